"""
Oracle dialect implementation.
"""

from __future__ import annotations

from .keywords import is_reserved


class OracleDialect:
    """
    Oracle dialect using double-quoted identifiers, named ``:param``
    placeholders and ``ROWNUM`` row limiting.
    """

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.strip().replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, database: str, table: str) -> str:
        return f"{self.quote_identifier(database)}.{self.quote_identifier(table)}"

    def is_reserved(self, token: str) -> bool:
        return is_reserved(token)

    def parameter_placeholder(self, name: str) -> str:
        return f":{name.lstrip(':')}"

    def row_limit_predicate(self, row_count: int) -> str:
        return f"ROWNUM <= {row_count}"
