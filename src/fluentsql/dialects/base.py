"""
Dialect strategy interface describing identifier quoting and row limiting.
"""

from __future__ import annotations

from typing import Protocol


class Dialect(Protocol):
    """
    Strategy interface consumed by the name resolver and statement builders.
    """

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, database: str, table: str) -> str: ...

    def is_reserved(self, token: str) -> bool: ...

    def parameter_placeholder(self, name: str) -> str: ...

    def row_limit_predicate(self, row_count: int) -> str: ...
