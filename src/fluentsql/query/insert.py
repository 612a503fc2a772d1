"""
INSERT statement builder.
"""

from __future__ import annotations

from typing import Any, Dict

from ..config import BuilderConfig
from ..dialects import Dialect
from .base import StatementBuilder


class InsertBuilder(StatementBuilder):
    """
    Accumulate ``field -> value`` pairs for a single-row INSERT.
    """

    kind = "insert"

    def __init__(
        self,
        database: str,
        table: str,
        *,
        config: BuilderConfig | None = None,
        dialect: Dialect | None = None,
    ) -> None:
        self._validate_identity("Database", database)
        self._validate_identity("Table", table)
        super().__init__(database, table, config=config, dialect=dialect)
        self._inserts: Dict[str, str] = {}

    def set_insert(self, field: str, value: Any, *, when: bool = True) -> "InsertBuilder":
        """
        Set the value inserted into ``field``; numbers are written inline,
        free text is bound as a parameter named after the field.
        """
        if not when:
            self.logger.debug("Skipped insert of %r", field)
            return self
        self._validate_field(field)
        self._store_value(self._inserts, field, value, numeric_literals=True)
        return self

    def render(self) -> str:
        fields = ",\n\t".join(self._resolve(field) for field in self._inserts)
        values = ",\n\t".join(self._inserts.values())
        return "\n".join(
            [
                f"INSERT INTO {self._target()}",
                f"\t({fields})",
                "VALUES",
                f"\t({values})",
            ]
        )
