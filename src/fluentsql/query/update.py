"""
UPDATE statement builder.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..config import BuilderConfig
from ..dialects import Dialect
from .base import WHERE_BUCKET, StatementBuilder


class UpdateBuilder(StatementBuilder):
    """
    Accumulate SET assignments and WHERE fragments for an UPDATE.

    Unlike SELECT and DELETE, WHERE fragments here are joined with ``AND``.
    Numbers are not written inline: ``42`` renders as the literal ``'42'``.
    """

    kind = "update"

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
        self._updates: Dict[str, str] = {}
        self._wheres: List[str] = []

    def set_update(self, field: str, value: Any, *, when: bool = True) -> "UpdateBuilder":
        if not when:
            self.logger.debug("Skipped update of %r", field)
            return self
        self._validate_field(field)
        self._store_value(self._updates, field, value, numeric_literals=False)
        return self

    def set_where(self, statement: str, *values: Any, when: bool = True) -> "UpdateBuilder":
        self._add_condition(self._wheres, WHERE_BUCKET, statement, values, when=when)
        return self

    def render(self) -> str:
        assignments = ",\n\t".join(
            f"{self._resolve(field)} = {value}" for field, value in self._updates.items()
        )
        lines = [f"UPDATE {self._target()}", "SET", f"\t{assignments}"]
        if self._wheres:
            lines.append(f"WHERE\n\t({' AND '.join(self._wheres)})")
        return "\n".join(lines)
