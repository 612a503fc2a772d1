"""
DELETE statement builder.
"""

from __future__ import annotations

from typing import Any, List

from ..config import BuilderConfig
from ..dialects import Dialect
from .base import WHERE_BUCKET, StatementBuilder


class DeleteBuilder(StatementBuilder):
    kind = "delete"

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
        self._wheres: List[str] = []

    def set_where(self, statement: str, *values: Any, when: bool = True) -> "DeleteBuilder":
        self._add_condition(self._wheres, WHERE_BUCKET, statement, values, when=when)
        return self

    def render(self) -> str:
        lines = [f"DELETE FROM {self._target()}"]
        if self._wheres:
            lines.append(f"WHERE\n\t({' '.join(self._wheres)})")
        return "\n".join(lines)
