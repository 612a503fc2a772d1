"""
Entry points mirroring the statement kinds.

    from fluentsql import select

    sql, params = (
        select("sales", "orders", "o")
        .set_select("o.id")
        .set_where("o.total > {}", 100)
        .to_sql()
    )
"""

from __future__ import annotations

from typing import Any

from .delete import DeleteBuilder
from .insert import InsertBuilder
from .select import SelectBuilder, SelectCountBuilder
from .update import UpdateBuilder


def select(database: str, table: str, alias: str | None = None, **options: Any) -> SelectBuilder:
    return SelectBuilder(database, table, alias, **options)


def select_from(subquery: SelectBuilder, alias: str, **options: Any) -> SelectBuilder:
    return SelectBuilder.from_subquery(subquery, alias, **options)


def select_count(database: str, table: str, alias: str | None = None, **options: Any) -> SelectCountBuilder:
    return SelectCountBuilder(database, table, alias, **options)


def insert(database: str, table: str, **options: Any) -> InsertBuilder:
    return InsertBuilder(database, table, **options)


def update(database: str, table: str, **options: Any) -> UpdateBuilder:
    return UpdateBuilder(database, table, **options)


def delete(database: str, table: str, **options: Any) -> DeleteBuilder:
    return DeleteBuilder(database, table, **options)
