"""
SELECT statement builders.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Sequence

from ..config import BuilderConfig
from ..dialects import Dialect
from ..validation import InvalidArgumentError, NullArgumentError, require_object, require_text
from ..validation.validators import simple_expression, strip_quotes
from .base import HAVING_BUCKET, WHERE_BUCKET, StatementBuilder, indent_block


class OrderDirection(str, Enum):
    ASCENDING = "ASC"
    DESCENDING = "DESC"


def _subquery_sql(select: Any, argument: str) -> str:
    require_object(select, SelectBuilder, argument)
    sql = select.render()
    if not sql.strip():
        raise InvalidArgumentError(f"{argument} argument should not be empty.", argument=argument)
    return sql


def _derived_table(sql: str) -> str:
    return f"(\n{indent_block(sql)}\n)"


class SelectBuilder(StatementBuilder):
    """
    Accumulate SELECT clauses and render them in a fixed order.

    ``SelectBuilder("sales", "orders", "o")`` selects from ``"sales"."orders"
    AS "o"`` and qualifies bare names with ``"o"``. Without an alias the table
    name qualifies bare names and FROM carries no ``AS``.
    """

    kind = "select"

    def __init__(
        self,
        database: str,
        table: str,
        alias: str | None = None,
        *,
        config: BuilderConfig | None = None,
        dialect: Dialect | None = None,
    ) -> None:
        self._validate_identity("Database", database)
        self._validate_identity("Table", table)
        alias = strip_quotes(alias) or None
        super().__init__(database, table, qualifier=alias or table, config=config, dialect=dialect)
        self._source = self._target()
        self._from = self._source
        if alias:
            self._from += f" AS {self._quote(alias)}"
        self._init_clauses()

    @classmethod
    def from_subquery(
        cls,
        select: "SelectBuilder",
        alias: str,
        *,
        config: BuilderConfig | None = None,
        dialect: Dialect | None = None,
    ) -> "SelectBuilder":
        """
        Select from another builder's rendered SQL used as a derived table.

        The inner builder's parameters are not copied; merge them with
        ``merge_parameters(inner.get_parameters())`` when they are needed.
        """

        sql = _subquery_sql(select, "Select")
        alias = strip_quotes(alias)
        require_text(alias, "TableAlias")
        builder = cls.__new__(cls)
        derived = _derived_table(sql)
        StatementBuilder.__init__(
            builder,
            None,
            derived,
            qualifier=alias,
            config=config or select.config,
            dialect=dialect or select.dialect,
        )
        builder._source = derived
        builder._from = f"{derived} AS {builder._quote(alias)}"
        builder._init_clauses()
        return builder

    def _init_clauses(self) -> None:
        self._distinct = False
        self._fields: List[str] = []
        self._joins: List[str] = []
        self._wheres: List[str] = []
        self._groups: List[str] = []
        self._with_rollup = False
        self._havings: List[str] = []
        self._orders: List[str] = []
        self._limit = 0

    # Setters ------------------------------------------------------------
    def set_virtual_field(self, name: str, expression: str) -> "SelectBuilder":
        self._virtual_fields.set(name, expression)
        return self

    def set_distinct(self, distinct: bool = True) -> "SelectBuilder":
        self._distinct = bool(distinct)
        return self

    def set_select(self, expression: Any, alias: str | None = None) -> "SelectBuilder":
        """
        Add a column (``"amount"``, ``"o.amount"``, a virtual field name) or a
        scalar subquery (a ``SelectBuilder``, alias required) to the select list.
        """

        if isinstance(expression, SelectBuilder):
            sql = _subquery_sql(expression, "Select")
            alias = strip_quotes(alias)
            require_text(alias, "Alias")
            self._fields.append(f"{_derived_table(sql)} AS {self._quote(alias)}")
            return self

        require_text(expression, "Expression")
        simple_expression(expression, argument="Expression")
        alias = strip_quotes(alias)
        if not alias and expression in self._virtual_fields:
            alias = expression
        field = self._resolve(expression)
        if alias:
            field += f" AS {self._quote(alias)}"
        self._fields.append(field)
        return self

    def set_left_join(
        self,
        alias: str,
        condition: str,
        *,
        table: str | None = None,
        database: str | None = None,
    ) -> "SelectBuilder":
        """
        LEFT JOIN another table, or this builder's own table when ``table``
        is omitted. ``database`` defaults to this builder's database.
        """
        return self._add_join("LEFT", self._join_source(table, database), alias, condition)

    def set_left_join_subquery(self, select: "SelectBuilder", alias: str, condition: str) -> "SelectBuilder":
        return self._add_join("LEFT", _derived_table(_subquery_sql(select, "Select")), alias, condition)

    def set_left_join_union(self, selects: Sequence["SelectBuilder"], alias: str, condition: str) -> "SelectBuilder":
        return self._add_join("LEFT", self._union_source(selects), alias, condition)

    def set_right_join(
        self,
        alias: str,
        condition: str,
        *,
        table: str | None = None,
        database: str | None = None,
    ) -> "SelectBuilder":
        return self._add_join("RIGHT", self._join_source(table, database), alias, condition)

    def set_right_join_subquery(self, select: "SelectBuilder", alias: str, condition: str) -> "SelectBuilder":
        return self._add_join("RIGHT", _derived_table(_subquery_sql(select, "Select")), alias, condition)

    def set_right_join_union(self, selects: Sequence["SelectBuilder"], alias: str, condition: str) -> "SelectBuilder":
        return self._add_join("RIGHT", self._union_source(selects), alias, condition)

    def set_where(self, statement: str, *values: Any, when: bool = True) -> "SelectBuilder":
        """
        Add a WHERE fragment. ``{}`` holes in ``statement`` receive bound
        ``:where_condition_N`` placeholders for ``values``. Fragments are joined
        with a single space, so each must carry its own ``AND``/``OR``.
        """
        self._add_condition(self._wheres, WHERE_BUCKET, statement, values, when=when)
        return self

    def set_group_by(self, *expressions: str) -> "SelectBuilder":
        for expression in self._valid_expressions(expressions):
            self._groups.append(self._resolve(expression))
        return self

    def set_with_rollup(self, with_rollup: bool = True) -> "SelectBuilder":
        self._with_rollup = bool(with_rollup)
        return self

    def set_having(self, statement: str, *values: Any, when: bool = True) -> "SelectBuilder":
        self._add_condition(self._havings, HAVING_BUCKET, statement, values, when=when)
        return self

    def set_order_by(
        self, *expressions: str, direction: OrderDirection | str = OrderDirection.ASCENDING
    ) -> "SelectBuilder":
        try:
            direction = OrderDirection(
                direction.value if isinstance(direction, OrderDirection) else str(direction).upper()
            )
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Direction argument '{direction}' should be ASC or DESC.", argument="Direction"
            ) from exc
        resolved = [self._resolve(expression) for expression in self._valid_expressions(expressions)]
        if resolved:
            self._orders.append(f"{', '.join(resolved)} {direction.value}")
        return self

    def set_limit(self, row_count: int) -> "SelectBuilder":
        """
        Cap the number of rows with a ``ROWNUM`` predicate; ``0`` removes the cap.
        """
        if isinstance(row_count, bool) or not isinstance(row_count, int):
            raise InvalidArgumentError("RowCount argument should be an integer.", argument="RowCount")
        if row_count < 0:
            raise InvalidArgumentError("RowCount argument should not be negative.", argument="RowCount")
        self._limit = row_count
        return self

    # Rendering ----------------------------------------------------------
    def render(self) -> str:
        return "\n".join(self._select_lines() + self._body_lines(include_order=True))

    def _select_lines(self) -> List[str]:
        head = "SELECT DISTINCT" if self._distinct else "SELECT"
        fields = ",\n\t".join(self._fields) if self._fields else "*"
        return [head, f"\t{fields}"]

    def _body_lines(self, *, include_order: bool) -> List[str]:
        lines = [f"FROM {self._from}"]
        lines.extend(self._joins)

        limit = self.dialect.row_limit_predicate(self._limit) if self._limit > 0 else None
        if self._wheres:
            where = f"WHERE\n\t({' '.join(self._wheres)})"
            if limit:
                where += f" AND {limit}"
            lines.append(where)
        elif limit:
            lines.append(f"WHERE\n\t({limit})")

        if self._groups:
            group_by = f"GROUP BY {', '.join(self._groups)}"
            if self._with_rollup:
                group_by += " WITH ROLLUP"
            lines.append(group_by)
        if self._havings:
            lines.append(f"HAVING\n\t({' '.join(self._havings)})")
        if include_order and self._orders:
            lines.append(f"ORDER BY {', '.join(self._orders)}")
        return lines

    # Helpers ------------------------------------------------------------
    def _valid_expressions(self, expressions: Sequence[str]) -> List[str]:
        valid: List[str] = []
        for expression in expressions:
            if expression is None or (isinstance(expression, str) and not expression.strip()):
                continue
            require_text(expression, "Expression")
            simple_expression(expression, argument="Expression")
            valid.append(expression)
        return valid

    def _join_source(self, table: str | None, database: str | None) -> str:
        if table is None:
            if database is not None:
                raise InvalidArgumentError(
                    "Table argument should not be empty when Database is given.", argument="Table"
                )
            return self._source
        self._validate_identity("Table", table)
        if database is None:
            if self._database is None:
                raise InvalidArgumentError(
                    "Database argument is required when joining from a derived table.",
                    argument="Database",
                )
            database = self._database
        self._validate_identity("Database", database)
        return self.dialect.format_table(database, table)

    def _union_source(self, selects: Sequence["SelectBuilder"]) -> str:
        if selects is None:
            raise NullArgumentError("Selects argument should not be null.", argument="Selects")
        if isinstance(selects, SelectBuilder) or not isinstance(selects, Sequence):
            raise InvalidArgumentError("Selects argument should be a sequence of SelectBuilder.", argument="Selects")
        if not selects:
            raise InvalidArgumentError("Selects argument should not be empty.", argument="Selects")
        queries = [_subquery_sql(select, "A member of Selects") for select in selects]
        return _derived_table("(" + ") UNION (".join(queries) + ")")

    def _add_join(self, kind: str, source: str, alias: str, condition: str) -> "SelectBuilder":
        alias = strip_quotes(alias)
        require_text(alias, "TableAlias")
        condition = strip_quotes(condition)
        require_text(condition, "Condition")
        self._joins.append(
            f"{kind} JOIN {source} AS {self._quote(alias)}\n\tON ({self._resolve(condition)})"
        )
        return self


class SelectCountBuilder(SelectBuilder):
    """
    Count the rows the equivalent SELECT would return.

    Without DISTINCT or GROUP BY the select list is replaced by ``COUNT(*)``;
    otherwise the select is wrapped as a derived table and its rows counted.
    ORDER BY never changes a count and is left out.
    """

    kind = "select_count"

    COUNT_ALIAS = "row_count"
    WRAPPED_ALIAS = "counted_rows"

    def render(self) -> str:
        count = f"\tCOUNT(*) AS {self._quote(self.COUNT_ALIAS)}"
        if not (self._distinct or self._groups):
            return "\n".join(["SELECT", count] + self._body_lines(include_order=False))
        inner = "\n".join(self._select_lines() + self._body_lines(include_order=False))
        return "\n".join(
            ["SELECT", count, f"FROM {_derived_table(inner)} AS {self._quote(self.WRAPPED_ALIAS)}"]
        )
