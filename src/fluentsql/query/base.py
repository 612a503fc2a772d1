"""
Shared state and behaviour for every statement builder.
"""

from __future__ import annotations

import re
import textwrap
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NamedTuple, Sequence

from ..config import BuilderConfig, get_default_config
from ..dialects import Dialect, OracleDialect
from ..security import redact_parameters
from ..utils import field_to_parameter_name, get_logger
from ..validation import InvalidArgumentError, require_text
from ..validation.validators import has_word_character, is_simple_expression, strip_quotes
from .parameters import ParameterBinder
from .resolver import NameResolver, VirtualFieldMap

_NUMERIC_TEXT_RE = re.compile(r"[+-]?(?:0|[1-9]\d*)(?:\.\d+)?")

WHERE_BUCKET = "where_condition"
HAVING_BUCKET = "having_condition"


class RenderedQuery(NamedTuple):
    """
    Statement text plus a read-only snapshot of its parameters.
    """

    sql: str
    parameters: Mapping[str, Any]


def indent_block(text: str) -> str:
    return textwrap.indent(text, "\t")


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return _NUMERIC_TEXT_RE.fullmatch(value) is not None
    return isinstance(value, (int, float, Decimal))


class StatementBuilder:
    """
    Base class owning the parameter map, virtual fields and name resolver.

    Subclasses validate their identity arguments before calling ``__init__``
    and implement ``render``. Every public setter returns ``self``.
    """

    kind = "statement"

    def __init__(
        self,
        database: str | None,
        table: str,
        *,
        qualifier: str | None = None,
        config: BuilderConfig | None = None,
        dialect: Dialect | None = None,
    ) -> None:
        self.config = config or get_default_config()
        self.dialect = dialect or OracleDialect()
        self.logger = get_logger(f"query.{self.kind}")
        self._database = database
        self._table = table
        self._virtual_fields = VirtualFieldMap()
        self._parameters = ParameterBinder()
        self._resolver = NameResolver(self.dialect, qualifier or table, self._virtual_fields)

    # Public API -------------------------------------------------------
    def set_parameter(self, name: str, value: Any):
        self._parameters.set(name, value)
        return self

    def merge_parameters(self, *parameters: Mapping[str, Any]):
        self._parameters.merge(*parameters)
        return self

    def get_parameters(self) -> Dict[str, Any]:
        return self._parameters.as_dict()

    def render(self) -> str:
        raise NotImplementedError

    def to_sql(self) -> RenderedQuery:
        return RenderedQuery(self.render(), MappingProxyType(self._parameters.as_dict()))

    def print_query(self) -> None:
        if not self.config.debug:
            return
        self.logger.info("SQL query:\n%s", self.render())

    def print_parameters(self) -> None:
        if not self.config.debug:
            return
        parameters = self._parameters.as_dict()
        if not parameters:
            self.logger.info("No parameters available.")
            return
        redacted = redact_parameters(parameters)
        for position, (name, value) in enumerate(parameters.items(), start=1):
            self.logger.info(
                "Parameter %s: name=%s type=%s value=%r",
                position,
                name,
                type(value).__name__,
                redacted[name],
            )

    def __str__(self) -> str:
        return self.render()

    # Helpers ------------------------------------------------------------
    @staticmethod
    def _validate_identity(argument: str, value: Any) -> str:
        require_text(value, argument)
        has_word_character(value, argument=argument)
        return value

    def _quote(self, identifier: str) -> str:
        return self.dialect.quote_identifier(identifier)

    def _target(self) -> str:
        return self.dialect.format_table(self._database, self._table)

    def _resolve(self, expression: str) -> str:
        return self._resolver.resolve(expression)

    def _add_condition(
        self,
        fragments: List[str],
        bucket: str,
        statement: str,
        values: Sequence[Any],
        *,
        when: bool,
    ) -> None:
        """
        Bind ``values`` under fresh ``:{bucket}_N`` names, substitute them into
        the ``{}`` holes of ``statement`` and append the resolved fragment.
        """

        if not when:
            self.logger.debug("Skipped %s %r", bucket, statement)
            return
        statement = strip_quotes(statement)
        require_text(statement, "ConditionStatement")
        if values:
            try:
                statement.format(*(":placeholder" for _ in values))
            except (IndexError, KeyError, ValueError) as exc:
                raise InvalidArgumentError(
                    f"ConditionStatement argument '{statement}' does not match the {len(values)} value(s) supplied.",
                    argument="ConditionStatement",
                ) from exc
            names = self._parameters.bind(bucket, values)
            statement = statement.format(*names)
        fragments.append(self._resolve(statement))

    def _validate_field(self, field: Any) -> str:
        require_text(field, "Field")
        has_word_character(field, argument="Field")
        return field

    def _store_value(self, values: Dict[str, str], field: str, value: Any, *, numeric_literals: bool) -> None:
        """
        Set ``values[field]``, dropping the placeholder bound by an earlier
        value of the same field once nothing else renders it.
        """

        previous = values.get(field)
        if previous is not None and previous in self._parameters:
            shared = any(other == previous for name, other in values.items() if name != field)
            if not shared:
                self._parameters.discard(previous)
        values[field] = self._encode_value(field, value, numeric_literals=numeric_literals)

    def _encode_value(self, field: str, value: Any, *, numeric_literals: bool) -> str:
        """
        Render a column value: ``NULL``, ``0``/``1`` for booleans, a bare
        number (when ``numeric_literals``), a quoted literal for simple word
        values, otherwise a placeholder named after the field and bound here.
        """

        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return "1" if value else "0"
        if numeric_literals and is_numeric(value):
            return str(value)
        text = str(value)
        if is_simple_expression(text):
            return f"'{text}'"
        name = self.dialect.parameter_placeholder(field_to_parameter_name(field))
        self._parameters.set(name, value)
        return name
