import pytest

from fluentsql.dialects import OracleDialect
from fluentsql.query import NameResolver, VirtualFieldMap
from fluentsql.validation import InvalidArgumentError


def _resolver(qualifier="t", **virtual):
    fields = VirtualFieldMap()
    for name, expression in virtual.items():
        fields.set(name, expression)
    return NameResolver(OracleDialect(), qualifier, fields)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("", ""),
        ("   ", ""),
        ("*", "*"),
        (" 42 ", "42"),
        ("-3.25", "-3.25"),
        ("count", "COUNT"),
        ("amount", '"t"."amount"'),
        ("o.amount", '"o"."amount"'),
        ("db.o.amount", '"db"."o"."amount"'),
        ("o.*", '"o".*'),
    ],
)
def test_resolve_whole_expressions(expression, expected):
    assert _resolver().resolve(expression) == expected


def test_virtual_field_inserted_verbatim():
    resolver = _resolver(total='SUM("o"."amount")')
    assert resolver.resolve("total") == 'SUM("o"."amount")'
    assert resolver.resolve("total > 10") == 'SUM("o"."amount") > 10'


def test_compound_expression_quotes_identifiers_only():
    resolver = _resolver(qualifier="o")
    resolved = resolver.resolve("o.status = 'OPEN' AND total > :where_condition_1")
    assert resolved == "\"o\".\"status\" = 'OPEN' AND \"o\".\"total\" > :where_condition_1"


def test_compound_expression_keeps_keyword_case():
    assert _resolver().resolve("a is not null") == '"t"."a" is not null'


def test_string_literals_are_never_requoted():
    resolver = _resolver()
    assert resolver.resolve("x = '' OR y = 'a'") == "\"t\".\"x\" = '' OR \"t\".\"y\" = 'a'"
    assert resolver.resolve("name = 'O''Brien'") == "\"t\".\"name\" = 'O''Brien'"


def test_functions_and_variables_untouched():
    resolved = _resolver().resolve("NVL(amount, 0) + @session.offset")
    assert resolved == 'NVL("t"."amount", 0) + @session.offset'


def test_wildcard_inside_expression():
    assert _resolver().resolve("COUNT(o.*)") == 'COUNT("o".*)'
    assert _resolver().resolve("COUNT(*)") == "COUNT(*)"


def test_word_with_dangling_dot_resolves_prefix_only():
    assert _resolver().resolve("o.amount. x") == '"o"."amount". "t"."x"'


def test_quotes_inside_identifiers_are_doubled():
    assert _resolver(qualifier='we"ird').resolve("col") == '"we""ird"."col"'


def test_virtual_field_names_are_validated():
    fields = VirtualFieldMap()
    with pytest.raises(InvalidArgumentError):
        fields.set("bad name", "1")
    with pytest.raises(InvalidArgumentError):
        fields.set("name", "  ")
    fields.set("name", "1")
    fields.set("name", "2")
    assert dict(fields) == {"name": "2"}
