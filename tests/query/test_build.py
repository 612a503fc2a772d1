from fluentsql import (
    BuilderConfig,
    DeleteBuilder,
    InsertBuilder,
    OracleDialect,
    SelectBuilder,
    SelectCountBuilder,
    UpdateBuilder,
    delete,
    insert,
    select,
    select_count,
    select_from,
    update,
)


def test_factories_return_builders():
    assert isinstance(select("s", "t"), SelectBuilder)
    assert isinstance(select_count("s", "t", "x"), SelectCountBuilder)
    assert isinstance(insert("s", "t"), InsertBuilder)
    assert isinstance(update("s", "t"), UpdateBuilder)
    assert isinstance(delete("s", "t"), DeleteBuilder)
    assert select("s", "t", "x").render() == 'SELECT\n\t*\nFROM "s"."t" AS "x"'


def test_factories_pass_config_and_dialect():
    config = BuilderConfig(debug=True)
    dialect = OracleDialect()
    query = select("s", "t", config=config, dialect=dialect)
    assert query.config is config
    assert query.dialect is dialect
    assert insert("s", "t", config=config).config is config


def test_select_from_inherits_inner_settings():
    config = BuilderConfig(debug=True)
    inner = select("s", "t", config=config)
    outer = select_from(inner, "q")
    assert outer.config is config
    assert outer.render().endswith(') AS "q"')
