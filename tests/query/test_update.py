import pytest

from fluentsql import InvalidArgumentError, UpdateBuilder


def test_update_numbers_are_quoted_literals():
    query = UpdateBuilder("db", "tbl").set_update("qty", 42).set_update("flag", False).set_update("note", None)
    assert query.render() == "UPDATE \"db\".\"tbl\"\nSET\n\t\"tbl\".\"qty\" = '42',\n\t\"tbl\".\"flag\" = 0,\n\t\"tbl\".\"note\" = NULL"


def test_update_where_fragments_join_with_and():
    query = (
        UpdateBuilder("db", "orders")
        .set_update("Status", "closed for good")
        .set_where("id = {}", 7)
        .set_where("amount > {}", 0)
        .set_where("region = {}", "x", when=False)
    )
    assert query.render() == (
        'UPDATE "db"."orders"\n'
        "SET\n"
        '\t"orders"."Status" = :Status\n'
        "WHERE\n"
        '\t("orders"."id" = :where_condition_1 AND "orders"."amount" > :where_condition_2)'
    )
    assert query.get_parameters() == {
        ":Status": "closed for good",
        ":where_condition_1": 7,
        ":where_condition_2": 0,
    }


def test_update_validation():
    with pytest.raises(InvalidArgumentError):
        UpdateBuilder(" ", "t")
    with pytest.raises(InvalidArgumentError):
        UpdateBuilder("db", "t").set_update(None, 1)
    with pytest.raises(InvalidArgumentError):
        UpdateBuilder("db", "t").set_where("a = {} AND b = {}", 1)


def test_update_reset_drops_stale_placeholder():
    query = UpdateBuilder("db", "tbl").set_update("Note", "two words").set_update("Note", "single")
    assert query.get_parameters() == {}
    assert query.render() == "UPDATE \"db\".\"tbl\"\nSET\n\t\"tbl\".\"Note\" = 'single'"
