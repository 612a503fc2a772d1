import pytest

from fluentsql import DeleteBuilder, InvalidArgumentError


def test_delete_without_where():
    assert DeleteBuilder("db", "tbl").render() == 'DELETE FROM "db"."tbl"'


def test_delete_where_joins_with_space():
    query = DeleteBuilder("db", "tbl").set_where("id = {}", 1).set_where("OR id = {}", 2)
    assert query.render() == (
        'DELETE FROM "db"."tbl"\nWHERE\n\t("tbl"."id" = :where_condition_1 OR "tbl"."id" = :where_condition_2)'
    )
    assert query.get_parameters() == {":where_condition_1": 1, ":where_condition_2": 2}


def test_delete_parameters_can_be_supplied_directly():
    query = DeleteBuilder("db", "tbl").set_where("id = :id").set_parameter(":id", 5).merge_parameters({":x": 1})
    sql, params = query.to_sql()
    assert sql == 'DELETE FROM "db"."tbl"\nWHERE\n\t("tbl"."id" = :id)'
    assert dict(params) == {":id": 5, ":x": 1}


def test_delete_validation():
    with pytest.raises(InvalidArgumentError):
        DeleteBuilder("db", "tbl").set_where("   ")
    with pytest.raises(InvalidArgumentError):
        DeleteBuilder("db", "tbl").set_parameter("id", 1)


def test_failed_merge_parameters_applies_nothing():
    query = DeleteBuilder("db", "tbl")
    with pytest.raises(InvalidArgumentError):
        query.merge_parameters({":a": 1, "bad": 2})
    assert query.get_parameters() == {}
