from fluentsql import SelectCountBuilder


def test_plain_count_replaces_select_list_and_drops_order():
    query = (
        SelectCountBuilder("s", "orders", "o")
        .set_select("id")
        .set_left_join("c", "c.id = o.customer_id", table="customers")
        .set_where("o.amount > {}", 10)
        .set_order_by("o.id")
        .set_limit(100)
    )
    assert query.render() == (
        'SELECT\n\tCOUNT(*) AS "row_count"\n'
        'FROM "s"."orders" AS "o"\n'
        'LEFT JOIN "s"."customers" AS "c"\n\tON ("c"."id" = "o"."customer_id")\n'
        'WHERE\n\t("o"."amount" > :where_condition_1) AND ROWNUM <= 100'
    )
    assert query.get_parameters() == {":where_condition_1": 10}


def test_grouped_count_wraps_the_select():
    query = (
        SelectCountBuilder("s", "orders", "o")
        .set_select("region")
        .set_group_by("region")
        .set_order_by("region")
    )
    assert query.render() == (
        'SELECT\n\tCOUNT(*) AS "row_count"\n'
        "FROM (\n"
        "\tSELECT\n"
        '\t\t"o"."region"\n'
        '\tFROM "s"."orders" AS "o"\n'
        '\tGROUP BY "o"."region"\n'
        ') AS "counted_rows"'
    )


def test_distinct_count_wraps_the_select():
    query = SelectCountBuilder("s", "t").set_distinct().set_select("a")
    assert query.render() == (
        'SELECT\n\tCOUNT(*) AS "row_count"\n'
        'FROM (\n\tSELECT DISTINCT\n\t\t"t"."a"\n\tFROM "s"."t"\n) AS "counted_rows"'
    )
