"""
Sales report example composing select, count and write statements.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fluentsql import (
    BuilderConfig,
    OrderDirection,
    RenderedQuery,
    delete,
    insert,
    select,
    select_count,
    select_from,
    update,
)
from fluentsql.utils import configure_logging

DATABASE = "sales"


def open_orders_report(region: str | None = None, *, limit: int = 0) -> RenderedQuery:
    query = (
        select(DATABASE, "orders", "o")
        .set_virtual_field("net_total", '"o"."total" - "o"."discount"')
        .set_select("o.id", "order_id")
        .set_select("c.name", "customer")
        .set_select("net_total")
        .set_left_join("c", "c.id = o.customer_id", table="customers")
        .set_where("o.status = {}", "OPEN")
        .set_where("AND o.region = {}", region, when=region is not None)
        .set_order_by("o.created_at", direction=OrderDirection.DESCENDING)
        .set_limit(limit)
    )
    return query.to_sql()


def customer_order_totals(minimum: int) -> RenderedQuery:
    totals = (
        select(DATABASE, "orders", "o")
        .set_virtual_field("order_total", 'SUM("o"."total")')
        .set_select("o.customer_id")
        .set_select("order_total")
        .set_group_by("o.customer_id")
        .set_having("SUM(o.total) >= {}", minimum)
    )
    query = (
        select_from(totals, "t")
        .set_select("t.customer_id")
        .set_select("c.name", "customer")
        .set_select("t.order_total")
        .set_left_join("c", "c.id = t.customer_id", table="customers", database=DATABASE)
        .set_order_by("t.order_total", direction="desc")
        .merge_parameters(totals.get_parameters())
    )
    return query.to_sql()


def count_orders_by_region() -> RenderedQuery:
    query = (
        select_count(DATABASE, "orders", "o")
        .set_select("o.region")
        .set_group_by("o.region")
        .set_order_by("o.region")
    )
    return query.to_sql()


def record_order(order_id: int, customer_id: int, note: str | None) -> RenderedQuery:
    query = (
        insert(DATABASE, "orders")
        .set_insert("id", order_id)
        .set_insert("customer_id", customer_id)
        .set_insert("status", "OPEN")
        .set_insert("Note", note)
    )
    return query.to_sql()


def archive_order(order_id: int, *, purge: bool = False) -> RenderedQuery:
    if purge:
        return delete(DATABASE, "orders").set_where("id = {}", order_id).to_sql()
    query = (
        update(DATABASE, "orders")
        .set_update("status", "ARCHIVED")
        .set_update("archived", True)
        .set_where("id = {}", order_id)
    )
    return query.to_sql()


def run_demo(*, debug: bool = False) -> List[Dict[str, Any]]:
    if debug:
        configure_logging(logging.DEBUG)
    config = BuilderConfig(debug=debug)
    report = select(DATABASE, "orders", "o", config=config).set_where("o.status = {}", "OPEN")
    report.print_query()
    report.print_parameters()

    statements = [
        open_orders_report("EMEA", limit=10),
        customer_order_totals(1000),
        count_orders_by_region(),
        record_order(1, 7, "gift wrap please"),
        archive_order(1),
    ]
    return [{"sql": sql, "parameters": dict(parameters)} for sql, parameters in statements]


if __name__ == "__main__":
    configure_logging()
    for statement in run_demo():
        print(statement["sql"])
        print(statement["parameters"])
        print()
