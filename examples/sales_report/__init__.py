from .demo import (  # noqa: F401
    archive_order,
    count_orders_by_region,
    customer_order_totals,
    open_orders_report,
    record_order,
    run_demo,
)

__all__ = [
    "archive_order",
    "count_orders_by_region",
    "customer_order_totals",
    "open_orders_report",
    "record_order",
    "run_demo",
]
