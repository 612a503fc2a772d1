"""
fluentsql public package initialization.

Fluent builders rendering quoted Oracle SQL plus a named parameter map.
"""

from .config import BuilderConfig, ConfigurationError, get_default_config, set_debug, set_default_config  # noqa: F401
from .dialects import Dialect, OracleDialect  # noqa: F401
from .query import (  # noqa: F401
    DeleteBuilder,
    InsertBuilder,
    OrderDirection,
    RenderedQuery,
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
from .validation import InvalidArgumentError, NullArgumentError  # noqa: F401

__all__ = [
    "BuilderConfig",
    "ConfigurationError",
    "Dialect",
    "OracleDialect",
    "DeleteBuilder",
    "InsertBuilder",
    "OrderDirection",
    "RenderedQuery",
    "SelectBuilder",
    "SelectCountBuilder",
    "UpdateBuilder",
    "InvalidArgumentError",
    "NullArgumentError",
    "delete",
    "get_default_config",
    "insert",
    "select",
    "select_count",
    "select_from",
    "set_debug",
    "set_default_config",
    "update",
]
