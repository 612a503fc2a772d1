"""
Statement builders and the expression resolver behind them.
"""

from .base import RenderedQuery, StatementBuilder
from .build import delete, insert, select, select_count, select_from, update
from .delete import DeleteBuilder
from .insert import InsertBuilder
from .parameters import ParameterBinder
from .resolver import NameResolver, VirtualFieldMap
from .select import OrderDirection, SelectBuilder, SelectCountBuilder
from .tokens import Token, TokenKind, tokenize
from .update import UpdateBuilder

__all__ = [
    "DeleteBuilder",
    "InsertBuilder",
    "NameResolver",
    "OrderDirection",
    "ParameterBinder",
    "RenderedQuery",
    "SelectBuilder",
    "SelectCountBuilder",
    "StatementBuilder",
    "Token",
    "TokenKind",
    "UpdateBuilder",
    "VirtualFieldMap",
    "delete",
    "insert",
    "select",
    "select_count",
    "select_from",
    "tokenize",
    "update",
]
