"""
Dialect strategy registry.
"""

from .base import Dialect
from .keywords import RESERVED_KEYWORDS, is_reserved
from .oracle import OracleDialect

__all__ = ["Dialect", "OracleDialect", "RESERVED_KEYWORDS", "is_reserved"]
