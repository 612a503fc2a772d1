"""
Utility helpers shared across fluentsql packages.
"""

from .logging import configure_logging, get_logger
from .naming import field_to_parameter_name

__all__ = ["configure_logging", "field_to_parameter_name", "get_logger"]
