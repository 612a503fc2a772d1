"""
Validation utilities exposed at the package level.
"""

from .errors import InvalidArgumentError, NullArgumentError
from .validators import RegexValidator, require_object, require_text

__all__ = [
    "InvalidArgumentError",
    "NullArgumentError",
    "RegexValidator",
    "require_object",
    "require_text",
]
