"""Security helpers for fluentsql."""

from .redaction import REDACTED_VALUE, redact_parameters, redact_value

__all__ = ["REDACTED_VALUE", "redact_parameters", "redact_value"]
