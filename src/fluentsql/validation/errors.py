"""
Argument error hierarchy for fluentsql builders.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """
    Raised when a setter or constructor receives a blank or malformed argument.
    """

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        self.argument = argument
        super().__init__(message)


class NullArgumentError(InvalidArgumentError):
    """
    Raised when a required object reference (nested builder, builder list,
    parameter mapping) is missing.
    """
