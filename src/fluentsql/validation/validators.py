"""
Argument validators shared by every statement builder.
"""

from __future__ import annotations

import re
from typing import Any

from .errors import InvalidArgumentError, NullArgumentError


class RegexValidator:
    """
    Check a string argument against a pattern.

    ``search`` switches from a full match to "contains a match", which is how
    database, table and field names are accepted.
    """

    def __init__(self, pattern: str, message: str, *, search: bool = False) -> None:
        self.pattern = re.compile(pattern)
        self.message = message
        self.search = search

    def __call__(self, value: str, *, argument: str) -> None:
        matcher = self.pattern.search if self.search else self.pattern.fullmatch
        if not matcher(value):
            raise InvalidArgumentError(
                self.message.format(argument=argument, value=value), argument=argument
            )


has_word_character = RegexValidator(
    r"\w",
    "{argument} argument '{value}' should only contain any word character (letter, number, underscore).",
    search=True,
)

word_characters_only = RegexValidator(
    r"\w+",
    "{argument} argument should only contain any word character (letter, number, underscore).",
)

simple_expression = RegexValidator(
    r"(?:\w+\.)?\w+",
    "{argument} argument '{value}' is not a valid format.",
)

parameter_name = RegexValidator(
    r":\w+",
    "{argument} argument should only contain ':' and any word character (letter, number, underscore) after.",
)


def is_simple_expression(value: str) -> bool:
    return simple_expression.pattern.fullmatch(value) is not None


def require_text(value: Any, argument: str) -> str:
    """
    Return ``value`` when it is a non-blank string.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgumentError(f"{argument} argument should not be empty.", argument=argument)
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{argument} argument should be a string, got {type(value).__name__}.",
            argument=argument,
        )
    return value


def require_object(value: Any, expected: type, argument: str) -> Any:
    if value is None:
        raise NullArgumentError(f"{argument} argument should not be null.", argument=argument)
    if not isinstance(value, expected):
        raise InvalidArgumentError(
            f"{argument} argument should be a {expected.__name__}, got {type(value).__name__}.",
            argument=argument,
        )
    return value


def strip_quotes(value: Any) -> Any:
    """
    Remove double quotes so pre-quoted aliases and conditions are not quoted twice.
    """
    if not isinstance(value, str):
        return value
    return value.replace('"', "").strip()
