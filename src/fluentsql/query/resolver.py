"""
Name resolution: turn caller-supplied expression text into quoted SQL.
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, Mapping

from ..dialects.base import Dialect
from ..validation import require_text
from ..validation.validators import word_characters_only
from .tokens import Token, TokenKind, tokenize

_NUMERIC_RE = re.compile(r"[+-]?(?:0|[1-9]\d*)(?:\.\d+)?")
_WORD_RE = re.compile(r"\w+")
_PATH_RE = re.compile(r"\w+(?:\.\w+)+")
_TABLE_WILDCARD_RE = re.compile(r"(\w+)\.\*")


class VirtualFieldMap(Mapping[str, str]):
    """
    Per-builder aliases from a bare name to an arbitrary SQL expression.
    """

    def __init__(self) -> None:
        self._fields: Dict[str, str] = {}

    def set(self, name: str, expression: str) -> None:
        require_text(name, "Name")
        word_characters_only(name, argument="Name")
        require_text(expression, "Expression")
        self._fields[name] = expression

    def __getitem__(self, name: str) -> str:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)


class NameResolver:
    """
    Classify expression text and render it with identifiers quoted.

    Bare words are qualified with ``qualifier`` (the owning builder's alias,
    or its table when there is none). Anything that is not a single word,
    path or wildcard is tokenized and rendered token by token, leaving string
    literals, placeholders, function heads and keywords as written.
    """

    def __init__(self, dialect: Dialect, qualifier: str, virtual_fields: Mapping[str, str]) -> None:
        self.dialect = dialect
        self.qualifier = qualifier
        self.virtual_fields = virtual_fields

    def resolve(self, expression: str) -> str:
        text = expression.strip()
        if not text:
            return text
        if text == "*":
            return text
        if _NUMERIC_RE.fullmatch(text):
            return text
        if self.dialect.is_reserved(text):
            return text.upper()
        if _WORD_RE.fullmatch(text):
            if text in self.virtual_fields:
                return self.virtual_fields[text]
            return f"{self.dialect.quote_identifier(self.qualifier)}.{self.dialect.quote_identifier(text)}"
        if _PATH_RE.fullmatch(text):
            return ".".join(self.dialect.quote_identifier(part) for part in text.split("."))
        wildcard = _TABLE_WILDCARD_RE.fullmatch(text)
        if wildcard:
            return f"{self.dialect.quote_identifier(wildcard.group(1))}.*"
        return "".join(self._render_token(token) for token in tokenize(text))

    def _render_token(self, token: Token) -> str:
        if token.kind is TokenKind.WILDCARD:
            return self.resolve(token.value)
        if token.kind is not TokenKind.WORD:
            return token.value
        if self.dialect.is_reserved(token.value):
            return token.value
        suffix = token.trailing_suffix
        if suffix:
            return self.resolve(token.value[: -len(suffix)]) + suffix
        return self.resolve(token.value)
