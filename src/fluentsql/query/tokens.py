"""
Tokenizer splitting free-form SQL expression text into typed tokens.

The scanner is shallow: it recognises the handful of shapes the
name resolver treats differently and passes every other character through as
``TEXT``. Joining the token values always reproduces the input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List


class TokenKind(str, Enum):
    STRING = "string"
    PLACEHOLDER = "placeholder"
    FUNCTION = "function"
    VARIABLE = "variable"
    WILDCARD = "wildcard"
    NUMBER = "number"
    WORD = "word"
    TEXT = "text"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str

    @property
    def trailing_suffix(self) -> str:
        """
        The single non-word character a ``WORD`` token may end with, or ``""``.
        """
        if self.value and not _WORD_CHAR_RE.match(self.value[-1]):
            return self.value[-1]
        return ""


_WORD_CHAR_RE = re.compile(r"\w")

# Alternatives are tried left to right at each position, so order matters:
# quoted literals swallow anything inside them, and a word chain followed by
# "(" is a function head rather than an identifier.
_TOKEN_RE = re.compile(
    r"""
    (?P<string>'(?:[^']|'')*')
    | (?P<placeholder>:\w+)
    | (?P<function>@?\w+(?:\.\w+)*\s*\()
    | (?P<variable>@\w+(?:\.\w+)*)
    | (?P<wildcard>(?:\w+\.)?\*)
    | (?P<number>(?:0|[1-9]\d*)(?:\.\d+)?(?![\w.]))
    | (?P<word>\w+(?:\.\w+)*\.?)
    | (?P<text>[^\w'@:*]+|.)
    """,
    re.VERBOSE | re.DOTALL,
)


def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    for match in _TOKEN_RE.finditer(text):
        kind = TokenKind(match.lastgroup)
        value = match.group()
        if kind is TokenKind.TEXT and tokens and tokens[-1].kind is TokenKind.TEXT:
            tokens[-1] = Token(TokenKind.TEXT, tokens[-1].value + value)
            continue
        tokens.append(Token(kind, value))
    return tokens
