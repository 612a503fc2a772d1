"""
Naming utilities for fluentsql.
"""

import re

_NON_WORD_RE = re.compile(r"\W")
_INNER_CAP_RE = re.compile(r"(?<=\w)([A-Z])")


def field_to_parameter_name(field: str) -> str:
    """
    Derive the bind name used for a column value.

    Non-word characters become ``_`` and an ``_`` is inserted before every
    capital preceded by a word character, so ``CustomerName`` binds as
    ``Customer_Name``. Case is kept as given; the dialect adds the prefix.
    """
    step1 = _NON_WORD_RE.sub("_", field.strip())
    return _INNER_CAP_RE.sub(r"_\1", step1)
