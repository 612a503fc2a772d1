"""
Parameter binding for statement builders.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple

from ..validation import NullArgumentError, require_text
from ..validation.validators import parameter_name


class ParameterBinder:
    """
    Ordered ``:name -> value`` map owned by a single builder.

    Setting an existing name overwrites the value in place; new names append.
    """

    def __init__(self) -> None:
        self._parameters: Dict[str, Any] = {}

    @staticmethod
    def _validate_name(name: Any) -> None:
        require_text(name, "Name")
        parameter_name(name, argument="Name")

    def set(self, name: str, value: Any) -> None:
        self._validate_name(name)
        self._parameters[name] = value

    def merge(self, *mappings: Mapping[str, Any]) -> None:
        """
        Upsert every mapping in order. All names are checked first, so a bad
        name leaves the map untouched.
        """
        pending: List[Tuple[str, Any]] = []
        for mapping in mappings:
            if mapping is None:
                raise NullArgumentError("Parameters argument should not be null.", argument="Parameters")
            for name, value in mapping.items():
                self._validate_name(name)
                pending.append((name, value))
        for name, value in pending:
            self._parameters[name] = value

    def discard(self, name: str) -> None:
        self._parameters.pop(name, None)

    def unique_name(self, bucket: str) -> str:
        """
        Next free ``:{bucket}_{n}`` name.

        ``n`` counts every existing name containing the bucket tag, so names
        merged in from another builder are stepped over as well. Should a
        merged map leave a gap, the suffix keeps climbing until it is free.
        """
        tag = f":{bucket}"
        index = sum(1 for name in self._parameters if tag in name) + 1
        while f"{tag}_{index}" in self._parameters:
            index += 1
        return f"{tag}_{index}"

    def bind(self, bucket: str, values: Iterable[Any]) -> List[str]:
        names: List[str] = []
        for value in values:
            name = self.unique_name(bucket)
            self.set(name, value)
            names.append(name)
        return names

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._parameters)

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __getitem__(self, name: str) -> Any:
        return self._parameters[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)
