"""Case-insensitive view of a principal's resolved attributes.

Attributes are resolved by an external collaborator before policy
evaluation. Attribute names coming from directories and identity sources
are not consistent in case ("mail", "Mail", "MAIL"), so every lookup made
by the release pipeline is case-insensitive. Claim names and mapping names
are still compared case-sensitively by their owners.
"""

from __future__ import annotations

__all__ = [
    "AttributeValues",
    "ResolvedAttributes",
]

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

# Values of a single attribute, in resolution order
AttributeValues = list[Any]


def _to_values(value: Any) -> AttributeValues | None:
    """Normalize a raw attribute value to a list of values.

    Scalars become single-element lists. Strings and bytes are scalars.
    None stays None so absence can be told apart from an empty list.
    """
    if value is None:
        return value
    if isinstance(value, (str, bytes, Mapping)):
        return [value]
    if isinstance(value, Iterable):
        return list(value)
    return [value]


class ResolvedAttributes(Mapping[str, AttributeValues]):
    """Read-only, case-insensitive mapping of attribute name to values.

    Keys keep the spelling they were resolved with for iteration and
    display. When two input keys differ only by case, the last one wins
    (both value and spelling).

    Example:
        >>> attrs = ResolvedAttributes({"Email": ["a@b.com"]})
        >>> attrs["email"]
        ['a@b.com']
        >>> "EMAIL" in attrs
        True
    """

    __slots__ = ("_data",)

    def __init__(self, attributes: Mapping[str, Any] | None = None) -> None:
        # lower-cased name -> (original name, values)
        self._data: dict[str, tuple[str, AttributeValues]] = {}
        for name, value in (attributes or {}).items():
            values = _to_values(value)
            if values is None:
                continue
            key = name.lower()
            # Drop first so the re-inserted key takes the latest position
            self._data.pop(key, None)
            self._data[key] = (name, values)

    def __getitem__(self, name: str) -> AttributeValues:
        if not isinstance(name, str):
            raise KeyError(name)
        try:
            return list(self._data[name.lower()][1])
        except KeyError:
            raise KeyError(name) from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._data

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ResolvedAttributes({dict(self.items())!r})"

    def names(self) -> list[str]:
        """Attribute names with their original spelling."""
        return list(self)

    @classmethod
    def coerce(cls, attributes: Mapping[str, Any] | None) -> "ResolvedAttributes":
        """Return attributes as ResolvedAttributes, wrapping plain mappings."""
        if isinstance(attributes, cls):
            return attributes
        return cls(attributes)
