"""Utility types and helpers for valueschema.

This module provides the sentinel used to detect omitted arguments and the
persistent mapping representation that node properties and default values
are stored in.
"""

from collections.abc import Iterator, Mapping, Set
from typing import Any


class _Unset:
    """Sentinel class to represent an unset or undefined value.

    This is used instead of None to distinguish between "no value provided"
    and "None was explicitly provided as a value".
    """

    def __repr__(self) -> str:
        return "UNSET"


# Singleton instance representing an unset value
UNSET = _Unset()


class FrozenDict(Mapping[Any, Any]):
    """Immutable, insertion-ordered mapping.

    FrozenDict copies its input on construction and exposes only the read
    side of the mapping protocol. Equality follows ``dict`` semantics, so two
    FrozenDicts (or a FrozenDict and a plain dict) with the same items compare
    equal regardless of order.

    Examples:
        >>> props = FrozenDict({"type": "number", "default_value": 0})
        >>> list(props)
        ['type', 'default_value']
        >>> props == {"default_value": 0, "type": "number"}
        True
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, data: Any = (), /, **kwargs: Any) -> None:
        self._data: dict[Any, Any] = dict(data, **kwargs)
        self._hash: int | None = None

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FrozenDict):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        # Raises TypeError if any value is unhashable, like tuple does
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r})"

    def __str__(self) -> str:
        items = ", ".join(f"{k}: {v}" for k, v in self._data.items())
        return f"{{ {items} }}"

    def set(self, key: Any, value: Any) -> "FrozenDict":
        """Return a copy of this mapping with ``key`` bound to ``value``."""
        return FrozenDict({**self._data, key: value})


def freeze(value: Any) -> Any:
    """Deep-convert a value into its persistent representation.

    Mappings become FrozenDict, lists and tuples become tuples and sets become
    frozensets, recursively. Any other value (scalars, nodes, already frozen
    containers' leaves) is returned unchanged.

    Args:
        value: The value to convert.

    Returns:
        An immutable equivalent of ``value``.

    Examples:
        >>> freeze({"tags": ["a", "b"], "size": {"w": 1}})
        FrozenDict({'tags': ('a', 'b'), 'size': FrozenDict({'w': 1})})
    """
    if isinstance(value, Mapping):
        return FrozenDict((k, freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    if isinstance(value, Set) and not isinstance(value, frozenset):
        return frozenset(freeze(v) for v in value)
    return value
