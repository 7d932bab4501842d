"""Scalar leaf nodes and the Scalar factory.

Scalar nodes sit at the leaves of a schema tree. Besides describing the
expected value they convert between values and the text shown in form
fields: ``serialize`` turns a value into text and ``deserialize`` turns text
back into a value.
"""

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any

from loguru import logger

from valueschema import messages
from valueschema.invariant import invariant

from .base import ConcreteNode


class ScalarNode(ConcreteNode):
    """Leaf node holding a string value.

    The empty string and None are the two representations of "no value":
    None serializes to "" and "" deserializes to None. Everything else passes
    through unchanged.

    Examples:
        >>> node = ScalarNode.create()
        >>> node.serialize(None)
        ''
        >>> node.deserialize("")
        >>> node.deserialize("hello")
        'hello'
    """

    kind = "string"

    def serialize(self, value: Any) -> Any:
        """Convert a value to its text representation."""
        return "" if value is None else value

    def deserialize(self, value: Any) -> Any:
        """Convert text back to a value."""
        return None if value == "" else value


class NumberNode(ScalarNode):
    """Leaf node holding a finite floating point number.

    Deserialization never raises on bad input. Text that is not a finite
    number yields a ``ValueError`` instance carrying
    ``messages.INVALID_VALUE``, which callers detect with ``is_invalid``.

    Accepted text is whatever ``float`` parses after surrounding whitespace is
    stripped, except for infinities, NaN and digit-group underscores.

    Examples:
        >>> node = NumberNode.create()
        >>> node.deserialize("3.14")
        3.14
        >>> node.deserialize("")
        >>> is_invalid(node.deserialize("3.14x"))
        True
    """

    kind = "number"

    def deserialize(self, value: Any) -> float | None | ValueError:
        if value == "":
            return None
        number = _parse_number(value)
        if number is None:
            return ValueError(messages.INVALID_VALUE)
        return number


def _parse_number(value: Any) -> float | None:
    """Parse ``value`` as a finite float, or return None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        if "_" in value:
            return None
    elif not isinstance(value, Real):
        return None

    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None

    return number if math.isfinite(number) else None


def is_invalid(result: Any) -> bool:
    """Check whether a ``deserialize`` result is an error value.

    Args:
        result: Value returned by a scalar node's ``deserialize``.

    Returns:
        True if the text could not be converted.
    """
    return isinstance(result, ValueError)


_SCALAR_TYPES: dict[str, type[ScalarNode]] = {
    "string": ScalarNode,
    "number": NumberNode,
}


def Scalar(props: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Any:
    """Factory function for creating a scalar leaf node.

    This is the primary user-facing API for leaf schemas. The ``type``
    property selects the node class and defaults to ``"string"``.

    Args:
        props: Node properties, e.g. ``{"type": "number", "default_value": 0}``.
        **kwargs: Additional properties, merged over ``props``.

    Returns:
        A ScalarNode for ``"string"`` or a NumberNode for ``"number"``.

    Raises:
        InvariantError: If ``type`` names no known scalar type.

    Examples:
        >>> Scalar()
        ScalarNode {  }
        >>> Scalar(type="number", default_value=1)
        NumberNode { type: number, default_value: 1 }
    """
    props = {**(props or {}), **kwargs}
    scalar_type = props.get("type") or "string"

    node_cls = None
    if isinstance(scalar_type, str):
        node_cls = _SCALAR_TYPES.get(scalar_type)
    invariant(
        node_cls is not None,
        f'invalid type "{scalar_type}" supplied to Scalar',
    )

    logger.debug("Creating {} for scalar type {!r}", node_cls.__name__, scalar_type)
    return node_cls.create(props)
