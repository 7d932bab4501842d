"""Base classes for schema node representation.

This module defines the root of the node hierarchy. Nodes describe the shape
of one piece of data and are immutable once created: every derived field is a
write-once cache computed from the node's properties.

Hierarchy is the following::

                         ScalarNode - NumberNode
                        /
    Node - ConcreteNode               MappingNode
                        \\             /
                         CompositeNode
                                      \\
                                       ListNode
"""

from collections.abc import Iterator, Mapping
from functools import cached_property
from typing import Any, ClassVar, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from valueschema.utils import FrozenDict, freeze


class Node:
    """Base class for all schema nodes.

    A node holds ``props``, a FrozenDict of schema properties such as
    ``type`` or ``default_value``. Nodes compare structurally: two nodes are
    equal when they are of the same class and carry equal properties and
    children.

    Nodes should be built through ``create`` (or the ``Scalar``, ``Mapping``
    and ``List`` factories) rather than by calling the constructor directly.

    Attributes:
        kind: Tag naming the node variant, for consumers that dispatch on it.
    """

    kind: ClassVar[str] = "node"

    def __init__(self, props: Mapping[str, Any] | None = None) -> None:
        if not isinstance(props, FrozenDict):
            props = FrozenDict(props or {})
        object.__setattr__(self, "_props", props)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"{self.__class__.__name__} is immutable, cannot set {name!r}"
        )

    def __delattr__(self, name: str) -> None:
        raise AttributeError(
            f"{self.__class__.__name__} is immutable, cannot delete {name!r}"
        )

    @property
    def props(self) -> FrozenDict:
        """The node's properties."""
        return self._props

    @cached_property
    def default_value(self) -> Any:
        """The declared default value in its persistent representation.

        Computed from ``props["default_value"]`` on first access and cached
        for the lifetime of the node. None if the node declares no default.
        """
        return freeze(self._props.get("default_value"))

    def _structural_children(self) -> Any:
        """Children taken into account by equality (None for leaves)."""
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return (
            self._props == other._props
            and self._structural_children() == other._structural_children()
        )

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, frozenset(self._props)))

    def equals(self, other: Any) -> bool:
        """Structural equality that tolerates any operand, including None.

        Args:
            other: Object to compare against.

        Returns:
            True if ``other`` is a node of the same class with equal
            properties and children.
        """
        if not isinstance(other, Node):
            return False
        return self == other

    def instantiate(self, value: Any) -> "Node":
        """Resolve the schema that applies to ``value``.

        Args:
            value: Runtime value the schema is being applied to.

        Returns:
            The resolved schema node.

        Raises:
            NotImplementedError: Always, at this level.
        """
        raise NotImplementedError("instantiate(value): not implemented")

    def __repr__(self) -> str:
        props = ", ".join(f"{k}: {v}" for k, v in self._props.items())
        return f"{self.__class__.__name__} {{ {props} }}"

    @classmethod
    def create(cls, props: Mapping[str, Any] | None = None) -> Self:
        """Create a node of the class this method is called on.

        Args:
            props: Plain property mapping. None means no properties.

        Returns:
            A new instance of ``cls``.
        """
        return cls(FrozenDict(props or {}))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        """Provide Pydantic schema for fields annotated with a node class.

        Values are accepted when they are instances of the annotated class
        and dumped to JSON as their string form.
        """
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                repr, info_arg=False, when_used="json"
            ),
        )


class ConcreteNode(Node):
    """Node that is already a finished schema.

    Concrete nodes need no further resolution against runtime values, so
    ``instantiate`` is the identity.
    """

    def instantiate(self, value: Any) -> Self:  # noqa: ARG002
        return self


class CompositeNode(ConcreteNode):
    """Node owning child schemas.

    Subclasses decide how children are stored and addressed by implementing
    ``get_children``, ``get``, ``has`` and ``keys``.
    """

    @cached_property
    def children(self) -> Any:
        """Children of this node, computed once by ``get_children``."""
        return self.get_children()

    def _structural_children(self) -> Any:
        return self.children

    def get_children(self) -> Any:
        raise NotImplementedError("get_children(): not implemented")

    def get(self, key: Any) -> Node | None:
        """Return the schema for the child at ``key``."""
        raise NotImplementedError("get(key): not implemented")

    def has(self, key: Any) -> bool:
        """Return whether ``key`` addresses a child."""
        raise NotImplementedError("has(key): not implemented")

    def keys(self, value: Any = None) -> Iterator[Any]:
        """Iterate over the child keys relevant to ``value``."""
        raise NotImplementedError("keys(value): not implemented")
