"""Mapping nodes: composite schemas keyed by named children."""

from collections import abc
from collections.abc import Iterator
from typing import Any, Self

from loguru import logger

from valueschema.invariant import invariant
from valueschema.utils import UNSET, FrozenDict

from .base import CompositeNode, Node


class MappingNode(CompositeNode):
    """Composite node describing a document with a fixed set of named fields.

    Children live in ``props["children"]``, a FrozenDict from field name to
    node that keeps the order fields were declared in.

    Examples:
        >>> node = MappingNode.create({"name": Scalar(), "age": Scalar(type="number")})
        >>> node.has("name")
        True
        >>> list(node.keys())
        ['name', 'age']
        >>> node.get("email") is None
        True
    """

    kind = "mapping"

    def get_children(self) -> FrozenDict:
        return self._props["children"]

    def get(self, key: Any) -> Node | None:
        return self.children.get(key)

    def has(self, key: Any) -> bool:
        return key in self.children

    def keys(self, value: Any = None) -> Iterator[str]:  # noqa: ARG002
        return iter(self.children)

    @classmethod
    def create(
        cls,
        props_or_children: abc.Mapping[str, Any] | None = None,
        children: abc.Mapping[str, Node] | Any = UNSET,
    ) -> Self:
        """Create a mapping node.

        Two call shapes are supported:
        - ``create(children)``: the only argument maps field names to nodes.
        - ``create(props, children)``: extra properties plus the children.

        Args:
            props_or_children: Children mapping, or extra properties when
                ``children`` is given.
            children: Mapping from field name to node.

        Returns:
            A new instance of ``cls``.

        Raises:
            InvariantError: If any child is not a Node.
        """
        if children is UNSET:
            children = props_or_children
            props = {}
        else:
            props = {
                k: v for k, v in (props_or_children or {}).items() if k != "children"
            }

        children = FrozenDict(children or {})
        for key, child in children.items():
            invariant(
                isinstance(child, Node),
                f'child "{key}" supplied to Mapping must be a Node, '
                f"got {type(child).__name__}",
            )

        logger.debug("Creating {} with fields {}", cls.__name__, list(children))
        return cls(FrozenDict({"children": children, **props}))


def Mapping(
    props_or_children: abc.Mapping[str, Any] | None = None,
    children: abc.Mapping[str, Node] | Any = UNSET,
    /,
    **named_children: Node,
) -> Any:
    """Factory function for creating a MappingNode.

    Accepts the same two call shapes as ``MappingNode.create``. Children may
    also be passed as keyword arguments, which are added after any children
    given positionally.

    Args:
        props_or_children: Children mapping, or extra properties when
            ``children`` is given.
        children: Mapping from field name to node.
        **named_children: Additional children by field name.

    Returns:
        A MappingNode.

    Examples:
        >>> user = Mapping(name=Scalar(), age=Scalar(type="number"))
        >>> labelled = Mapping({"label": "User"}, {"name": Scalar()})
    """
    if children is UNSET:
        if not named_children:
            return MappingNode.create(props_or_children)
        return MappingNode.create({**(props_or_children or {}), **named_children})
    return MappingNode.create(
        props_or_children, {**(children or {}), **named_children}
    )
