"""List nodes: composite schemas for homogeneous sequences."""

from collections import abc
from collections.abc import Iterator
from typing import Any, Self

from loguru import logger

from valueschema.utils import UNSET, FrozenDict

from .base import CompositeNode, Node


class ListNode(CompositeNode):
    """Composite node describing a list whose elements share one schema.

    ``props["children"]`` holds the element schema rather than a per-index
    map. The schema does not encode the length of the list, so every index is
    addressable and resolves to the same element schema.

    Examples:
        >>> tags = ListNode.create(Scalar())
        >>> tags.has(9999)
        True
        >>> tags.get(0) is tags.get(1)
        True
        >>> list(tags.keys(["a", "b"]))
        [0, 1]
    """

    kind = "list"

    def get_children(self) -> Any:
        return self._props.get("children")

    def get(self, key: Any) -> Any:  # noqa: ARG002
        return self.children

    def has(self, key: Any) -> bool:  # noqa: ARG002
        return True

    def keys(self, value: Any = None) -> Iterator[Any]:
        """Iterate over the indices of a runtime list value.

        Args:
            value: The runtime collection the schema is applied to. Mappings
                yield their keys. None, for a value not yet present,
                yields nothing.

        Returns:
            Iterator over the positions present in ``value``.
        """
        if value is None:
            return iter(())
        if isinstance(value, abc.Mapping):
            return iter(value.keys())
        return iter(range(len(value)))

    @classmethod
    def create(
        cls,
        props_or_children: Any = None,
        children: Node | Any = UNSET,
    ) -> Self:
        """Create a list node.

        Two call shapes are supported:
        - ``create(children)``: the only argument is the element schema.
        - ``create(props, children)``: extra properties plus the element schema.

        The element schema is stored as given, without normalisation.

        Args:
            props_or_children: Element schema, or extra properties when
                ``children`` is given.
            children: Element schema.

        Returns:
            A new instance of ``cls``.
        """
        if children is UNSET:
            children = props_or_children
            props = {}
        else:
            props = {
                k: v for k, v in (props_or_children or {}).items() if k != "children"
            }

        logger.debug("Creating {} of {!r}", cls.__name__, children)
        return cls(FrozenDict({**props, "children": children}))


def List(props_or_children: Any = None, children: Node | Any = UNSET, /) -> Any:
    """Factory function for creating a ListNode.

    Args:
        props_or_children: Element schema, or extra properties when
            ``children`` is given.
        children: Element schema.

    Returns:
        A ListNode.

    Examples:
        >>> tags = List(Scalar())
        >>> scores = List({"default_value": [0]}, Scalar(type="number"))
    """
    return ListNode.create(props_or_children, children)
