"""Schema node hierarchy.

Nodes form an immutable tree describing the shape of a document. Leaves are
scalar nodes that convert between values and text; inner nodes are mappings
of named fields or lists of a single element schema.

Node Types:
-----------
- Node: Base class for all nodes
- ConcreteNode: Node whose ``instantiate`` is the identity
- CompositeNode: Base class for nodes with children
  - MappingNode: Named fields
  - ListNode: Homogeneous elements
- ScalarNode: String leaf
  - NumberNode: Finite float leaf

Factories:
----------
- Scalar: Builds a ScalarNode or NumberNode from the ``type`` property
- Mapping: Builds a MappingNode
- List: Builds a ListNode

Examples:
    >>> from valueschema.nodes import List, Mapping, Scalar
    >>>
    >>> schema = Mapping(
    ...     name=Scalar(),
    ...     age=Scalar(type="number"),
    ...     tags=List(Scalar()),
    ... )
    >>> schema.get("tags").get(3)
    ScalarNode {  }
"""

from .base import CompositeNode, ConcreteNode, Node
from .list import List, ListNode
from .mapping import Mapping, MappingNode
from .scalar import NumberNode, Scalar, ScalarNode, is_invalid

__all__ = [
    # Base classes
    "Node",
    "ConcreteNode",
    "CompositeNode",
    # Node implementations
    "ScalarNode",
    "NumberNode",
    "MappingNode",
    "ListNode",
    # User-facing factories
    "Scalar",
    "Mapping",
    "List",
    # Helpers
    "is_invalid",
]
