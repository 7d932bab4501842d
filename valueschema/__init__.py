"""valueschema: immutable schemas for structured values.

valueschema describes the shape of structured data as a tree of immutable
nodes. Form and validation layers walk the tree to find out, for any path in
a document, which kind of value is expected and how to render it as text and
parse it back.

Core Components:
---------------
- Scalar: String and number leaves with text conversion
- Mapping: Named fields
- List: Homogeneous elements sharing one schema

Key Features:
------------
- Immutable nodes with structural equality
- Lazy, cached children and default values
- Text conversion that reports bad input as a value, not an exception
- Usable as field types on Pydantic models

Quick Start:
-----------
    >>> import valueschema as vs
    >>>
    >>> schema = vs.Mapping(
    ...     name=vs.Scalar(),
    ...     age=vs.Scalar(type="number", default_value=18),
    ...     tags=vs.List(vs.Scalar()),
    ... )
    >>>
    >>> age = schema.get("age")
    >>> age.deserialize("42")
    42.0
    >>> vs.is_invalid(age.deserialize("forty-two"))
    True
    >>> age.default_value
    18

Logging:
--------
valueschema logs through loguru and is disabled by default. Enable it with
``loguru.logger.enable("valueschema")``.
"""

from loguru import logger

from .invariant import InvariantError, invariant
from .nodes import (
    CompositeNode,
    ConcreteNode,
    List,
    ListNode,
    Mapping,
    MappingNode,
    Node,
    NumberNode,
    Scalar,
    ScalarNode,
    is_invalid,
)
from .utils import UNSET, FrozenDict, freeze

logger.disable(__name__)

__version__ = "0.1.0"

__all__ = [
    # User-facing factories
    "Scalar",
    "Mapping",
    "List",
    # Node classes (for type checking and introspection)
    "Node",
    "ConcreteNode",
    "CompositeNode",
    "ScalarNode",
    "NumberNode",
    "MappingNode",
    "ListNode",
    # Deserialization helpers
    "is_invalid",
    # Errors
    "InvariantError",
    "invariant",
    # Persistent values
    "FrozenDict",
    "freeze",
    "UNSET",
    # Version
    "__version__",
]
