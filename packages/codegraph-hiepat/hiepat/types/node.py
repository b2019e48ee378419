"""HieNode Protocol - Domain Layer.

HieNode represents one node of a HIE AST as seen by the matcher:
    - its own tag pair
    - its ordered children
    - optional literal value, resolved identifier, variable name and type

This is a Protocol (interface) to decouple hiepat from a specific AST
implementation. The search driver walking the tree provides the real nodes.
"""

from collections.abc import Callable, Hashable, Sequence
from typing import Any, Protocol

from hiepat.types.tags import TagPair

# Opaque type pattern and node type are handed to an external matcher.
TypeMatcher = Callable[[Any, Any], bool]


class HieNode(Protocol):
    """Node protocol for pattern matching.

    Required fields:
        - tag: (constructor, category) annotation
        - children: child nodes in source order
        - literal: literal value for constant nodes (int or bytes)
        - identifier: resolved name for name occurrences
        - variable_name: occurrence name for variable references
        - node_type: type of the node, opaque to hiepat

    Missing information is ``None``; the matcher treats it as "does not match".
    """

    @property
    def tag(self) -> TagPair:
        """Node annotation, e.g. ``TagPair("HsApp", "HsExpr")``."""
        ...

    @property
    def children(self) -> Sequence["HieNode"]:
        """Child nodes in order."""
        ...

    @property
    def literal(self) -> int | bytes | None:
        """Literal value of a constant node.

        Examples:
            - ``5`` -> 5
            - ``"foo"`` -> b"foo"
        """
        ...

    @property
    def identifier(self) -> Hashable | None:
        """Resolved identifier (usually a ``NameMeta``)."""
        ...

    @property
    def variable_name(self) -> str | None:
        """Occurrence name if the node is a variable reference."""
        ...

    @property
    def node_type(self) -> Any:
        """Type of the node, queried only through a ``TypeMatcher``."""
        ...


class MockNode:
    """Mock node for testing.

    Simple concrete implementation of HieNode protocol for tests and small
    drivers. Production code wraps the front end's own AST nodes.
    """

    __slots__ = ("_tag", "_children", "_literal", "_identifier", "_variable_name", "_node_type")

    def __init__(
        self,
        tag: tuple[str, str],
        children: Sequence[HieNode] = (),
        literal: int | bytes | str | None = None,
        identifier: Hashable | None = None,
        variable_name: str | None = None,
        node_type: Any = None,
    ) -> None:
        """Initialize mock node.

        Args:
            tag: (constructor, category) pair
            children: Child nodes
            literal: Literal value; ``str`` is stored UTF-8 encoded
            identifier: Resolved identifier
            variable_name: Variable occurrence name
            node_type: Opaque node type
        """
        self._tag = TagPair(*tag)
        self._children = tuple(children)
        self._literal = literal.encode("utf-8") if isinstance(literal, str) else literal
        self._identifier = identifier
        self._variable_name = variable_name
        self._node_type = node_type

    @property
    def tag(self) -> TagPair:
        return self._tag

    @property
    def children(self) -> Sequence[HieNode]:
        return self._children

    @property
    def literal(self) -> int | bytes | None:
        return self._literal

    @property
    def identifier(self) -> Hashable | None:
        return self._identifier

    @property
    def variable_name(self) -> str | None:
        return self._variable_name

    @property
    def node_type(self) -> Any:
        return self._node_type

    def __repr__(self) -> str:
        return f"MockNode({self._tag}, children={len(self._children)})"
