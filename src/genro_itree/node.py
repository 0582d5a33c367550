# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ITree node classes.

This module provides the two value types handed out by an ITree:

- NodeId: an opaque, immutable handle to a node within one tree
- ITreeNode: the read-only record holding a value, its parent id and
  the ids of its children in insertion order

Neither type holds a reference back to the tree. A NodeId stays valid
for the whole lifetime of the tree that returned it; an ITreeNode is a
view that callers should re-fetch with ITree.get() after the tree grows.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, NoReturn, TypeVar

T = TypeVar('T')


class NodeId:
    """Opaque handle to a node within one ITree.

    A NodeId wraps a non-negative position in the tree's node sequence.
    Two ids are equal iff they wrap the same position. Ids carry no
    reference to their tree: mixing ids between trees is not detected.

    Example:
        >>> NodeId(2) == NodeId(2)
        True
        >>> NodeId(2)
        NodeId(2)
    """

    __slots__ = ('_index',)

    def __init__(self, index: int) -> None:
        """Initialize a NodeId.

        Args:
            index: Position of the node in its tree (0 is the root).

        Raises:
            TypeError: If index is not an int.
            ValueError: If index is negative.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(
                f"NodeId index must be int, not {type(index).__name__}"
            )
        if index < 0:
            raise ValueError(f"NodeId index must be non-negative, got {index}")
        object.__setattr__(self, '_index', index)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError("NodeId is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError("NodeId is immutable")

    @property
    def index(self) -> int:
        """Position of the node in its tree."""
        return self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeId):
            return NotImplemented
        return self._index == other._index

    def __hash__(self) -> int:
        return hash((NodeId, self._index))

    def __repr__(self) -> str:
        return f"NodeId({self._index})"

    def __copy__(self) -> NodeId:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> NodeId:
        return self

    def __reduce__(self) -> tuple[type[NodeId], tuple[int]]:
        return (NodeId, (self._index,))


class ITreeNode(Generic[T]):
    """A node in an ITree.

    Each node has:
    - value: The caller-supplied value, fixed at insertion
    - parent: NodeId of the parent, or None for the root
    - children: NodeIds of the children, in insertion order

    Nodes are only created by ITree.add_node(). The value and the parent
    never change; the children only grow, and only through the tree.

    Example:
        >>> from genro_itree import ITree
        >>> tree = ITree()
        >>> root_id = tree.add_node(None, 'root')
        >>> tree.get(root_id).value
        'root'
        >>> tree.get(root_id).parent is None
        True
    """

    __slots__ = ('_value', '_parent', '_children')

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(
            "ITreeNode cannot be instantiated directly, use ITree.add_node()"
        )

    @classmethod
    def _create(cls, value: T, parent: NodeId | None) -> ITreeNode[T]:
        """Build a childless node. Reserved to ITree."""
        node = object.__new__(cls)
        object.__setattr__(node, '_value', value)
        object.__setattr__(node, '_parent', parent)
        object.__setattr__(node, '_children', [])
        return node

    def _append_child(self, child: NodeId) -> None:
        """Record a new child id. Reserved to ITree."""
        self._children.append(child)

    def _clone(self, transform: Callable[[T], T] | None = None) -> ITreeNode[T]:
        """Copy the record with its own children list. Reserved to ITree.

        Args:
            transform: Optional function applied to the value of the copy.
        """
        value = self._value if transform is None else transform(self._value)
        return _rebuild(value, self._parent, self._children)

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        return (_rebuild, (self._value, self._parent, list(self._children)))

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"ITreeNode is read-only, cannot set '{name}'")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"ITreeNode is read-only, cannot delete '{name}'")

    @property
    def value(self) -> T:
        """The value stored at insertion."""
        return self._value

    @property
    def parent(self) -> NodeId | None:
        """NodeId of the parent, or None if this is the root."""
        return self._parent

    @property
    def children(self) -> tuple[NodeId, ...]:
        """Child ids in insertion order.

        The tuple is a snapshot: fetch the node again after adding
        children to see them.
        """
        return tuple(self._children)

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self._parent is None

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children yet."""
        return not self._children

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ITreeNode):
            return NotImplemented
        return (
            self._value == other._value
            and self._parent == other._parent
            and self._children == other._children
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ITreeNode(value={self._value!r}, parent={self._parent!r}, "
            f"children={self._children!r})"
        )


def _rebuild(
    value: T, parent: NodeId | None, children: list[NodeId]
) -> ITreeNode[T]:
    """Recreate a node from its parts, for copy and pickle."""
    node = ITreeNode._create(value, parent)
    node._children.extend(children)
    return node
