# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ITree - An append-only tree addressed by stable ids.

This module provides the ITree class, an arena of nodes where children
can be added but nothing can be changed or removed once inserted.

Key Features:
    - **Stable ids**: add_node() returns a NodeId that stays valid for the
      lifetime of the tree, however much the tree grows
    - **Append-only**: values and parents are fixed at insertion, child
      lists only grow, in insertion order
    - **O(1) insertion and lookup**: nodes live in a single list indexed
      by NodeId
    - **Single entry point**: the first add_node() creates the root and
      ignores its parent argument, every later call adds a child

Layout:
    The node at position 0 is the root. Every other node has a parent
    whose position is strictly lower than its own, so the parent relation
    cannot form a cycle.

Example:
    Building a small tree::

        tree = ITree()
        root = tree.add_node(None, 'html')
        body = tree.add_node(root, 'body')
        tree.add_node(body, 'div')

        tree.get(root).children   # (NodeId(1),)
        tree.get(body).parent     # NodeId(0)
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Generic, TypeVar

from .exceptions import MissingNodeError, OutOfRangeParentError
from .node import ITreeNode, NodeId

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ITree(Generic[T]):
    """An append-only tree of values addressed by NodeId.

    ITree provides:
    - add_node(parent_id, value): Insert the root, then children
    - root() / get(node_id): Read nodes, None when missing
    - tree[node_id]: Read nodes, MissingNodeError when missing
    - len(tree), node_id in tree, ids(): Inspect the node sequence

    Nodes returned by root() and get() are views: fetch them again after
    an insertion. NodeIds never need refreshing.

    Example:
        >>> tree = ITree()
        >>> root = tree.add_node(None, 0)
        >>> child = tree.add_node(root, 1)
        >>> tree.get(root).children
        (NodeId(1),)
        >>> tree.get(child).parent
        NodeId(0)
    """

    __slots__ = ('_nodes',)

    def __init__(self) -> None:
        """Initialize an empty ITree."""
        self._nodes: list[ITreeNode[T]] = []

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing the node count."""
        return f"ITree({len(self._nodes)} nodes)"

    def __len__(self) -> int:
        """Return the number of nodes in the tree."""
        return len(self._nodes)

    def __bool__(self) -> bool:
        """Return False if the tree has no root yet."""
        return bool(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        """Check if node_id refers to a node of this tree.

        Args:
            node_id: The id to check. Non-NodeId values are never contained.

        Returns:
            True if get(node_id) would return a node.
        """
        if not isinstance(node_id, NodeId):
            return False
        return node_id.index < len(self._nodes)

    def __getitem__(self, node_id: NodeId) -> ITreeNode[T]:
        """Get a node by id.

        Args:
            node_id: Id returned by add_node() or root_id.

        Returns:
            The node.

        Raises:
            TypeError: If node_id is not a NodeId.
            MissingNodeError: If the tree holds no node with that id.
        """
        node = self.get(node_id)
        if node is None:
            raise MissingNodeError(
                f"{node_id!r} not found ({self._range_repr()})"
            )
        return node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ITree):
            return NotImplemented
        return self._nodes == other._nodes

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> ITree[T]:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> ITree[T]:
        result: ITree[T] = ITree()
        memo[id(self)] = result
        result._nodes = [
            node._clone(lambda value: copy.deepcopy(value, memo))
            for node in self._nodes
        ]
        return result

    # ==================== Access ====================

    @property
    def is_empty(self) -> bool:
        """True if the tree has no root yet."""
        return not self._nodes

    @property
    def root_id(self) -> NodeId | None:
        """Id of the root node, or None if the tree is empty."""
        return NodeId(0) if self._nodes else None

    def root(self) -> ITreeNode[T] | None:
        """Get the root node, or None if the tree is empty."""
        return self._nodes[0] if self._nodes else None

    def get(self, node_id: NodeId) -> ITreeNode[T] | None:
        """Get a node by id.

        The returned node reflects the tree at the time of the call: its
        children tuple does not grow with later insertions.

        Args:
            node_id: Id returned by add_node() or root_id.

        Returns:
            The node, or None if the tree holds no node with that id.

        Raises:
            TypeError: If node_id is not a NodeId.
        """
        self._check_id(node_id)
        if node_id.index < len(self._nodes):
            return self._nodes[node_id.index]
        return None

    def ids(self) -> list[NodeId]:
        """Return the ids of all nodes in insertion order."""
        return [NodeId(i) for i in range(len(self._nodes))]

    # ==================== Insertion ====================

    def add_node(self, parent_id: NodeId | None, value: T) -> NodeId:
        """Add a node and return its id.

        On an empty tree the node becomes the root and parent_id is
        ignored, whatever it is. Otherwise the node is appended as the
        last child of parent_id.

        Args:
            parent_id: Id of the parent node. Ignored for the first node.
            value: Value to store. It is kept as given, never copied.

        Returns:
            The NodeId of the new node.

        Raises:
            TypeError: If parent_id is neither a NodeId nor None.
            OutOfRangeParentError: If the tree is not empty and parent_id
                is None or refers to no node. The tree is left unchanged.

        Example:
            >>> tree = ITree()
            >>> tree.add_node(NodeId(42), 'a')
            NodeId(0)
            >>> tree.add_node(NodeId(0), 'b')
            NodeId(1)
        """
        if not self._nodes:
            self._nodes.append(ITreeNode._create(value, None))
            logger.debug("Created root %r, ignored parent %r", NodeId(0), parent_id)
            return NodeId(0)

        if parent_id is not None:
            self._check_id(parent_id)
        parent = None if parent_id is None else self.get(parent_id)
        if parent is None:
            logger.debug("Rejected child of %r (%s)", parent_id, self._range_repr())
            raise OutOfRangeParentError(
                f"Parent {parent_id!r} not found ({self._range_repr()})"
            )

        node_id = NodeId(len(self._nodes))
        parent._append_child(node_id)
        self._nodes.append(ITreeNode._create(value, parent_id))
        return node_id

    # ==================== Conversion ====================

    def copy(self) -> ITree[T]:
        """Return an independent tree with the same shape and values.

        Values are shared, not copied. Nodes added to either tree do not
        appear in the other. NodeIds are valid in both trees.
        """
        result: ITree[T] = ITree()
        result._nodes = [node._clone() for node in self._nodes]
        return result

    # ==================== Helpers ====================

    @staticmethod
    def _check_id(node_id: object) -> None:
        if not isinstance(node_id, NodeId):
            raise TypeError(
                f"node id must be NodeId, not {type(node_id).__name__}"
            )

    def _range_repr(self) -> str:
        if not self._nodes:
            return "tree is empty"
        return f"valid ids: NodeId(0)..NodeId({len(self._nodes) - 1})"
