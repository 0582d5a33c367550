# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-ITree - Append-only trees addressed by stable node ids.

A lightweight, zero-dependency library providing an immutable tree
container: nodes can be added as children of existing nodes, but no
value, parent, or child list can be changed or removed afterwards.
"""

__version__ = "0.1.0"

from .exceptions import (
    ITreeError,
    MissingNodeError,
    OutOfRangeParentError,
)
from .node import ITreeNode, NodeId
from .tree import ITree

__all__ = [
    # Core classes
    "ITree",
    "ITreeNode",
    "NodeId",
    # Exceptions
    "ITreeError",
    "OutOfRangeParentError",
    "MissingNodeError",
]
