# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ITree exceptions."""

from __future__ import annotations


class ITreeError(Exception):
    """Base exception for ITree errors."""

    pass


class OutOfRangeParentError(ITreeError, IndexError):
    """Raised when a child is added under a parent id the tree does not hold."""

    pass


class MissingNodeError(ITreeError, KeyError):
    """Raised when subscripting a tree with an id it does not hold."""

    pass
