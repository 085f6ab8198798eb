"""linkedlists: an owned stack list and a persistent shared list."""

from __future__ import annotations

from linkedlists.errors import (
    BorrowError,
    ConcurrentModificationError,
    LinkedListError,
)
from linkedlists.iterators import IntoIter, Iter, IterMut, MutRef
from linkedlists.persistent import PersistentList
from linkedlists.stack import StackList

__all__ = [
    "BorrowError",
    "ConcurrentModificationError",
    "IntoIter",
    "Iter",
    "IterMut",
    "LinkedListError",
    "MutRef",
    "PersistentList",
    "StackList",
]
