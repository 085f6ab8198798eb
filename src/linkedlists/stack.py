"""Singly-linked stack with exclusive ownership of its nodes.

Every node is referenced by exactly one link: the list head or the ``next``
field of the node in front of it. Releasing the list walks the chain and
unlinks one node at a time, so dropping a very long chain never recurses.
"""

from __future__ import annotations

import copy
from typing import Any

from linkedlists.errors import BorrowError
from linkedlists.iterators import IntoIter, Iter, IterMut, MutRef


class _Node:
    __slots__ = ("elem", "next")

    def __init__(self, elem: Any, link: _Node | None) -> None:
        self.elem = elem
        self.next = link


class StackList:
    """Mutable last-in-first-out list.

    Empty-list operations return ``None`` rather than raising. While an
    ``IterMut`` is live, any other access raises ``BorrowError``.
    """

    __slots__ = ("_borrowed", "_head", "_len", "_version")

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._len = 0
        self._version = 0
        self._borrowed = False

    def _check_unborrowed(self) -> None:
        if self._borrowed:
            msg = "StackList is mutably borrowed by a live iter_mut() cursor"
            raise BorrowError(msg)

    def push(self, elem: Any) -> None:
        """Put ``elem`` at the front."""
        self._check_unborrowed()
        self._head = _Node(elem, self._head)
        self._len += 1
        self._version += 1

    def pop(self) -> Any:
        """Remove and return the front element, or ``None`` if empty."""
        self._check_unborrowed()
        node = self._head
        if node is None:
            return None
        self._head = node.next
        node.next = None
        self._len -= 1
        self._version += 1
        return node.elem

    def peek(self) -> Any:
        """Return the front element without removing it, or ``None``."""
        self._check_unborrowed()
        if self._head is None:
            return None
        return self._head.elem

    def peek_mut(self) -> MutRef | None:
        """Return a write handle on the front element, or ``None``."""
        self._check_unborrowed()
        if self._head is None:
            return None
        return MutRef(self._head)

    def iter(self) -> Iter:
        """Return a fresh read cursor, front to back."""
        self._check_unborrowed()
        return Iter(self, self._head)

    def iter_mut(self) -> IterMut:
        """Return a cursor of write handles, front to back.

        The list is exclusively borrowed until the cursor is exhausted or
        closed.
        """
        self._check_unborrowed()
        # Read cursors created before the borrow must not resume after it.
        self._version += 1
        return IterMut(self, self._head)

    def into_iter(self) -> IntoIter:
        """Move the chain into a consuming cursor and leave this list empty."""
        self._check_unborrowed()
        moved = StackList()
        moved._head, moved._len = self._head, self._len
        self._head = None
        self._len = 0
        self._version += 1
        return IntoIter(moved)

    def clear(self) -> None:
        """Release every node, unlinking each before it is dropped."""
        self._check_unborrowed()
        self._teardown()

    def _teardown(self) -> None:
        link = self._head
        self._head = None
        self._len = 0
        self._version += 1
        while link is not None:
            next_link = link.next
            link.next = None
            link = next_link

    def _push_all(self, elems: list[Any]) -> None:
        # ``elems`` is front first, so push from the back.
        for elem in reversed(elems):
            self.push(elem)

    def __copy__(self) -> StackList:
        """Return a list with its own chain holding the same elements."""
        new = StackList()
        new._push_all(list(self.iter()))
        return new

    def __deepcopy__(self, memo: dict[int, Any]) -> StackList:
        new = StackList()
        memo[id(self)] = new
        new._push_all([copy.deepcopy(elem, memo) for elem in self.iter()])
        return new

    def __del__(self) -> None:
        self._teardown()

    def __iter__(self) -> Iter:
        return self.iter()

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        if self._borrowed:
            return "StackList(<borrowed>)"
        return f"StackList({list(self.iter())!r})"
