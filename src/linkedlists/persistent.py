"""Immutable singly-linked list with structural sharing.

Lists built from one another share their common suffix instead of copying
it. Each node carries an explicit strong count of the links that refer to
it (list heads and ``next`` fields). Dropping a list releases nodes from the
front only while it held the last reference, and stops at the first node
that is still owned by another list.

The counts are not atomic. Lists must not be shared across threads without
external locking.
"""

from __future__ import annotations

from typing import Any

from linkedlists.iterators import Iter


class _SharedNode:
    __slots__ = ("elem", "next", "refs")

    def __init__(self, elem: Any, link: _SharedNode | None) -> None:
        self.elem = elem
        self.next = link
        self.refs = 1


def _share(node: _SharedNode | None) -> _SharedNode | None:
    """Take one more strong reference to ``node``."""
    if node is not None:
        node.refs += 1
    return node


class PersistentList:
    """Persistent list: every operation returns a new list.

    ``prepend`` and ``tail`` run in constant time and never touch the
    original. ``head`` returns ``None`` on an empty list, and the tail of an
    empty list is another empty list.
    """

    __slots__ = ("_head", "_version")

    def __init__(self) -> None:
        self._head: _SharedNode | None = None
        self._version = 0

    @classmethod
    def _from_link(cls, link: _SharedNode | None) -> PersistentList:
        # ``link`` must already count this list as one of its owners.
        new = cls()
        new._head = link
        return new

    def head(self) -> Any:
        """Return the front element, or ``None`` if empty."""
        if self._head is None:
            return None
        return self._head.elem

    def prepend(self, elem: Any) -> PersistentList:
        """Return a new list with ``elem`` in front of this one."""
        return self._from_link(_SharedNode(elem, _share(self._head)))

    def tail(self) -> PersistentList:
        """Return the list after the front element."""
        if self._head is None:
            return self._from_link(None)
        return self._from_link(_share(self._head.next))

    def iter(self) -> Iter:
        """Return a fresh read cursor, front to back."""
        return Iter(self, self._head)

    def strong_count(self) -> int:
        """Number of owners of the front node, 0 for an empty list."""
        if self._head is None:
            return 0
        return self._head.refs

    def drop(self) -> None:
        """Release this list's claim on its chain and leave it empty.

        Unlinks nodes one at a time while their last owner goes away. The
        walk stops at the first node another list still refers to.
        """
        node = self._head
        if node is None:
            return
        self._head = None
        self._version += 1
        while node is not None:
            node.refs -= 1
            if node.refs > 0:
                break
            next_node = node.next
            node.next = None
            node = next_node

    def __del__(self) -> None:
        self.drop()

    def __copy__(self) -> PersistentList:
        return self._from_link(_share(self._head))

    def __iter__(self) -> Iter:
        return self.iter()

    def __len__(self) -> int:
        count = 0
        node = self._head
        while node is not None:
            count += 1
            node = node.next
        return count

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"PersistentList({list(self.iter())!r})"
