"""Traversal cursors shared by both list types.

Three shapes of traversal are provided:

- ``Iter`` yields elements and leaves the list untouched. Any number may be
  alive at once.
- ``IterMut`` yields ``MutRef`` write handles and holds an exclusive borrow on
  a ``StackList`` for as long as it is live.
- ``IntoIter`` owns the chain it was given and yields elements by value.

A cursor only ever holds "the next node to visit". It never changes the
ownership of the chain it walks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from linkedlists.errors import BorrowError, ConcurrentModificationError

if TYPE_CHECKING:
    from types import TracebackType

    from linkedlists.persistent import PersistentList, _SharedNode
    from linkedlists.stack import StackList, _Node


class MutRef:
    """Write handle on the element of a single node.

    Assigning to ``value`` replaces the element in place.

    A handle is not tied to the borrow that produced it: handles kept after
    their ``iter_mut()`` cursor ends still write into the list, and a handle
    on a node that has since been popped writes into the detached node only.
    Keep handles no longer than the cursor or ``peek_mut()`` call they came
    from.
    """

    __slots__ = ("_node",)

    def __init__(self, node: _Node) -> None:
        self._node = node

    @property
    def value(self) -> Any:
        return self._node.elem

    @value.setter
    def value(self, elem: Any) -> None:
        self._node.elem = elem

    def __repr__(self) -> str:
        return f"MutRef({self._node.elem!r})"


class _Cursor:
    """Walks a chain one node at a time.

    The owner's version is captured at creation; a structural change of the
    owner makes the next step fail instead of walking a detached chain.
    """

    __slots__ = ("_next", "_owner", "_version")

    def __init__(
        self,
        owner: StackList | PersistentList,
        head: _Node | _SharedNode | None,
    ) -> None:
        self._owner = owner
        self._next = head
        self._version = owner._version

    def __iter__(self) -> _Cursor:
        return self

    def _advance(self) -> _Node | _SharedNode:
        node = self._next
        if node is None:
            raise StopIteration
        if self._owner._version != self._version:
            msg = f"{type(self._owner).__name__} changed shape during iteration"
            raise ConcurrentModificationError(msg)
        self._next = node.next
        return node


class Iter(_Cursor):
    """Read-only front-to-back cursor."""

    __slots__ = ()

    def __next__(self) -> Any:
        if getattr(self._owner, "_borrowed", False):
            name = type(self._owner).__name__
            msg = f"{name} is mutably borrowed by a live iter_mut() cursor"
            raise BorrowError(msg)
        return self._advance().elem


class IterMut(_Cursor):
    """Front-to-back cursor yielding ``MutRef`` handles.

    Holds the owner's exclusive borrow until it is exhausted, closed, leaves
    a ``with`` block or is garbage-collected.
    """

    __slots__ = ("_active",)

    def __init__(self, owner: StackList, head: _Node | None) -> None:
        super().__init__(owner, head)
        owner._borrowed = True
        self._active = True

    def __next__(self) -> MutRef:
        try:
            node = self._advance()
        except StopIteration:
            self.close()
            raise
        return MutRef(node)

    def close(self) -> None:
        """Release the borrow. The cursor yields nothing afterwards."""
        if self._active:
            self._active = False
            self._next = None
            self._owner._borrowed = False

    def __enter__(self) -> IterMut:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()


class IntoIter:
    """Consuming cursor over a chain moved out of a ``StackList``."""

    __slots__ = ("_list",)

    def __init__(self, moved: StackList) -> None:
        self._list = moved

    def __iter__(self) -> IntoIter:
        return self

    def __next__(self) -> Any:
        if not self._list:
            raise StopIteration
        return self._list.pop()

    def __length_hint__(self) -> int:
        return len(self._list)
