"""Unit tests for linkedlists.iterators module."""

from __future__ import annotations

import pytest

from linkedlists import IntoIter, Iter, IterMut, MutRef, PersistentList, StackList


class TestMutRef:
    """Tests for the MutRef write handle."""

    def test_read_and_write(self) -> None:
        """Test reading and replacing an element through a handle."""
        stack = StackList()
        stack.push("a")
        ref = stack.peek_mut()
        assert isinstance(ref, MutRef)
        assert ref.value == "a"
        ref.value = "b"
        assert stack.peek() == "b"

    def test_mutable_element_in_place(self) -> None:
        """Test mutating a mutable element without replacing it."""
        stack = StackList()
        stack.push([1])
        stack.peek_mut().value.append(2)
        assert stack.pop() == [1, 2]

    def test_repr(self) -> None:
        """Test the handle's repr."""
        stack = StackList()
        stack.push(7)
        assert repr(stack.peek_mut()) == "MutRef(7)"


class TestCursorTypes:
    """Tests for the cursor types returned by both lists."""

    def test_types(self) -> None:
        """Test which cursor each method returns."""
        stack = StackList()
        stack.push(1)
        assert isinstance(stack.iter(), Iter)
        assert isinstance(iter(stack), Iter)
        with stack.iter_mut() as it:
            assert isinstance(it, IterMut)
        assert isinstance(stack.into_iter(), IntoIter)
        assert isinstance(PersistentList().iter(), Iter)

    def test_cursors_are_iterators(self) -> None:
        """Test that iter() on a cursor returns the cursor itself."""
        stack = StackList()
        stack.push(1)
        it = stack.iter()
        assert iter(it) is it
        moved = stack.into_iter()
        assert iter(moved) is moved

    def test_exhausted_cursor_stays_exhausted(self) -> None:
        """Test that an exhausted cursor does not rewind."""
        plist = PersistentList().prepend(1)
        it = plist.iter()
        assert list(it) == [1]
        assert list(it) == []

    def test_exhausted_cursor_ignores_later_changes(self) -> None:
        """Test that finishing first means no modification error later."""
        stack = StackList()
        stack.push(1)
        it = stack.iter()
        assert list(it) == [1]
        stack.push(2)
        with pytest.raises(StopIteration):
            next(it)
