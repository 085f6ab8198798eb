"""Exceptions raised on misuse of the list types.

An empty list is never an error: ``pop``, ``peek`` and ``head`` return
``None`` instead.
"""

from __future__ import annotations


class LinkedListError(Exception):
    """Base class for list errors."""


class BorrowError(LinkedListError):
    """The list is exclusively borrowed by a live mutable cursor."""


class ConcurrentModificationError(LinkedListError, RuntimeError):
    """A cursor was advanced after its list changed shape."""
