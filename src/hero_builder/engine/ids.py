"""Identifier generation for new entities.

The factory takes any zero-argument callable returning a string, so
tests can swap random identifiers for predictable ones.

Example:
    >>> ids = SequentialIdGenerator(prefix="test")
    >>> ids(), ids()
    ('test-1', 'test-2')
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import count
from uuid import uuid4


IdGenerator = Callable[[], str]
"""A capability that returns a fresh identifier on every call."""


def uuid_id_generator() -> str:
    """Return a random UUID4 identifier.

    Collisions are left to UUID4's probability; nothing is tracked.
    """
    return str(uuid4())


class SequentialIdGenerator:
    """Deterministic identifiers ``<prefix>-1``, ``<prefix>-2``...

    Attributes:
        prefix: Text placed before the running number.
    """

    def __init__(self, prefix: str = "id", *, start: int = 1) -> None:
        self.prefix = prefix
        self._counter = count(start)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


__all__ = [
    "IdGenerator",
    "uuid_id_generator",
    "SequentialIdGenerator",
]
