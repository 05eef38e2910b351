"""Shared fixtures for sentinelq tests."""

from collections.abc import Callable

import pytest

from sentinelq import CircularList, Queue
from sentinelq.linkedlist import Node


def _check_ring(sentinel: Node) -> int:
    """Assert the doubly-linked ring invariants and return the node count."""
    count = 0
    node = sentinel
    while True:
        assert node.next.prev is node
        assert node.prev.next is node
        node = node.next
        if node is sentinel:
            return count
        count += 1
        assert count < 100_000, "ring does not return to its sentinel"


@pytest.fixture
def check_ring() -> Callable[[Queue | CircularList], int]:
    """Return a checker that validates the ring behind a queue or list."""

    def check(target: Queue | CircularList) -> int:
        ring = target._list if isinstance(target, Queue) else target
        return _check_ring(ring.sentinel)

    return check
