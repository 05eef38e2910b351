"""Main Queue implementation."""

import logging
from collections.abc import Iterable, Iterator
from typing import cast

from sentinelq.element import Element
from sentinelq.errors import QueueDestroyedError
from sentinelq.linkedlist import CircularList, Node
from sentinelq.types import OutputBuffer, Value

logger = logging.getLogger(__name__)


def _value(node: Node) -> Value:
    return cast(Element, node).value


def _merge(ring: CircularList, other: CircularList) -> None:
    """Merge the ascending ring ``other`` into the ascending ring ``ring``.

    The front of ``other`` goes in front of the first entry of ``ring`` that is
    not strictly smaller, so equal values from ``other`` overtake those of
    ``ring``. Once ``ring`` is exhausted the rest of ``other`` is spliced on.
    """
    head = ring.sentinel
    cursor = head.next
    while not other.is_empty():
        front = other.sentinel.next
        while cursor is not head and _value(cursor) < _value(front):
            cursor = cursor.next
        if cursor is head:
            ring.splice_tail(other)
            break
        other.remove(front)
        ring.insert_before(front, cursor)


def _sort(ring: CircularList) -> None:
    if ring.is_empty() or ring.is_singular():
        return
    middle = ring.middle()
    if middle is None:
        return
    upper = CircularList()
    ring.cut_before(upper, middle)
    _sort(ring)
    _sort(upper)
    _merge(ring, upper)


class Queue:
    """
    Queue of text values on a circular doubly-linked list with a sentinel.

    Head/tail insertion and removal are O(1). Removal hands the element to the
    caller, who must release it (``Element.release``) or keep it. Not
    thread-safe: callers serialize access to one queue.
    """

    def __init__(self, values: Iterable[Value] = (), *, name: str | None = None) -> None:
        """
        Initialize the queue.

        Args:
            values: Initial values, inserted at the tail in iteration order.
            name: Label used in repr() and log records.
        """
        self._list = CircularList()
        self._name = name
        self._destroyed = False
        for value in values:
            self._list.append(Element(value))

    @classmethod
    def create(cls, *, name: str | None = None) -> "Queue | None":
        """Create an empty queue, or return None if memory cannot be obtained."""
        try:
            queue = cls(name=name)
        except MemoryError:
            logger.warning("Allocation failed while creating queue %r", name)
            return None
        logger.debug("Created %r", queue)
        return queue

    def destroy(self) -> None:
        """Release every element, then retire the sentinel.

        Raises:
            QueueDestroyedError: If the queue was already destroyed
        """
        self._check_alive()
        nodes = list(self._list)
        self._list.clear()
        for node in nodes:
            cast(Element, node).release()
        released = len(nodes)
        self._destroyed = True
        logger.debug("Destroyed queue %r, released %d elements", self._name, released)

    @property
    def destroyed(self) -> bool:
        """True once destroy() has run."""
        return self._destroyed

    def __enter__(self) -> "Queue":
        """Context manager entry."""
        self._check_alive()
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        if not self._destroyed:
            self.destroy()

    def _check_alive(self) -> None:
        if self._destroyed:
            raise QueueDestroyedError(f"Queue {self._name!r} was already destroyed")

    def _new_element(self, value: Value) -> Element | None:
        try:
            return Element(value)
        except MemoryError:
            logger.warning("Allocation failed while inserting into queue %r", self._name)
            return None
        except TypeError:
            logger.warning("Rejected non-text value %r for queue %r", value, self._name)
            return None

    def insert_head(self, value: Value) -> bool:
        """
        Insert a copy of value at the head of the queue.

        Returns:
            True on success, False if value is not a str or the element
            could not be allocated.
            The queue is unchanged on failure.

        Raises:
            QueueDestroyedError: If the queue was destroyed
        """
        self._check_alive()
        element = self._new_element(value)
        if element is None:
            return False
        self._list.appendleft(element)
        return True

    def insert_tail(self, value: Value) -> bool:
        """Insert a copy of value at the tail of the queue. See insert_head()."""
        self._check_alive()
        element = self._new_element(value)
        if element is None:
            return False
        self._list.append(element)
        return True

    def remove_head(
        self, sp: OutputBuffer | None = None, bufsize: int | None = None
    ) -> Element | None:
        """
        Unlink and return the head element, or None if the queue is empty.

        The element is not released: ownership passes to the caller.

        Args:
            sp: Optional buffer receiving the value, NUL terminated.
            bufsize: Bytes of sp that may be written, defaulting to and capped
                at len(sp); at most bufsize - 1 bytes of the value are copied,
                longer values are truncated.

        Raises:
            QueueDestroyedError: If the queue was destroyed
        """
        self._check_alive()
        node = self._list.popleft()
        return self._hand_over(node, sp, bufsize)

    def remove_tail(
        self, sp: OutputBuffer | None = None, bufsize: int | None = None
    ) -> Element | None:
        """Unlink and return the tail element. See remove_head()."""
        self._check_alive()
        node = self._list.pop()
        return self._hand_over(node, sp, bufsize)

    @staticmethod
    def _hand_over(
        node: Node | None, sp: OutputBuffer | None, bufsize: int | None
    ) -> Element | None:
        if node is None:
            return None
        element = cast(Element, node)
        if sp is not None:
            element.copy_to(sp, bufsize)
        return element

    @staticmethod
    def release_element(element: Element) -> None:
        """Release an element that is no longer reachable from any queue."""
        element.release()

    def size(self) -> int:
        """Return the number of elements, counted by walking the ring."""
        self._check_alive()
        return self._list.count()

    def __len__(self) -> int:
        """Return the number of elements. O(n)."""
        return self.size()

    def __bool__(self) -> bool:
        """Return True if the queue holds any element."""
        self._check_alive()
        return not self._list.is_empty()

    def __iter__(self) -> Iterator[Element]:
        self._check_alive()
        for node in self._list:
            yield cast(Element, node)

    def values(self) -> list[Value]:
        """Return the values from head to tail."""
        return [element.value for element in self]

    def __repr__(self) -> str:
        if self._destroyed:
            return f"Queue(name={self._name!r}, destroyed)"
        return f"Queue({self.values()!r}, name={self._name!r})"

    @property
    def head(self) -> Element | None:
        """The first element, without removing it."""
        self._check_alive()
        return cast("Element | None", self._list.first())

    @property
    def tail(self) -> Element | None:
        """The last element, without removing it."""
        self._check_alive()
        return cast("Element | None", self._list.last())

    def is_empty(self) -> bool:
        """Return True if the queue holds no element."""
        self._check_alive()
        return self._list.is_empty()

    def is_singular(self) -> bool:
        """Return True if the queue holds exactly one element."""
        self._check_alive()
        return self._list.is_singular()

    def get_middle(self) -> Element | None:
        """
        Return the element at 0-based index n // 2, or None if empty.

        For six elements this is the fourth one. Found in a single traversal.
        """
        self._check_alive()
        return cast("Element | None", self._list.middle())

    def delete_middle(self) -> bool:
        """Unlink and release the middle element. Returns False if empty."""
        self._check_alive()
        middle = self._list.middle()
        if middle is None:
            return False
        self._list.remove(middle)
        cast(Element, middle).release()
        return True

    def delete_adjacent_duplicates(self) -> bool:
        """
        Collapse every run of equal adjacent values to its last element.

        The queue must already be sorted ascending; this is not checked.
        An empty queue is left as is.

        Returns:
            True
        """
        self._check_alive()
        head = self._list.sentinel
        for node in self._list:
            following = node.next
            if following is not head and _value(node) == _value(following):
                self._list.remove(node)
                cast(Element, node).release()
        return True

    def swap_pairs(self) -> None:
        """Swap every two adjacent elements in place."""
        self._check_alive()
        self._list.swap_pairs()

    def reverse(self) -> None:
        """Reverse the element order in place, without allocating or releasing."""
        self._check_alive()
        self._list.reverse()

    def sort(self) -> None:
        """
        Sort ascending by value with a recursive merge sort.

        Elements are only relinked, never allocated or released. Equal values
        from the two halves of a split are not kept in their original order.
        """
        self._check_alive()
        _sort(self._list)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Sorted queue %r (%d elements)", self._name, self._list.count())
