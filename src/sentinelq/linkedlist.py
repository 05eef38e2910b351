"""Circular doubly-linked list with a sentinel node.

Every ring is anchored by a payload-free sentinel ``Node``. A node that is not
part of any ring points to itself, so an empty list is simply a sentinel
linked to itself::

    sentinel <-> a <-> b <-> c <-> (back to sentinel)
"""

from collections.abc import Iterator


class Node:
    """Two-pointer linkage. A detached node points to itself."""

    __slots__ = ("prev", "next")

    def __init__(self) -> None:
        self.prev: Node = self
        self.next: Node = self

    def detach(self) -> None:
        """Reset the node to the self-linked state without touching neighbours."""
        self.prev = self
        self.next = self

    def is_linked(self) -> bool:
        """Return True if the node currently sits in a ring with other nodes."""
        return self.next is not self


class CircularList:
    """Circular doubly-linked list anchored by a sentinel node.

    Holds no payload knowledge: the operations here only rewire ``prev`` and
    ``next``. Size is not cached because the structural algorithms relink
    nodes directly; ``count()`` walks the ring.
    """

    __slots__ = ("_head",)

    def __init__(self) -> None:
        self._head = Node()

    @property
    def sentinel(self) -> Node:
        """The payload-free anchor node of the ring."""
        return self._head

    def is_empty(self) -> bool:
        """Return True if the sentinel links only to itself."""
        return self._head.next is self._head

    def is_singular(self) -> bool:
        """Return True if exactly one node follows the sentinel."""
        head = self._head
        return head.next is not head and head.next is head.prev

    def first(self) -> Node | None:
        """Return the first node without unlinking it, or None if empty."""
        return None if self.is_empty() else self._head.next

    def last(self) -> Node | None:
        """Return the last node without unlinking it, or None if empty."""
        return None if self.is_empty() else self._head.prev

    @staticmethod
    def _link_between(node: Node, prev_node: Node, next_node: Node) -> None:
        next_node.prev = node
        node.next = next_node
        node.prev = prev_node
        prev_node.next = node

    def append(self, node: Node) -> None:
        """Link node as the last entry (before the sentinel). O(1)."""
        self._link_between(node, self._head.prev, self._head)

    def appendleft(self, node: Node) -> None:
        """Link node as the first entry (after the sentinel). O(1)."""
        self._link_between(node, self._head, self._head.next)

    def insert_before(self, node: Node, at: Node) -> None:
        """Link node immediately before ``at``, which must be in this ring."""
        self._link_between(node, at.prev, at)

    def remove(self, node: Node) -> None:
        """Unlink node from the ring and leave it self-linked. O(1)."""
        node.prev.next = node.next
        node.next.prev = node.prev
        node.detach()

    def pop(self) -> Node | None:
        """Unlink and return the last node, or None if empty."""
        node = self.last()
        if node is not None:
            self.remove(node)
        return node

    def popleft(self) -> Node | None:
        """Unlink and return the first node, or None if empty."""
        node = self.first()
        if node is not None:
            self.remove(node)
        return node

    def count(self) -> int:
        """Count nodes by a full traversal. O(n)."""
        total = 0
        node = self._head.next
        while node is not self._head:
            total += 1
            node = node.next
        return total

    def __iter__(self) -> Iterator[Node]:
        # Safe against removal of the node just yielded.
        node = self._head.next
        while node is not self._head:
            following = node.next
            yield node
            node = following

    def clear(self) -> None:
        """Unlink every node, leaving each one self-linked, and empty the list."""
        for node in self:
            node.detach()
        self._head.detach()

    def splice_tail(self, other: "CircularList") -> None:
        """Move every node of ``other`` to the end of this list in one step.

        ``other`` is left empty.
        """
        if other.is_empty():
            return
        src = other.sentinel
        first, last = src.next, src.prev
        tail = self._head.prev

        first.prev = tail
        tail.next = first
        last.next = self._head
        self._head.prev = last
        src.detach()

    def cut_before(self, other: "CircularList", node: Node) -> None:
        """Move ``node`` and everything after it into the empty list ``other``.

        This list keeps the nodes strictly before ``node``. ``node`` must be an
        entry of this list, not the sentinel.
        """
        head = self._head
        dst = other.sentinel
        new_last = node.prev

        dst.next = node
        dst.prev = head.prev
        head.prev.next = dst
        node.prev = dst

        new_last.next = head
        head.prev = new_last

    def middle(self) -> Node | None:
        """Return the node at 0-based index ``n // 2``, or None if empty.

        Two cursors walk inward from the first and last nodes until they meet
        (odd count) or become adjacent (even count, where the later one is the
        middle). Needs no prior count.
        """
        head = self._head
        if head.next is head:
            return None
        if self.is_singular():
            return head.next
        forward, backward = head.next, head.prev
        while forward is not backward and forward.next is not backward:
            forward = forward.next
            backward = backward.prev
        return backward

    def swap_pairs(self) -> None:
        """Exchange each adjacent pair in place; an odd last node stays put."""
        head = self._head
        first = head.next
        second = first.next
        while first is not head and second is not head:
            first.prev.next = second
            second.prev = first.prev
            second.next.prev = first
            first.next = second.next
            second.next = first
            first.prev = second

            first = first.next
            second = first.next

    def reverse(self) -> None:
        """Reverse traversal order by exchanging ``prev``/``next`` on every node."""
        head = self._head
        if head.next is head:
            return
        node = head.next
        while node is not head:
            following = node.next
            node.next, node.prev = node.prev, following
            node = following
        head.next, head.prev = head.prev, head.next
