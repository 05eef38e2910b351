"""Queue element: an owned text value with an embedded ring linkage."""

from sentinelq.errors import ElementLinkedError, ElementReleasedError
from sentinelq.linkedlist import Node
from sentinelq.types import OutputBuffer, Value


class Element(Node):
    """A node of the queue ring that carries a text payload.

    The linkage is inherited from ``Node``, so the node reached while walking a
    ring is the element itself.
    """

    __slots__ = ("value", "released")

    def __init__(self, value: Value) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Element value must be str, not {type(value).__name__}")
        super().__init__()
        self.value: Value = str(value)
        self.released = False

    def __repr__(self) -> str:
        state = "released" if self.released else repr(self.value)
        return f"Element({state})"

    def copy_to(self, sp: OutputBuffer, bufsize: int | None = None) -> None:
        """Write the value into ``sp`` as a NUL-terminated byte string.

        At most ``bufsize - 1`` bytes of the UTF-8 encoded value are copied and
        the rest of the first ``bufsize`` bytes is zero filled. Longer values
        are truncated silently. ``bufsize`` defaults to ``len(sp)`` and never
        exceeds it, so the buffer is not resized.
        """
        if bufsize is None or bufsize > len(sp):
            bufsize = len(sp)
        if bufsize <= 0:
            return
        data = self.value.encode("utf-8")[: bufsize - 1]
        sp[0:bufsize] = data.ljust(bufsize, b"\0")

    def release(self) -> None:
        """Drop the owned text and retire the element.

        Raises:
            ElementLinkedError: If the element is still linked into a ring
            ElementReleasedError: If the element was already released
        """
        if self.released:
            raise ElementReleasedError(f"{self!r} was already released")
        if self.is_linked():
            raise ElementLinkedError(f"{self!r} is still linked into a queue")
        self.value = ""
        self.released = True
