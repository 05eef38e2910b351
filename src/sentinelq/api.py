"""Operation table over possibly-absent queues.

Every function accepts ``None`` in place of a queue and answers with the
neutral result (``None``, ``False``, ``0`` or nothing) instead of failing.
"""

from sentinelq.core import Queue
from sentinelq.element import Element
from sentinelq.types import OutputBuffer, Value


def create() -> Queue | None:
    return Queue.create()


def destroy(queue: Queue | None) -> None:
    if queue is not None:
        queue.destroy()


def insert_head(queue: Queue | None, value: Value) -> bool:
    return queue is not None and queue.insert_head(value)


def insert_tail(queue: Queue | None, value: Value) -> bool:
    return queue is not None and queue.insert_tail(value)


def remove_head(
    queue: Queue | None, sp: OutputBuffer | None = None, bufsize: int | None = None
) -> Element | None:
    if queue is None:
        return None
    return queue.remove_head(sp, bufsize)


def remove_tail(
    queue: Queue | None, sp: OutputBuffer | None = None, bufsize: int | None = None
) -> Element | None:
    if queue is None:
        return None
    return queue.remove_tail(sp, bufsize)


def release_element(element: Element) -> None:
    element.release()


def size(queue: Queue | None) -> int:
    return 0 if queue is None else queue.size()


def get_middle(queue: Queue | None) -> Element | None:
    return None if queue is None else queue.get_middle()


def delete_middle(queue: Queue | None) -> bool:
    return queue is not None and queue.delete_middle()


def delete_adjacent_duplicates(queue: Queue | None) -> bool:
    return queue is not None and queue.delete_adjacent_duplicates()


def swap_pairs(queue: Queue | None) -> None:
    if queue is not None:
        queue.swap_pairs()


def reverse(queue: Queue | None) -> None:
    if queue is not None:
        queue.reverse()


def sort(queue: Queue | None) -> None:
    if queue is not None:
        queue.sort()
