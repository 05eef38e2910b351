"""sentinelq - Text queue on a circular doubly-linked list with a sentinel node."""

import logging

from sentinelq import api
from sentinelq.core import Queue
from sentinelq.element import Element
from sentinelq.errors import (
    ElementLinkedError,
    ElementReleasedError,
    QueueDestroyedError,
    SentinelQError,
)
from sentinelq.linkedlist import CircularList, Node
from sentinelq.types import OutputBuffer, Value

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.0.1"

__all__ = [
    "api",
    "Queue",
    "Element",
    "CircularList",
    "Node",
    "SentinelQError",
    "QueueDestroyedError",
    "ElementLinkedError",
    "ElementReleasedError",
    "OutputBuffer",
    "Value",
]
