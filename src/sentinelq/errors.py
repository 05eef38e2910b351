"""Exception classes for sentinelq.

Expected conditions (absent or empty queue, allocation failure) are reported
through return values. These exceptions signal misuse of the API.
"""


class SentinelQError(Exception):
    """Base exception for all sentinelq errors."""


class QueueDestroyedError(SentinelQError):
    """Raised when an operation is attempted on a queue that was already destroyed."""


class ElementLinkedError(SentinelQError):
    """Raised when releasing an element that is still reachable from a queue."""


class ElementReleasedError(SentinelQError):
    """Raised when releasing an element that was already released."""
