"""Tests for queue elements."""

import pytest

from sentinelq import Element, ElementLinkedError, ElementReleasedError, Queue


def test_element_creation() -> None:
    """Test a new element is detached and owns its value."""
    element = Element("value")
    assert element.value == "value"
    assert not element.is_linked()
    assert not element.released


def test_copy_to_fits() -> None:
    """Test copying a short value into a buffer."""
    element = Element("abc")
    sp = bytearray(8)
    element.copy_to(sp, 8)
    assert bytes(sp) == b"abc\0\0\0\0\0"


def test_copy_to_truncates() -> None:
    """Test long values are cut to bufsize - 1 bytes plus a terminator."""
    element = Element("abcdefghij")
    sp = bytearray(5)
    element.copy_to(sp, 5)
    assert bytes(sp) == b"abcd\0"


def test_copy_to_exact_fit() -> None:
    """Test a value of bufsize - 1 bytes is copied whole."""
    element = Element("abcd")
    sp = bytearray(5)
    element.copy_to(sp, 5)
    assert bytes(sp) == b"abcd\0"


def test_copy_to_counts_bytes_not_characters() -> None:
    """Test truncation is measured in UTF-8 bytes."""
    element = Element("été")
    sp = bytearray(4)
    element.copy_to(sp, 4)
    assert bytes(sp) == b"\xc3\xa9t\0"


def test_copy_to_zero_size_writes_nothing() -> None:
    """Test a zero bufsize leaves the buffer untouched."""
    element = Element("abc")
    sp = bytearray(b"xyz")
    element.copy_to(sp, 0)
    assert sp == bytearray(b"xyz")


def test_release() -> None:
    """Test releasing a detached element."""
    element = Element("value")
    element.release()
    assert element.released
    assert element.value == ""
    assert "released" in repr(element)


def test_double_release_raises() -> None:
    """Test an element cannot be released twice."""
    element = Element("value")
    element.release()
    with pytest.raises(ElementReleasedError):
        element.release()


def test_release_linked_element_raises() -> None:
    """Test an element still in a queue cannot be released."""
    queue = Queue(["a", "b"])
    head = queue.head
    assert head is not None
    with pytest.raises(ElementLinkedError):
        head.release()
    assert queue.values() == ["a", "b"]


def test_non_text_value_rejected() -> None:
    """Test elements only accept str values."""
    with pytest.raises(TypeError):
        Element(b"abc")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Element(None)  # type: ignore[arg-type]


def test_copy_to_defaults_to_buffer_length() -> None:
    """Test omitting bufsize uses the whole buffer."""
    element = Element("hi")
    sp = bytearray(b"zzzz")
    element.copy_to(sp)
    assert bytes(sp) == b"hi\0\0"


def test_copy_to_never_grows_buffer() -> None:
    """Test a bufsize larger than the buffer is capped at its length."""
    element = Element("hello")
    sp = bytearray(2)
    element.copy_to(sp, 8)
    assert len(sp) == 2
    assert bytes(sp) == b"h\0"
