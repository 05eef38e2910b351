"""Type definitions for sentinelq."""

from typing import TypeAlias

# Payload carried by every element
Value: TypeAlias = str

# Caller-supplied buffer that receives a NUL-terminated copy of a removed value
OutputBuffer: TypeAlias = bytearray
