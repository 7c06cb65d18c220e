"""Opaque request and response bodies and the request authentication field."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

from .wire_header import _write_all, read_exact


@dataclass(frozen=True)
class RequestBody:
    """Body of a request: bytes whose meaning depends on the content type."""

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    @classmethod
    def read_from_stream(cls, stream: BinaryIO, length: int) -> RequestBody:
        """Read a body of ``length`` bytes from ``stream``."""
        return cls(read_exact(stream, length))

    def write_to_stream(self, stream: BinaryIO) -> None:
        """Write the body's bytes to ``stream``."""
        _write_all(stream, self.data)


@dataclass(frozen=True)
class ResponseBody:
    """Body of a response: bytes whose meaning depends on the content type."""

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    @classmethod
    def read_from_stream(cls, stream: BinaryIO, length: int) -> ResponseBody:
        """Read a body of ``length`` bytes from ``stream``."""
        return cls(read_exact(stream, length))

    def write_to_stream(self, stream: BinaryIO) -> None:
        """Write the body's bytes to ``stream``."""
        _write_all(stream, self.data)


@dataclass(frozen=True)
class RequestAuth:
    """Authentication value of a request; its contents are kept out of repr."""

    buffer: bytes = field(default=b"", repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "buffer", bytes(self.buffer))

    def __bytes__(self) -> bytes:
        return self.buffer

    def __len__(self) -> int:
        return len(self.buffer)

    @classmethod
    def read_from_stream(cls, stream: BinaryIO, length: int) -> RequestAuth:
        """Read an authentication field of ``length`` bytes from ``stream``."""
        return cls(read_exact(stream, length))

    def write_to_stream(self, stream: BinaryIO) -> None:
        """Write the authentication bytes to ``stream``."""
        _write_all(stream, self.buffer)