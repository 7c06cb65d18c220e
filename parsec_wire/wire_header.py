"""The fixed-size header frame of version 1.0 of the wire protocol."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import struct
from typing import BinaryIO

from .status import ParsecError, ResponseStatus

_log = logging.getLogger(__name__)

MAGIC_NUMBER = 0x5EC0_A710
WIRE_PROTOCOL_VERSION_MAJ = 1
WIRE_PROTOCOL_VERSION_MIN = 0
HEADER_SIZE = 30

_PREAMBLE = struct.Struct("<IHBB")
_MAGIC = struct.Struct("<I")
_SIZE = struct.Struct("<H")
_FIELDS = struct.Struct("<HBQBBBIHIHBB")


def _connection_error(exc: OSError) -> ParsecError:
    _log.warning("Conversion from %r to ResponseStatus.CONNECTION_ERROR.", exc)
    if isinstance(exc, (BlockingIOError, TimeoutError)):
        _log.warning(
            "The operation would block, which might mean that the connection timed out. "
            "Try to increase the timeout length."
        )
    return ParsecError(ResponseStatus.CONNECTION_ERROR, str(exc) or None)


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``stream``.

    Raises ParsecError with CONNECTION_ERROR if the stream fails or ends early.
    """
    data = bytearray()
    while len(data) < size:
        try:
            chunk = stream.read(size - len(data))
        except OSError as exc:
            raise _connection_error(exc) from exc
        if not chunk:
            raise ParsecError(
                ResponseStatus.CONNECTION_ERROR,
                f"stream ended after {len(data)} of {size} bytes",
            )
        data += chunk
    return bytes(data)


def _write_all(stream: BinaryIO, data: bytes) -> None:
    remaining = memoryview(data)
    try:
        while remaining:
            written = stream.write(bytes(remaining))
            if written is None:
                written = len(remaining)
            if written <= 0:
                raise ParsecError(
                    ResponseStatus.CONNECTION_ERROR, "stream accepted no more bytes"
                )
            remaining = remaining[written:]
    except OSError as exc:
        raise _connection_error(exc) from exc


@dataclass
class WireHeader:
    """Raw common header of requests and responses, as laid out on the wire."""

    flags: int = 0
    provider: int = 0
    session: int = 0
    content_type: int = 0
    accept_type: int = 0
    auth_type: int = 0
    body_len: int = 0
    auth_len: int = 0
    opcode: int = 0
    status: int = 0
    reserved1: int = 0
    reserved2: int = 0

    def to_bytes(self) -> bytes:
        """Encode the magic number, header size, version and fields, little-endian."""
        try:
            fields = _FIELDS.pack(
                self.flags,
                self.provider,
                self.session,
                self.content_type,
                self.accept_type,
                self.auth_type,
                self.body_len,
                self.auth_len,
                self.opcode,
                self.status,
                self.reserved1,
                self.reserved2,
            )
        except struct.error as exc:
            _log.warning("Conversion from %s to ResponseStatus.INVALID_ENCODING.", exc)
            raise ParsecError(ResponseStatus.INVALID_ENCODING, str(exc)) from exc
        preamble = _PREAMBLE.pack(
            MAGIC_NUMBER, HEADER_SIZE, WIRE_PROTOCOL_VERSION_MAJ, WIRE_PROTOCOL_VERSION_MIN
        )
        return preamble + fields

    def write_to_stream(self, stream: BinaryIO) -> None:
        """Serialise the header and write it to ``stream``."""
        _write_all(stream, self.to_bytes())

    @classmethod
    def read_from_stream(cls, stream: BinaryIO) -> "WireHeader":
        """Read and validate a header from ``stream``."""
        (magic_number,) = _MAGIC.unpack(read_exact(stream, _MAGIC.size))
        if magic_number != MAGIC_NUMBER:
            _log.error("Expected magic number %s, got %s", MAGIC_NUMBER, magic_number)
            raise ParsecError(ResponseStatus.INVALID_HEADER, "unexpected magic number")

        (hdr_size,) = _SIZE.unpack(read_exact(stream, _SIZE.size))
        payload = read_exact(stream, hdr_size)
        if hdr_size != HEADER_SIZE:
            _log.error("Expected request header size %s, got %s", HEADER_SIZE, hdr_size)
            raise ParsecError(ResponseStatus.INVALID_HEADER, "unexpected header size")

        version_maj, version_min = payload[0], payload[1]
        if (version_maj, version_min) != (WIRE_PROTOCOL_VERSION_MAJ, WIRE_PROTOCOL_VERSION_MIN):
            _log.error(
                "Expected wire protocol version %s.%s, got %s.%s instead",
                WIRE_PROTOCOL_VERSION_MAJ,
                WIRE_PROTOCOL_VERSION_MIN,
                version_maj,
                version_min,
            )
            raise ParsecError(ResponseStatus.WIRE_PROTOCOL_VERSION_NOT_SUPPORTED)

        header = cls(*_FIELDS.unpack(payload[2:]))
        if header.reserved1 != 0 or header.reserved2 != 0:
            raise ParsecError(ResponseStatus.INVALID_HEADER, "reserved fields must be zero")
        return header