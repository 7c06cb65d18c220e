"""A response as returned by the service: header and opaque body."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import BinaryIO

from .bodies import ResponseBody
from .headers import RequestHeader, ResponseHeader
from .status import ParsecError, ResponseStatus
from .wire_header import WireHeader

_log = logging.getLogger(__name__)

_MAX_BODY_LEN = 0xFFFF_FFFF


@dataclass
class Response:
    """Native representation of the response wire format."""

    header: ResponseHeader = field(default_factory=ResponseHeader)
    body: ResponseBody = field(default_factory=ResponseBody)

    @classmethod
    def from_request_header(
        cls, header: RequestHeader, status: ResponseStatus
    ) -> "Response":
        """Build an empty-bodied response to a request, carrying ``status``."""
        response_header = header.to_response_header()
        response_header.status = status
        return cls(header=response_header)

    @classmethod
    def from_status(cls, status: ResponseStatus) -> "Response":
        """Build an empty response with default header fields and ``status``."""
        return cls(header=ResponseHeader(status=status))

    def write_to_stream(self, stream: BinaryIO) -> None:
        """Serialise the response and write it to ``stream``.

        Raises ParsecError with INVALID_ENCODING if the body is too long for the
        header, and CONNECTION_ERROR if writing fails.
        """
        body_len = len(self.body)
        if body_len > _MAX_BODY_LEN:
            raise ParsecError(
                ResponseStatus.INVALID_ENCODING,
                f"body length {body_len} does not fit in the header",
            )
        raw_header = self.header.to_raw()
        raw_header.body_len = body_len
        raw_header.write_to_stream(stream)
        self.body.write_to_stream(stream)

    @classmethod
    def read_from_stream(cls, stream: BinaryIO, body_len_limit: int) -> "Response":
        """Read a response from ``stream``.

        Raises ParsecError with BODY_SIZE_EXCEEDS_LIMIT if the body length given
        in the header is above ``body_len_limit`` bytes, or with the status of
        whatever else fails while reading or validating the response.
        """
        raw_header = WireHeader.read_from_stream(stream)
        body_len = raw_header.body_len
        if body_len > body_len_limit:
            _log.error(
                "Request body length (%s) bigger than the limit given (%s).",
                body_len,
                body_len_limit,
            )
            raise ParsecError(ResponseStatus.BODY_SIZE_EXCEEDS_LIMIT)
        body = ResponseBody.read_from_stream(stream, body_len)
        return cls(header=ResponseHeader.from_raw(raw_header), body=body)