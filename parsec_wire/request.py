"""A request as sent to the service: header, opaque body and authentication field."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import BinaryIO

from .bodies import RequestAuth, RequestBody
from .headers import RequestHeader
from .status import ParsecError, ResponseStatus
from .wire_header import WireHeader

_log = logging.getLogger(__name__)

_MAX_BODY_LEN = 0xFFFF_FFFF
_MAX_AUTH_LEN = 0xFFFF


@dataclass
class Request:
    """Native representation of the request wire format."""

    header: RequestHeader = field(default_factory=RequestHeader)
    body: RequestBody = field(default_factory=RequestBody)
    auth: RequestAuth = field(default_factory=RequestAuth, repr=False)

    def write_to_stream(self, stream: BinaryIO) -> None:
        """Serialise the request and write it to ``stream``.

        Raises ParsecError with INVALID_ENCODING if the body or authentication
        field is too long for the header, and CONNECTION_ERROR if writing fails.
        """
        body_len = len(self.body)
        auth_len = len(self.auth)
        if body_len > _MAX_BODY_LEN:
            raise ParsecError(
                ResponseStatus.INVALID_ENCODING,
                f"body length {body_len} does not fit in the header",
            )
        if auth_len > _MAX_AUTH_LEN:
            raise ParsecError(
                ResponseStatus.INVALID_ENCODING,
                f"authentication length {auth_len} does not fit in the header",
            )

        raw_header = self.header.to_raw()
        raw_header.body_len = body_len
        raw_header.auth_len = auth_len
        raw_header.write_to_stream(stream)
        self.body.write_to_stream(stream)
        self.auth.write_to_stream(stream)

    @classmethod
    def read_from_stream(cls, stream: BinaryIO, body_len_limit: int) -> "Request":
        """Read a request from ``stream``.

        Raises ParsecError with BODY_SIZE_EXCEEDS_LIMIT if the body length given
        in the header is above ``body_len_limit`` bytes, or with the status of
        whatever else fails while reading or validating the request.
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
        body = RequestBody.read_from_stream(stream, body_len)
        auth = RequestAuth.read_from_stream(stream, raw_header.auth_len)
        return cls(header=RequestHeader.from_raw(raw_header), body=body, auth=auth)