"""Native request and response headers and their conversion from and to the raw header."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeVar

from .ids import AuthType, BodyType, Opcode, ProviderId
from .status import ParsecError, ResponseStatus
from .wire_header import WireHeader

_E = TypeVar("_E", bound=IntEnum)


def _lookup(enum_cls: type[_E], value: int, status: ResponseStatus) -> _E:
    try:
        return enum_cls(value)
    except ValueError:
        raise ParsecError(status, f"{value} is not a valid {enum_cls.__name__}") from None


@dataclass
class RequestHeader:
    """Request header fields that matter to applications."""

    provider: ProviderId = ProviderId.CORE
    session: int = 0
    content_type: BodyType = BodyType.PROTOBUF
    accept_type: BodyType = BodyType.PROTOBUF
    auth_type: AuthType = AuthType.DIRECT
    opcode: Opcode = Opcode.PING

    @classmethod
    def from_raw(cls, raw: WireHeader) -> "RequestHeader":
        """Validate a raw header and build the native request header from it."""
        content_type = _lookup(
            BodyType, raw.content_type, ResponseStatus.CONTENT_TYPE_NOT_SUPPORTED
        )
        accept_type = _lookup(
            BodyType, raw.accept_type, ResponseStatus.ACCEPT_TYPE_NOT_SUPPORTED
        )
        auth_type = _lookup(
            AuthType, raw.auth_type, ResponseStatus.AUTHENTICATOR_DOES_NOT_EXIST
        )
        opcode = _lookup(Opcode, raw.opcode, ResponseStatus.OPCODE_DOES_NOT_EXIST)
        return cls(
            provider=ProviderId.from_code(raw.provider),
            session=raw.session,
            content_type=content_type,
            accept_type=accept_type,
            auth_type=auth_type,
            opcode=opcode,
        )

    def to_raw(self) -> WireHeader:
        """Build the raw header; lengths and status are left at zero."""
        return WireHeader(
            provider=int(self.provider),
            session=self.session,
            content_type=int(self.content_type),
            accept_type=int(self.accept_type),
            auth_type=int(self.auth_type),
            opcode=int(self.opcode),
        )

    def to_response_header(self) -> "ResponseHeader":
        """Build the header of a successful response to this request."""
        return ResponseHeader(
            provider=self.provider,
            session=self.session,
            content_type=self.accept_type,
            opcode=self.opcode,
            status=ResponseStatus.SUCCESS,
        )


@dataclass
class ResponseHeader:
    """Response header fields that matter to applications."""

    provider: ProviderId = ProviderId.CORE
    session: int = 0
    content_type: BodyType = BodyType.PROTOBUF
    opcode: Opcode = Opcode.PING
    status: ResponseStatus = ResponseStatus.SUCCESS

    @classmethod
    def from_raw(cls, raw: WireHeader) -> "ResponseHeader":
        """Validate a raw header and build the native response header from it."""
        provider = _lookup(ProviderId, raw.provider, ResponseStatus.PROVIDER_DOES_NOT_EXIST)
        content_type = _lookup(
            BodyType, raw.content_type, ResponseStatus.CONTENT_TYPE_NOT_SUPPORTED
        )
        opcode = _lookup(Opcode, raw.opcode, ResponseStatus.OPCODE_DOES_NOT_EXIST)
        status = _lookup(ResponseStatus, raw.status, ResponseStatus.INVALID_ENCODING)
        return cls(
            provider=provider,
            session=raw.session,
            content_type=content_type,
            opcode=opcode,
            status=status,
        )

    def to_raw(self) -> WireHeader:
        """Build the raw header; accept type, auth type and lengths are zero."""
        return WireHeader(
            provider=int(self.provider),
            session=self.session,
            content_type=int(self.content_type),
            opcode=int(self.opcode),
            status=int(self.status),
        )