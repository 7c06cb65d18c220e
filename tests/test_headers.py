import pytest

from parsec_wire.headers import RequestHeader, ResponseHeader
from parsec_wire.ids import AuthType, BodyType, Opcode, ProviderId
from parsec_wire.status import ParsecError, ResponseStatus
from parsec_wire.wire_header import WireHeader

SESSION = 0x11_22_33_44_55_66_77_88


def _request_header():
    return RequestHeader(
        provider=ProviderId.CORE,
        session=SESSION,
        content_type=BodyType.PROTOBUF,
        accept_type=BodyType.PROTOBUF,
        auth_type=AuthType.DIRECT,
        opcode=Opcode.PING,
    )


def _conversion_error(header_type, raw):
    with pytest.raises(ParsecError) as info:
        header_type.from_raw(raw)
    return info.value.status


def test_request_header_to_raw():
    assert _request_header().to_raw() == WireHeader(session=SESSION, auth_type=1, opcode=1)


def test_response_header_to_raw_zeroes_request_fields():
    header = ResponseHeader(
        session=SESSION, opcode=Opcode.PING, status=ResponseStatus.INVALID_HEADER
    )
    assert header.to_raw() == WireHeader(session=SESSION, opcode=1, status=17)


@pytest.mark.parametrize(
    "header",
    [
        RequestHeader(
            provider=ProviderId.TPM,
            session=7,
            auth_type=AuthType.UNIX_PEER_CREDENTIALS,
            opcode=Opcode.PSA_SIGN_HASH,
        ),
        ResponseHeader(
            provider=ProviderId.MBED_CRYPTO,
            session=42,
            opcode=Opcode.LIST_KEYS,
            status=ResponseStatus.PSA_ERROR_INVALID_SIGNATURE,
        ),
    ],
)
def test_header_round_trip(header):
    assert type(header).from_raw(header.to_raw()) == header


def test_request_to_response_header():
    assert _request_header().to_response_header() == ResponseHeader(
        provider=ProviderId.CORE,
        session=SESSION,
        content_type=BodyType.PROTOBUF,
        opcode=Opcode.PING,
        status=ResponseStatus.SUCCESS,
    )


@pytest.mark.parametrize(
    "make_raw, header_type, field, value, status",
    [
        (lambda: _request_header().to_raw(), RequestHeader,
         "content_type", 5, ResponseStatus.CONTENT_TYPE_NOT_SUPPORTED),
        (lambda: _request_header().to_raw(), RequestHeader,
         "accept_type", 5, ResponseStatus.ACCEPT_TYPE_NOT_SUPPORTED),
        (lambda: _request_header().to_raw(), RequestHeader,
         "auth_type", 200, ResponseStatus.AUTHENTICATOR_DOES_NOT_EXIST),
        (lambda: _request_header().to_raw(), RequestHeader,
         "opcode", 0xFFFF, ResponseStatus.OPCODE_DOES_NOT_EXIST),
        (lambda: _request_header().to_raw(), RequestHeader,
         "provider", 100, ResponseStatus.PROVIDER_DOES_NOT_EXIST),
        (lambda: ResponseHeader().to_raw(), ResponseHeader,
         "provider", 100, ResponseStatus.PROVIDER_DOES_NOT_EXIST),
        (lambda: ResponseHeader().to_raw(), ResponseHeader,
         "content_type", 5, ResponseStatus.CONTENT_TYPE_NOT_SUPPORTED),
        (lambda: ResponseHeader().to_raw(), ResponseHeader,
         "opcode", 0xFFFF, ResponseStatus.OPCODE_DOES_NOT_EXIST),
        (lambda: ResponseHeader().to_raw(), ResponseHeader,
         "status", 1144, ResponseStatus.INVALID_ENCODING),
    ],
)
def test_invalid_fields(make_raw, header_type, field, value, status):
    raw = make_raw()
    setattr(raw, field, value)
    assert _conversion_error(header_type, raw) is status


@pytest.mark.parametrize(
    "header_type, status",
    [
        (RequestHeader, ResponseStatus.CONTENT_TYPE_NOT_SUPPORTED),
        (ResponseHeader, ResponseStatus.PROVIDER_DOES_NOT_EXIST),
    ],
)
def test_order_of_checks(header_type, status):
    raw = WireHeader(provider=100, content_type=5, opcode=1)
    assert _conversion_error(header_type, raw) is status


def test_response_header_ignores_accept_and_auth_type():
    raw = WireHeader(accept_type=9, auth_type=9, opcode=1)
    assert ResponseHeader.from_raw(raw) == ResponseHeader()