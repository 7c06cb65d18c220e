import io

import pytest

from parsec_wire.bodies import RequestAuth, RequestBody
from parsec_wire.headers import RequestHeader, ResponseHeader
from parsec_wire.ids import AuthType, BodyType, Opcode, ProviderId
from parsec_wire.request import Request
from parsec_wire.status import ParsecError, ResponseStatus

DEAD_STREAM = io.BufferedIOBase()


def _make_request(session, body, auth):
    return Request(
        header=RequestHeader(
            provider=ProviderId.CORE,
            session=session,
            content_type=BodyType.PROTOBUF,
            accept_type=BodyType.PROTOBUF,
            auth_type=AuthType.DIRECT,
            opcode=Opcode.PING,
        ),
        body=RequestBody(bytes.fromhex(body)),
        auth=RequestAuth(bytes.fromhex(auth)),
    )


def request_1():
    return _make_request(0x11_22_33_44_55_66_77_88, "708090", "a0b0c0")


def request_2():
    return _make_request(0x88_99_AA_BB_CC_DD_EE_FF, "b0b1b2b3b4b5", "a0a1a2a3a4")


REQUEST_1_BYTES = bytes.fromhex(
    "10a7c05e 1e00 0100 0000 00 8877665544332211 000001 03000000 0300 01000000 0000 0000"
    " 708090 a0b0c0"
)
_REQUEST_2_HEAD = bytes.fromhex(
    "10a7c05e 1e00 0100 0000 00 ffeeddccbbaa9988 000001 06000000 0500 01000000 0000"
)


def _request_2_bytes(reserved="0000"):
    return _REQUEST_2_HEAD + bytes.fromhex(reserved + "b0b1b2b3b4b5 a0a1a2a3a4")


REQUEST_2_BYTES = _request_2_bytes()
BIG_ENDIAN_FIXINT = bytes.fromhex(
    "5ec0a710 001e 0100 0000 00 1122334455667788 000001 00000003 0003 00000001 0000 0000"
    " 708090 a0b0c0"
)
LITTLE_ENDIAN_VARINT = bytes.fromhex(
    "fc5ec0a710 1e 01 00 00 00 fd1122334455667788 00 00 01 03 03 01 00 00 00 708090 a0b0c0"
)
BIG_ENDIAN_VARINT = bytes.fromhex(
    "fc10a7c05e 1e 01 00 00 00 fd1122334455667788 00 00 01 03 03 01 00 00 00 708090 a0b0c0"
)


def _patched(**changes):
    data = bytearray(REQUEST_1_BYTES)
    for index, value in changes.items():
        data[int(index[1:])] = value
    return bytes(data)


def _rejection(stream, limit=1000):
    with pytest.raises(ParsecError) as info:
        Request.read_from_stream(stream, limit)
    return info.value.status


@pytest.mark.parametrize(
    "request_factory, expected",
    [(request_1, REQUEST_1_BYTES), (request_2, REQUEST_2_BYTES)],
)
def test_request_to_stream_and_back(request_factory, expected):
    stream = io.BytesIO()
    request_factory().write_to_stream(stream)
    assert stream.getvalue() == expected
    request = Request.read_from_stream(io.BytesIO(expected), 1000)
    reference = request_factory()
    assert request == reference
    assert request.auth.buffer == reference.auth.buffer


@pytest.mark.parametrize(
    "data, status",
    [
        (_request_2_bytes("dead"), ResponseStatus.INVALID_HEADER),
        (_request_2_bytes("de00"), ResponseStatus.INVALID_HEADER),
        (_request_2_bytes("00ad"), ResponseStatus.INVALID_HEADER),
        (BIG_ENDIAN_FIXINT, ResponseStatus.INVALID_HEADER),
        (BIG_ENDIAN_VARINT, ResponseStatus.INVALID_HEADER),
        (LITTLE_ENDIAN_VARINT, ResponseStatus.INVALID_HEADER),
        (_patched(b6=0xFF, b7=0xFF), ResponseStatus.WIRE_PROTOCOL_VERSION_NOT_SUPPORTED),
        (_patched(b28=0xFF), ResponseStatus.OPCODE_DOES_NOT_EXIST),
        (REQUEST_1_BYTES[:-2], ResponseStatus.CONNECTION_ERROR),
    ],
)
def test_stream_to_fail_request(data, status):
    assert _rejection(io.BytesIO(data)) == status


def test_failed_read():
    assert _rejection(DEAD_STREAM) == ResponseStatus.CONNECTION_ERROR


def test_body_too_large():
    assert _rejection(io.BytesIO(REQUEST_1_BYTES), 0) == ResponseStatus.BODY_SIZE_EXCEEDS_LIMIT


def test_body_at_limit_is_accepted():
    request = Request.read_from_stream(io.BytesIO(REQUEST_1_BYTES), 3)
    assert bytes(request.body) == bytes([0x70, 0x80, 0x90])


def test_failed_write():
    with pytest.raises(ParsecError) as info:
        request_1().write_to_stream(DEAD_STREAM)
    assert info.value.status == ResponseStatus.CONNECTION_ERROR


def test_req_hdr_to_resp_hdr():
    assert request_1().header.to_response_header() == ResponseHeader(
        provider=ProviderId.CORE,
        session=0x11_22_33_44_55_66_77_88,
        content_type=BodyType.PROTOBUF,
        opcode=Opcode.PING,
        status=ResponseStatus.SUCCESS,
    )


def test_auth_too_long_is_invalid_encoding_and_writes_nothing():
    stream = io.BytesIO()
    with pytest.raises(ParsecError) as info:
        Request(auth=RequestAuth(bytes(0x1_0000))).write_to_stream(stream)
    assert info.value.status == ResponseStatus.INVALID_ENCODING
    assert stream.getvalue() == b""


def test_default_request_is_empty():
    stream = io.BytesIO()
    Request().write_to_stream(stream)
    data = stream.getvalue()
    assert len(data) == 36
    assert Request.read_from_stream(io.BytesIO(data), 0) == Request()