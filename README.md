# parsec-wire

Read and write requests and responses in the Parsec wire protocol, version 1.0.

The package handles the frame around each message. It checks the magic number,
the header size, the protocol version and the reserved bytes. It validates the
identifiers in the header. The body and authentication bytes pass through
unchanged.

## Installation

```
pip install parsec-wire
```

The package has no runtime dependencies.

## Writing a request

```python
import io

from parsec_wire.bodies import RequestAuth, RequestBody
from parsec_wire.headers import RequestHeader
from parsec_wire.ids import AuthType, BodyType, Opcode, ProviderId
from parsec_wire.request import Request

header = RequestHeader(
    provider=ProviderId.CORE,
    session=0x1122334455667788,
    content_type=BodyType.PROTOBUF,
    accept_type=BodyType.PROTOBUF,
    auth_type=AuthType.DIRECT,
    opcode=Opcode.PING,
)
request = Request(header, RequestBody(b"\x70\x80\x90"), RequestAuth(b"token"))

stream = io.BytesIO()
request.write_to_stream(stream)
```

`write_to_stream` fills in the body and authentication lengths of the header.
A body that is longer than 2**32 - 1 bytes raises an error with
`INVALID_ENCODING`. So does an authentication field that is longer than
2**16 - 1 bytes.

## Reading a request

`read_from_stream` takes a limit on the body length, in bytes. A body that is
longer than the limit is refused.

```python
from parsec_wire.status import ParsecError, ResponseStatus

stream.seek(0)
try:
    received = Request.read_from_stream(stream, body_len_limit=1000)
except ParsecError as err:
    print(err.status, err.message)
else:
    print(received.header.opcode, bytes(received.body))
```

Every failure raises `ParsecError`. Its `status` attribute holds the
`ResponseStatus` for the failure, and its `message` attribute holds a
description. Some examples:

- A bad magic number, a wrong header size or non-zero reserved bytes give
  `INVALID_HEADER`.
- An unknown protocol version gives `WIRE_PROTOCOL_VERSION_NOT_SUPPORTED`.
- A body longer than the limit gives `BODY_SIZE_EXCEEDS_LIMIT`.
- A stream that fails or ends early gives `CONNECTION_ERROR`.
- An unknown content type, accept type, authenticator, opcode or provider
  gives `CONTENT_TYPE_NOT_SUPPORTED`, `ACCEPT_TYPE_NOT_SUPPORTED`,
  `AUTHENTICATOR_DOES_NOT_EXIST`, `OPCODE_DOES_NOT_EXIST` or
  `PROVIDER_DOES_NOT_EXIST`.

`str()` of a `ResponseStatus` returns its description.
`ResponseStatus.from_code` maps a number to a status. It raises with
`INVALID_ENCODING` for an unknown code.

## Responses

```python
from parsec_wire.response import Response

error_response = Response.from_request_header(
    received.header, ResponseStatus.PSA_ERROR_NOT_SUPPORTED
)
out = io.BytesIO()
error_response.write_to_stream(out)

out.seek(0)
reply = Response.read_from_stream(out, body_len_limit=1000)
assert reply.header.status is ResponseStatus.PSA_ERROR_NOT_SUPPORTED
```

`Response.from_request_header` copies the request's provider, session and
opcode into the response header. It uses the request's accept type as the
response's content type. `Response.from_status` builds an empty response with
default header fields. `RequestHeader.to_response_header` gives the header of a
successful response.

## Identifiers

The enums in `parsec_wire.ids` hold the codes that the protocol defines:
`ProviderId`, `BodyType`, `Opcode` and `AuthType`. `ProviderId.from_code` raises
with `PROVIDER_DOES_NOT_EXIST` for an unknown code. `Opcode` reports the kind
of an operation:

```python
Opcode.LIST_KEYS.is_core()          # True
Opcode.LIST_CLIENTS.is_admin()      # True
Opcode.PSA_GENERATE_KEY.is_crypto() # True
```

## Low-level header

`parsec_wire.wire_header.WireHeader` is the raw 36-byte header frame, with
its fields as plain integers:

- `to_bytes` encodes the frame, little-endian.
- `write_to_stream` writes the frame to a stream.
- `WireHeader.read_from_stream` reads a frame and validates it.

`read_exact(stream, size)` reads exactly `size` bytes or raises with
`CONNECTION_ERROR`.

`RequestHeader` and `ResponseHeader` convert to and from `WireHeader` with
`to_raw` and `from_raw`.

## What the package does not do

The package does not decode or encode the contents of bodies. It has no
conversion between operation bodies and Python objects. It has no client or
server, and it opens no connections itself. It reads from and writes to any
binary stream you pass it, such as a file, a `BytesIO` or a socket file.