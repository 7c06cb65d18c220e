"""Response status codes of the wire protocol and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum
import logging

_log = logging.getLogger(__name__)


class ResponseStatus(IntEnum):
    """Status codes returned by the service, each with a short description."""

    description: str

    def __new__(cls, code: int, description: str) -> "ResponseStatus":
        member = int.__new__(cls, code)
        member._value_ = code
        member.description = description
        return member

    SUCCESS = 0, "successful operation"
    WRONG_PROVIDER_ID = 1, "requested provider ID does not match that of the backend"
    CONTENT_TYPE_NOT_SUPPORTED = 2, "requested content type is not supported by the backend"
    ACCEPT_TYPE_NOT_SUPPORTED = 3, "requested accept type is not supported by the backend"
    WIRE_PROTOCOL_VERSION_NOT_SUPPORTED = 4, "requested version is not supported by the backend"
    PROVIDER_NOT_REGISTERED = 5, "no provider registered for the requested provider ID"
    PROVIDER_DOES_NOT_EXIST = 6, "no provider defined for requested provider ID"
    DESERIALIZING_BODY_FAILED = 7, "failed to deserialize the body of the message"
    SERIALIZING_BODY_FAILED = 8, "failed to serialize the body of the message"
    OPCODE_DOES_NOT_EXIST = 9, "requested operation is not defined"
    RESPONSE_TOO_LARGE = 10, "response size exceeds allowed limits"
    AUTHENTICATION_ERROR = 11, "authentication failed"
    AUTHENTICATOR_DOES_NOT_EXIST = 12, "authenticator not supported"
    AUTHENTICATOR_NOT_REGISTERED = 13, "authenticator not supported"
    KEY_INFO_MANAGER_ERROR = 14, "internal error in the Key Info Manager"
    CONNECTION_ERROR = 15, "generic input/output error"
    INVALID_ENCODING = 16, "invalid value for this data type"
    INVALID_HEADER = 17, "constant fields in header are invalid"
    WRONG_PROVIDER_UUID = 18, "the UUID vector needs to only contain 16 bytes"
    NOT_AUTHENTICATED = 19, "request did not provide a required authentication"
    BODY_SIZE_EXCEEDS_LIMIT = 20, "request length specified in the header is above defined limit"
    ADMIN_OPERATION = 21, "the operation requires admin privilege"
    DEPRECATED_PRIMITIVE = 22, "the key template contains a deprecated type or algorithm"
    PSA_ERROR_GENERIC_ERROR = (
        1132,
        "an error occurred that does not correspond to any defined failure cause",
    )
    PSA_ERROR_NOT_PERMITTED = 1133, "the requested action is denied by a policy"
    PSA_ERROR_NOT_SUPPORTED = (
        1134,
        "the requested operation or a parameter is not supported by this implementation",
    )
    PSA_ERROR_INVALID_ARGUMENT = 1135, "the parameters passed to the function are invalid"
    PSA_ERROR_INVALID_HANDLE = 1136, "the key handle is not valid"
    PSA_ERROR_BAD_STATE = 1137, "the requested action cannot be performed in the current state"
    PSA_ERROR_BUFFER_TOO_SMALL = 1138, "an output buffer is too small"
    PSA_ERROR_ALREADY_EXISTS = 1139, "asking for an item that already exists"
    PSA_ERROR_DOES_NOT_EXIST = 1140, "asking for an item that doesn't exist"
    PSA_ERROR_INSUFFICIENT_MEMORY = 1141, "there is not enough runtime memory"
    PSA_ERROR_INSUFFICIENT_STORAGE = 1142, "there is not enough persistent storage"
    PSA_ERROR_INSUFFICIENT_DATA = (
        1143,
        "insufficient data when attempting to read from a resource",
    )
    PSA_ERROR_COMMUNICATION_FAILURE = (
        1145,
        "there was a communication failure inside the implementation",
    )
    PSA_ERROR_STORAGE_FAILURE = (
        1146,
        "there was a storage failure that may have led to data loss",
    )
    PSA_ERROR_HARDWARE_FAILURE = 1147, "a hardware failure was detected"
    PSA_ERROR_INSUFFICIENT_ENTROPY = (
        1148,
        "there is not enough entropy to generate random data needed for the requested action",
    )
    PSA_ERROR_INVALID_SIGNATURE = 1149, "the signature, MAC or hash is incorrect"
    PSA_ERROR_INVALID_PADDING = 1150, "the decrypted padding is incorrect"
    PSA_ERROR_CORRUPTION_DETECTED = 1151, "a tampering attempt was detected"
    PSA_ERROR_DATA_CORRUPT = 1152, "stored data has been corrupted"
    PSA_ERROR_DATA_INVALID = (
        1153,
        "data read from storage is not valid for the implementation",
    )

    def __str__(self) -> str:
        return self.description

    @classmethod
    def from_code(cls, value: int) -> "ResponseStatus":
        """Return the status for a numeric code, raising INVALID_ENCODING if unknown."""
        try:
            return cls(value)
        except ValueError:
            _log.error("Value %s does not correspond to a valid ResponseStatus.", value)
            raise ParsecError(
                cls.INVALID_ENCODING,
                f"value {value} does not correspond to a valid response status",
            ) from None


class ParsecError(Exception):
    """An error carrying the response status that describes it."""

    def __init__(self, status: ResponseStatus, message: str | None = None) -> None:
        self.status = status
        self.message = message if message is not None else str(status)
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"ParsecError({self.status.name}, {self.message!r})"