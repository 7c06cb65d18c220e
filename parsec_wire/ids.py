"""Identifiers carried in message headers: providers, body types, opcodes and authenticators."""

from __future__ import annotations

from enum import IntEnum

from .status import ParsecError, ResponseStatus


class ProviderId(IntEnum):
    """Provider types and their codes, passed in headers as ``provider``."""

    description: str

    def __new__(cls, code: int, description: str) -> "ProviderId":
        member = int.__new__(cls, code)
        member._value_ = code
        member.description = description
        return member

    CORE = 0, "Core provider"
    MBED_CRYPTO = 1, "Mbed Crypto provider"
    PKCS11 = 2, "PKCS #11 provider"
    TPM = 3, "TPM provider"
    TRUSTED_SERVICE = 4, "Trusted Service provider"
    CRYPTO_AUTH_LIB = 5, "CryptoAuthentication Library provider"

    def __str__(self) -> str:
        return self.description

    @classmethod
    def from_code(cls, value: int) -> "ProviderId":
        """Return the provider for a code, raising PROVIDER_DOES_NOT_EXIST if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise ParsecError(
                ResponseStatus.PROVIDER_DOES_NOT_EXIST,
                f"no provider defined for code {value}",
            ) from None


class BodyType(IntEnum):
    """Body encodings, passed in headers as ``content_type`` and ``accept_type``."""

    PROTOBUF = 0


class Opcode(IntEnum):
    """Operations and their opcodes, passed in headers as ``opcode``."""

    PING = 0x0001
    PSA_GENERATE_KEY = 0x0002
    PSA_DESTROY_KEY = 0x0003
    PSA_SIGN_HASH = 0x0004
    PSA_VERIFY_HASH = 0x0005
    PSA_IMPORT_KEY = 0x0006
    PSA_EXPORT_PUBLIC_KEY = 0x0007
    LIST_PROVIDERS = 0x0008
    LIST_OPCODES = 0x0009
    PSA_ASYMMETRIC_ENCRYPT = 0x000A
    PSA_ASYMMETRIC_DECRYPT = 0x000B
    PSA_EXPORT_KEY = 0x000C
    PSA_GENERATE_RANDOM = 0x000D
    LIST_AUTHENTICATORS = 0x000E
    PSA_HASH_COMPUTE = 0x000F
    PSA_HASH_COMPARE = 0x0010
    PSA_AEAD_ENCRYPT = 0x0011
    PSA_AEAD_DECRYPT = 0x0012
    PSA_RAW_KEY_AGREEMENT = 0x0013
    PSA_CIPHER_ENCRYPT = 0x0014
    PSA_CIPHER_DECRYPT = 0x0015
    PSA_SIGN_MESSAGE = 0x0018
    PSA_VERIFY_MESSAGE = 0x0019
    LIST_KEYS = 0x001A
    LIST_CLIENTS = 0x001B
    DELETE_CLIENT = 0x001C
    ATTEST_KEY = 0x001E
    PREPARE_KEY_ATTESTATION = 0x001F
    CAN_DO_CRYPTO = 0x0020

    def is_core(self) -> bool:
        """Whether this is a Core operation."""
        return self in _CORE_OPCODES

    def is_admin(self) -> bool:
        """Whether this is an admin operation."""
        return self in _ADMIN_OPCODES

    def is_crypto(self) -> bool:
        """Whether this is a PSA Crypto operation."""
        return not self.is_core()


_CORE_OPCODES = frozenset(
    {
        Opcode.PING,
        Opcode.LIST_PROVIDERS,
        Opcode.LIST_OPCODES,
        Opcode.LIST_AUTHENTICATORS,
        Opcode.LIST_KEYS,
        Opcode.LIST_CLIENTS,
        Opcode.DELETE_CLIENT,
    }
)

_ADMIN_OPCODES = frozenset({Opcode.LIST_CLIENTS, Opcode.DELETE_CLIENT})


class AuthType(IntEnum):
    """Authentication methods, passed in headers as ``auth_type``."""

    description: str

    def __new__(cls, code: int, description: str) -> "AuthType":
        member = int.__new__(cls, code)
        member._value_ = code
        member.description = description
        return member

    NO_AUTH = 0, "No authentication"
    DIRECT = 1, "Direct authentication"
    JWT = 2, "JSON Web Tokens authentication"
    UNIX_PEER_CREDENTIALS = 3, "Unix Peer Credentials authentication"
    JWT_SVID = 4, "JWT SPIFFE Verifiable Identity Document authentication"

    def __str__(self) -> str:
        return self.description