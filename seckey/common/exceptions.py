"""
Custom exceptions for encrypted key handling.
"""

from __future__ import annotations


class SecKeyError(Exception):
    """Base exception for all encrypted key failures."""


class InvalidBinaryLength(SecKeyError, ValueError):
    """Exception for binary payloads of the wrong size."""

    def __init__(self, message: str, length: int | None = None) -> None:
        super().__init__(message)
        self.length = length


class InvalidK1Data(InvalidBinaryLength):
    """Exception for K1 payloads that are not exactly 37 bytes."""

    def __init__(self, length: int) -> None:
        super().__init__(f"K1 key data must be 37 bytes, got {length}", length)


class MalformedTextFormat(SecKeyError, ValueError):
    """Exception for strings that are not a valid encrypted key."""


class MalformedKeyString(MalformedTextFormat):
    """Exception for a missing prefix or a wrong number of segments."""


class InvalidKeyType(MalformedTextFormat):
    """Exception for a type tag that is not two uppercase characters."""


class Base58DecodeFailed(MalformedTextFormat):
    """Exception for a payload that fails base58-check decoding."""


class InvalidDataPayload(MalformedTextFormat):
    """Exception for an unknown key type payload that is too short."""


class UnsupportedKeyType(SecKeyError):
    """Exception for key types that cannot be encrypted or decrypted."""

    def __init__(self, key_type: str) -> None:
        super().__init__(f"Unsupported key type: {key_type}")
        self.key_type = key_type


class InvalidPassword(SecKeyError):
    """Exception for a password that does not match the key checksum."""

    def __init__(self, message: str = "Invalid password") -> None:
        super().__init__(message)


class CryptoPrimitiveFailure(SecKeyError):
    """Exception wrapping scrypt or AES failures."""


class KeyFormatError(SecKeyError, ValueError):
    """Exception for private or public keys that cannot be decoded."""


class ConfigError(SecKeyError, ValueError):
    """Exception for invalid configuration values."""
