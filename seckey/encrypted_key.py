"""
Password encrypted EOSIO private keys.

Binary form is ``header(1) | checksum(4) | ciphertext``, 37 bytes for K1 keys.
The header is the security level flags byte, the checksum is the first 4
bytes of the public key checksum and doubles as scrypt salt. The string form
is ``SEC_<type>_<base58check(binary)>`` with the type as check suffix.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from pydantic_core import core_schema

from seckey import base58check
from seckey.cipher import Operation, crypt
from seckey.common.config import Config
from seckey.common.decorators import run_in_background
from seckey.common.exceptions import (
    Base58DecodeFailed,
    InvalidBinaryLength,
    InvalidDataPayload,
    InvalidK1Data,
    InvalidKeyType,
    InvalidPassword,
    KeyFormatError,
    MalformedKeyString,
    MalformedTextFormat,
    UnsupportedKeyType,
)
from seckey.keys import WIF_VERSION, PrivateKey
from seckey.security_level import SecurityLevel

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

    from seckey.common.interfaces import IPrivateKey

logger = logging.getLogger(__name__)

PREFIX = "SEC_"
K1_DATA_SIZE = 37
CHECKSUM_SIZE = 4
MIN_UNKNOWN_DATA_SIZE = 7

ABI_TYPES = {"K1": 0, "R1": 1, "WA": 2}
ABI_UNKNOWN_TYPE = 255
ABI_UNKNOWN_NAME = "XX"


@dataclass(frozen=True)
class K1Storage:
    """32 bytes of encrypted K1 key."""

    data: bytes


@dataclass(frozen=True)
class UnknownStorage:
    """Opaque ciphertext of a key type that cannot be decrypted."""

    name: str
    data: bytes


Storage = Union[K1Storage, UnknownStorage]


@dataclass(frozen=True)
class EncryptedPrivateKey:
    """An encrypted EOSIO private key."""

    header: int
    checksum: bytes
    storage: Storage

    @classmethod
    def from_binary(cls, data: bytes) -> EncryptedPrivateKey:
        """Create instance from 37 bytes of K1 key data."""
        if len(data) != K1_DATA_SIZE:
            raise InvalidK1Data(len(data))
        return cls(
            header=data[0],
            checksum=bytes(data[1 : 1 + CHECKSUM_SIZE]),
            storage=K1Storage(bytes(data[1 + CHECKSUM_SIZE :])),
        )

    @classmethod
    def from_binary_unknown(
        cls, data: bytes, type_name: str
    ) -> EncryptedPrivateKey | None:
        """Create instance of an unknown key type, None if data is too short."""
        if len(data) < MIN_UNKNOWN_DATA_SIZE:
            return None
        return cls(
            header=data[0],
            checksum=bytes(data[1 : 1 + CHECKSUM_SIZE]),
            storage=UnknownStorage(type_name, bytes(data[1 + CHECKSUM_SIZE :])),
        )

    @classmethod
    def from_string(cls, value: str) -> EncryptedPrivateKey:
        """Create instance from string format, e.g. ``SEC_K1_<base58data>``."""
        if not value.startswith(PREFIX):
            msg = "Not an encrypted private key string"
            raise MalformedKeyString(msg)
        parts = value.split("_")
        if len(parts) != 3:  # noqa: PLR2004
            msg = "Malformed key string"
            raise MalformedKeyString(msg)
        key_type, encoded = parts[1], parts[2]
        if len(key_type) != 2 or key_type.upper() != key_type:  # noqa: PLR2004
            msg = f"Invalid key type: {key_type!r}"
            raise InvalidKeyType(msg)

        data = base58check.decode(encoded, key_type.encode())
        if data is None:
            msg = "Unable to decode base58"
            raise Base58DecodeFailed(msg)

        if key_type == "K1":
            return cls.from_binary(data)
        instance = cls.from_binary_unknown(data, key_type)
        if instance is None:
            msg = f"Invalid data payload for key type {key_type}"
            raise InvalidDataPayload(msg)
        return instance

    @classmethod
    def parse(cls, value: str) -> EncryptedPrivateKey | None:
        """Like from_string but returns None for invalid input."""
        try:
            return cls.from_string(value)
        except (MalformedTextFormat, InvalidBinaryLength):
            return None

    @classmethod
    def from_abi(cls, data: bytes) -> EncryptedPrivateKey:
        """Decode the fixed size binary encoding, type byte plus 37 bytes."""
        if len(data) != 1 + K1_DATA_SIZE:
            msg = f"ABI encoded key must be {1 + K1_DATA_SIZE} bytes, got {len(data)}"
            raise InvalidBinaryLength(msg, len(data))
        key_type, payload = data[0], data[1:]
        if key_type == ABI_TYPES["K1"]:
            return cls.from_binary(payload)
        type_name = next(
            (name for name, value in ABI_TYPES.items() if value == key_type),
            ABI_UNKNOWN_NAME,
        )
        instance = cls.from_binary_unknown(payload, type_name)
        if instance is None:
            msg = f"Unable to create encrypted key for unknown type: {type_name}"
            raise InvalidDataPayload(msg)
        return instance

    @classmethod
    def from_json(cls, value: str | bytes) -> EncryptedPrivateKey:
        try:
            decoded = json.loads(value)
        except ValueError as err:
            msg = "Encrypted key JSON is not valid JSON"
            raise MalformedKeyString(msg) from err
        if not isinstance(decoded, str):
            msg = "Encrypted key JSON must be a string"
            raise MalformedKeyString(msg)
        return cls.from_string(decoded)

    @property
    def key_type(self) -> str:
        """Encrypted key curve type, e.g. ``K1``."""
        if isinstance(self.storage, K1Storage):
            return "K1"
        return self.storage.name

    @property
    def ciphertext(self) -> bytes:
        return self.storage.data

    @property
    def security_level(self) -> SecurityLevel:
        """Security level this key was encrypted with."""
        return SecurityLevel.from_flags(self.header)

    def to_binary(self) -> bytes:
        """Header + checksum + ciphertext."""
        return bytes([self.header]) + self.checksum + self.ciphertext

    def to_string(self) -> str:
        key_type = self.key_type
        encoded = base58check.encode(self.to_binary(), key_type.encode())
        return f"{PREFIX}{key_type}_{encoded}"

    def to_abi(self) -> bytes:
        key_type = ABI_TYPES.get(self.key_type, ABI_UNKNOWN_TYPE)
        return bytes([key_type]) + self.to_binary()

    def to_json(self) -> str:
        return json.dumps(self.to_string())

    def decrypt(
        self, password: str | bytes, max_memory: int | None = None
    ) -> PrivateKey:
        """Decrypt private key, raises InvalidPassword on wrong password.

        This is very compute intensive, call it on a background thread. Check
        that security_level is not set to something insane before decrypting
        keys from untrusted sources.
        """
        if self.key_type != "K1":
            raise UnsupportedKeyType(self.key_type)

        logger.debug("Decrypting %s key (%s)", self.key_type, self.security_level)
        decrypted = crypt(
            self.ciphertext,
            password,
            self.checksum,
            self.security_level,
            Operation.DECRYPT,
            max_memory,
        )

        try:
            private_key = PrivateKey.from_k1_data(bytes([WIF_VERSION]) + decrypted)
        except KeyFormatError as err:
            raise InvalidPassword from err

        if private_key.public_key().checksum != self.checksum:
            logger.info("Checksum mismatch after decryption")
            raise InvalidPassword
        return private_key

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"EncryptedPrivateKey({self.to_string()!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_string()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": "^SEC_[A-Z0-9]{2}_"}

    @classmethod
    def _validate(cls, value: Any) -> EncryptedPrivateKey:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        msg = f"Expected encrypted key string, got {type(value).__name__}"
        raise ValueError(msg)


def encrypt(
    private_key: IPrivateKey,
    password: str | bytes,
    security_level: SecurityLevel | None = None,
    max_memory: int | None = None,
) -> EncryptedPrivateKey:
    """Encrypt a private key using password.

    This is very compute intensive, call it on a background thread.
    """
    if private_key.key_type != "K1":
        raise UnsupportedKeyType(private_key.key_type)
    if security_level is None:
        security_level = Config().DEFAULT_SECURITY_LEVEL

    # key checksum, also used as scrypt salt
    checksum = private_key.public_key().checksum

    logger.debug("Encrypting %s key (%s)", private_key.key_type, security_level)
    encrypted = crypt(
        private_key.data,
        password,
        checksum,
        security_level,
        Operation.ENCRYPT,
        max_memory,
    )
    return EncryptedPrivateKey.from_binary(
        bytes([security_level.flags]) + checksum + encrypted
    )


def decrypt(
    encrypted_key: EncryptedPrivateKey,
    password: str | bytes,
    max_memory: int | None = None,
) -> PrivateKey:
    return encrypted_key.decrypt(password, max_memory)


encrypt_in_background = run_in_background(encrypt)
decrypt_in_background = run_in_background(decrypt)
