"""Scrypt key derivation and AES-256-CBC used to protect private keys.
"""

from __future__ import annotations

import enum
import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from seckey.common.config import Config
from seckey.common.exceptions import CryptoPrimitiveFailure
from seckey.security_level import SecurityLevel

logger = logging.getLogger(__name__)

IV_SIZE = 16
KEY_SIZE = 32


class Operation(enum.Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


def _password_bytes(password: str | bytes) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    return bytes(password)


def derive_key_and_iv(
    password: str | bytes,
    salt: bytes,
    security_level: SecurityLevel,
    max_memory: int | None = None,
) -> tuple[bytes, bytes]:
    """Run scrypt and split the 48 derived bytes into (key, iv).

    This is slow on purpose, do not call it on a latency sensitive thread.
    """
    if max_memory is None:
        max_memory = Config().SCRYPT_MAX_MEMORY
    n, r, p = security_level.params
    if security_level.memory_cost > max_memory:
        msg = (
            f"Security level {security_level} needs {security_level.memory_cost} "
            f"bytes of memory, limit is {max_memory}"
        )
        raise CryptoPrimitiveFailure(msg)

    logger.debug("Deriving key with scrypt N=%d r=%d p=%d", n, r, p)
    try:
        derived = Scrypt(salt=salt, length=IV_SIZE + KEY_SIZE, n=n, r=r, p=p).derive(
            _password_bytes(password)
        )
    except (ValueError, MemoryError) as err:
        msg = f"Key derivation failed: {err}"
        raise CryptoPrimitiveFailure(msg) from err

    return derived[IV_SIZE:], derived[:IV_SIZE]


def aes_cbc(data: bytes, key: bytes, iv: bytes, operation: Operation) -> bytes:
    """AES-256-CBC without padding, input must be block aligned."""
    if len(key) != KEY_SIZE:
        msg = f"AES key must be {KEY_SIZE} bytes"
        raise CryptoPrimitiveFailure(msg)
    if len(iv) != IV_SIZE:
        msg = f"AES IV must be {IV_SIZE} bytes"
        raise CryptoPrimitiveFailure(msg)

    cipher = Cipher(algorithms.AES(key), modes.CBC(iv))
    context = (
        cipher.encryptor() if operation is Operation.ENCRYPT else cipher.decryptor()
    )
    try:
        return context.update(data) + context.finalize()
    except ValueError as err:
        msg = f"AES {operation.value} failed: {err}"
        raise CryptoPrimitiveFailure(msg) from err


def crypt(
    data: bytes,
    password: str | bytes,
    salt: bytes,
    security_level: SecurityLevel,
    operation: Operation,
    max_memory: int | None = None,
) -> bytes:
    """Encrypt or decrypt data using password, salt and security level.

    No authentication happens here, a wrong password yields garbage output of
    the right length.
    """
    key, iv = derive_key_and_iv(password, salt, security_level, max_memory)
    return aes_cbc(data, key, iv, operation)
