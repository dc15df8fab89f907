# EOSIO private key encryption

from seckey.encrypted_key import (
    EncryptedPrivateKey,
    decrypt,
    decrypt_in_background,
    encrypt,
    encrypt_in_background,
)
from seckey.keys import PrivateKey, PublicKey
from seckey.security_level import ScryptParams, SecurityLevel

__all__ = [
    "EncryptedPrivateKey",
    "PrivateKey",
    "PublicKey",
    "ScryptParams",
    "SecurityLevel",
    "decrypt",
    "decrypt_in_background",
    "encrypt",
    "encrypt_in_background",
]
