"""
EOSIO private and public keys.

Only what encryption needs: parsing and formatting key strings, deriving the
public key and the public key checksum used as scrypt salt.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from seckey import base58check
from seckey.common.exceptions import KeyFormatError

PRIVATE_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 33
WIF_VERSION = 0x80
LEGACY_PUBLIC_PREFIX = "EOS"

CURVES: dict[str, ec.EllipticCurve] = {
    "K1": ec.SECP256K1(),
    "R1": ec.SECP256R1(),
}


def _split_key_string(value: str, prefix: str) -> tuple[str, str]:
    parts = value.split("_")
    if len(parts) != 3 or parts[0] != prefix:  # noqa: PLR2004
        msg = f"Malformed {prefix} key string"
        raise KeyFormatError(msg)
    key_type, encoded = parts[1], parts[2]
    if key_type not in CURVES:
        msg = f"Unknown key type: {key_type}"
        raise KeyFormatError(msg)
    return key_type, encoded


class PublicKey:
    """Compressed elliptic curve public key."""

    def __init__(self, key_type: str, data: bytes) -> None:
        if key_type not in CURVES:
            msg = f"Unknown key type: {key_type}"
            raise KeyFormatError(msg)
        if len(data) != PUBLIC_KEY_SIZE:
            msg = f"Public key data must be {PUBLIC_KEY_SIZE} bytes, got {len(data)}"
            raise KeyFormatError(msg)
        self.key_type = key_type
        self.data = bytes(data)

    @classmethod
    def from_string(cls, value: str) -> PublicKey:
        """Parse ``PUB_<type>_<data>`` or a legacy ``EOS<data>`` string."""
        if value.startswith(LEGACY_PUBLIC_PREFIX):
            data = base58check.decode(value[len(LEGACY_PUBLIC_PREFIX) :])
            key_type = "K1"
        else:
            key_type, encoded = _split_key_string(value, "PUB")
            data = base58check.decode(encoded, key_type.encode())
        if data is None:
            msg = "Invalid public key checksum"
            raise KeyFormatError(msg)
        return cls(key_type, data)

    def to_string(self) -> str:
        encoded = base58check.encode(self.data, self.key_type.encode())
        return f"PUB_{self.key_type}_{encoded}"

    def to_legacy_string(self) -> str:
        if self.key_type != "K1":
            msg = "Legacy format only exists for K1 keys"
            raise KeyFormatError(msg)
        return LEGACY_PUBLIC_PREFIX + base58check.encode(self.data)

    @property
    def checksum(self) -> bytes:
        """First 4 bytes of double sha256 over the key string."""
        return base58check.sha256d(self.to_string().encode("ascii"))[:4]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.key_type == other.key_type and self.data == other.data

    def __hash__(self) -> int:
        return hash((self.key_type, self.data))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"PublicKey({self.to_string()!r})"


class PrivateKey:
    """Elliptic curve private key scalar."""

    def __init__(self, key_type: str, data: bytes) -> None:
        if key_type not in CURVES:
            msg = f"Unknown key type: {key_type}"
            raise KeyFormatError(msg)
        if len(data) != PRIVATE_KEY_SIZE:
            msg = f"Private key data must be {PRIVATE_KEY_SIZE} bytes, got {len(data)}"
            raise KeyFormatError(msg)
        try:
            self._key = ec.derive_private_key(
                int.from_bytes(data, "big"), CURVES[key_type]
            )
        except ValueError as err:
            msg = "Private key is not a valid scalar for the curve"
            raise KeyFormatError(msg) from err
        self.key_type = key_type
        self._data = bytes(data)

    @classmethod
    def from_k1_data(cls, data: bytes) -> PrivateKey:
        """Create a K1 key from 32 raw bytes or the 0x80 prefixed WIF payload."""
        if len(data) == PRIVATE_KEY_SIZE + 1:
            if data[0] != WIF_VERSION:
                msg = f"Unexpected K1 key version byte 0x{data[0]:02x}"
                raise KeyFormatError(msg)
            data = data[1:]
        return cls("K1", data)

    @classmethod
    def from_string(cls, value: str) -> PrivateKey:
        """Parse ``PVT_<type>_<data>`` or a legacy WIF string."""
        if value.startswith("PVT_"):
            key_type, encoded = _split_key_string(value, "PVT")
            data = base58check.decode(encoded, key_type.encode())
            if data is None:
                msg = "Invalid private key checksum"
                raise KeyFormatError(msg)
            return cls(key_type, data)

        data = base58check.decode_sha256d(value)
        if data is None:
            msg = "Invalid WIF private key"
            raise KeyFormatError(msg)
        return cls.from_k1_data(data)

    @classmethod
    def generate(cls, key_type: str = "K1") -> PrivateKey:
        key = ec.generate_private_key(CURVES[key_type])
        return cls(key_type, key.private_numbers().private_value.to_bytes(32, "big"))

    @property
    def data(self) -> bytes:
        return self._data

    def public_key(self) -> PublicKey:
        point = self._key.public_key().public_bytes(
            encoding=serialization.Encoding.X962,
            format=serialization.PublicFormat.CompressedPoint,
        )
        return PublicKey(self.key_type, point)

    def to_string(self) -> str:
        encoded = base58check.encode(self._data, self.key_type.encode())
        return f"PVT_{self.key_type}_{encoded}"

    def to_wif(self) -> str:
        if self.key_type != "K1":
            msg = "WIF format only exists for K1 keys"
            raise KeyFormatError(msg)
        return base58check.encode_sha256d(bytes([WIF_VERSION]) + self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrivateKey):
            return NotImplemented
        return self.key_type == other.key_type and self._data == other._data

    def __hash__(self) -> int:
        return hash((self.key_type, self._data))

    def __repr__(self) -> str:
        return f"PrivateKey({self.key_type}, public={self.public_key().to_string()!r})"
