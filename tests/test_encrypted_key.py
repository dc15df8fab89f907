import pytest
from pydantic import TypeAdapter, ValidationError

from seckey import base58check
from seckey.common.exceptions import (
    Base58DecodeFailed,
    InvalidBinaryLength,
    InvalidDataPayload,
    InvalidK1Data,
    InvalidKeyType,
    InvalidPassword,
    MalformedKeyString,
    MalformedTextFormat,
    UnsupportedKeyType,
)
from seckey.encrypted_key import EncryptedPrivateKey, decrypt, encrypt
from seckey.keys import PrivateKey
from seckey.security_level import SecurityLevel

from .conftest import ENCRYPTED, ENCRYPTED_ABI_HEX, FAST


def test_encrypt_known_vector(private_key: PrivateKey) -> None:
    encrypted = encrypt(private_key, "foobar", SecurityLevel.DEFAULT)
    assert encrypted.to_string() == ENCRYPTED
    assert encrypted == EncryptedPrivateKey.from_string(ENCRYPTED)
    assert encrypted.security_level == SecurityLevel.DEFAULT


def test_encrypt_uses_configured_default_level(private_key: PrivateKey) -> None:
    assert encrypt(private_key, b"foobar").to_string() == ENCRYPTED


def test_decrypt_known_vector(private_key: PrivateKey) -> None:
    encrypted = EncryptedPrivateKey.from_string(ENCRYPTED)
    assert encrypted.decrypt("foobar") == private_key
    with pytest.raises(InvalidPassword):
        encrypted.decrypt("hunter1")


def test_round_trip_with_custom_level() -> None:
    key = PrivateKey.generate()
    encrypted = encrypt(key, "correct horse", FAST)
    assert encrypted.header == 0
    assert encrypted.security_level == FAST
    assert decrypt(encrypted, "correct horse") == key
    with pytest.raises(InvalidPassword):
        decrypt(encrypted, "battery staple")


def test_encrypt_rejects_unsupported_key_type() -> None:
    with pytest.raises(UnsupportedKeyType) as excinfo:
        encrypt(PrivateKey.generate("R1"), "foobar", FAST)
    assert excinfo.value.key_type == "R1"


def test_binary_form() -> None:
    encrypted = EncryptedPrivateKey.from_string(ENCRYPTED)
    data = encrypted.to_binary()
    assert len(data) == 37  # noqa: PLR2004
    assert data[0] == 0x24  # noqa: PLR2004
    assert encrypted.checksum == bytes.fromhex("1feb8491")
    assert len(encrypted.ciphertext) == 32  # noqa: PLR2004
    assert EncryptedPrivateKey.from_binary(data) == encrypted


def test_from_binary_requires_37_bytes() -> None:
    with pytest.raises(InvalidK1Data):
        EncryptedPrivateKey.from_binary(b"\x24" * 36)
    with pytest.raises(InvalidBinaryLength):
        EncryptedPrivateKey.from_binary(b"\x24" * 38)


def test_from_binary_unknown() -> None:
    assert EncryptedPrivateKey.from_binary_unknown(b"\x00" * 6, "R1") is None
    encrypted = EncryptedPrivateKey.from_binary_unknown(b"\x24" + b"\x01" * 45, "R1")
    assert encrypted is not None
    assert encrypted.key_type == "R1"
    assert len(encrypted.ciphertext) == 41  # noqa: PLR2004


def test_unknown_type_string_round_trip() -> None:
    encrypted = EncryptedPrivateKey.from_binary_unknown(b"\x44" + b"\x07" * 20, "R1")
    assert encrypted is not None
    value = encrypted.to_string()
    assert value.startswith("SEC_R1_")
    parsed = EncryptedPrivateKey.from_string(value)
    assert parsed == encrypted
    assert parsed.security_level == SecurityLevel.HIGH
    with pytest.raises(UnsupportedKeyType):
        parsed.decrypt("foobar")


@pytest.mark.parametrize(
    ("value", "error"),
    [
        ("PUB_K1_8vWLjFLTcvWNKY8wwfMKJJ3Sf278qb5xQgqXFzrRF44ECxACwoC3RPTj", MalformedKeyString),
        ("SEC_K1", MalformedKeyString),
        ("SEC_K1_abc_def", MalformedKeyString),
        ("SEC_k1_8vWLjFLTcvWNKY8wwfMKJJ3Sf278qb5xQgqXFzrRF44ECxACwoC3RPTj", InvalidKeyType),
        ("SEC_K1X_8vWLjFLTcvWNKY8wwfMKJJ3Sf278qb5xQgqXFzrRF44ECxACwoC3RPTj", InvalidKeyType),
        ("SEC_K1_0OIl", Base58DecodeFailed),
        ("SEC_R1_8vWLjFLTcvWNKY8wwfMKJJ3Sf278qb5xQgqXFzrRF44ECxACwoC3RPTj", Base58DecodeFailed),
    ],
)
def test_from_string_errors(value: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        EncryptedPrivateKey.from_string(value)
    assert EncryptedPrivateKey.parse(value) is None


def test_from_string_payload_errors() -> None:
    short_k1 = "SEC_K1_" + base58check.encode(b"\x24" * 36, b"K1")
    with pytest.raises(InvalidK1Data):
        EncryptedPrivateKey.from_string(short_k1)
    short_unknown = "SEC_ZZ_" + base58check.encode(b"\x24" * 6, b"ZZ")
    with pytest.raises(InvalidDataPayload):
        EncryptedPrivateKey.from_string(short_unknown)


def test_abi_encoding() -> None:
    encrypted = EncryptedPrivateKey.from_string(ENCRYPTED)
    assert encrypted.to_abi().hex() == ENCRYPTED_ABI_HEX
    assert EncryptedPrivateKey.from_abi(bytes.fromhex(ENCRYPTED_ABI_HEX)) == encrypted


def test_abi_unknown_types() -> None:
    payload = bytes.fromhex(ENCRYPTED_ABI_HEX)[1:]
    r1 = EncryptedPrivateKey.from_abi(b"\x01" + payload)
    assert r1.key_type == "R1"
    assert r1.to_abi()[0] == 1
    wa = EncryptedPrivateKey.from_abi(b"\x02" + payload)
    assert wa.key_type == "WA"
    other = EncryptedPrivateKey.from_abi(b"\x07" + payload)
    assert other.key_type == "XX"
    assert other.to_abi()[0] == 255  # noqa: PLR2004
    with pytest.raises(InvalidBinaryLength):
        EncryptedPrivateKey.from_abi(b"\x00" + payload[:-1])


def test_json_encoding() -> None:
    encrypted = EncryptedPrivateKey.from_string(ENCRYPTED)
    assert encrypted.to_json() == f'"{ENCRYPTED}"'
    assert EncryptedPrivateKey.from_json(encrypted.to_json()) == encrypted
    with pytest.raises(MalformedKeyString):
        EncryptedPrivateKey.from_json("42")


def test_pydantic_type_adapter() -> None:
    adapter = TypeAdapter(EncryptedPrivateKey)
    encrypted = adapter.validate_python(ENCRYPTED)
    assert adapter.dump_json(encrypted) == f'"{ENCRYPTED}"'.encode()
    assert adapter.validate_json(f'"{ENCRYPTED}"') == encrypted
    assert adapter.validate_python(encrypted) is encrypted
    with pytest.raises(ValidationError):
        adapter.validate_python("SEC_K1_0OIl")
    with pytest.raises(ValidationError):
        adapter.validate_python(42)


def test_str_is_canonical_string() -> None:
    encrypted = EncryptedPrivateKey.from_string(ENCRYPTED)
    assert str(encrypted) == ENCRYPTED
    assert ENCRYPTED in repr(encrypted)


def test_from_json_rejects_invalid_json() -> None:
    with pytest.raises(MalformedTextFormat):
        EncryptedPrivateKey.from_json("not json")
    with pytest.raises(MalformedTextFormat):
        EncryptedPrivateKey.from_json(b"\xff")


def test_pydantic_json_schema() -> None:
    schema = TypeAdapter(EncryptedPrivateKey).json_schema()
    assert schema["type"] == "string"
    assert schema["pattern"].startswith("^SEC_")
