import pytest

from seckey.cipher import Operation, aes_cbc, crypt, derive_key_and_iv
from seckey.common.exceptions import CryptoPrimitiveFailure
from seckey.security_level import SecurityLevel

from .conftest import FAST

SALT = bytes.fromhex("1feb8491")
PLAINTEXT = bytes(range(32))


def test_derive_key_and_iv_sizes() -> None:
    key, iv = derive_key_and_iv("foobar", SALT, FAST)
    assert len(key) == 32  # noqa: PLR2004
    assert len(iv) == 16  # noqa: PLR2004


def test_derive_is_deterministic() -> None:
    assert derive_key_and_iv("foobar", SALT, FAST) == derive_key_and_iv(
        b"foobar", SALT, FAST
    )
    assert derive_key_and_iv("foobar", SALT, FAST) != derive_key_and_iv(
        "foobar", b"\x00\x00\x00\x00", FAST
    )


def test_crypt_round_trip() -> None:
    ciphertext = crypt(PLAINTEXT, "foobar", SALT, FAST, Operation.ENCRYPT)
    assert len(ciphertext) == len(PLAINTEXT)
    assert ciphertext != PLAINTEXT
    assert crypt(ciphertext, "foobar", SALT, FAST, Operation.DECRYPT) == PLAINTEXT


def test_wrong_password_returns_garbage() -> None:
    ciphertext = crypt(PLAINTEXT, "foobar", SALT, FAST, Operation.ENCRYPT)
    decrypted = crypt(ciphertext, "hunter1", SALT, FAST, Operation.DECRYPT)
    assert len(decrypted) == len(PLAINTEXT)
    assert decrypted != PLAINTEXT


def test_unaligned_input_fails() -> None:
    with pytest.raises(CryptoPrimitiveFailure):
        crypt(b"short", "foobar", SALT, FAST, Operation.ENCRYPT)


def test_bad_key_length_fails() -> None:
    with pytest.raises(CryptoPrimitiveFailure, match="key"):
        aes_cbc(PLAINTEXT, b"\x00" * 16, b"\x00" * 16, Operation.ENCRYPT)
    with pytest.raises(CryptoPrimitiveFailure, match="IV"):
        aes_cbc(PLAINTEXT, b"\x00" * 32, b"\x00" * 8, Operation.ENCRYPT)


def test_memory_limit_refuses_expensive_levels() -> None:
    with pytest.raises(CryptoPrimitiveFailure, match="memory"):
        crypt(PLAINTEXT, "foobar", SALT, SecurityLevel.custom(0xFF), Operation.DECRYPT)
    with pytest.raises(CryptoPrimitiveFailure, match="memory"):
        derive_key_and_iv("foobar", SALT, SecurityLevel.DEFAULT, max_memory=1024)


def test_memory_limit_from_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECKEY_SCRYPT_MAX_MEMORY", "1024")
    with pytest.raises(CryptoPrimitiveFailure):
        derive_key_and_iv("foobar", SALT, FAST)
