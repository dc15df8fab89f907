import pytest

from seckey.keys import PrivateKey
from seckey.security_level import SecurityLevel

WIF = "5JZAVLoiZWc5u4JsmFXfZa7MfBsf7axQy2nu5ztrQitukEhmLzE"
ENCRYPTED = "SEC_K1_8vWLjFLTcvWNKY8wwfMKJJ3Sf278qb5xQgqXFzrRF44ECxACwoC3RPTj"
ENCRYPTED_ABI_HEX = (
    "00241feb8491b4fd5745396bb401bac0be2c7a85855b3b2b79eaafced1396765e315b7a93fec"
)

# Cheapest level (N=16384 r=8 p=1), keeps round trip tests fast
FAST = SecurityLevel.custom(0)


@pytest.fixture
def private_key() -> PrivateKey:
    return PrivateKey.from_string(WIF)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SECKEY_SECURITY_LEVEL",
        "SECKEY_SCRYPT_MAX_MEMORY",
        "SECKEY_BACKGROUND_WORKERS",
        "SECKEY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
