"""
Pydantic models for command line reports.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from seckey.encrypted_key import EncryptedPrivateKey


class ScryptParamsInfo(BaseModel):
    n: int = Field(gt=1)
    r: int = Field(gt=0)
    p: int = Field(gt=0)


class EncryptedKeyInfo(BaseModel):
    key: EncryptedPrivateKey
    key_type: str
    security_level: str
    flags: int = Field(ge=0, le=255)
    scrypt: ScryptParamsInfo
    checksum: str

    @classmethod
    def from_key(cls, key: EncryptedPrivateKey) -> EncryptedKeyInfo:
        level = key.security_level
        n, r, p = level.params
        return cls(
            key=key,
            key_type=key.key_type,
            security_level=level.name,
            flags=level.flags,
            scrypt=ScryptParamsInfo(n=n, r=r, p=p),
            checksum=key.checksum.hex(),
        )
