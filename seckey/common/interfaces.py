"""
Interfaces for the key management collaborator.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IPublicKey(Protocol):
    """Protocol for public keys used to verify a decryption."""

    key_type: str

    def to_string(self) -> str: ...

    @property
    def checksum(self) -> bytes: ...


@runtime_checkable
class IPrivateKey(Protocol):
    """Protocol for private keys that can be encrypted."""

    key_type: str

    @property
    def data(self) -> bytes: ...

    def public_key(self) -> IPublicKey: ...
