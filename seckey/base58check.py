"""Base58-check codecs used by EOSIO style key strings.

The check is the first 4 bytes of RIPEMD-160 over the payload followed by a
suffix (usually the key type, e.g. ``b"K1"``). Legacy WIF strings use a
double SHA-256 check instead.
"""

from __future__ import annotations

import hashlib

import base58

CHECKSUM_SIZE = 4


def ripemd160(data: bytes) -> bytes:
    return hashlib.new("ripemd160", data).digest()


def sha256d(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def encode(data: bytes, suffix: bytes = b"") -> str:
    checksum = ripemd160(data + suffix)[:CHECKSUM_SIZE]
    return base58.b58encode(data + checksum).decode("ascii")


def decode(text: str, suffix: bytes = b"") -> bytes | None:
    """Decode a base58-check string, returns None if it is invalid."""
    try:
        raw = base58.b58decode(text)
    except ValueError:
        return None
    if len(raw) < CHECKSUM_SIZE:
        return None
    data, checksum = raw[:-CHECKSUM_SIZE], raw[-CHECKSUM_SIZE:]
    if ripemd160(data + suffix)[:CHECKSUM_SIZE] != checksum:
        return None
    return data


def encode_sha256d(data: bytes) -> str:
    return base58.b58encode_check(data).decode("ascii")


def decode_sha256d(text: str) -> bytes | None:
    try:
        return base58.b58decode_check(text)
    except ValueError:
        return None
