# -*- coding: utf-8 -*-
"""
One-way hashes and HMACs over UTF-8 text, returned as lowercase hex.

| Function     | Output bytes | Hex chars |
|--------------|--------------|-----------|
| hash_md5     | 16           | 32        |
| hash_sha1    | 20           | 40        |
| hash_sha256  | 32           | 64        |
| hmac_sha1    | 20           | 40        |
| hmac_sha256  | 32           | 64        |

MD5 and SHA1 are kept for interoperability with existing digests, not for new
security designs.
"""

from __future__ import annotations

import hashlib
import hmac as _hmac
from typing import Final

from crypto2.utils import utf8_encode

MD5_OUTPUT_SIZE: Final[int] = 16
SHA1_OUTPUT_SIZE: Final[int] = 20
SHA256_OUTPUT_SIZE: Final[int] = 32


def _digest(name: str, text: str) -> str:
    # usedforsecurity=False keeps MD5 available on FIPS-restricted builds
    return hashlib.new(name, utf8_encode(text), usedforsecurity=False).hexdigest()


def hash_md5(text: str) -> str:
    return _digest("md5", text)


def hash_sha1(text: str) -> str:
    return _digest("sha1", text)


def hash_sha256(text: str) -> str:
    return _digest("sha256", text)


def _hmac_hex(text: str, secret: str, digestmod: str) -> str:
    return _hmac.new(utf8_encode(secret), utf8_encode(text), digestmod).hexdigest()


def hmac_sha1(text: str, secret: str) -> str:
    """HMAC-SHA1 of text keyed with the UTF-8 secret."""
    return _hmac_hex(text, secret, "sha1")


def hmac_sha256(text: str, secret: str) -> str:
    """HMAC-SHA256 of text keyed with the UTF-8 secret."""
    return _hmac_hex(text, secret, "sha256")


__all__ = [
    "MD5_OUTPUT_SIZE",
    "SHA1_OUTPUT_SIZE",
    "SHA256_OUTPUT_SIZE",
    "hash_md5",
    "hash_sha1",
    "hash_sha256",
    "hmac_sha1",
    "hmac_sha256",
]
