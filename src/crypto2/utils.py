# -*- coding: utf-8 -*-
"""
Codec and randomness helpers shared by every crypto2 component.

- Hex codec: lowercase output, strict input (even length, hex digits only).
- UTF-8 codec: text in, bytes out and back, with typed failures.
- RNG: dual-source (os.urandom XOR secrets.token_bytes) mixed through HKDF-SHA256
  with basic repetition/proportion sanity checks.
"""
from __future__ import annotations

import logging
import math
import os
import secrets
import string
from collections import Counter
from typing import Final

from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.kdf.hkdf import HKDFExpand

from crypto2.exceptions import InvalidEncodingError

_LOGGER: Final = logging.getLogger(__name__)

_MAX_RANDOM_BYTES: Final[int] = 10 * 1024 * 1024
_ENTROPY_SAMPLE_THRESHOLD: Final[int] = 256
_MIN_SHANNON_PER_BYTE: Final[float] = 7.20
_SMALL_APT_MIN_N: Final[int] = 32
_RCT_MIN_N: Final[int] = 8
# RFC 5869: a single expand yields at most 255 hash blocks
_HKDF_MAX_OUTPUT: Final[int] = 255 * 32
_RNG_INFO: Final[bytes] = b"CRYPTO2-RNG-v1"
_HEX_DIGITS: Final[frozenset[str]] = frozenset(string.hexdigits)


def to_hex(data: bytes) -> str:
    """
    Encode bytes to hexadecimal string.

    Args:
        data: bytes to encode.

    Returns:
        Lowercase hex string without prefix or separators.
    """
    return bytes(data).hex()


def from_hex(text: str) -> bytes:
    """
    Decode hexadecimal string to bytes.

    Args:
        text: hex string (case-insensitive).

    Returns:
        Decoded bytes.

    Raises:
        InvalidEncodingError: on odd length, non-hex characters or non-str input.
    """
    if not isinstance(text, str):
        raise InvalidEncodingError(
            f"Hex input must be str, got {type(text).__name__}"
        )
    if len(text) % 2 != 0:
        raise InvalidEncodingError("Hex input must have an even length")
    # bytes.fromhex() tolerates whitespace, the wire format does not
    if not all(ch in _HEX_DIGITS for ch in text):
        raise InvalidEncodingError("Hex input contains non-hex characters")
    return bytes.fromhex(text)


def utf8_encode(text: str) -> bytes:
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    return text.encode("utf-8")


def utf8_decode(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError("Data is not valid UTF-8", cause=exc) from exc


def generate_random_bytes(n: int) -> bytes:
    """
    Generate cryptographically secure random bytes with entropy checks.

    Args:
        n: number of bytes to generate (1..10MiB).

    Returns:
        Random bytes of requested length.

    Raises:
        ValueError: if n is out of range or entropy checks fail.
    """
    if not isinstance(n, int) or n <= 0 or n > _MAX_RANDOM_BYTES:
        raise ValueError("Requested random size must be in 1..10MiB")

    src1 = os.urandom(n)
    src2 = secrets.token_bytes(n)
    ikm = bytes(a ^ b for a, b in zip(src1, src2))
    salt = src2[:16]
    out = _hkdf_stream(ikm, salt, n)

    _rct_apt_checks(out)
    if n >= _ENTROPY_SAMPLE_THRESHOLD:
        h = _shannon_entropy(out)
        if h < _MIN_SHANNON_PER_BYTE:
            _LOGGER.warning(
                "Entropy check low (%.2f bits/byte) on %d-byte sample; continuing", h, n
            )

    _LOGGER.debug("Generated %d random bytes", n)
    return out


def _hkdf_stream(ikm: bytes, salt: bytes, n: int) -> bytes:
    """
    HKDF-SHA256 extract once, then expand in blocks of at most 8160 bytes.

    Each block gets its own info suffix (big-endian block counter).
    """
    extractor = hmac.HMAC(salt, hashes.SHA256())
    extractor.update(ikm)
    prk = extractor.finalize()

    chunks = []
    remaining = n
    counter = 0
    while remaining > 0:
        size = min(remaining, _HKDF_MAX_OUTPUT)
        expand = HKDFExpand(
            algorithm=hashes.SHA256(),
            length=size,
            info=_RNG_INFO + counter.to_bytes(4, "big"),
        )
        chunks.append(expand.derive(prk))
        remaining -= size
        counter += 1
    return b"".join(chunks)


def _rct_apt_checks(data: bytes) -> None:
    """
    Repetition Count Test (RCT) and Adaptive Proportion Test (APT) sanity checks.

    Outputs shorter than 8 bytes are exempt from the repetition test.
    """
    if not data:
        raise ValueError("Empty data for entropy checks")
    if len(data) >= _RCT_MIN_N and all(b == data[0] for b in data):
        raise ValueError("Degenerate RNG output (all bytes equal)")
    if len(data) >= _SMALL_APT_MIN_N:
        freq: Counter[int] = Counter(data)
        max_prop = max(freq.values()) / float(len(data))
        if max_prop > 0.80:
            raise ValueError("RNG output fails adaptive proportion sanity check")


def _shannon_entropy(data: bytes) -> float:
    """Shannon entropy in bits per byte (0.0 to 8.0)."""
    if not data:
        return 0.0
    freq: Counter[int] = Counter(data)
    n = len(data)
    ent: float = 0.0
    for c in freq.values():
        p = c / n
        ent -= p * math.log2(p)
    return ent


__all__ = [
    "to_hex",
    "from_hex",
    "utf8_encode",
    "utf8_decode",
    "generate_random_bytes",
]
