# -*- coding: utf-8 -*-
"""
AES-256-CBC with passphrase-derived key and IV.

Key and IV come from OpenSSL's EVP_BytesToKey (MD5, one iteration, no salt), the
derivation used by OpenSSL's legacy password-based cipher API. The same
(plaintext, passphrase) pair therefore always yields the same ciphertext; existing
ciphertexts depend on this and it must stay bit-for-bit stable.

Security notes:
- Deterministic IV reveals equal plaintexts and common prefixes. Use it only where
  compatibility with existing ciphertexts is required.
- CBC is not authenticated. A wrong passphrase is detected only through padding
  (or UTF-8) validation, which is probabilistic.
- No passphrases, keys, IVs or plaintext fragments are logged.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Final, Optional, Tuple

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from crypto2.exceptions import BadInputStringError, EncryptionError, InvalidEncodingError
from crypto2.utils import from_hex, to_hex, utf8_decode, utf8_encode

_LOGGER: Final = logging.getLogger(__name__)

KEY_LEN: Final[int] = 32
IV_LEN: Final[int] = 16
BLOCK_SIZE: Final[int] = 16


def evp_bytes_to_key(
    password: bytes,
    key_len: int = KEY_LEN,
    iv_len: int = IV_LEN,
    salt: Optional[bytes] = None,
    count: int = 1,
) -> Tuple[bytes, bytes]:
    """
    OpenSSL EVP_BytesToKey with MD5.

    D_1 = MD5^count(password || salt), D_i = MD5^count(D_{i-1} || password || salt);
    the concatenation D_1 || D_2 ... is split into key and IV.

    Args:
        password: passphrase bytes.
        key_len: key length in bytes.
        iv_len: IV length in bytes.
        salt: optional 8-byte salt.
        count: hash iterations per block.

    Returns:
        (key, iv)
    """
    if salt is not None and len(salt) != 8:
        raise ValueError("EVP_BytesToKey salt must be 8 bytes")
    if count < 1:
        raise ValueError("count must be >= 1")

    tail = password + (salt or b"")
    derived = b""
    block = b""
    while len(derived) < key_len + iv_len:
        block = hashlib.md5(block + tail).digest()
        for _ in range(count - 1):
            block = hashlib.md5(block).digest()
        derived += block
    return derived[:key_len], derived[key_len : key_len + iv_len]


def _cipher_for(passphrase: str) -> Cipher:
    key, iv = evp_bytes_to_key(utf8_encode(passphrase))
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def encrypt(plaintext: str, passphrase: str) -> str:
    """
    Encrypt text with AES-256-CBC.

    Args:
        plaintext: text to encrypt (UTF-8 encoded before encryption).
        passphrase: passphrase the key and IV are derived from.

    Returns:
        Lowercase hex ciphertext, a multiple of 32 characters long.

    Raises:
        TypeError: if plaintext or passphrase is not str.
        EncryptionError: on provider failure.

    Example:
        >>> encrypt("the native web", "secret")
        '6c9ae06e9cd536bf38d0f551f8150065'
    """
    data = utf8_encode(plaintext)
    cipher = _cipher_for(passphrase)
    try:
        padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
        padded = padder.update(data) + padder.finalize()
        encryptor = cipher.encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
    except Exception as exc:
        _LOGGER.error("AES-CBC encryption failed: %s", exc.__class__.__name__)
        raise EncryptionError("AES-256-CBC encryption failed", cause=exc) from exc
    return to_hex(ciphertext)


def decrypt(cipher_hex: str, passphrase: str) -> str:
    """
    Decrypt hex ciphertext produced by encrypt().

    Raises:
        TypeError: if passphrase is not str.
        BadInputStringError: on malformed hex, a length that is not a whole number
            of blocks, invalid padding, or a plaintext that is not UTF-8.
    """
    cipher = _cipher_for(passphrase)
    try:
        data = from_hex(cipher_hex)
    except InvalidEncodingError as exc:
        _LOGGER.warning("AES-CBC input is not valid hex")
        raise BadInputStringError(cause=exc) from exc

    if not data or len(data) % BLOCK_SIZE != 0:
        _LOGGER.warning("AES-CBC input length %d is not a whole number of blocks", len(data))
        raise BadInputStringError()

    try:
        decryptor = cipher.decryptor()
        padded = decryptor.update(data) + decryptor.finalize()
        unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        _LOGGER.warning("AES-CBC padding check failed")
        raise BadInputStringError(cause=exc) from exc

    try:
        return utf8_decode(plaintext)
    except InvalidEncodingError as exc:
        _LOGGER.warning("AES-CBC plaintext is not valid UTF-8")
        raise BadInputStringError(cause=exc) from exc


__all__ = ["KEY_LEN", "IV_LEN", "BLOCK_SIZE", "evp_bytes_to_key", "encrypt", "decrypt"]
