"""
RSA encryption with OAEP padding (MGF1-SHA1, SHA1).

One RSA block per message: the UTF-8 plaintext may be at most
modulus_bytes - 2 * 20 - 2 bytes (214 bytes for a 2048-bit key).

Decryption never distinguishes failure causes to the caller beyond the chained
exception: every failure is a DecryptionError with the
"Error during decryption (probably incorrect key)." prefix.
"""

from __future__ import annotations

import logging
from typing import Final

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from crypto2.exceptions import DecryptionError, EncryptionError, PlaintextTooLargeError
from crypto2.keys import PrivateKey, PublicKey
from crypto2.utils import from_hex, to_hex, utf8_decode, utf8_encode

_LOGGER: Final = logging.getLogger(__name__)


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA1()),
        algorithm=hashes.SHA1(),
        label=None,
    )


def _rsa_oaep_overhead(hash_alg: hashes.HashAlgorithm = hashes.SHA1()) -> int:
    hash_len: int = hash_alg.digest_size
    return 2 * hash_len + 2  # OAEP overhead formula


def max_plaintext_size(public_key: PublicKey) -> int:
    """Largest UTF-8 plaintext, in bytes, that fits one OAEP block for this key."""
    return public_key.key_size // 8 - _rsa_oaep_overhead()


def encrypt(plaintext: str, public_key: PublicKey) -> str:
    """
    Encrypt text with an RSA public key.

    Raises:
        TypeError: if public_key is not a PublicKey handle.
        PlaintextTooLargeError: if the plaintext does not fit one OAEP block.
        EncryptionError: on provider failure.
    """
    if not isinstance(public_key, PublicKey):
        raise TypeError(f"Expected PublicKey, got {type(public_key).__name__}")
    data = utf8_encode(plaintext)
    limit = max_plaintext_size(public_key)
    if len(data) > limit:
        _LOGGER.warning("RSA plaintext of %d bytes exceeds limit %d", len(data), limit)
        raise PlaintextTooLargeError(f"RSA plain length must be <= {limit} bytes for key")
    try:
        ciphertext = public_key.key.encrypt(data, _oaep())
    except Exception as exc:
        _LOGGER.error("RSA encryption failed: %s", exc.__class__.__name__)
        raise EncryptionError("RSA encryption failed", cause=exc) from exc
    return to_hex(ciphertext)


def decrypt(cipher_hex: str, private_key: PrivateKey) -> str:
    """
    Decrypt hex ciphertext with an RSA private key.

    Raises:
        TypeError: if private_key is not a PrivateKey handle.
        DecryptionError: on malformed input, wrong key or corrupt data.
    """
    if not isinstance(private_key, PrivateKey):
        raise TypeError(f"Expected PrivateKey, got {type(private_key).__name__}")
    try:
        data = from_hex(cipher_hex)
        plaintext = private_key.key.decrypt(data, _oaep())
        return utf8_decode(plaintext)
    except Exception as exc:
        _LOGGER.warning("RSA decryption failed: %s", exc.__class__.__name__)
        raise DecryptionError.from_cause(exc) from exc


__all__ = ["encrypt", "decrypt", "max_plaintext_size"]
