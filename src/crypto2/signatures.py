# -*- coding: utf-8 -*-
"""
RSA signatures over SHA256 (RSASSA-PKCS1-v1_5).

PKCS#1 v1.5 signing is deterministic: the same text and key always give the same
signature, whose length equals the modulus length (512 hex chars for RSA-2048).

verify() answers a yes/no question. A well-formed signature that does not match
(tampered, truncated, other key, other text) is False, not an exception. Only
malformed hex or a wrong key type raise.
"""
from __future__ import annotations

import logging
from typing import Final

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from crypto2.exceptions import SignatureGenerationError
from crypto2.keys import PrivateKey, PublicKey
from crypto2.utils import from_hex, to_hex, utf8_encode

_LOGGER: Final = logging.getLogger(__name__)


def sign_sha256(text: str, private_key: PrivateKey) -> str:
    """
    Sign text with SHA256 + RSA.

    Raises:
        TypeError: if private_key is not a PrivateKey handle.
        SignatureGenerationError: on provider failure.
    """
    if not isinstance(private_key, PrivateKey):
        raise TypeError(f"Expected PrivateKey, got {type(private_key).__name__}")
    data = utf8_encode(text)
    try:
        signature = private_key.key.sign(data, padding.PKCS1v15(), hashes.SHA256())
    except Exception as exc:
        _LOGGER.error("RSA-SHA256 sign failed: %s", exc.__class__.__name__)
        raise SignatureGenerationError("Signing failed", cause=exc) from exc
    return to_hex(signature)


def verify_sha256(text: str, public_key: PublicKey, signature_hex: str) -> bool:
    """
    Verify a hex signature produced by sign_sha256().

    Raises:
        TypeError: if public_key is not a PublicKey handle.
        InvalidEncodingError: if signature_hex is not valid hex.
    """
    if not isinstance(public_key, PublicKey):
        raise TypeError(f"Expected PublicKey, got {type(public_key).__name__}")
    signature = from_hex(signature_hex)
    data = utf8_encode(text)
    try:
        public_key.key.verify(signature, data, padding.PKCS1v15(), hashes.SHA256())
        return True
    except InvalidSignature:
        _LOGGER.debug("RSA-SHA256 signature mismatch")
        return False


__all__ = ["sign_sha256", "verify_sha256"]
