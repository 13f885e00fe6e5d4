# -*- coding: utf-8 -*-
"""
Centralized exception hierarchy for crypto2.

Every failure of the facade is raised as a subclass of CryptoError so callers can
catch the whole family at once, or a narrow subclass for precise handling.

Guidelines:
- Do not put secrets (keys, passphrases, plaintexts) into exception messages.
- Names avoid shadowing Python built-ins (KeyError, FileNotFoundError).
- Underlying library errors are chained via ``cause`` / ``__cause__``.
"""

from __future__ import annotations

from typing import Final, Optional

BAD_INPUT_STRING: Final[str] = "Bad input string"
DECRYPTION_FAILED_PREFIX: Final[str] = (
    "Error during decryption (probably incorrect key). Original error: "
)


class CryptoError(Exception):
    """Base exception for all crypto-related failures."""

    def __init__(
        self, message: str = "", *, cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(message)
        self.__cause__ = cause


class UnsupportedAlgorithmError(CryptoError, ValueError):
    """Raised when an operation is asked for an algorithm it does not offer."""


# Encoding
class InvalidEncodingError(CryptoError):
    """Raised on malformed hex or UTF-8 input."""


# Symmetric/asymmetric encryption
class EncryptionError(CryptoError):
    """Raised on encryption failures (e.g., invalid parameters, provider errors)."""


class PlaintextTooLargeError(EncryptionError):
    """Raised when a plaintext exceeds what one RSA block can carry."""


class DecryptionError(CryptoError):
    """Raised on decryption failures (e.g., wrong key, corrupted payload)."""

    @classmethod
    def from_cause(cls, cause: BaseException) -> "DecryptionError":
        """Build the wrapped error reported by RSA decryption."""
        detail = f"{type(cause).__name__}: {cause}"
        return cls(DECRYPTION_FAILED_PREFIX + detail, cause=cause)


class BadInputStringError(InvalidEncodingError, DecryptionError):
    """Raised when an AES ciphertext fails structural or padding validation."""

    def __init__(self, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(BAD_INPUT_STRING, cause=cause)


# Signatures
class SignatureError(CryptoError):
    """Base class for signature errors."""


class SignatureGenerationError(SignatureError):
    """Raised when signing fails inside the provider."""


# Keys
class CryptoKeyError(CryptoError):
    """Base class for key management errors (generation/loading)."""


class KeyGenerationError(CryptoKeyError):
    """Raised on key generation failures."""


class InvalidKeyFormatError(CryptoKeyError):
    """Raised when PEM text cannot be parsed or holds the wrong kind of key."""


class KeyFileNotFoundError(CryptoKeyError):
    """Raised when a key file cannot be read from the filesystem."""


__all__ = [
    "BAD_INPUT_STRING",
    "DECRYPTION_FAILED_PREFIX",
    "CryptoError",
    "UnsupportedAlgorithmError",
    "InvalidEncodingError",
    "EncryptionError",
    "PlaintextTooLargeError",
    "DecryptionError",
    "BadInputStringError",
    "SignatureError",
    "SignatureGenerationError",
    "CryptoKeyError",
    "KeyGenerationError",
    "InvalidKeyFormatError",
    "KeyFileNotFoundError",
]
