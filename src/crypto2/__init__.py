"""
crypto2
=======

Unified cryptographic facade with good defaults and explicit alternatives.

This package provides:
    - createPassword / createKeyPair / readPrivateKey / readPublicKey equivalents
    - encrypt / decrypt: AES-256-CBC (default) and RSA
    - sign / verify: RSA with SHA256
    - hash: MD5, SHA1, SHA256 (default)
    - hmac: SHA1, SHA256 (default)

Every byte-valued result (ciphertext, signature, digest, HMAC) is lowercase hex.

Basic usage:
    >>> import crypto2
    >>> crypto2.encrypt("the native web", "secret")
    '6c9ae06e9cd536bf38d0f551f8150065'
    >>> crypto2.decrypt.aes256cbc("6c9ae06e9cd536bf38d0f551f8150065", "secret")
    'the native web'
    >>> private_pem, public_pem = crypto2.create_key_pair()
    >>> signature = crypto2.sign("the native web", crypto2.load_private_key(private_pem))
    >>> crypto2.verify("the native web", crypto2.load_public_key(public_pem), signature)
    True

Logging is configured on the "crypto2" logger at import time. The level is read
from CRYPTO2_LOG_LEVEL (default INFO); CRYPTO2_LOG_FILE enables a rotating file log.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Final

__version__ = "1.0.0"

VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0

LOG_LEVEL_ENV_VAR: Final[str] = "CRYPTO2_LOG_LEVEL"
LOG_FILE_ENV_VAR: Final[str] = "CRYPTO2_LOG_FILE"
_ROOT_LOGGER_NAME: Final[str] = "crypto2"


def _setup_logging() -> None:
    """
    Configure the package logger.

    - stderr handler for WARNING and above
    - optional rotating file handler (CRYPTO2_LOG_FILE) for all levels
    - format: [timestamp] LEVEL [module.function:line] message

    Idempotent: returns early when the package logger already has handlers.
    """
    log_level_str = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get(LOG_FILE_ENV_VAR)
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 MiB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Could not initialize file logging: %s. Using console only.", e
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the "crypto2" namespace.

    Args:
        module_name: usually ``__name__``; names outside the package are
            prefixed with "crypto2.".

    Example:
        >>> get_logger("my_app.keys").name
        'crypto2.my_app.keys'
    """
    if module_name == _ROOT_LOGGER_NAME or module_name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.main")
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{module_name.lstrip('.')}")


_setup_logging()

from crypto2.config import DEFAULT_POLICY, CryptoPolicy, load_policy  # noqa: E402
from crypto2.crypto_service import (  # noqa: E402
    CryptoService,
    EncryptionAlgorithm,
    HashAlgorithm,
    HmacAlgorithm,
    SigningAlgorithm,
    create_key_pair,
    create_password,
    decrypt,
    encrypt,
    hash,
    hmac,
    read_private_key,
    read_public_key,
    sign,
    verify,
)
from crypto2.exceptions import (  # noqa: E402
    BadInputStringError,
    CryptoError,
    CryptoKeyError,
    DecryptionError,
    EncryptionError,
    InvalidEncodingError,
    InvalidKeyFormatError,
    KeyFileNotFoundError,
    KeyGenerationError,
    PlaintextTooLargeError,
    SignatureError,
    UnsupportedAlgorithmError,
)
from crypto2.keys import (  # noqa: E402
    KeyPair,
    PrivateKey,
    PublicKey,
    create_key_pair_async,
    load_private_key,
    load_public_key,
    read_private_key_async,
    read_public_key_async,
)

__all__ = [
    "__version__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    "get_logger",
    # Facade
    "encrypt",
    "decrypt",
    "sign",
    "verify",
    "hash",
    "hmac",
    "create_password",
    "create_key_pair",
    "create_key_pair_async",
    "read_private_key",
    "read_private_key_async",
    "read_public_key",
    "read_public_key_async",
    "load_private_key",
    "load_public_key",
    "CryptoService",
    "EncryptionAlgorithm",
    "SigningAlgorithm",
    "HashAlgorithm",
    "HmacAlgorithm",
    # Keys
    "KeyPair",
    "PrivateKey",
    "PublicKey",
    # Config
    "CryptoPolicy",
    "DEFAULT_POLICY",
    "load_policy",
    # Errors
    "CryptoError",
    "UnsupportedAlgorithmError",
    "InvalidEncodingError",
    "EncryptionError",
    "PlaintextTooLargeError",
    "DecryptionError",
    "BadInputStringError",
    "SignatureError",
    "CryptoKeyError",
    "KeyGenerationError",
    "InvalidKeyFormatError",
    "KeyFileNotFoundError",
]
