# -*- coding: utf-8 -*-
"""
Key and password generation policy.

The facade never negotiates sizes at call time: RSA strength and password length
come from a CryptoPolicy, DEFAULT_POLICY unless a caller injects another one.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Final, Mapping, Optional, Union

_LOGGER: Final = logging.getLogger(__name__)

CONFIG_ENV_VAR: Final[str] = "CRYPTO2_CONFIG"

_MIN_RSA_KEY_SIZE: Final[int] = 1024
_ALLOWED_EXPONENTS: Final[tuple[int, ...]] = (3, 65537)
_MIN_PASSWORD_LEN: Final[int] = 8
_MAX_PASSWORD_LEN: Final[int] = 1024


@dataclass(frozen=True)
class CryptoPolicy:
    """
    Generation parameters for key pairs and passwords.

    Attributes:
        rsa_key_size: RSA modulus size in bits (>= 1024, multiple of 256).
        rsa_public_exponent: RSA public exponent (3 or 65537).
        password_length: Length of generated passwords in characters (8..1024).

    Examples:
        >>> CryptoPolicy().rsa_key_size
        2048
        >>> CryptoPolicy.from_mapping({"password_length": 48}).password_length
        48
    """

    rsa_key_size: int = 2048
    rsa_public_exponent: int = 65537
    password_length: int = 32

    def __post_init__(self) -> None:
        """Validate parameters."""
        if (
            not isinstance(self.rsa_key_size, int)
            or self.rsa_key_size < _MIN_RSA_KEY_SIZE
            or self.rsa_key_size % 256 != 0
        ):
            raise ValueError("rsa_key_size must be >= 1024 and divisible by 256")
        if self.rsa_public_exponent not in _ALLOWED_EXPONENTS:
            raise ValueError("rsa_public_exponent must be 3 or 65537")
        if (
            not isinstance(self.password_length, int)
            or not _MIN_PASSWORD_LEN <= self.password_length <= _MAX_PASSWORD_LEN
        ):
            raise ValueError("password_length must be between 8 and 1024")

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "CryptoPolicy":
        """Build a policy from a mapping; unknown keys are ignored."""
        known = {f.name for f in fields(CryptoPolicy)}
        unknown = sorted(set(data) - known)
        if unknown:
            _LOGGER.warning("Ignoring unknown policy keys: %s", ", ".join(unknown))
        return CryptoPolicy(**{k: v for k, v in data.items() if k in known})


DEFAULT_POLICY: Final[CryptoPolicy] = CryptoPolicy()


def load_policy(path: Optional[Union[str, Path]] = None) -> CryptoPolicy:
    """
    Load a policy from a JSON file.

    Args:
        path: JSON file; defaults to the file named by CRYPTO2_CONFIG.

    Returns:
        The parsed policy, or DEFAULT_POLICY when no file is configured.

    Raises:
        ValueError: on unreadable or invalid JSON, or invalid values.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return DEFAULT_POLICY
        path = env_path

    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        _LOGGER.error("Could not load policy from %s: %s", config_path, type(e).__name__)
        raise ValueError(f"Invalid policy file: {config_path}") from e

    if not isinstance(raw, dict):
        raise ValueError("Policy file must contain a JSON object")

    policy = CryptoPolicy.from_mapping(raw)
    _LOGGER.info("Loaded crypto policy from %s", config_path)
    return policy


__all__ = [
    "CONFIG_ENV_VAR",
    "CryptoPolicy",
    "DEFAULT_POLICY",
    "load_policy",
]
