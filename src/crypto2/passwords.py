# -*- coding: utf-8 -*-
"""
Random password generation.

Passwords are URL-safe base64 text of fresh random bytes from
crypto2.utils.generate_random_bytes, cut to the requested length. With the
default length of 32 this is exactly 24 random bytes (192 bits).
"""
from __future__ import annotations

import base64
import logging
import math
from typing import Final, Optional

from crypto2.config import DEFAULT_POLICY, CryptoPolicy
from crypto2.utils import generate_random_bytes

_LOGGER: Final = logging.getLogger(__name__)

_MIN_LEN: Final[int] = 8
_MAX_LEN: Final[int] = 1024


def create_password(
    length: Optional[int] = None, policy: Optional[CryptoPolicy] = None
) -> str:
    """
    Create a random password.

    Args:
        length: number of characters; defaults to the policy password_length.
        policy: generation policy; defaults to DEFAULT_POLICY.

    Returns:
        Password of exactly `length` characters from [A-Za-z0-9_-].

    Raises:
        ValueError: if length is outside 8..1024.

    Examples:
        >>> len(create_password())
        32
    """
    if length is None:
        length = (policy or DEFAULT_POLICY).password_length
    if not isinstance(length, int) or not _MIN_LEN <= length <= _MAX_LEN:
        raise ValueError("Password length must be between 8 and 1024")

    raw = generate_random_bytes(math.ceil(length * 3 / 4))
    password = base64.urlsafe_b64encode(raw).decode("ascii")[:length]
    _LOGGER.debug("Generated password of %d characters", length)
    return password


__all__ = ["create_password"]
