# -*- coding: utf-8 -*-
"""
CryptoService: enum-driven dispatch over the crypto2 components.

Each category (encrypt, decrypt, sign, verify, hash, hmac) is one operation object:
- calling it directly runs the category's default algorithm,
- every algorithm is also a method named after its enum value
  (encrypt.aes256cbc, encrypt.rsa, hash.md5, ...),
- algorithm=<enum member or name> selects an algorithm explicitly.

The algorithm sets are closed str enums. An operation refuses to construct unless
every enum member has a handler, so a new member without an implementation fails
at import time rather than at call time.

Examples:
    >>> encrypt("the native web", "secret") == encrypt.aes256cbc("the native web", "secret")
    True
    >>> hash("the native web", algorithm="md5")
    '4e8ba2e64931c64b63f4dc8d90e1dc7c'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Final, Generic, Optional, Tuple, Type, TypeVar, Union

from crypto2 import asymmetric, hashing, keys, passwords, signatures, symmetric
from crypto2.config import DEFAULT_POLICY, CryptoPolicy
from crypto2.exceptions import UnsupportedAlgorithmError
from crypto2.keys import KeyPair, PathLike, PrivateKey, PublicKey

LOGGER: Final = logging.getLogger(__name__)


class EncryptionAlgorithm(str, Enum):
    AES256CBC = "aes256cbc"
    RSA = "rsa"


class SigningAlgorithm(str, Enum):
    SHA256 = "sha256"


class HashAlgorithm(str, Enum):
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"


class HmacAlgorithm(str, Enum):
    SHA1 = "sha1"
    SHA256 = "sha256"


AlgorithmT = TypeVar("AlgorithmT", bound=Enum)


class _Operation(Generic[AlgorithmT]):
    """
    One operation category with a default algorithm and named alternatives.

    Subclasses set `category`, `algorithm_type` and `default`, and define one
    method per algorithm, named after the enum value.
    """

    category: ClassVar[str]
    algorithm_type: ClassVar[Type[Enum]]
    default: ClassVar[Enum]

    __slots__ = ("_handlers",)

    def __init__(self) -> None:
        handlers: Dict[Enum, Callable[..., Any]] = {}
        for member in self.algorithm_type:
            handler = getattr(self, member.value, None)
            if not callable(handler):
                raise TypeError(
                    f"{type(self).__name__} has no handler for algorithm {member.value!r}"
                )
            handlers[member] = handler
        self._handlers = handlers

    @property
    def algorithms(self) -> Tuple[AlgorithmT, ...]:
        return tuple(self._handlers)  # type: ignore[arg-type]

    def resolve(self, algorithm: Union[AlgorithmT, str, None] = None) -> AlgorithmT:
        """Map None, an enum member or its name to an enum member."""
        if algorithm is None:
            return self.default  # type: ignore[return-value]
        try:
            return self.algorithm_type(algorithm)  # type: ignore[return-value]
        except ValueError:
            LOGGER.error("Unsupported %s algorithm: %s", self.category, algorithm)
            raise UnsupportedAlgorithmError(
                f"Unsupported {self.category} algorithm: {algorithm}"
            ) from None

    def __call__(
        self, *args: Any, algorithm: Union[AlgorithmT, str, None] = None, **kwargs: Any
    ) -> Any:
        selected = self.resolve(algorithm)
        LOGGER.debug("Dispatching %s to %s", self.category, selected.value)
        return self._handlers[selected](*args, **kwargs)

    def __repr__(self) -> str:
        names = ", ".join(m.value for m in self._handlers)
        return f"<{self.category} default={self.default.value} algorithms=[{names}]>"


class EncryptOperation(_Operation[EncryptionAlgorithm]):
    category = "encrypt"
    algorithm_type = EncryptionAlgorithm
    default = EncryptionAlgorithm.AES256CBC

    def aes256cbc(self, plaintext: str, passphrase: str) -> str:
        return symmetric.encrypt(plaintext, passphrase)

    def rsa(self, plaintext: str, public_key: PublicKey) -> str:
        return asymmetric.encrypt(plaintext, public_key)


class DecryptOperation(_Operation[EncryptionAlgorithm]):
    category = "decrypt"
    algorithm_type = EncryptionAlgorithm
    default = EncryptionAlgorithm.AES256CBC

    def aes256cbc(self, cipher_hex: str, passphrase: str) -> str:
        return symmetric.decrypt(cipher_hex, passphrase)

    def rsa(self, cipher_hex: str, private_key: PrivateKey) -> str:
        return asymmetric.decrypt(cipher_hex, private_key)


class SignOperation(_Operation[SigningAlgorithm]):
    category = "sign"
    algorithm_type = SigningAlgorithm
    default = SigningAlgorithm.SHA256

    def sha256(self, text: str, private_key: PrivateKey) -> str:
        return signatures.sign_sha256(text, private_key)


class VerifyOperation(_Operation[SigningAlgorithm]):
    category = "verify"
    algorithm_type = SigningAlgorithm
    default = SigningAlgorithm.SHA256

    def sha256(self, text: str, public_key: PublicKey, signature_hex: str) -> bool:
        return signatures.verify_sha256(text, public_key, signature_hex)


class HashOperation(_Operation[HashAlgorithm]):
    category = "hash"
    algorithm_type = HashAlgorithm
    default = HashAlgorithm.SHA256

    def md5(self, text: str) -> str:
        return hashing.hash_md5(text)

    def sha1(self, text: str) -> str:
        return hashing.hash_sha1(text)

    def sha256(self, text: str) -> str:
        return hashing.hash_sha256(text)


class HmacOperation(_Operation[HmacAlgorithm]):
    category = "hmac"
    algorithm_type = HmacAlgorithm
    default = HmacAlgorithm.SHA256

    def sha1(self, text: str, secret: str) -> str:
        return hashing.hmac_sha1(text, secret)

    def sha256(self, text: str, secret: str) -> str:
        return hashing.hmac_sha256(text, secret)


@dataclass(frozen=True, eq=False)
class CryptoService:
    """
    Unified cryptographic service facade.

    Bundles the six operation objects with a generation policy. The module-level
    `encrypt`, `decrypt`, ... names are the operations of the default service.
    Instances compare and hash by identity.
    """

    policy: CryptoPolicy = DEFAULT_POLICY
    encrypt: EncryptOperation = field(default_factory=EncryptOperation, repr=False)
    decrypt: DecryptOperation = field(default_factory=DecryptOperation, repr=False)
    sign: SignOperation = field(default_factory=SignOperation, repr=False)
    verify: VerifyOperation = field(default_factory=VerifyOperation, repr=False)
    hash: HashOperation = field(default_factory=HashOperation, repr=False)
    hmac: HmacOperation = field(default_factory=HmacOperation, repr=False)

    @staticmethod
    def new_default(policy: Optional[CryptoPolicy] = None) -> "CryptoService":
        return CryptoService(policy or DEFAULT_POLICY)

    # ---- Generation façade ----

    def create_password(self) -> str:
        return passwords.create_password(policy=self.policy)

    def create_key_pair(self) -> KeyPair:
        return keys.create_key_pair(self.policy)

    async def create_key_pair_async(self) -> KeyPair:
        return await keys.create_key_pair_async(self.policy)

    # ---- Key loading façade ----

    @staticmethod
    def read_private_key(path: PathLike) -> PrivateKey:
        return keys.read_private_key(path)

    @staticmethod
    def read_public_key(path: PathLike) -> PublicKey:
        return keys.read_public_key(path)


_DEFAULT_SERVICE: Final[CryptoService] = CryptoService.new_default()

encrypt: Final[EncryptOperation] = _DEFAULT_SERVICE.encrypt
decrypt: Final[DecryptOperation] = _DEFAULT_SERVICE.decrypt
sign: Final[SignOperation] = _DEFAULT_SERVICE.sign
verify: Final[VerifyOperation] = _DEFAULT_SERVICE.verify
hash: Final[HashOperation] = _DEFAULT_SERVICE.hash
hmac: Final[HmacOperation] = _DEFAULT_SERVICE.hmac


def create_password() -> str:
    """32-character random password (default policy)."""
    return _DEFAULT_SERVICE.create_password()


def create_key_pair() -> KeyPair:
    """RSA-2048 key pair as PEM text (default policy)."""
    return _DEFAULT_SERVICE.create_key_pair()


read_private_key = keys.read_private_key
read_public_key = keys.read_public_key


__all__ = [
    "EncryptionAlgorithm",
    "SigningAlgorithm",
    "HashAlgorithm",
    "HmacAlgorithm",
    "EncryptOperation",
    "DecryptOperation",
    "SignOperation",
    "VerifyOperation",
    "HashOperation",
    "HmacOperation",
    "CryptoService",
    "encrypt",
    "decrypt",
    "sign",
    "verify",
    "hash",
    "hmac",
    "create_password",
    "create_key_pair",
    "read_private_key",
    "read_public_key",
]
