from __future__ import annotations

import hashlib

import pytest

from crypto2 import symmetric
from crypto2.exceptions import (
    BAD_INPUT_STRING,
    BadInputStringError,
    DecryptionError,
    EncryptionError,
    InvalidEncodingError,
)

REFERENCE_CIPHERTEXT = "6c9ae06e9cd536bf38d0f551f8150065"


def test_encrypt_matches_reference_ciphertext() -> None:
    assert symmetric.encrypt("the native web", "secret") == REFERENCE_CIPHERTEXT


def test_encrypt_is_deterministic() -> None:
    first = symmetric.encrypt("deterministic", "pass")
    second = symmetric.encrypt("deterministic", "pass")
    assert first == second
    assert symmetric.encrypt("deterministic", "other") != first


def test_decrypt_reference_ciphertext() -> None:
    assert symmetric.decrypt(REFERENCE_CIPHERTEXT, "secret") == "the native web"


@pytest.mark.parametrize(
    "plaintext",
    ["", "a", "x" * 15, "y" * 16, "z" * 17, "Привет, мир! 🚀", "line\nbreak\ttab"],
)
def test_roundtrip_and_block_alignment(plaintext: str) -> None:
    ct = symmetric.encrypt(plaintext, "secret")
    assert len(ct) % 32 == 0
    assert ct == ct.lower()
    # PKCS#7 always adds at least one byte of padding
    assert len(ct) // 2 > len(plaintext.encode("utf-8"))
    assert symmetric.decrypt(ct, "secret") == plaintext


def test_evp_bytes_to_key_md5_chain() -> None:
    key, iv = symmetric.evp_bytes_to_key(b"secret")
    d1 = hashlib.md5(b"secret").digest()
    d2 = hashlib.md5(d1 + b"secret").digest()
    d3 = hashlib.md5(d2 + b"secret").digest()
    assert key == d1 + d2
    assert iv == d3
    assert len(key) == symmetric.KEY_LEN and len(iv) == symmetric.IV_LEN


def test_evp_bytes_to_key_with_salt_and_count() -> None:
    salt = b"\x01" * 8
    key, iv = symmetric.evp_bytes_to_key(b"pw", salt=salt, count=2)
    d1 = hashlib.md5(hashlib.md5(b"pw" + salt).digest()).digest()
    assert key[:16] == d1
    assert (key, iv) != symmetric.evp_bytes_to_key(b"pw")
    with pytest.raises(ValueError):
        symmetric.evp_bytes_to_key(b"pw", salt=b"short")
    with pytest.raises(ValueError):
        symmetric.evp_bytes_to_key(b"pw", count=0)


def test_decrypt_not_hex_reports_bad_input_string() -> None:
    with pytest.raises(BadInputStringError) as excinfo:
        symmetric.decrypt("this-is-not-encrypted", "secret")
    assert str(excinfo.value) == BAD_INPUT_STRING == "Bad input string"
    assert isinstance(excinfo.value, InvalidEncodingError)
    assert isinstance(excinfo.value, DecryptionError)


@pytest.mark.parametrize("bad", ["", "00", "00" * 15, "00" * 17])
def test_decrypt_wrong_length_reports_bad_input_string(bad: str) -> None:
    with pytest.raises(BadInputStringError, match="^Bad input string$"):
        symmetric.decrypt(bad, "secret")


def test_decrypt_wrong_padding_reports_bad_input_string() -> None:
    ct = bytearray.fromhex(symmetric.encrypt("y" * 16, "secret"))
    assert len(ct) == 32
    # CBC: flipping C1[15] flips P2[15], turning padding byte 0x10 into 0xef
    ct[15] ^= 0xFF
    with pytest.raises(BadInputStringError):
        symmetric.decrypt(bytes(ct).hex(), "secret")


def test_decrypt_with_wrong_passphrase_never_returns_plaintext() -> None:
    try:
        result = symmetric.decrypt(REFERENCE_CIPHERTEXT, "not-the-secret")
    except BadInputStringError:
        return
    assert result != "the native web"


def test_non_str_arguments_raise_type_error() -> None:
    with pytest.raises(TypeError):
        symmetric.encrypt(b"bytes", "secret")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        symmetric.encrypt("text", None)  # type: ignore[arg-type]


def test_encrypt_internal_failure_is_wrapped(monkeypatch: pytest.MonkeyPatch) -> None:
    class Boom(Exception):
        pass

    def exploding_padder(*args: object, **kwargs: object) -> None:
        raise Boom()

    monkeypatch.setattr("crypto2.symmetric.padding.PKCS7", exploding_padder)
    with pytest.raises(EncryptionError):
        symmetric.encrypt("data", "secret")
