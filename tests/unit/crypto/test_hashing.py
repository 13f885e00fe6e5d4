from __future__ import annotations

import pytest

from crypto2 import hashing

TEXT = "the native web"


def test_reference_digests() -> None:
    assert hashing.hash_md5(TEXT) == "4e8ba2e64931c64b63f4dc8d90e1dc7c"
    assert hashing.hash_sha1(TEXT) == "cc762e69089ee2393b061ab26a005319bda94744"
    assert (
        hashing.hash_sha256(TEXT)
        == "55a1f59420da66b2c4c87b565660054cff7c2aad5ebe5f56e04ae0f2a20f00a9"
    )


def test_reference_hmacs() -> None:
    assert hashing.hmac_sha1(TEXT, "secret") == "c9a6cdb2d350820e76a14f4f9a6392990ce1982a"
    assert (
        hashing.hmac_sha256(TEXT, "secret")
        == "028e3043f9d848e346c8a93c4c29b091cb871065b6f5d1199f38e5a7360532f4"
    )


@pytest.mark.parametrize("text", ["", "a", "Привет", "x" * 10_000])
def test_output_lengths(text: str) -> None:
    assert len(hashing.hash_md5(text)) == 2 * hashing.MD5_OUTPUT_SIZE == 32
    assert len(hashing.hash_sha1(text)) == 2 * hashing.SHA1_OUTPUT_SIZE == 40
    assert len(hashing.hash_sha256(text)) == 2 * hashing.SHA256_OUTPUT_SIZE == 64
    assert len(hashing.hmac_sha1(text, "k")) == 40
    assert len(hashing.hmac_sha256(text, "k")) == 64


def test_known_empty_string_digests() -> None:
    assert hashing.hash_md5("") == "d41d8cd98f00b204e9800998ecf8427e"
    assert hashing.hash_sha256("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_all_digests_share_hashlib_path(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = []
    real_new = hashing.hashlib.new

    def recording_new(name: str, *args: object, **kwargs: object):  # type: ignore[no-untyped-def]
        seen.append(name)
        return real_new(name, *args, **kwargs)

    monkeypatch.setattr(hashing.hashlib, "new", recording_new)
    hashing.hash_md5(TEXT)
    hashing.hash_sha1(TEXT)
    assert hashing.hash_sha256(TEXT) == (
        "55a1f59420da66b2c4c87b565660054cff7c2aad5ebe5f56e04ae0f2a20f00a9"
    )
    assert seen == ["md5", "sha1", "sha256"]


def test_hmac_depends_on_secret() -> None:
    assert hashing.hmac_sha256(TEXT, "secret") != hashing.hmac_sha256(TEXT, "Secret")
    assert hashing.hmac_sha256(TEXT, "") == hashing.hmac_sha256(TEXT, "")


def test_non_text_input_raises() -> None:
    with pytest.raises(TypeError):
        hashing.hash_sha256(b"bytes")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        hashing.hmac_sha1("text", b"secret")  # type: ignore[arg-type]
