# -*- coding: utf-8 -*-
from __future__ import annotations

import json
from pathlib import Path

import pytest

from crypto2.config import CONFIG_ENV_VAR, DEFAULT_POLICY, CryptoPolicy, load_policy


def test_defaults() -> None:
    assert DEFAULT_POLICY == CryptoPolicy()
    assert DEFAULT_POLICY.rsa_key_size == 2048
    assert DEFAULT_POLICY.rsa_public_exponent == 65537
    assert DEFAULT_POLICY.password_length == 32


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rsa_key_size": 512},
        {"rsa_key_size": 2000},
        {"rsa_public_exponent": 17},
        {"password_length": 4},
        {"password_length": 2048},
    ],
)
def test_invalid_values_raise(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        CryptoPolicy(**kwargs)


def test_policy_is_frozen() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_POLICY.rsa_key_size = 4096  # type: ignore[misc]


def test_from_mapping_ignores_unknown_keys() -> None:
    policy = CryptoPolicy.from_mapping({"rsa_key_size": 3072, "colour": "blue"})
    assert policy.rsa_key_size == 3072
    assert policy.password_length == 32


def test_load_policy_without_file_returns_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert load_policy() is DEFAULT_POLICY


def test_load_policy_from_path_and_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = tmp_path / "crypto2.json"
    cfg.write_text(json.dumps({"password_length": 48}), encoding="utf-8")
    assert load_policy(cfg).password_length == 48

    monkeypatch.setenv(CONFIG_ENV_VAR, str(cfg))
    assert load_policy().password_length == 48


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '{"rsa_key_size": 100}'])
def test_load_policy_rejects_bad_files(tmp_path: Path, content: str) -> None:
    cfg = tmp_path / "bad.json"
    cfg.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_policy(cfg)


def test_load_policy_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_policy(tmp_path / "missing.json")
