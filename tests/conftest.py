from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pytest

from crypto2.keys import KeyPair, PrivateKey, PublicKey, create_key_pair, load_private_key, load_public_key


@pytest.fixture(scope="session")
def key_pair() -> KeyPair:
    return create_key_pair()


@pytest.fixture(scope="session")
def key_files(key_pair: KeyPair, tmp_path_factory: pytest.TempPathFactory) -> Tuple[Path, Path]:
    directory = tmp_path_factory.mktemp("keys")
    private_path = directory / "privateKey.pem"
    public_path = directory / "publicKey.pem"
    private_path.write_text(key_pair.private_key, encoding="utf-8")
    public_path.write_text(key_pair.public_key, encoding="utf-8")
    return private_path, public_path


@pytest.fixture(scope="session")
def private_key(key_pair: KeyPair) -> PrivateKey:
    return load_private_key(key_pair.private_key)


@pytest.fixture(scope="session")
def public_key(key_pair: KeyPair) -> PublicKey:
    return load_public_key(key_pair.public_key)
