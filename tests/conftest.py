# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas: pares de claves y configuración aislada.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from saltshaker import config
from saltshaker.codec import b64decode, b64encode
from saltshaker.crypto_keys import create
from saltshaker.models import KeyPair


@pytest.fixture(autouse=True)
def _legacy_decoder(monkeypatch) -> Iterator[None]:
    """Fija la política de decodificación por defecto en cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar atributos del módulo.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setattr(config, "TEXT_DECODER", "legacy")
    yield


@pytest.fixture
def alice() -> KeyPair:
    return create()


@pytest.fixture
def bob() -> KeyPair:
    return create()


@pytest.fixture
def carol() -> KeyPair:
    return create()


def _flip_bit(value: str, bit: int) -> str:
    """Invierte un bit de un campo Base64 y lo vuelve a codificar."""

    raw = bytearray(b64decode(value))
    raw[bit // 8] ^= 1 << (bit % 8)
    return b64encode(bytes(raw))


@pytest.fixture
def flip_bit():
    return _flip_bit
