# --------------------------------------------------------------
# File: test_crypto_box.py
# Description: Pruebas del cifrado autenticado de clave pública (NaCl box).
# --------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from saltshaker.codec import b64decode, b64encode
from saltshaker.crypto_box import (
    NONCE_SIZE,
    decrypt,
    encrypt,
    to_encryption_private_key,
    to_encryption_public_key,
)
from saltshaker.errors import AuthenticationError, EncodingError, KeyConversionError
from saltshaker.models import Envelope

# Punto de orden pequeño (y = 0): libsodium se niega a convertirlo.
SMALL_ORDER_KEY = b64encode(b"\x00" * 32)


@pytest.mark.parametrize("message", ["attack at dawn", "cifrado ñ €", ""])
def test_box_roundtrip_ok(alice, bob, message):
    """Comprueba que el destinatario recupere el mensaje del remitente.

    Returns:
        None: Las aserciones evalúan la igualdad entre claro y descifrado.
    """
    envelope = encrypt(message, bob.public_key, alice.private_key)
    assert decrypt(envelope.message, envelope.nonce, alice.public_key, bob.private_key) == message


def test_sender_can_open_own_box(alice, bob):
    envelope = encrypt("nota", bob.public_key, alice.private_key)
    assert decrypt(envelope.message, envelope.nonce, bob.public_key, alice.private_key) == "nota"


def test_envelope_sizes(alice, bob):
    envelope = encrypt("hola", bob.public_key, alice.private_key)
    assert len(b64decode(envelope.nonce)) == NONCE_SIZE == 24
    assert len(b64decode(envelope.message)) == 4 + 16


def test_box_detects_tampering_ciphertext(alice, bob, flip_bit):
    """Cualquier bit alterado del ciphertext debe provocar AuthenticationError.

    Returns:
        None: Se recorre cada bit del ciphertext.
    """
    envelope = encrypt("hola", bob.public_key, alice.private_key)
    total_bits = len(b64decode(envelope.message)) * 8
    for bit in range(total_bits):
        with pytest.raises(AuthenticationError):
            decrypt(flip_bit(envelope.message, bit), envelope.nonce, alice.public_key, bob.private_key)


def test_box_detects_tampering_nonce(alice, bob, flip_bit):
    envelope = encrypt("hola", bob.public_key, alice.private_key)
    for bit in range(0, NONCE_SIZE * 8, 7):
        with pytest.raises(AuthenticationError):
            decrypt(envelope.message, flip_bit(envelope.nonce, bit), alice.public_key, bob.private_key)


def test_box_fails_with_wrong_keys(alice, bob, carol):
    envelope = encrypt("hola", bob.public_key, alice.private_key)
    with pytest.raises(AuthenticationError):
        decrypt(envelope.message, envelope.nonce, alice.public_key, carol.private_key)
    with pytest.raises(AuthenticationError):
        decrypt(envelope.message, envelope.nonce, carol.public_key, bob.private_key)


def test_truncated_ciphertext_fails_authentication(alice, bob):
    envelope = encrypt("hola", bob.public_key, alice.private_key)
    short = b64encode(b64decode(envelope.message)[:10])
    with pytest.raises(AuthenticationError):
        decrypt(short, envelope.nonce, alice.public_key, bob.private_key)


def test_box_nonce_uniqueness(alice, bob):
    """Dos cifrados idénticos producen nonces y ciphertexts distintos.

    Returns:
        None: Las aserciones verifican la unicidad dentro del muestreo.
    """
    nonces = set()
    ciphertexts = set()
    for _ in range(100):
        envelope = encrypt("x", bob.public_key, alice.private_key)
        assert envelope.nonce not in nonces
        assert envelope.message not in ciphertexts
        nonces.add(envelope.nonce)
        ciphertexts.add(envelope.message)


def test_conversion_is_deterministic(alice):
    assert bytes(to_encryption_public_key(alice.public_key)) == bytes(
        to_encryption_public_key(alice.public_key)
    )
    private = to_encryption_private_key(alice.private_key)
    assert bytes(private.public_key) == bytes(to_encryption_public_key(alice.public_key))


def test_small_order_public_key_is_not_convertible(alice):
    with pytest.raises(KeyConversionError):
        to_encryption_public_key(SMALL_ORDER_KEY)
    with pytest.raises(KeyConversionError):
        encrypt("hola", SMALL_ORDER_KEY, alice.private_key)


def test_decrypt_rejects_wrong_nonce_length(alice, bob):
    envelope = encrypt("hola", bob.public_key, alice.private_key)
    with pytest.raises(EncodingError):
        decrypt(envelope.message, b64encode(b"\x00" * 12), alice.public_key, bob.private_key)


def test_decrypt_rejects_malformed_base64(alice, bob):
    envelope = encrypt("hola", bob.public_key, alice.private_key)
    with pytest.raises(EncodingError):
        decrypt("***", envelope.nonce, alice.public_key, bob.private_key)


def test_envelope_json_has_exactly_two_fields(alice, bob):
    envelope = encrypt("hola", bob.public_key, alice.private_key)
    restored = Envelope.model_validate_json(envelope.model_dump_json())
    assert restored == envelope
    assert set(envelope.model_dump()) == {"message", "nonce"}
    with pytest.raises(ValidationError):
        Envelope(message=envelope.message, nonce=envelope.nonce, sender="alice")


def test_box_is_safe_across_threads(alice, bob):
    def roundtrip(index: int) -> str:
        text = f"mensaje {index}"
        envelope = encrypt(text, bob.public_key, alice.private_key)
        return decrypt(envelope.message, envelope.nonce, alice.public_key, bob.private_key)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(roundtrip, range(32)))
    assert results == [f"mensaje {i}" for i in range(32)]
