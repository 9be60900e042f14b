# --------------------------------------------------------------
# File: crypto_box.py
# Description: Cifrado autenticado de clave pública con NaCl box.
# --------------------------------------------------------------
"""Cifrado y descifrado entre pares de claves de firma Ed25519.

Las claves Ed25519 se convierten a Curve25519 en cada llamada; las claves
convertidas nunca se guardan.
"""

import logging

import nacl.utils
from nacl.exceptions import CryptoError
from nacl.public import Box, PrivateKey, PublicKey

from saltshaker.codec import b64decode, b64encode, decode_to_text, encode_utf8
from saltshaker.crypto_keys import load_signing_key, load_verify_key
from saltshaker.errors import AuthenticationError, EncodingError, KeyConversionError
from saltshaker.models import Envelope

logger = logging.getLogger(__name__)

NONCE_SIZE = Box.NONCE_SIZE


def to_encryption_public_key(public_key: str) -> PublicKey:
    """Convierte una clave pública Ed25519 (Base64) en su equivalente Curve25519.

    Raises:
        KeyConversionError: Si el punto no es apto para la conversión.

    """

    verify_key = load_verify_key(public_key)
    try:
        return verify_key.to_curve25519_public_key()
    except CryptoError as exc:
        logger.warning("Clave pública Ed25519 no convertible a Curve25519")
        raise KeyConversionError("La clave pública no puede convertirse a Curve25519.") from exc


def to_encryption_private_key(private_key: str) -> PrivateKey:
    """Convierte una clave privada Ed25519 (Base64) en su equivalente Curve25519."""

    signing_key = load_signing_key(private_key)
    try:
        return signing_key.to_curve25519_private_key()
    except CryptoError as exc:
        logger.warning("Clave privada Ed25519 no convertible a Curve25519")
        raise KeyConversionError("La clave privada no puede convertirse a Curve25519.") from exc


def encrypt(message: str, public_key: str, private_key: str) -> Envelope:
    """Cifra un mensaje para el destinatario autenticando al remitente.

    Args:
        message (str): Texto en claro.
        public_key (str): Clave pública Ed25519 del destinatario en Base64.
        private_key (str): Clave privada Ed25519 del remitente en Base64.

    Returns:
        Envelope: Ciphertext y nonce, ambos en Base64.

    """

    nonce = nacl.utils.random(NONCE_SIZE)
    box = Box(to_encryption_private_key(private_key), to_encryption_public_key(public_key))
    encrypted = box.encrypt(encode_utf8(message), nonce)
    return Envelope(message=b64encode(encrypted.ciphertext), nonce=b64encode(nonce))


def decrypt(message: str, nonce: str, public_key: str, private_key: str) -> str:
    """Abre un box y devuelve el texto original.

    Args:
        message (str): Ciphertext en Base64.
        nonce (str): Nonce en Base64 producido por el mismo cifrado.
        public_key (str): Clave pública Ed25519 del remitente en Base64.
        private_key (str): Clave privada Ed25519 del destinatario en Base64.

    Returns:
        str: Mensaje descifrado.

    Raises:
        AuthenticationError: Si el box no se abre (clave, nonce o datos alterados).
        EncodingError: Si algún campo no es Base64 o el nonce no mide 24 bytes.

    """

    ciphertext = b64decode(message, "message")
    raw_nonce = b64decode(nonce, "nonce")
    if len(raw_nonce) != NONCE_SIZE:
        raise EncodingError(f"El nonce debe tener {NONCE_SIZE} bytes.")

    box = Box(to_encryption_private_key(private_key), to_encryption_public_key(public_key))
    try:
        plaintext = box.decrypt(ciphertext, raw_nonce)
    except CryptoError as exc:
        logger.debug("Box no autenticado (%d bytes)", len(ciphertext))
        raise AuthenticationError("No se ha podido abrir el mensaje cifrado.") from exc
    return decode_to_text(plaintext)
