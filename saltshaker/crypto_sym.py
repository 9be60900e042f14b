# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Cifrado autenticado simétrico (secretbox) con clave compartida.
# --------------------------------------------------------------
"""Sobres PSK: XSalsa20-Poly1305 con la clave derivada de una passphrase."""

import logging

import nacl.utils
from nacl.exceptions import CryptoError
from nacl.secret import SecretBox

from saltshaker.codec import b64decode, b64encode, decode_to_text, encode_utf8
from saltshaker.crypto_kdf import derive_psk_key
from saltshaker.errors import AuthenticationError, EncodingError
from saltshaker.models import Envelope

logger = logging.getLogger(__name__)

NONCE_SIZE = SecretBox.NONCE_SIZE


def encrypt_psk(message: str, passphrase: str) -> Envelope:
    """Cifra un mensaje con la clave derivada de la passphrase.

    Args:
        message (str): Texto en claro.
        passphrase (str): Passphrase compartida por ambos extremos.

    Returns:
        Envelope: Ciphertext y nonce en Base64.

    """

    nonce = nacl.utils.random(NONCE_SIZE)
    box = SecretBox(derive_psk_key(passphrase))
    encrypted = box.encrypt(encode_utf8(message), nonce)
    return Envelope(message=b64encode(encrypted.ciphertext), nonce=b64encode(nonce))


def decrypt_psk(message: str, nonce: str, passphrase: str) -> str:
    """Descifra un sobre PSK.

    Args:
        message (str): Ciphertext en Base64.
        nonce (str): Nonce en Base64.
        passphrase (str): Passphrase compartida.

    Returns:
        str: Mensaje original.

    Raises:
        AuthenticationError: Si la passphrase, el nonce o el ciphertext no cuadran.

    """

    ciphertext = b64decode(message, "message")
    raw_nonce = b64decode(nonce, "nonce")
    if len(raw_nonce) != NONCE_SIZE:
        raise EncodingError(f"El nonce debe tener {NONCE_SIZE} bytes.")

    box = SecretBox(derive_psk_key(passphrase))
    try:
        plaintext = box.decrypt(ciphertext, raw_nonce)
    except CryptoError as exc:
        logger.debug("Secretbox no autenticado (%d bytes)", len(ciphertext))
        raise AuthenticationError("No se ha podido descifrar el mensaje PSK.") from exc
    return decode_to_text(plaintext)
