# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Firma y verificación Ed25519 de mensajes de texto.
# --------------------------------------------------------------
"""Mensajes firmados (firma adjunta o separada) sobre claves Base64."""

import logging
from typing import Optional

from nacl.bindings import crypto_sign_BYTES
from nacl.exceptions import BadSignatureError

from saltshaker.codec import b64decode, b64encode, decode_to_text, encode_utf8
from saltshaker.crypto_keys import load_signing_key, load_verify_key

logger = logging.getLogger(__name__)

SIGNATURE_SIZE = crypto_sign_BYTES


def sign(message: str, private_key: str) -> str:
    """Firma un mensaje y devuelve firma y mensaje concatenados.

    Args:
        message (str): Texto a firmar.
        private_key (str): Clave privada Ed25519 en Base64.

    Returns:
        str: Base64 de `firma (64 bytes) || mensaje`.

    """

    signing_key = load_signing_key(private_key)
    signed = signing_key.sign(encode_utf8(message))
    return b64encode(bytes(signed))


def verify(signed_message: str, public_key: str) -> Optional[str]:
    """Verifica un mensaje firmado y recupera el texto original.

    Args:
        signed_message (str): Mensaje firmado en Base64.
        public_key (str): Clave pública Ed25519 en Base64.

    Returns:
        Optional[str]: Texto original, o None si la firma no es válida.

    """

    verify_key = load_verify_key(public_key)
    raw = b64decode(signed_message, "signed message")
    try:
        payload = verify_key.verify(raw)
    except BadSignatureError:
        logger.debug("Firma no verificada (%d bytes)", len(raw))
        return None
    return decode_to_text(payload)


def sign_detached(message: str, private_key: str) -> str:
    """Devuelve sólo la firma Ed25519 (64 bytes) en Base64."""

    signing_key = load_signing_key(private_key)
    return b64encode(signing_key.sign(encode_utf8(message)).signature)


def verify_detached(message: str, signature: str, public_key: str) -> bool:
    """Comprueba una firma separada; False si no corresponde al mensaje."""

    verify_key = load_verify_key(public_key)
    raw_signature = b64decode(signature, "signature")
    if len(raw_signature) != SIGNATURE_SIZE:
        return False
    try:
        verify_key.verify(encode_utf8(message), raw_signature)
    except BadSignatureError:
        logger.debug("Firma separada no verificada")
        return False
    return True
