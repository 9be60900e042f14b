# --------------------------------------------------------------
# File: __init__.py
# Description: API pública del paquete saltshaker.
# --------------------------------------------------------------
"""Sobres criptográficos mínimos sobre NaCl: firma, box y secretbox PSK."""

from saltshaker.crypto_box import decrypt, encrypt
from saltshaker.crypto_keys import create, fingerprint
from saltshaker.crypto_sign import sign, sign_detached, verify, verify_detached
from saltshaker.crypto_sym import decrypt_psk, encrypt_psk
from saltshaker.errors import (
    AuthenticationError,
    EncodingError,
    InvalidKeyError,
    KeyConversionError,
    SaltShakerError,
)
from saltshaker.models import Envelope, KeyPair

__all__ = [
    "AuthenticationError",
    "EncodingError",
    "Envelope",
    "InvalidKeyError",
    "KeyConversionError",
    "KeyPair",
    "SaltShakerError",
    "create",
    "decrypt",
    "decrypt_psk",
    "encrypt",
    "encrypt_psk",
    "fingerprint",
    "sign",
    "sign_detached",
    "verify",
    "verify_detached",
]
