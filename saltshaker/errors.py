# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones expuesta por el paquete saltshaker.
# --------------------------------------------------------------
"""Excepciones tipadas que traducen los fallos de las primitivas NaCl."""

__all__ = [
    "SaltShakerError",
    "InvalidKeyError",
    "KeyConversionError",
    "AuthenticationError",
    "EncodingError",
]


class SaltShakerError(Exception):
    """Base común de todos los errores del paquete."""


class InvalidKeyError(SaltShakerError):
    """Clave mal formada o con longitud distinta de la esperada."""


class KeyConversionError(SaltShakerError):
    """La clave Ed25519 no admite conversión a Curve25519."""


class AuthenticationError(SaltShakerError):
    """El box o secretbox no pudo abrirse (clave, nonce o datos alterados)."""


class EncodingError(SaltShakerError):
    """Entrada Base64 o texto que no puede convertirse a bytes."""
