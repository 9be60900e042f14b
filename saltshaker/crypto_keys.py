# --------------------------------------------------------------
# File: crypto_keys.py
# Description: Generación y reconstrucción de pares de claves Ed25519.
# --------------------------------------------------------------
"""Gestión de claves de firma y validación de claves en la frontera."""

import hashlib
import logging
from typing import Optional

from nacl.bindings import (
    crypto_sign_PUBLICKEYBYTES,
    crypto_sign_SECRETKEYBYTES,
    crypto_sign_SEEDBYTES,
)
from nacl.signing import SigningKey, VerifyKey

from saltshaker.codec import b64decode, b64encode
from saltshaker.errors import InvalidKeyError
from saltshaker.models import KeyPair

logger = logging.getLogger(__name__)

PUBLIC_KEY_SIZE = crypto_sign_PUBLICKEYBYTES
PRIVATE_KEY_SIZE = crypto_sign_SECRETKEYBYTES
SEED_SIZE = crypto_sign_SEEDBYTES


def _private_key_bytes(signing_key: SigningKey) -> bytes:
    """Serializa la clave privada como semilla seguida de la clave pública."""

    return bytes(signing_key) + bytes(signing_key.verify_key)


def load_signing_key(private_key: str) -> SigningKey:
    """Reconstruye la clave de firma a partir de su forma Base64.

    Args:
        private_key (str): Clave privada de 64 bytes codificada en Base64.

    Returns:
        SigningKey: Clave de firma equivalente.

    Raises:
        InvalidKeyError: Si la longitud no es la esperada o la mitad pública
            no corresponde a la semilla.

    """

    raw = b64decode(private_key, "private key")
    if len(raw) != PRIVATE_KEY_SIZE:
        raise InvalidKeyError(
            f"La clave privada debe tener {PRIVATE_KEY_SIZE} bytes (recibidos {len(raw)})."
        )
    signing_key = SigningKey(raw[:SEED_SIZE])
    if bytes(signing_key.verify_key) != raw[SEED_SIZE:]:
        raise InvalidKeyError("La clave pública embebida no corresponde a la semilla.")
    return signing_key


def load_verify_key(public_key: str) -> VerifyKey:
    """Carga una clave pública Ed25519 validando su longitud."""

    raw = b64decode(public_key, "public key")
    if len(raw) != PUBLIC_KEY_SIZE:
        raise InvalidKeyError(
            f"La clave pública debe tener {PUBLIC_KEY_SIZE} bytes (recibidos {len(raw)})."
        )
    return VerifyKey(raw)


def create(private_key: Optional[str] = None) -> KeyPair:
    """Crea un par de claves, opcionalmente a partir de una clave privada.

    Args:
        private_key (Optional[str]): Clave privada Base64; si se omite (o está
            vacía) se genera un par nuevo con el RNG seguro.

    Returns:
        KeyPair: Claves pública y privada codificadas en Base64.

    """

    if private_key:
        signing_key = load_signing_key(private_key)
    else:
        signing_key = SigningKey.generate()
        logger.debug("Generado nuevo par de claves Ed25519")

    return KeyPair(
        public_key=b64encode(bytes(signing_key.verify_key)),
        private_key=b64encode(_private_key_bytes(signing_key)),
    )


def fingerprint(public_key: str) -> str:
    """Calcula la huella SHA-256 abreviada de una clave pública.

    Returns:
        str: Primeros 8 bytes del resumen en pares hexadecimales separados por `:`.

    """

    raw = bytes(load_verify_key(public_key))
    digest = hashlib.sha256(raw).hexdigest()
    return ":".join(digest[i:i + 2] for i in range(0, 16, 2))
