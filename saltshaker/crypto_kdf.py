# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación heredada de claves PSK a partir de una passphrase.
# --------------------------------------------------------------
"""Derivación MD5 + ensanchado a 16 bits usada por los sobres PSK existentes.

MD5 no es una KDF; esta ruta se conserva únicamente para interoperar con
mensajes ya emitidos. Cualquier sustituto (Argon2id, scrypt...) debe
reemplazar `derive_psk_key` sin tocar `crypto_sym`.
"""

from cryptography.hazmat.primitives import hashes
from nacl.secret import SecretBox

from saltshaker.codec import encode_legacy16, encode_utf8

PSK_KEY_SIZE = SecretBox.KEY_SIZE


def legacy_digest(data: bytes) -> str:
    """Devuelve el resumen MD5 de `data` en hexadecimal en minúsculas."""

    digest = hashes.Hash(hashes.MD5())
    digest.update(data)
    return digest.finalize().hex()


def derive_psk_key(passphrase: str) -> bytes:
    """Deriva la clave de 32 bytes del secretbox a partir de una passphrase.

    Args:
        passphrase (str): Passphrase compartida, de cualquier longitud.

    Returns:
        bytes: Clave simétrica lista para `SecretBox`.

    """

    return encode_legacy16(legacy_digest(encode_utf8(passphrase)))
