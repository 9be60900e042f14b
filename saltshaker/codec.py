# --------------------------------------------------------------
# File: codec.py
# Description: Conversiones bytes/texto y Base64 en la frontera del sobre.
# --------------------------------------------------------------
"""Codificadores usados por todas las operaciones de saltshaker.

Incluye el decodificador tolerante heredado (formas UTF-8 de 1, 2 y 3 bytes),
el ensanchado a 16 bits que alimenta la derivación de claves PSK y el Base64
estándar de todos los campos que cruzan la frontera.
"""

import base64
import binascii
from typing import List, Optional

from saltshaker import config
from saltshaker.errors import EncodingError

__all__ = [
    "b64decode",
    "b64encode",
    "decode_to_text",
    "encode_legacy16",
    "encode_utf8",
]

LEGACY = "legacy"
STRICT = "strict"

# Longitud de secuencia según el nibble alto del byte inicial; 0 = se ignora.
_SEQUENCE_WIDTH = (1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 2, 2, 3, 0)


def b64encode(data: bytes) -> str:
    """Codifica bytes en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def b64decode(value: str, field: str = "value") -> bytes:
    """Decodifica Base64 estándar de forma estricta.

    Args:
        value (str): Cadena Base64 recibida.
        field (str): Nombre del campo, usado en el mensaje de error.

    Returns:
        bytes: Datos binarios decodificados.

    Raises:
        EncodingError: Si la cadena no es Base64 válido.

    """

    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise EncodingError(f"{field} no es Base64 válido") from exc


def encode_utf8(text: str) -> bytes:
    """Devuelve los bytes UTF-8 de un mensaje."""

    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError("el texto contiene caracteres no codificables en UTF-8") from exc


def encode_legacy16(text: str) -> bytes:
    """Ensancha cada unidad UTF-16 y la almacena en un byte (se conserva el byte bajo).

    Reproduce la copia elemento a elemento de un array de 16 bits a uno de
    8 bits: la salida tiene una posición por unidad de código UTF-16. Sólo la
    usa la derivación de claves PSK y debe mantenerse bit a bit.
    """

    units = text.encode("utf-16-le", "surrogatepass")
    return units[::2]


def _decode_legacy(data: bytes) -> str:
    units: List[int] = []
    index = 0
    length = len(data)
    while index < length:
        lead = data[index]
        width = _SEQUENCE_WIDTH[lead >> 4]
        if width == 0:
            index += 1
            continue
        if index + width > length:
            # secuencia final truncada: se descarta
            break
        if width == 1:
            unit = lead
        elif width == 2:
            unit = ((lead & 0x1F) << 6) | (data[index + 1] & 0x3F)
        else:
            unit = (
                ((lead & 0x0F) << 12)
                | ((data[index + 1] & 0x3F) << 6)
                | (data[index + 2] & 0x3F)
            )
        units.append(unit)
        index += width

    raw = b"".join(unit.to_bytes(2, "little") for unit in units)
    return raw.decode("utf-16-le", "surrogatepass")


def decode_to_text(data: bytes, policy: Optional[str] = None) -> str:
    """Convierte la carga útil verificada o descifrada en texto.

    Args:
        data (bytes): Bytes a interpretar.
        policy (Optional[str]): `"legacy"` o `"strict"`; por defecto
            `config.TEXT_DECODER`.

    Returns:
        str: Texto reconstruido.

    Raises:
        EncodingError: Con la política estricta, si los bytes no son UTF-8.
        ValueError: Si la política no es conocida.

    """

    policy = policy or config.TEXT_DECODER
    if policy == LEGACY:
        return _decode_legacy(bytes(data))
    if policy == STRICT:
        try:
            return bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError("la carga útil no es UTF-8 válido") from exc
    raise ValueError(f"Política de decodificación desconocida: {policy!r}")
