# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos intercambiados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan las estructuras del sobre."""

from pydantic import BaseModel, ConfigDict, Field


class KeyPair(BaseModel):
    """Par de claves Ed25519 en formato portable.

    Attributes:
        public_key (str): Clave pública de 32 bytes en Base64.
        private_key (str): Clave privada de 64 bytes (semilla + pública) en Base64.

    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    public_key: str = Field(alias="publickey")
    private_key: str = Field(alias="privatekey")


class Envelope(BaseModel):
    """Mensaje cifrado junto con el nonce necesario para abrirlo.

    Attributes:
        message (str): Ciphertext autenticado en Base64.
        nonce (str): Nonce de 24 bytes en Base64.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    message: str
    nonce: str
