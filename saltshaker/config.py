# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de entorno y arranque del sistema de logging.
# --------------------------------------------------------------
"""Configuración leída de variables de entorno (y `.env` si existe)."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Política del decodificador de texto: "legacy" (tolerante) o "strict" (UTF-8).
TEXT_DECODER = os.getenv("SALTSHAKER_TEXT_DECODER", "legacy").strip().lower()
LOG_LEVEL = os.getenv("SALTSHAKER_LOG_LEVEL", "WARNING").strip().upper()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Inicializa el logging raíz y devuelve el logger del paquete.

    Args:
        level (Optional[str]): Nivel a aplicar; por defecto `LOG_LEVEL`.

    Returns:
        logging.Logger: Logger `saltshaker` con el nivel configurado.

    """

    resolved = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logger = logging.getLogger("saltshaker")
    logger.setLevel(resolved)
    return logger
