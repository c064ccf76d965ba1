"""
Utilidades base para modelos.

Generación de IDs, tokens y timestamps compartida por el resto del paquete.
"""

import uuid
from datetime import datetime


def generate_id() -> str:
    """Genera un ID corto único (8 caracteres)."""
    return str(uuid.uuid4())[:8]


def generate_token() -> str:
    """Genera un token largo para enlaces públicos."""
    return str(uuid.uuid4())


def generate_timestamp() -> str:
    """Genera timestamp ISO actual."""
    return datetime.now().isoformat()
