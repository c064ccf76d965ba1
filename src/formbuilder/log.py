"""Configuración de logging para FormBuilder."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configura el logger raíz del paquete una única vez.

    Los módulos usan logging.getLogger(__name__), por lo que heredan
    el handler y el nivel definidos aquí.
    """
    global _configured
    logger = logging.getLogger("formbuilder")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True

    return logger
