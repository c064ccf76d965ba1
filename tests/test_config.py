"""
Tests para la configuración y el logging.
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from formbuilder.config import Settings, get_settings, reset_settings
from formbuilder.log import configure_logging


class TestSettings:
    """Tests para Settings."""

    def test_from_env(self, cli_env):
        """Lee las variables FORMBUILDER_*."""
        settings = get_settings()
        assert settings.db_path == cli_env / "cli.db"
        assert settings.user_id == "ana"
        assert settings.share_base_url == "https://forms.test/submit/"

    def test_singleton(self, cli_env):
        """get_settings se cachea hasta reset_settings."""
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first

    def test_log_level_normalized(self):
        """El nivel se normaliza a mayúsculas."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_log_level_invalid(self):
        """Un nivel desconocido se rechaza."""
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_share_link_roundtrip(self):
        """El token se recupera desde el enlace completo."""
        settings = Settings(db_path=Path("x.db"), share_base_url="https://f.test/s/")
        link = settings.share_link("abc-123")
        assert link == "https://f.test/s/abc-123"
        assert settings.share_token(link) == "abc-123"
        assert settings.share_token("abc-123") == "abc-123"

    def test_share_token_other_prefix(self):
        """Con otro prefijo se toma el último segmento."""
        settings = Settings(db_path=Path("x.db"))
        assert settings.share_token("http://otro/submit/tok/") == "tok"


class TestLogging:
    """Tests para configure_logging."""

    def test_configure_logging(self):
        """Configura el logger del paquete con un único handler."""
        logger = configure_logging("INFO")
        configure_logging("DEBUG")

        assert logger.name == "formbuilder"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        configure_logging("WARNING")
