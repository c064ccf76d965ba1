"""Configuración de pytest para tests de formbuilder."""

import pytest

from formbuilder.config import reset_settings
from formbuilder.database import Database, reset_database
from formbuilder.fields import build_default_registry
from formbuilder.models import FieldInstance


@pytest.fixture
def registry():
    """Registro con los tipos incluidos (independiente del global)."""
    return build_default_registry()


@pytest.fixture
def temp_db(tmp_path, registry):
    """Base de datos temporal."""
    return Database(tmp_path / "forms.db", registry=registry)


@pytest.fixture
def make_instance(registry):
    """Crea un campo con configuración por defecto o modificada."""
    def _make(tag: str, instance_id: str = "f1", **changes) -> FieldInstance:
        descriptor = registry.resolve(tag)
        configuration = descriptor.default_configuration.model_copy(update=changes)
        return FieldInstance(id=instance_id, tag=tag, configuration=configuration)
    return _make


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Entorno aislado para comandos CLI (usuario y base de datos propios)."""
    monkeypatch.setenv("FORMBUILDER_DB", str(tmp_path / "cli.db"))
    monkeypatch.setenv("FORMBUILDER_USER", "ana")
    monkeypatch.setenv("FORMBUILDER_SHARE_URL", "https://forms.test/submit/")
    reset_settings()
    reset_database()
    yield tmp_path
    reset_settings()
    reset_database()
