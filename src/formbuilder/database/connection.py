"""
Módulo de conexión a base de datos SQLite.

Proporciona la clase base con manejo de conexión y esquema.
"""

import json
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, TypeVar


# ============================================================================
# Helpers para JSON
# ============================================================================

T = TypeVar("T")


def _json_loads(value: Optional[str], default: T = None) -> T | Any:
    """
    Deserializa JSON de forma segura.

    Args:
        value: String JSON o None
        default: Valor por defecto si value es None o vacío

    Returns:
        Objeto deserializado o default
    """
    if not value:
        return default
    return json.loads(value)


def _json_dict(value: Optional[str]) -> dict:
    """Deserializa JSON a dict, retorna dict vacío si es None."""
    return _json_loads(value, {})


# ============================================================================
# Esquema de la Base de Datos
# ============================================================================

SCHEMA_VERSION = 1

SCHEMA_SQL = """
-- Tabla de formularios
CREATE TABLE IF NOT EXISTS forms (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    description TEXT DEFAULT '',
    published INTEGER NOT NULL DEFAULT 0,
    content TEXT NOT NULL DEFAULT '[]',  -- JSON definición
    share_url TEXT NOT NULL UNIQUE,
    visits INTEGER NOT NULL DEFAULT 0,
    submissions INTEGER NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL,
    UNIQUE (user_id, name)
);

-- Tabla de respuestas
CREATE TABLE IF NOT EXISTS form_submissions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    form_id TEXT NOT NULL,
    content TEXT NOT NULL,  -- JSON {field_id: valor}
    created_at TEXT NOT NULL,
    FOREIGN KEY (form_id) REFERENCES forms(id) ON DELETE CASCADE
);

-- Índices para búsquedas rápidas
CREATE INDEX IF NOT EXISTS idx_forms_user ON forms(user_id);
CREATE INDEX IF NOT EXISTS idx_submissions_form ON form_submissions(form_id);

-- Tabla de metadatos
CREATE TABLE IF NOT EXISTS metadata (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


# ============================================================================
# Clase DatabaseConnection
# ============================================================================

class DatabaseConnection:
    """Gestor de conexión a base de datos SQLite."""

    def __init__(self, db_path: Optional[Path] = None):
        """
        Inicializa la conexión a la base de datos.

        Args:
            db_path: Ruta al archivo SQLite. Default: ~/.formbuilder/formbuilder.db
        """
        if db_path is None:
            db_path = Path.home() / ".formbuilder" / "formbuilder.db"

        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self._init_database()

    def _init_database(self) -> None:
        """Inicializa el esquema de la base de datos."""
        with self.connection() as conn:
            conn.executescript(SCHEMA_SQL)

            # Verificar/establecer versión del esquema
            cursor = conn.execute(
                "SELECT value FROM metadata WHERE key = 'schema_version'"
            )
            row = cursor.fetchone()

            if row is None:
                conn.execute(
                    "INSERT INTO metadata (key, value) VALUES (?, ?)",
                    ("schema_version", str(SCHEMA_VERSION))
                )

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Context manager para conexiones a la base de datos."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
