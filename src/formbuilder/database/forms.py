"""
Operaciones de base de datos para formularios.
"""

import logging
import sqlite3
from typing import Optional

from formbuilder.database.connection import DatabaseConnection
from formbuilder.errors import FormNameTaken
from formbuilder.models.base import generate_id, generate_timestamp, generate_token

logger = logging.getLogger(__name__)


class FormRepository:
    """Repositorio para operaciones CRUD de formularios."""

    def __init__(self, db: DatabaseConnection):
        """
        Inicializa el repositorio.

        Args:
            db: Instancia de DatabaseConnection
        """
        self._db = db

    def create(self, user_id: str, name: str, description: str = "") -> dict:
        """Crea un formulario vacío (sin publicar)."""
        form_id = generate_id()
        share_url = generate_token()
        now = generate_timestamp()

        try:
            with self._db.connection() as conn:
                conn.execute(
                    """
                    INSERT INTO forms (id, user_id, name, description, published,
                                       content, share_url, visits, submissions, created_at)
                    VALUES (?, ?, ?, ?, 0, '[]', ?, 0, 0, ?)
                    """,
                    (form_id, user_id, name, description, share_url, now)
                )
        except sqlite3.IntegrityError as e:
            raise FormNameTaken(name) from e

        logger.info("Formulario %s creado por %s", form_id, user_id)
        return {
            "id": form_id,
            "user_id": user_id,
            "name": name,
            "description": description,
            "published": False,
            "content": "[]",
            "share_url": share_url,
            "visits": 0,
            "submissions": 0,
            "created_at": now,
        }

    def get(self, form_id: str, user_id: Optional[str] = None) -> Optional[dict]:
        """
        Obtiene un formulario por ID (parcial o completo).

        Si se indica user_id, solo se buscan formularios de ese usuario.
        """
        query = "SELECT * FROM forms WHERE (id = ? OR id LIKE ?)"
        params: list = [form_id, f"{form_id}%"]
        if user_id is not None:
            query += " AND user_id = ?"
            params.append(user_id)

        with self._db.connection() as conn:
            row = conn.execute(query, params).fetchone()
            if row is None:
                return None
            return self._row_to_dict(row)

    def get_by_share_url(self, share_url: str) -> Optional[dict]:
        """Obtiene un formulario por su enlace público."""
        with self._db.connection() as conn:
            row = conn.execute(
                "SELECT * FROM forms WHERE share_url = ?", (share_url,)
            ).fetchone()
            if row is None:
                return None
            return self._row_to_dict(row)

    def _row_to_dict(self, row) -> dict:
        """Convierte una fila de la BD a diccionario de formulario."""
        return {
            "id": row["id"],
            "user_id": row["user_id"],
            "name": row["name"],
            "description": row["description"] or "",
            "published": bool(row["published"]),
            "content": row["content"],
            "share_url": row["share_url"],
            "visits": row["visits"],
            "submissions": row["submissions"],
            "created_at": row["created_at"],
        }

    def list_for_user(self, user_id: str) -> list[dict]:
        """Lista los formularios de un usuario, más recientes primero."""
        with self._db.connection() as conn:
            cursor = conn.execute(
                "SELECT * FROM forms WHERE user_id = ? ORDER BY created_at DESC",
                (user_id,)
            )
            return [self._row_to_dict(row) for row in cursor]

    def update_content(self, form_id: str, content: str) -> bool:
        """Reemplaza la definición serializada."""
        with self._db.connection() as conn:
            cursor = conn.execute(
                "UPDATE forms SET content = ? WHERE id = ?",
                (content, form_id)
            )
            updated = cursor.rowcount > 0

        if updated:
            logger.info("Contenido del formulario %s guardado", form_id)
        return updated

    def publish(self, form_id: str) -> bool:
        """Marca el formulario como publicado."""
        with self._db.connection() as conn:
            cursor = conn.execute(
                "UPDATE forms SET published = 1 WHERE id = ?", (form_id,)
            )
            published = cursor.rowcount > 0

        if published:
            logger.info("Formulario %s publicado", form_id)
        return published

    def increment_visits(self, form_id: str) -> None:
        """Suma una visita al formulario público."""
        with self._db.connection() as conn:
            conn.execute(
                "UPDATE forms SET visits = visits + 1 WHERE id = ?", (form_id,)
            )

    def delete(self, form_id: str) -> bool:
        """Elimina un formulario y sus respuestas."""
        with self._db.connection() as conn:
            cursor = conn.execute("DELETE FROM forms WHERE id = ?", (form_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("Formulario %s eliminado", form_id)
        return deleted

    def stats(self, user_id: str) -> dict:
        """Suma de visitas y respuestas de los formularios de un usuario."""
        with self._db.connection() as conn:
            row = conn.execute(
                """
                SELECT COALESCE(SUM(visits), 0) AS visits,
                       COALESCE(SUM(submissions), 0) AS submissions
                FROM forms
                WHERE user_id = ?
                """,
                (user_id,)
            ).fetchone()

        visits = row["visits"]
        submissions = row["submissions"]
        submission_rate = submissions / visits * 100 if visits > 0 else 0.0

        return {
            "visits": visits,
            "submissions": submissions,
            "submission_rate": submission_rate,
            "bounce_rate": 100 - submission_rate,
        }
