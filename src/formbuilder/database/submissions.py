"""
Operaciones de base de datos para respuestas de formularios.
"""

import json
import logging

from formbuilder.database.connection import DatabaseConnection, _json_dict
from formbuilder.models.base import generate_timestamp

logger = logging.getLogger(__name__)


class SubmissionRepository:
    """Repositorio de respuestas."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def add(self, form_id: str, content: dict) -> dict:
        """
        Guarda una respuesta y actualiza el contador del formulario.

        Args:
            form_id: ID del formulario
            content: Valores {field_id: valor}

        Returns:
            Respuesta guardada (con id y created_at)
        """
        now = generate_timestamp()

        with self._db.connection() as conn:
            cursor = conn.execute(
                """
                INSERT INTO form_submissions (form_id, content, created_at)
                VALUES (?, ?, ?)
                """,
                (form_id, json.dumps(content, ensure_ascii=False), now)
            )
            submission_id = cursor.lastrowid
            conn.execute(
                "UPDATE forms SET submissions = submissions + 1 WHERE id = ?",
                (form_id,)
            )

        logger.info("Respuesta %s registrada para %s", submission_id, form_id)
        return {
            "id": submission_id,
            "form_id": form_id,
            "content": dict(content),
            "created_at": now,
        }

    def list_for_form(self, form_id: str) -> list[dict]:
        """Respuestas de un formulario, en orden de llegada."""
        with self._db.connection() as conn:
            cursor = conn.execute(
                "SELECT * FROM form_submissions WHERE form_id = ? ORDER BY id",
                (form_id,)
            )
            return [
                {
                    "id": row["id"],
                    "form_id": row["form_id"],
                    "content": _json_dict(row["content"]),
                    "created_at": row["created_at"],
                }
                for row in cursor
            ]

    def delete_for_form(self, form_id: str) -> int:
        """
        Elimina todas las respuestas de un formulario.

        Returns:
            Cantidad de respuestas eliminadas
        """
        with self._db.connection() as conn:
            cursor = conn.execute(
                "DELETE FROM form_submissions WHERE form_id = ?", (form_id,)
            )
            deleted = cursor.rowcount
            conn.execute(
                "UPDATE forms SET submissions = 0 WHERE id = ?", (form_id,)
            )

        logger.info("%d respuestas eliminadas de %s", deleted, form_id)
        return deleted
