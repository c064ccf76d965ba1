"""
Módulo de base de datos SQLite para FormBuilder.

Persiste formularios (definición serializada, estado de publicación y
contadores) y sus respuestas.

La clase Database es una fachada sobre los repositorios especializados:
devuelve modelos Pydantic y aplica las reglas de propiedad y publicación.
"""

from pathlib import Path
from typing import Any, Iterable, Optional

from formbuilder import definition as codec
from formbuilder.config import get_settings
from formbuilder.database.connection import DatabaseConnection
from formbuilder.database.forms import FormRepository
from formbuilder.database.submissions import SubmissionRepository
from formbuilder.errors import (
    FormAlreadyPublished,
    FormNotFound,
    FormNotPublished,
    Unauthorized,
)
from formbuilder.fields.registry import FieldRegistry, get_registry
from formbuilder.models import FieldInstance, Form, FormCreate, FormStats, Submission


class Database:
    """
    Gestor de base de datos SQLite para FormBuilder.

    Las operaciones del diseñador reciben el user_id del dueño; las
    operaciones públicas (abrir y responder) se identifican por el
    enlace compartido.
    """

    def __init__(
        self,
        db_path: Optional[Path] = None,
        registry: Optional[FieldRegistry] = None,
    ):
        """
        Inicializa la conexión a la base de datos.

        Args:
            db_path: Ruta al archivo SQLite. Default: ~/.formbuilder/formbuilder.db
            registry: Registro de tipos usado para leer definiciones
        """
        self._conn = DatabaseConnection(db_path)
        self._forms = FormRepository(self._conn)
        self._submissions = SubmissionRepository(self._conn)
        self.registry = registry or get_registry()

    @property
    def db_path(self) -> Path:
        """Ruta al archivo de base de datos."""
        return self._conn.db_path

    def connection(self):
        """Context manager para conexiones a la base de datos."""
        return self._conn.connection()

    # ========================================================================
    # Operaciones de Formulario
    # ========================================================================

    def create_form(self, user_id: Optional[str], name: str, description: str = "") -> Form:
        """
        Crea un formulario vacío.

        Raises:
            Unauthorized: Sin usuario
            pydantic.ValidationError: Nombre con menos de 4 caracteres
            FormNameTaken: El usuario ya tiene un formulario con ese nombre
        """
        _require_user(user_id)
        data = FormCreate(name=name, description=description)
        d = self._forms.create(user_id, data.name, data.description)
        return Form(**d)

    def get_form(self, form_id: str, user_id: Optional[str] = None) -> Optional[Form]:
        """Obtiene un formulario por ID (parcial o completo)."""
        d = self._forms.get(form_id, user_id)
        if d is None:
            return None
        return Form(**d)

    def require_form(self, form_id: str, user_id: Optional[str]) -> Form:
        """
        Obtiene un formulario del usuario.

        Raises:
            Unauthorized: Sin usuario
            FormNotFound: No existe o pertenece a otro usuario
        """
        _require_user(user_id)
        form = self.get_form(form_id, user_id)
        if form is None:
            raise FormNotFound(form_id)
        return form

    def list_forms(self, user_id: Optional[str]) -> list[Form]:
        """Lista los formularios del usuario."""
        _require_user(user_id)
        return [Form(**d) for d in self._forms.list_for_user(user_id)]

    def form_stats(self, user_id: Optional[str]) -> FormStats:
        """Visitas, respuestas y tasas sobre todos los formularios del usuario."""
        _require_user(user_id)
        return FormStats(**self._forms.stats(user_id))

    def publish_form(self, user_id: Optional[str], form_id: str) -> Form:
        """Publica un formulario (deja de poder editarse)."""
        form = self.require_form(form_id, user_id)
        self._forms.publish(form.id)
        return form.model_copy(update={"published": True})

    def delete_form(self, user_id: Optional[str], form_id: str) -> bool:
        """Elimina un formulario y todas sus respuestas."""
        form = self.require_form(form_id, user_id)
        return self._forms.delete(form.id)

    # ========================================================================
    # Definición
    # ========================================================================

    def load_definition(self, form_id: str, user_id: Optional[str] = None) -> list[FieldInstance]:
        """
        Lee la definición guardada de un formulario.

        Raises:
            FormNotFound: Si no existe
            InvalidDefinition: Si el contenido guardado está corrupto
        """
        form = self.get_form(form_id, user_id)
        if form is None:
            raise FormNotFound(form_id)
        return codec.loads(form.content, self.registry)

    def save_definition(
        self,
        user_id: Optional[str],
        form_id: str,
        instances: Iterable[FieldInstance],
    ) -> Form:
        """
        Guarda la definición producida por el diseñador.

        Raises:
            Unauthorized: Sin usuario
            FormNotFound: No existe o pertenece a otro usuario
            FormAlreadyPublished: Los formularios publicados no se editan
        """
        form = self.require_form(form_id, user_id)
        if form.published:
            raise FormAlreadyPublished(form.id)
        content = codec.dumps(instances)
        self._forms.update_content(form.id, content)
        return form.model_copy(update={"content": content})

    # ========================================================================
    # Operaciones públicas
    # ========================================================================

    def open_public_form(self, share_url: str) -> Form:
        """
        Abre un formulario por su enlace público y registra la visita.

        Raises:
            FormNotFound: Si el enlace no corresponde a ningún formulario
        """
        d = self._forms.get_by_share_url(share_url)
        if d is None:
            raise FormNotFound(share_url)
        self._forms.increment_visits(d["id"])
        d["visits"] += 1
        return Form(**d)

    def record_submission(self, share_url: str, payload: dict[str, Any]) -> Submission:
        """
        Guarda una respuesta completa.

        Raises:
            FormNotFound: Si el enlace no corresponde a ningún formulario
            FormNotPublished: Si el formulario no acepta respuestas
        """
        d = self._forms.get_by_share_url(share_url)
        if d is None:
            raise FormNotFound(share_url)
        if not d["published"]:
            raise FormNotPublished(d["name"])
        return Submission(**self._submissions.add(d["id"], payload))

    # ========================================================================
    # Respuestas
    # ========================================================================

    def list_submissions(self, form_id: str) -> list[Submission]:
        """Respuestas de un formulario, en orden de llegada."""
        return [Submission(**d) for d in self._submissions.list_for_form(form_id)]

    def get_form_with_submissions(
        self,
        user_id: Optional[str],
        form_id: str,
    ) -> tuple[Form, list[Submission]]:
        """Formulario del usuario junto con sus respuestas."""
        form = self.require_form(form_id, user_id)
        return form, self.list_submissions(form.id)

    def delete_submissions(self, user_id: Optional[str], form_id: str) -> int:
        """Elimina las respuestas de un formulario del usuario."""
        form = self.require_form(form_id, user_id)
        return self._submissions.delete_for_form(form.id)


def _require_user(user_id: Optional[str]) -> None:
    if not user_id:
        raise Unauthorized()


# ============================================================================
# Función de conveniencia para obtener la instancia global
# ============================================================================

_database: Optional[Database] = None


def get_database() -> Database:
    """Retorna la instancia global de la base de datos."""
    global _database
    if _database is None:
        _database = Database(get_settings().db_path)
    return _database


def reset_database() -> None:
    """Reinicia la instancia global (útil para tests)."""
    global _database
    _database = None


__all__ = [
    "Database",
    "DatabaseConnection",
    "FormRepository",
    "SubmissionRepository",
    "get_database",
    "reset_database",
]
