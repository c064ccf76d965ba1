"""
Modelos de formularios guardados y sus respuestas.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from formbuilder.models.base import generate_id, generate_timestamp, generate_token


class FormCreate(BaseModel):
    """Datos mínimos para crear un formulario."""
    name: str = Field(..., min_length=4, description="Nombre del formulario")
    description: str = Field(default="", description="Descripción")


class Form(BaseModel):
    """Formulario guardado."""
    id: str = Field(default_factory=generate_id)
    user_id: str
    name: str
    description: str = ""
    published: bool = False
    content: str = "[]"  # Definición serializada (JSON)
    share_url: str = Field(default_factory=generate_token)
    visits: int = 0
    submissions: int = 0
    created_at: str = Field(default_factory=generate_timestamp)

    @property
    def submission_rate(self) -> float:
        """Porcentaje de visitas que terminaron en respuesta."""
        if self.visits <= 0:
            return 0.0
        return self.submissions / self.visits * 100

    @property
    def bounce_rate(self) -> float:
        """Porcentaje de visitas sin respuesta."""
        return 100 - self.submission_rate


class Submission(BaseModel):
    """Respuesta enviada a un formulario."""
    id: Optional[int] = None
    form_id: str
    content: dict[str, Any] = Field(default_factory=dict)  # {field_id: valor}
    created_at: str = Field(default_factory=generate_timestamp)


class FormStats(BaseModel):
    """Estadísticas agregadas de los formularios de un usuario."""
    visits: int = 0
    submissions: int = 0
    submission_rate: float = 0.0
    bounce_rate: float = 0.0
