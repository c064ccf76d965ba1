"""
Modelos de datos para FormBuilder.

Contiene los campos (configuración + instancia) y los registros
persistidos de formularios y respuestas.
"""

from formbuilder.models.base import (
    generate_id,
    generate_token,
    generate_timestamp,
)
from formbuilder.models.field import (
    FieldTag,
    FieldConfiguration,
    InputConfiguration,
    FieldInstance,
    tag_value,
)
from formbuilder.models.form import Form, FormCreate, FormStats, Submission

__all__ = [
    # Utilidades
    "generate_id",
    "generate_token",
    "generate_timestamp",
    # Campos
    "FieldTag",
    "FieldConfiguration",
    "InputConfiguration",
    "FieldInstance",
    "tag_value",
    # Formularios
    "Form",
    "FormCreate",
    "FormStats",
    "Submission",
]
