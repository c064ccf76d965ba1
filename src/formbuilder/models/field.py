"""
Modelos de campos de formulario.

Un campo colocado en un formulario (FieldInstance) se compone de un ID
único, el tag de su tipo y una configuración propia de ese tipo.
La configuración es un modelo Pydantic inmutable: editarla significa
reemplazarla por completo.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FieldTag(str, Enum):
    """Tipos de campo incluidos."""
    TEXT = "text"
    NUMBER = "number"
    TEXTAREA = "textarea"
    DATE = "date"
    SELECT = "select"
    CHECKBOX = "checkbox"
    TITLE = "title"
    SUBTITLE = "subtitle"
    PARAGRAPH = "paragraph"
    SEPARATOR = "separator"
    SPACER = "spacer"


def tag_value(tag: Any) -> str:
    """Normaliza un tag (enum o string) a su valor string."""
    if isinstance(tag, Enum):
        return tag.value
    return str(tag)


class FieldConfiguration(BaseModel):
    """
    Configuración base de un campo.

    Las claves se serializan en camelCase (helperText, fontSize, ...),
    que es el formato persistido en extraAttributes.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_attributes(self) -> dict:
        """Serializa la configuración con claves camelCase."""
        return self.model_dump(by_alias=True, mode="json")


class InputConfiguration(FieldConfiguration):
    """Configuración común a los campos que reciben un valor."""
    label: str = Field(default="Field", min_length=2, max_length=50)
    helper_text: str = Field(default="Helper text", max_length=200)
    required: bool = False


C = TypeVar("C", bound=FieldConfiguration)


@dataclass
class FieldInstance(Generic[C]):
    """Un campo concreto dentro de un formulario."""
    id: str
    tag: str
    configuration: C

    def __post_init__(self):
        self.tag = tag_value(self.tag)

    @property
    def required(self) -> bool:
        """True si la configuración marca el campo como obligatorio."""
        return isinstance(self.configuration, InputConfiguration) and self.configuration.required

    @property
    def label(self) -> str:
        """Etiqueta visible del campo (vacía para campos de diseño)."""
        if isinstance(self.configuration, InputConfiguration):
            return self.configuration.label
        return ""

    def copy(self) -> "FieldInstance[C]":
        """
        Copia independiente del campo.

        El modelo es inmutable pero sus listas (p.ej. options) no lo son,
        por eso la configuración se copia en profundidad.
        """
        return FieldInstance(
            id=self.id,
            tag=self.tag,
            configuration=self.configuration.model_copy(deep=True),
        )

    def to_dict(self) -> dict:
        """Representación persistida: {id, type, extraAttributes}."""
        return {
            "id": self.id,
            "type": self.tag,
            "extraAttributes": self.configuration.to_attributes(),
        }
