"""
Descriptor de tipo de campo y utilidades de render compartidas.

Cada tipo de campo se define con un FieldTypeDescriptor que reúne:
- configuración por defecto y esquema de validación (modelo Pydantic)
- tres renders independientes: vista previa en el diseñador, editor de
  propiedades y entrada para el llenado
- validación del valor ingresado por quien responde

Los renders son funciones puras: reciben la instancia y devuelven una
representación (objetos Rich o especificaciones) que la interfaz decide
cómo mostrar.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional

from pydantic import ValidationError
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text
from rich import box

from formbuilder.errors import InvalidConfiguration
from formbuilder.models.field import (
    FieldConfiguration,
    FieldInstance,
    InputConfiguration,
    tag_value,
)


class FieldGroup(Enum):
    """Grupo del campo en la paleta del diseñador."""
    LAYOUT = "layout"
    INPUT = "input"


class PropertyKind(Enum):
    """Tipo de control para editar una propiedad."""
    TEXT = "text"
    INT = "int"
    BOOL = "bool"
    CHOICE = "choice"
    LIST = "list"


class InputKind(Enum):
    """Tipo de control para ingresar un valor al llenar."""
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"
    CONFIRM = "confirm"
    NONE = "none"  # Campo de diseño, no recibe valor


@dataclass
class PropertySpec:
    """Una propiedad editable de la configuración de un campo."""
    key: str  # Nombre del atributo en el modelo de configuración
    label: str
    kind: PropertyKind = PropertyKind.TEXT
    value: Any = None  # Valor actual
    hint: str = ""
    choices: list[str] = field(default_factory=list)  # Para CHOICE
    min_value: Optional[int] = None
    max_value: Optional[int] = None


@dataclass
class FillWidget:
    """Representación de un campo en la vista de llenado."""
    instance_id: str
    kind: InputKind
    renderable: RenderableType
    message: str = ""  # Pregunta a mostrar
    default: Any = None
    choices: list[str] = field(default_factory=list)
    hint: str = ""
    required: bool = False
    invalid: bool = False


DesignPreview = Callable[[FieldInstance], RenderableType]
PropertyEditor = Callable[[FieldInstance], list[PropertySpec]]
FillInput = Callable[..., FillWidget]
ValueValidator = Callable[[FieldInstance, Any], bool]


@dataclass(frozen=True)
class FieldTypeDescriptor:
    """Definición completa de un tipo de campo."""
    tag: str
    label: str  # Texto del botón en la paleta
    group: FieldGroup
    configuration_schema: type[FieldConfiguration]
    design_preview: DesignPreview
    property_editor: PropertyEditor
    fill_input: FillInput
    validate_value: ValueValidator
    icon: str = ""

    def __post_init__(self):
        object.__setattr__(self, "tag", tag_value(self.tag))
        if not isinstance(self.configuration_schema, type) or not issubclass(
            self.configuration_schema, FieldConfiguration
        ):
            raise TypeError(f"'{self.tag}': configuration_schema debe ser un FieldConfiguration")
        for name in ("design_preview", "property_editor", "fill_input", "validate_value"):
            if not callable(getattr(self, name)):
                raise TypeError(f"'{self.tag}': {name} debe ser invocable")

    @property
    def default_configuration(self) -> FieldConfiguration:
        """Configuración inicial de un campo recién creado."""
        return self.configuration_schema()

    def validate_configuration(self, candidate: Any) -> FieldConfiguration:
        """
        Valida una configuración candidata contra el esquema.

        Args:
            candidate: Modelo de configuración o mapping (camelCase o snake_case)

        Returns:
            Configuración validada (nueva instancia inmutable)

        Raises:
            InvalidConfiguration: Si no cumple el esquema
        """
        if isinstance(candidate, FieldConfiguration):
            candidate = candidate.model_dump()
        if not isinstance(candidate, Mapping):
            raise InvalidConfiguration(
                self.tag, [{"loc": (), "msg": "se esperaba un objeto"}]
            )
        try:
            return self.configuration_schema.model_validate(dict(candidate))
        except ValidationError as e:
            raise InvalidConfiguration(self.tag, e.errors()) from e

    def construct(self, instance_id: str) -> FieldInstance:
        """Crea una instancia nueva con la configuración por defecto."""
        return FieldInstance(id=instance_id, tag=self.tag, configuration=self.default_configuration)


# ============================================================================
# Helpers de render
# ============================================================================

INVALID_STYLE = "bold red"
MUTED_STYLE = "dim"


def render_label(config: InputConfiguration, invalid: bool = False) -> Text:
    """Etiqueta del campo con marca de obligatorio."""
    text = Text(config.label, style=INVALID_STYLE if invalid else "bold")
    if config.required:
        text.append(" *", style="red")
    return text


def render_box(content: str, placeholder: bool = True, invalid: bool = False) -> Panel:
    """Caja que simula el control de entrada."""
    style = MUTED_STYLE if placeholder else ""
    return Panel(
        Text(content or " ", style=style),
        box=box.ROUNDED,
        border_style="red" if invalid else "grey50",
        padding=(0, 1),
    )


def render_helper(config: InputConfiguration, invalid: bool = False) -> Optional[Text]:
    """Texto de ayuda bajo el campo (None si está vacío)."""
    if not config.helper_text:
        return None
    return Text(config.helper_text, style="red" if invalid else MUTED_STYLE)


def render_input(
    config: InputConfiguration,
    content: str,
    placeholder: bool = True,
    invalid: bool = False,
) -> RenderableType:
    """Bloque estándar: etiqueta, caja y ayuda."""
    parts: list[RenderableType] = [
        render_label(config, invalid),
        render_box(content, placeholder, invalid),
    ]
    helper = render_helper(config, invalid)
    if helper is not None:
        parts.append(helper)
    return Group(*parts)


def is_empty(value: Any) -> bool:
    """True si el valor ingresado está vacío."""
    return value is None or str(value) == ""


# ============================================================================
# Helpers del editor de propiedades
# ============================================================================

def text_property(config: FieldConfiguration, key: str, label: str, hint: str = "") -> PropertySpec:
    return PropertySpec(key=key, label=label, kind=PropertyKind.TEXT, value=getattr(config, key), hint=hint)


def bool_property(config: FieldConfiguration, key: str, label: str, hint: str = "") -> PropertySpec:
    return PropertySpec(key=key, label=label, kind=PropertyKind.BOOL, value=getattr(config, key), hint=hint)


def int_property(
    config: FieldConfiguration,
    key: str,
    label: str,
    min_value: int,
    max_value: int,
    hint: str = "",
) -> PropertySpec:
    return PropertySpec(
        key=key,
        label=label,
        kind=PropertyKind.INT,
        value=getattr(config, key),
        hint=hint,
        min_value=min_value,
        max_value=max_value,
    )


def choice_property(
    config: FieldConfiguration,
    key: str,
    label: str,
    choices: tuple[str, ...],
    hint: str = "",
) -> PropertySpec:
    return PropertySpec(
        key=key,
        label=label,
        kind=PropertyKind.CHOICE,
        value=getattr(config, key),
        hint=hint,
        choices=list(choices),
    )


def input_properties(config: InputConfiguration) -> list[PropertySpec]:
    """Propiedades comunes de los campos de entrada."""
    return [
        text_property(config, "label", "Etiqueta", "Se muestra sobre el campo"),
        text_property(config, "helper_text", "Texto de ayuda", "Se muestra debajo del campo"),
        bool_property(config, "required", "Obligatorio"),
    ]
