"""
Campo de título con opciones tipográficas.

En la terminal solo se aplican negrita, cursiva, subrayado, color,
alineación y transformación de mayúsculas; el tamaño y la familia
tipográfica se conservan para los formularios guardados.
"""

from typing import Any, Literal

from pydantic import Field
from rich.align import Align
from rich.console import Group, RenderableType
from rich.text import Text

from formbuilder.fields.base import (
    FieldGroup,
    FieldTypeDescriptor,
    FillWidget,
    InputKind,
    PropertySpec,
    MUTED_STYLE,
    choice_property,
    int_property,
    text_property,
)
from formbuilder.models.field import FieldConfiguration, FieldInstance, FieldTag


ALIGNMENTS = ("left", "center", "right")
FONT_WEIGHTS = ("100", "200", "300", "400", "500", "600", "700", "800", "900")
FONT_STYLES = ("normal", "italic")
TEXT_DECORATIONS = ("none", "underline")
TEXT_TRANSFORMS = ("none", "uppercase", "capitalize", "lowercase")
FONT_FAMILIES = ("Arial", "Times New Roman", "Courier New", "Georgia", "Verdana", "Tahoma")


class TitleConfiguration(FieldConfiguration):
    title: str = Field(default="Title field", min_length=2, max_length=50)
    font_size: int = Field(default=20, ge=10, le=72)
    alignment: Literal["left", "center", "right"] = "left"
    text_color: str = Field(default="#000000", pattern=r"^#([0-9A-Fa-f]{3}){1,2}$")
    font_weight: Literal["100", "200", "300", "400", "500", "600", "700", "800", "900"] = "400"
    font_style: Literal["normal", "italic"] = "normal"
    text_decoration: Literal["none", "underline"] = "none"
    text_transform: Literal["none", "uppercase", "capitalize", "lowercase"] = "none"
    font_family: Literal[
        "Arial", "Times New Roman", "Courier New", "Georgia", "Verdana", "Tahoma"
    ] = "Arial"


def _transform(text: str, transform: str) -> str:
    if transform == "uppercase":
        return text.upper()
    if transform == "lowercase":
        return text.lower()
    if transform == "capitalize":
        return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))
    return text


def _style(config: TitleConfiguration) -> str:
    parts = []
    if int(config.font_weight) >= 600 or config.font_size >= 24:
        parts.append("bold")
    if config.font_style == "italic":
        parts.append("italic")
    if config.text_decoration == "underline":
        parts.append("underline")
    # Negro puro no se ve en terminales oscuras: se deja el color por defecto
    if config.text_color.lower() not in ("#000", "#000000"):
        color = config.text_color
        if len(color) == 4:
            color = "#" + "".join(c * 2 for c in color[1:])
        parts.append(color)
    return " ".join(parts)


def render_title(config: TitleConfiguration) -> RenderableType:
    text = Text(_transform(config.title, config.text_transform), style=_style(config))
    return Align(text, align=config.alignment)


def design_preview(instance: FieldInstance[TitleConfiguration]) -> RenderableType:
    return Group(Text("Title field", style=MUTED_STYLE), render_title(instance.configuration))


def property_editor(instance: FieldInstance[TitleConfiguration]) -> list[PropertySpec]:
    config = instance.configuration
    return [
        text_property(config, "title", "Título"),
        int_property(config, "font_size", "Tamaño de fuente", 10, 72),
        choice_property(config, "alignment", "Alineación", ALIGNMENTS),
        text_property(config, "text_color", "Color", "Formato #RGB o #RRGGBB"),
        choice_property(config, "font_weight", "Peso", FONT_WEIGHTS),
        choice_property(config, "font_style", "Estilo", FONT_STYLES),
        choice_property(config, "text_decoration", "Decoración", TEXT_DECORATIONS),
        choice_property(config, "text_transform", "Transformación", TEXT_TRANSFORMS),
        choice_property(config, "font_family", "Fuente", FONT_FAMILIES),
    ]


def fill_input(
    instance: FieldInstance[TitleConfiguration],
    value: Any = None,
    invalid: bool = False,
) -> FillWidget:
    return FillWidget(
        instance_id=instance.id,
        kind=InputKind.NONE,
        renderable=render_title(instance.configuration),
    )


def validate_value(instance: FieldInstance[TitleConfiguration], value: Any) -> bool:
    return True


TITLE_FIELD = FieldTypeDescriptor(
    tag=FieldTag.TITLE,
    label="Title Field",
    group=FieldGroup.LAYOUT,
    configuration_schema=TitleConfiguration,
    design_preview=design_preview,
    property_editor=property_editor,
    fill_input=fill_input,
    validate_value=validate_value,
    icon="H1",
)
