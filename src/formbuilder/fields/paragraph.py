"""Campo de párrafo (texto fijo)."""

from typing import Any

from pydantic import Field
from rich.console import Group, RenderableType
from rich.text import Text

from formbuilder.fields.base import (
    FieldGroup,
    FieldTypeDescriptor,
    FillWidget,
    InputKind,
    PropertySpec,
    MUTED_STYLE,
    text_property,
)
from formbuilder.models.field import FieldConfiguration, FieldInstance, FieldTag


class ParagraphConfiguration(FieldConfiguration):
    text: str = Field(default="Text here", min_length=2, max_length=500)


def design_preview(instance: FieldInstance[ParagraphConfiguration]) -> RenderableType:
    return Group(Text("Paragraph field", style=MUTED_STYLE), Text(instance.configuration.text))


def property_editor(instance: FieldInstance[ParagraphConfiguration]) -> list[PropertySpec]:
    return [text_property(instance.configuration, "text", "Texto")]


def fill_input(
    instance: FieldInstance[ParagraphConfiguration],
    value: Any = None,
    invalid: bool = False,
) -> FillWidget:
    return FillWidget(
        instance_id=instance.id,
        kind=InputKind.NONE,
        renderable=Text(instance.configuration.text),
    )


def validate_value(instance: FieldInstance[ParagraphConfiguration], value: Any) -> bool:
    return True


PARAGRAPH_FIELD = FieldTypeDescriptor(
    tag=FieldTag.PARAGRAPH,
    label="Paragraph Field",
    group=FieldGroup.LAYOUT,
    configuration_schema=ParagraphConfiguration,
    design_preview=design_preview,
    property_editor=property_editor,
    fill_input=fill_input,
    validate_value=validate_value,
    icon="P",
)
