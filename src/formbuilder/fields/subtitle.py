"""Campo de subtítulo."""

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


class SubTitleConfiguration(FieldConfiguration):
    title: str = Field(default="SubTitle field", min_length=2, max_length=50)


def design_preview(instance: FieldInstance[SubTitleConfiguration]) -> RenderableType:
    return Group(
        Text("SubTitle field", style=MUTED_STYLE),
        Text(instance.configuration.title, style="bold"),
    )


def property_editor(instance: FieldInstance[SubTitleConfiguration]) -> list[PropertySpec]:
    return [text_property(instance.configuration, "title", "Subtítulo")]


def fill_input(
    instance: FieldInstance[SubTitleConfiguration],
    value: Any = None,
    invalid: bool = False,
) -> FillWidget:
    return FillWidget(
        instance_id=instance.id,
        kind=InputKind.NONE,
        renderable=Text(instance.configuration.title, style="bold"),
    )


def validate_value(instance: FieldInstance[SubTitleConfiguration], value: Any) -> bool:
    return True


SUBTITLE_FIELD = FieldTypeDescriptor(
    tag=FieldTag.SUBTITLE,
    label="SubTitle Field",
    group=FieldGroup.LAYOUT,
    configuration_schema=SubTitleConfiguration,
    design_preview=design_preview,
    property_editor=property_editor,
    fill_input=fill_input,
    validate_value=validate_value,
    icon="H2",
)
