"""Espaciador vertical (altura en píxeles)."""

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
    int_property,
)
from formbuilder.models.field import FieldConfiguration, FieldInstance, FieldTag


# Píxeles por línea de terminal
PIXELS_PER_LINE = 20


class SpacerConfiguration(FieldConfiguration):
    height: int = Field(default=20, ge=5, le=200)


def _blank_lines(config: SpacerConfiguration) -> Text:
    lines = max(1, round(config.height / PIXELS_PER_LINE))
    return Text("\n" * (lines - 1))


def design_preview(instance: FieldInstance[SpacerConfiguration]) -> RenderableType:
    config = instance.configuration
    return Group(Text(f"Spacer field: {config.height}px", style=MUTED_STYLE), _blank_lines(config))


def property_editor(instance: FieldInstance[SpacerConfiguration]) -> list[PropertySpec]:
    return [int_property(instance.configuration, "height", "Altura (px)", 5, 200)]


def fill_input(
    instance: FieldInstance[SpacerConfiguration],
    value: Any = None,
    invalid: bool = False,
) -> FillWidget:
    return FillWidget(
        instance_id=instance.id,
        kind=InputKind.NONE,
        renderable=_blank_lines(instance.configuration),
    )


def validate_value(instance: FieldInstance[SpacerConfiguration], value: Any) -> bool:
    return True


SPACER_FIELD = FieldTypeDescriptor(
    tag=FieldTag.SPACER,
    label="Spacer Field",
    group=FieldGroup.LAYOUT,
    configuration_schema=SpacerConfiguration,
    design_preview=design_preview,
    property_editor=property_editor,
    fill_input=fill_input,
    validate_value=validate_value,
    icon="<>",
)
