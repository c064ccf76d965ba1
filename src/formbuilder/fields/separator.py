"""Separador horizontal."""

from typing import Any

from rich.console import Group, RenderableType
from rich.rule import Rule
from rich.text import Text

from formbuilder.fields.base import (
    FieldGroup,
    FieldTypeDescriptor,
    FillWidget,
    InputKind,
    PropertySpec,
    MUTED_STYLE,
)
from formbuilder.models.field import FieldConfiguration, FieldInstance, FieldTag


class SeparatorConfiguration(FieldConfiguration):
    """Sin propiedades editables."""


def design_preview(instance: FieldInstance[SeparatorConfiguration]) -> RenderableType:
    return Group(Text("Separator field", style=MUTED_STYLE), Rule(style="grey50"))


def property_editor(instance: FieldInstance[SeparatorConfiguration]) -> list[PropertySpec]:
    return []


def fill_input(
    instance: FieldInstance[SeparatorConfiguration],
    value: Any = None,
    invalid: bool = False,
) -> FillWidget:
    return FillWidget(instance_id=instance.id, kind=InputKind.NONE, renderable=Rule(style="grey50"))


def validate_value(instance: FieldInstance[SeparatorConfiguration], value: Any) -> bool:
    return True


SEPARATOR_FIELD = FieldTypeDescriptor(
    tag=FieldTag.SEPARATOR,
    label="Separator Field",
    group=FieldGroup.LAYOUT,
    configuration_schema=SeparatorConfiguration,
    design_preview=design_preview,
    property_editor=property_editor,
    fill_input=fill_input,
    validate_value=validate_value,
    icon="--",
)
