"""Casilla de verificación (valores "true" / "false")."""

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
    input_properties,
    render_helper,
    render_label,
)
from formbuilder.models.field import FieldInstance, FieldTag, InputConfiguration


CHECKED = "true"
UNCHECKED = "false"


class CheckboxConfiguration(InputConfiguration):
    label: str = Field(default="Checkbox field", min_length=2, max_length=50)


def is_checked(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).lower() == CHECKED


def _render(config: CheckboxConfiguration, checked: bool, invalid: bool) -> RenderableType:
    line = Text("[x] " if checked else "[ ] ", style="red" if invalid else "")
    line.append_text(render_label(config, invalid))
    parts: list[RenderableType] = [line]
    helper = render_helper(config, invalid)
    if helper is not None:
        parts.append(helper)
    return Group(*parts)


def design_preview(instance: FieldInstance[CheckboxConfiguration]) -> RenderableType:
    return _render(instance.configuration, checked=False, invalid=False)


def property_editor(instance: FieldInstance[CheckboxConfiguration]) -> list[PropertySpec]:
    return input_properties(instance.configuration)


def fill_input(
    instance: FieldInstance[CheckboxConfiguration],
    value: Any = None,
    invalid: bool = False,
) -> FillWidget:
    config = instance.configuration
    checked = value is not None and is_checked(value)
    return FillWidget(
        instance_id=instance.id,
        kind=InputKind.CONFIRM,
        renderable=_render(config, checked, invalid),
        message=config.label,
        default=checked,
        hint=config.helper_text,
        required=config.required,
        invalid=invalid,
    )


def validate_value(instance: FieldInstance[CheckboxConfiguration], value: Any) -> bool:
    if instance.configuration.required:
        return value is not None and is_checked(value)
    return True


CHECKBOX_FIELD = FieldTypeDescriptor(
    tag=FieldTag.CHECKBOX,
    label="CheckBox Field",
    group=FieldGroup.INPUT,
    configuration_schema=CheckboxConfiguration,
    design_preview=design_preview,
    property_editor=property_editor,
    fill_input=fill_input,
    validate_value=validate_value,
    icon="[x]",
)
