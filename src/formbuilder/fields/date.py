"""Campo de fecha (formato ISO AAAA-MM-DD)."""

import re
from datetime import date
from typing import Any

from pydantic import Field
from rich.console import RenderableType

from formbuilder.fields.base import (
    FieldGroup,
    FieldTypeDescriptor,
    FillWidget,
    InputKind,
    PropertySpec,
    input_properties,
    is_empty,
    render_input,
)
from formbuilder.models.field import FieldInstance, FieldTag, InputConfiguration


DATE_PLACEHOLDER = "AAAA-MM-DD"
ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class DateConfiguration(InputConfiguration):
    label: str = Field(default="Date field", min_length=2, max_length=50)
    helper_text: str = Field(default="Pick a date", max_length=200)


def design_preview(instance: FieldInstance[DateConfiguration]) -> RenderableType:
    return render_input(instance.configuration, DATE_PLACEHOLDER)


def property_editor(instance: FieldInstance[DateConfiguration]) -> list[PropertySpec]:
    return input_properties(instance.configuration)


def fill_input(
    instance: FieldInstance[DateConfiguration],
    value: Any = None,
    invalid: bool = False,
) -> FillWidget:
    config = instance.configuration
    has_value = not is_empty(value)
    return FillWidget(
        instance_id=instance.id,
        kind=InputKind.DATE,
        renderable=render_input(
            config,
            str(value) if has_value else DATE_PLACEHOLDER,
            placeholder=not has_value,
            invalid=invalid,
        ),
        message=f"{config.label} ({DATE_PLACEHOLDER})",
        default=str(value) if has_value else "",
        hint=config.helper_text,
        required=config.required,
        invalid=invalid,
    )


def validate_value(instance: FieldInstance[DateConfiguration], value: Any) -> bool:
    if is_empty(value):
        return not instance.configuration.required
    text = str(value)
    # fromisoformat también acepta 20240115 o 2024-W03-1
    if not ISO_DATE.fullmatch(text):
        return False
    try:
        date.fromisoformat(text)
    except ValueError:
        return False
    return True


DATE_FIELD = FieldTypeDescriptor(
    tag=FieldTag.DATE,
    label="Date Field",
    group=FieldGroup.INPUT,
    configuration_schema=DateConfiguration,
    design_preview=design_preview,
    property_editor=property_editor,
    fill_input=fill_input,
    validate_value=validate_value,
    icon="[d]",
)
