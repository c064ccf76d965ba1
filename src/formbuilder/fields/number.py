"""Campo numérico."""

import math
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
    text_property,
)
from formbuilder.models.field import FieldInstance, FieldTag, InputConfiguration


class NumberConfiguration(InputConfiguration):
    label: str = Field(default="Number field", min_length=2, max_length=50)
    placeholder: str = Field(default="0", max_length=50, alias="placeHolder")


def parse_number(value: Any) -> float:
    """
    Convierte el valor ingresado a número.

    Acepta coma decimal. Rechaza separadores "_" y valores no finitos
    (nan, inf).

    Raises:
        ValueError: Si no es un número finito
    """
    text = str(value).strip().replace(",", ".")
    if "_" in text:
        raise ValueError(f"Número inválido: {value}")
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"Número no finito: {value}")
    return number


def design_preview(instance: FieldInstance[NumberConfiguration]) -> RenderableType:
    config = instance.configuration
    return render_input(config, config.placeholder)


def property_editor(instance: FieldInstance[NumberConfiguration]) -> list[PropertySpec]:
    config = instance.configuration
    properties = input_properties(config)
    properties.insert(1, text_property(config, "placeholder", "Placeholder"))
    return properties


def fill_input(
    instance: FieldInstance[NumberConfiguration],
    value: Any = None,
    invalid: bool = False,
) -> FillWidget:
    config = instance.configuration
    has_value = not is_empty(value)
    return FillWidget(
        instance_id=instance.id,
        kind=InputKind.NUMBER,
        renderable=render_input(
            config,
            str(value) if has_value else config.placeholder,
            placeholder=not has_value,
            invalid=invalid,
        ),
        message=config.label,
        default=str(value) if has_value else "",
        hint=config.helper_text,
        required=config.required,
        invalid=invalid,
    )


def validate_value(instance: FieldInstance[NumberConfiguration], value: Any) -> bool:
    if is_empty(value):
        return not instance.configuration.required
    try:
        parse_number(value)
    except ValueError:
        return False
    return True


NUMBER_FIELD = FieldTypeDescriptor(
    tag=FieldTag.NUMBER,
    label="Number Field",
    group=FieldGroup.INPUT,
    configuration_schema=NumberConfiguration,
    design_preview=design_preview,
    property_editor=property_editor,
    fill_input=fill_input,
    validate_value=validate_value,
    icon="[#]",
)
