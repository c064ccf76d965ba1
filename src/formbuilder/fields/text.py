"""Campo de texto de una línea."""

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


class TextConfiguration(InputConfiguration):
    label: str = Field(default="Text field", min_length=2, max_length=50)
    placeholder: str = Field(default="Value here...", max_length=50, alias="placeHolder")


def design_preview(instance: FieldInstance[TextConfiguration]) -> RenderableType:
    config = instance.configuration
    return render_input(config, config.placeholder)


def property_editor(instance: FieldInstance[TextConfiguration]) -> list[PropertySpec]:
    config = instance.configuration
    properties = input_properties(config)
    properties.insert(1, text_property(config, "placeholder", "Placeholder"))
    return properties


def fill_input(
    instance: FieldInstance[TextConfiguration],
    value: Any = None,
    invalid: bool = False,
) -> FillWidget:
    config = instance.configuration
    has_value = not is_empty(value)
    return FillWidget(
        instance_id=instance.id,
        kind=InputKind.TEXT,
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


def validate_value(instance: FieldInstance[TextConfiguration], value: Any) -> bool:
    if instance.configuration.required:
        return not is_empty(value)
    return True


TEXT_FIELD = FieldTypeDescriptor(
    tag=FieldTag.TEXT,
    label="Text Field",
    group=FieldGroup.INPUT,
    configuration_schema=TextConfiguration,
    design_preview=design_preview,
    property_editor=property_editor,
    fill_input=fill_input,
    validate_value=validate_value,
    icon="[T]",
)
