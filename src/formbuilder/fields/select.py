"""
Campo de selección entre opciones.

La validación de un campo obligatorio solo exige un valor no vacío: no
verifica que el valor pertenezca a las opciones configuradas. Es el
comportamiento histórico de los formularios guardados y se mantiene.
"""

from typing import Any

from pydantic import Field
from rich.console import RenderableType

from formbuilder.fields.base import (
    FieldGroup,
    FieldTypeDescriptor,
    FillWidget,
    InputKind,
    PropertyKind,
    PropertySpec,
    input_properties,
    is_empty,
    render_input,
    text_property,
)
from formbuilder.models.field import FieldInstance, FieldTag, InputConfiguration


class SelectConfiguration(InputConfiguration):
    label: str = Field(default="Select field", min_length=2, max_length=50)
    placeholder: str = Field(default="Value here...", max_length=50, alias="placeHolder")
    options: list[str] = Field(default_factory=list)


def design_preview(instance: FieldInstance[SelectConfiguration]) -> RenderableType:
    config = instance.configuration
    return render_input(config, f"{config.placeholder}  v")


def property_editor(instance: FieldInstance[SelectConfiguration]) -> list[PropertySpec]:
    config = instance.configuration
    properties = input_properties(config)
    properties.insert(1, text_property(config, "placeholder", "Placeholder"))
    properties.append(
        PropertySpec(
            key="options",
            label="Opciones",
            kind=PropertyKind.LIST,
            value=list(config.options),
            hint="Una opción por elemento",
        )
    )
    return properties


def fill_input(
    instance: FieldInstance[SelectConfiguration],
    value: Any = None,
    invalid: bool = False,
) -> FillWidget:
    config = instance.configuration
    has_value = not is_empty(value)
    return FillWidget(
        instance_id=instance.id,
        kind=InputKind.SELECT,
        renderable=render_input(
            config,
            f"{value if has_value else config.placeholder}  v",
            placeholder=not has_value,
            invalid=invalid,
        ),
        message=config.label,
        default=str(value) if has_value else None,
        choices=list(config.options),
        hint=config.helper_text,
        required=config.required,
        invalid=invalid,
    )


def validate_value(instance: FieldInstance[SelectConfiguration], value: Any) -> bool:
    if instance.configuration.required:
        return not is_empty(value)
    return True


SELECT_FIELD = FieldTypeDescriptor(
    tag=FieldTag.SELECT,
    label="Select Field",
    group=FieldGroup.INPUT,
    configuration_schema=SelectConfiguration,
    design_preview=design_preview,
    property_editor=property_editor,
    fill_input=fill_input,
    validate_value=validate_value,
    icon="[v]",
)
