"""Área de texto multilínea."""

from typing import Any

from pydantic import Field
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text
from rich import box

from formbuilder.fields.base import (
    FieldGroup,
    FieldTypeDescriptor,
    FillWidget,
    InputKind,
    PropertySpec,
    MUTED_STYLE,
    input_properties,
    int_property,
    is_empty,
    render_helper,
    render_label,
    text_property,
)
from formbuilder.models.field import FieldInstance, FieldTag, InputConfiguration


class TextAreaConfiguration(InputConfiguration):
    label: str = Field(default="Text area", min_length=2, max_length=50)
    placeholder: str = Field(default="Value here...", max_length=50, alias="placeHolder")
    rows: int = Field(default=3, ge=1, le=10)


def _render(config: TextAreaConfiguration, content: str, placeholder: bool, invalid: bool) -> RenderableType:
    lines = content.splitlines() or [""]
    # Completar hasta la altura configurada
    lines += [""] * max(0, config.rows - len(lines))
    area = Panel(
        Text("\n".join(lines), style=MUTED_STYLE if placeholder else ""),
        box=box.ROUNDED,
        border_style="red" if invalid else "grey50",
        padding=(0, 1),
    )
    parts: list[RenderableType] = [render_label(config, invalid), area]
    helper = render_helper(config, invalid)
    if helper is not None:
        parts.append(helper)
    return Group(*parts)


def design_preview(instance: FieldInstance[TextAreaConfiguration]) -> RenderableType:
    config = instance.configuration
    return _render(config, config.placeholder, placeholder=True, invalid=False)


def property_editor(instance: FieldInstance[TextAreaConfiguration]) -> list[PropertySpec]:
    config = instance.configuration
    properties = input_properties(config)
    properties.insert(1, text_property(config, "placeholder", "Placeholder"))
    properties.append(int_property(config, "rows", "Filas", 1, 10))
    return properties


def fill_input(
    instance: FieldInstance[TextAreaConfiguration],
    value: Any = None,
    invalid: bool = False,
) -> FillWidget:
    config = instance.configuration
    has_value = not is_empty(value)
    return FillWidget(
        instance_id=instance.id,
        kind=InputKind.TEXT,
        renderable=_render(
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


def validate_value(instance: FieldInstance[TextAreaConfiguration], value: Any) -> bool:
    if instance.configuration.required:
        return not is_empty(value)
    return True


TEXTAREA_FIELD = FieldTypeDescriptor(
    tag=FieldTag.TEXTAREA,
    label="TextArea Field",
    group=FieldGroup.INPUT,
    configuration_schema=TextAreaConfiguration,
    design_preview=design_preview,
    property_editor=property_editor,
    fill_input=fill_input,
    validate_value=validate_value,
    icon="[=]",
)
