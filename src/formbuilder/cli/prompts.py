"""
Preguntas interactivas (questionary) a partir de las especificaciones
que producen los tipos de campo.

ask_property traduce un PropertySpec del editor de propiedades y
ask_value traduce un FillWidget de la vista de llenado. Devuelven None
si el usuario cancela (Ctrl+C).
"""

from typing import Any, Optional

import questionary

from formbuilder.cli.styles import PROMPT_STYLE
from formbuilder.fields import FillWidget, InputKind, PropertyKind, PropertySpec

# Respuesta vacía en selects no obligatorios
NO_ANSWER = "(sin respuesta)"


def parse_options(text: str) -> list[str]:
    """Lista de opciones a partir de texto separado por comas."""
    return [option.strip() for option in text.split(",") if option.strip()]


def parse_property_answer(spec: PropertySpec, answer: Any) -> Any:
    """Convierte la respuesta del prompt al tipo de la propiedad."""
    if spec.kind == PropertyKind.INT:
        return int(str(answer).strip())
    if spec.kind == PropertyKind.LIST:
        return parse_options(answer)
    if spec.kind == PropertyKind.BOOL:
        return bool(answer)
    return answer


def int_validator(spec: PropertySpec):
    """Validador de questionary para propiedades enteras con rango."""
    def validate(text: str):
        try:
            value = int(text.strip())
        except ValueError:
            return "Ingrese un número entero"
        if spec.min_value is not None and value < spec.min_value:
            return f"Mínimo: {spec.min_value}"
        if spec.max_value is not None and value > spec.max_value:
            return f"Máximo: {spec.max_value}"
        return True
    return validate


def ask_property(spec: PropertySpec) -> Optional[Any]:
    """Pregunta el nuevo valor de una propiedad."""
    if spec.kind == PropertyKind.BOOL:
        answer = questionary.confirm(
            spec.label,
            default=bool(spec.value),
            style=PROMPT_STYLE,
        ).ask()
    elif spec.kind == PropertyKind.CHOICE:
        answer = questionary.select(
            spec.label,
            choices=spec.choices,
            default=spec.value if spec.value in spec.choices else None,
            style=PROMPT_STYLE,
        ).ask()
    elif spec.kind == PropertyKind.INT:
        answer = questionary.text(
            f"{spec.label} [{spec.min_value}-{spec.max_value}]",
            default=str(spec.value),
            validate=int_validator(spec),
            style=PROMPT_STYLE,
        ).ask()
    elif spec.kind == PropertyKind.LIST:
        answer = questionary.text(
            f"{spec.label} (separadas por coma)",
            default=", ".join(spec.value or []),
            style=PROMPT_STYLE,
        ).ask()
    else:
        answer = questionary.text(
            spec.label,
            default=str(spec.value or ""),
            instruction=spec.hint or None,
            style=PROMPT_STYLE,
        ).ask()

    if answer is None:
        return None
    return parse_property_answer(spec, answer)


def ask_value(widget: FillWidget) -> Optional[Any]:
    """
    Pregunta el valor de un campo al llenar el formulario.

    Returns:
        Valor ingresado (texto; "true"/"false" en casillas) o None si se cancela
    """
    message = f"{widget.message} *" if widget.required else widget.message

    if widget.kind == InputKind.CONFIRM:
        answer = questionary.confirm(
            message,
            default=bool(widget.default),
            style=PROMPT_STYLE,
        ).ask()
        if answer is None:
            return None
        return "true" if answer else "false"

    if widget.kind == InputKind.SELECT:
        choices = list(widget.choices)
        if not widget.required:
            choices.append(NO_ANSWER)
        if not choices:
            return ""
        answer = questionary.select(
            message,
            choices=choices,
            default=widget.default if widget.default in choices else None,
            style=PROMPT_STYLE,
        ).ask()
        if answer == NO_ANSWER:
            return ""
        return answer

    return questionary.text(
        message,
        default=str(widget.default or ""),
        instruction=widget.hint or None,
        style=PROMPT_STYLE,
    ).ask()
