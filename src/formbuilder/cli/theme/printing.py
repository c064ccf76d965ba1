"""
Funciones que imprimen directamente a la consola.
"""

from formbuilder.cli.theme.palette import get_console
from formbuilder.cli.theme.styled import (
    styled_header, styled_label, styled_success, styled_warning,
    styled_error, styled_info, styled_status,
)
from formbuilder.models import Form


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


def print_header(text: str, subtitle: str = None) -> None:
    console = get_console()
    console.print(styled_header(text, subtitle))


def print_field(label: str, value, indent: int = 2) -> None:
    """Imprime un campo con valor."""
    console = get_console()
    prefix = " " * indent
    console.print(prefix, styled_label(label, value))


def print_success(text: str) -> None:
    console = get_console()
    console.print(styled_success(text))


def print_warning(text: str) -> None:
    console = get_console()
    console.print(styled_warning(text))


def print_error(text: str) -> None:
    console = get_console()
    console.print(styled_error(text))


def print_info(text: str) -> None:
    console = get_console()
    console.print(styled_info(text))


def print_form_info(form: Form, share_link: str = "", n_fields: int = None) -> None:
    """Imprime los datos principales de un formulario."""
    console = get_console()
    console.print()
    print_header(form.name, form.description or None)
    print_field("ID", form.id)
    console.print("  ", styled_status(form.published))
    if n_fields is not None:
        print_field("Campos", n_fields)
    print_field("Visitas", form.visits)
    print_field("Respuestas", form.submissions)
    print_field("Tasa de respuesta", format_percent(form.submission_rate))
    print_field("Creado", form.created_at[:19])
    if share_link and form.published:
        print_field("Enlace", share_link)
