"""
Utilidades comunes para los comandos CLI.
"""

from contextlib import contextmanager
from typing import Iterator

import typer
from pydantic import ValidationError

from formbuilder.cli.theme import print_error
from formbuilder.config import get_settings
from formbuilder.database import Database, get_database
from formbuilder.errors import FormBuilderError, Unauthorized
from formbuilder.models import Form


def current_user_id() -> str:
    """
    Usuario que diseña los formularios.

    Raises:
        Unauthorized: Si no hay usuario configurado
    """
    user_id = get_settings().user_id
    if not user_id:
        raise Unauthorized("Configure FORMBUILDER_USER para identificarse")
    return user_id


def share_link(form: Form) -> str:
    """Enlace público de un formulario."""
    return get_settings().share_link(form.share_url)


def validation_message(error: ValidationError) -> str:
    """Resume los errores de un modelo Pydantic en una línea."""
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in error.errors()
    )


@contextmanager
def handle_errors() -> Iterator[None]:
    """Muestra los errores de FormBuilder y termina con código 1."""
    try:
        yield
    except FormBuilderError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except ValidationError as e:
        print_error(validation_message(e))
        raise typer.Exit(1) from e


__all__ = [
    "Database",
    "get_database",
    "current_user_id",
    "share_link",
    "validation_message",
    "handle_errors",
]
