"""
Vista de llenado: vista previa de un formulario y respuesta pública.
"""

from typing import Annotated, Iterable, Optional

import questionary
import typer
from rich.panel import Panel
from rich import box

from formbuilder.cli.common import current_user_id, get_database, handle_errors
from formbuilder.cli.prompts import ask_value
from formbuilder.cli.styles import PROMPT_STYLE
from formbuilder.cli.theme import (
    get_console,
    get_palette,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from formbuilder.config import get_settings
from formbuilder.errors import FormNotPublished, FormNotValid
from formbuilder.fields import FieldGroup, FieldRegistry
from formbuilder.filler import FillSession
from formbuilder.models import FieldInstance


ACTION_SUBMIT = "Enviar"
ACTION_EDIT = "Corregir un campo"
ACTION_CANCEL = "Cancelar"


def render_fill_view(
    title: str,
    instances: Iterable[FieldInstance],
    registry: FieldRegistry,
    session: Optional[FillSession] = None,
) -> None:
    """Dibuja el formulario tal como lo ve quien responde."""
    console = get_console()
    p = get_palette()

    console.print()
    print_header(title)
    for instance in instances:
        if session is not None:
            widget = session.widget(instance.id)
        else:
            widget = registry.resolve(instance.tag).fill_input(instance)
        console.print(Panel(
            widget.renderable,
            border_style=p.error if widget.invalid else p.border,
            box=box.SIMPLE,
        ))


def _parse_assignments(assignments: list[str]) -> dict[str, str]:
    values = {}
    for item in assignments:
        if "=" not in item:
            raise typer.BadParameter(f"Se esperaba ID=VALOR: {item}")
        key, value = item.split("=", 1)
        values[key.strip()] = value
    return values


def _ask_field(session: FillSession, instance: FieldInstance) -> bool:
    """Pregunta un campo hasta que sea válido. False si se cancela."""
    while True:
        widget = session.widget(instance.id)
        value = ask_value(widget)
        if value is None:
            return False
        if session.set_value(instance.id, value):
            return True
        print_warning(f"'{instance.label}': valor no válido")


def _report_invalid(session: FillSession, invalid_ids: list[str]) -> None:
    for instance_id in invalid_ids:
        instance = next(i for i in session.instances if i.id == instance_id)
        print_error(f"'{instance.label or instance.id}' requiere un valor válido")


class FillMenu:
    """Recorre los campos de entrada de un formulario y envía la respuesta."""

    def __init__(self, title: str, session: FillSession):
        self.title = title
        self.session = session
        self.inputs = [
            instance for instance in session.instances
            if session.registry.resolve(instance.tag).group is FieldGroup.INPUT
        ]

    def show(self) -> Optional[dict]:
        """
        Ejecuta el llenado.

        Returns:
            Respuesta lista para guardar, o None si se cancela
        """
        for instance in self.inputs:
            if not _ask_field(self.session, instance):
                return None

        while True:
            render_fill_view(self.title, self.session.instances, self.session.registry, self.session)
            action = questionary.select(
                "¿Qué deseas hacer?",
                choices=[ACTION_SUBMIT, ACTION_EDIT, ACTION_CANCEL],
                style=PROMPT_STYLE,
            ).ask()

            if action is None or action == ACTION_CANCEL:
                return None

            if action == ACTION_EDIT:
                instance_id = questionary.select(
                    "Campo:",
                    choices=[
                        questionary.Choice(i.label or i.id, value=i.id) for i in self.inputs
                    ],
                    style=PROMPT_STYLE,
                ).ask()
                if instance_id is not None:
                    instance = next(i for i in self.inputs if i.id == instance_id)
                    _ask_field(self.session, instance)
                continue

            invalid = self.session.validate_all()
            if invalid:
                _report_invalid(self.session, invalid)
                continue
            return self.session.build_submission_payload()


def preview(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
) -> None:
    """Muestra el formulario tal como lo verá quien responda."""
    db = get_database()
    with handle_errors():
        form = db.require_form(form_id, current_user_id())
        instances = db.load_definition(form.id)

    if not instances:
        print_info("El formulario no tiene campos.")
        return
    render_fill_view(form.name, instances, db.registry)


def fill(
    link: Annotated[str, typer.Argument(help="Enlace público o token del formulario")],
    assignments: Annotated[
        Optional[list[str]],
        typer.Option("--set", "-s", help="Respuesta sin preguntas: ID=VALOR (repetible)"),
    ] = None,
) -> None:
    """
    Responde un formulario publicado.

    Sin --set pregunta cada campo de forma interactiva. Con --set
    valida los valores dados y envía la respuesta directamente.

    Ejemplo:
        formbuilder fill formbuilder://submit/<token> -s a1b2c3d4="Juan"
    """
    db = get_database()
    token = get_settings().share_token(link)

    with handle_errors():
        form = db.open_public_form(token)
        if not form.published:
            raise FormNotPublished(form.name)
        session = FillSession(db.load_definition(form.id), registry=db.registry)

        if assignments:
            for instance_id, value in _parse_assignments(assignments).items():
                session.set_value(instance_id, value)
            try:
                payload = session.build_submission_payload()
            except FormNotValid as e:
                _report_invalid(session, e.invalid_ids)
                raise
        else:
            payload = FillMenu(form.name, session).show()
            if payload is None:
                print_info("Respuesta cancelada.")
                return

        db.record_submission(token, payload)

    print_success("Respuesta enviada. ¡Gracias!")
