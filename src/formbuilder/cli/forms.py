"""
Comandos CLI para gestión de formularios.
"""

from typing import Annotated, Optional

import typer

from formbuilder.cli.common import current_user_id, get_database, handle_errors, share_link
from formbuilder.cli.theme import (
    format_percent,
    get_console,
    print_field,
    print_form_info,
    print_forms_table,
    print_header,
    print_info,
    print_success,
    print_warning,
)


def form_create(
    name: Annotated[str, typer.Argument(help="Nombre del formulario (mínimo 4 caracteres)")],
    description: Annotated[Optional[str], typer.Option("--desc", "-d", help="Descripción")] = "",
) -> None:
    """
    Crea un formulario vacío.

    Ejemplo:
        formbuilder form create "Encuesta de satisfacción" --desc "Clientes 2024"
    """
    with handle_errors():
        form = get_database().create_form(current_user_id(), name, description or "")

    print_success("Formulario creado")
    print_form_info(form, n_fields=0)
    print_info(f"Usa 'formbuilder design {form.id}' para agregar campos.")


def form_list() -> None:
    """Lista los formularios del usuario."""
    with handle_errors():
        forms = get_database().list_forms(current_user_id())

    if not forms:
        print_info("No hay formularios guardados.")
        print_info("Usa 'formbuilder form create <nombre>' para crear uno nuevo.")
        return

    console = get_console()
    console.print()
    print_forms_table(forms, title=f"Formularios ({len(forms)})")
    console.print()


def form_show(
    form_id: Annotated[str, typer.Argument(help="ID del formulario (parcial o completo)")],
) -> None:
    """Muestra los datos de un formulario."""
    db = get_database()
    with handle_errors():
        form = db.require_form(form_id, current_user_id())
        instances = db.load_definition(form.id)

    print_form_info(form, share_link=share_link(form), n_fields=len(instances))
    get_console().print()


def form_delete(
    form_id: Annotated[str, typer.Argument(help="ID del formulario a eliminar")],
    force: Annotated[bool, typer.Option("--force", "-f", help="No pedir confirmación")] = False,
) -> None:
    """
    Elimina un formulario y todas sus respuestas.

    Esta acción es irreversible.
    """
    db = get_database()
    with handle_errors():
        user_id = current_user_id()
        form = db.require_form(form_id, user_id)

        if not force:
            msg = f"¿Eliminar formulario '{form.name}' ({form.submissions} respuestas)?"
            if not typer.confirm(msg, default=False):
                print_info("Cancelado.")
                return

        db.delete_form(user_id, form.id)

    print_success(f"Formulario '{form.name}' eliminado.")


def form_publish(
    form_id: Annotated[str, typer.Argument(help="ID del formulario a publicar")],
    force: Annotated[bool, typer.Option("--force", "-f", help="No pedir confirmación")] = False,
) -> None:
    """
    Publica un formulario para recibir respuestas.

    Un formulario publicado ya no puede editarse.
    """
    db = get_database()
    with handle_errors():
        user_id = current_user_id()
        form = db.require_form(form_id, user_id)

        if form.published:
            print_warning(f"El formulario '{form.name}' ya está publicado.")
            print_field("Enlace", share_link(form))
            return

        if not db.load_definition(form.id):
            print_warning("El formulario no tiene campos.")

        if not force:
            msg = f"¿Publicar '{form.name}'? No podrá editarse después."
            if not typer.confirm(msg, default=False):
                print_info("Cancelado.")
                return

        form = db.publish_form(user_id, form.id)

    print_success(f"Formulario '{form.name}' publicado.")
    print_field("Enlace", share_link(form))


def form_stats() -> None:
    """Muestra visitas y respuestas de todos los formularios."""
    with handle_errors():
        stats = get_database().form_stats(current_user_id())

    print_header("Estadísticas")
    print_field("Visitas", stats.visits)
    print_field("Respuestas", stats.submissions)
    print_field("Tasa de respuesta", format_percent(stats.submission_rate))
    print_field("Tasa de rebote", format_percent(stats.bounce_rate))
