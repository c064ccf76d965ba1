"""
Comandos CLI para consultar y exportar respuestas.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from formbuilder.cli.common import current_user_id, get_database, handle_errors
from formbuilder.cli.theme import (
    get_console,
    print_data_table,
    print_error,
    print_info,
    print_success,
)
from formbuilder.export import ExportFormat, export_submissions, prepare_data


def submissions(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
    delete: Annotated[bool, typer.Option("--delete", help="Eliminar todas las respuestas")] = False,
    force: Annotated[bool, typer.Option("--force", "-f", help="No pedir confirmación")] = False,
) -> None:
    """Muestra (o elimina) las respuestas de un formulario."""
    db = get_database()
    with handle_errors():
        user_id = current_user_id()
        form, items = db.get_form_with_submissions(user_id, form_id)

        if delete:
            if not force and not typer.confirm(
                f"¿Eliminar {len(items)} respuestas de '{form.name}'?", default=False
            ):
                print_info("Cancelado.")
                return
            deleted = db.delete_submissions(user_id, form.id)
            print_success(f"{deleted} respuestas eliminadas.")
            return

        instances = db.load_definition(form.id)

    if not items:
        print_info(f"'{form.name}' no tiene respuestas.")
        return

    df = prepare_data(instances, items, db.registry)
    console = get_console()
    console.print()
    print_data_table(
        list(df.columns),
        df.values.tolist(),
        title=f"Respuestas de {form.name} ({len(items)})",
    )
    console.print()


def export(
    form_id: Annotated[str, typer.Argument(help="ID del formulario")],
    fmt: Annotated[ExportFormat, typer.Option("--format", "-f", help="Formato de salida")] = ExportFormat.CSV,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Archivo de salida")] = None,
) -> None:
    """
    Exporta las respuestas de un formulario.

    Ejemplo:
        formbuilder export a1b2c3d4 --format excel -o respuestas.xlsx
    """
    db = get_database()
    with handle_errors():
        form, items = db.get_form_with_submissions(current_user_id(), form_id)
        instances = db.load_definition(form.id)

    if output is None:
        name = form.name.lower().replace(" ", "_")
        output = Path(f"{name}_respuestas{fmt.extension}")

    try:
        path = export_submissions(form, instances, items, fmt, output, db.registry)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    print_success(f"Respuestas exportadas: {path}")
