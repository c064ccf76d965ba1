"""
CLI de FormBuilder - Diseño y llenado de formularios en la terminal.

Comandos:
- form: Gestión de formularios (create, list, show, delete, publish, stats)
- fields: Tipos de campo disponibles
- design: Diseñador interactivo
- preview: Vista previa del llenado
- fill: Responder un formulario publicado
- submissions: Respuestas recibidas
- export: Exportación de respuestas
"""

from typing import Annotated, Optional

import typer

from formbuilder.cli.design import design
from formbuilder.cli.fields import fields_list
from formbuilder.cli.fill import fill, preview
from formbuilder.cli.forms import (
    form_create,
    form_delete,
    form_list,
    form_publish,
    form_show,
    form_stats,
)
from formbuilder.cli.submissions import export, submissions
from formbuilder.cli.theme import CLITheme, ThemeName
from formbuilder.config import get_settings
from formbuilder.log import configure_logging

# Crear aplicación principal
app = typer.Typer(
    name="formbuilder",
    help="Diseño, publicación y llenado de formularios desde la terminal.",
    no_args_is_help=True,
)

# Sub-aplicación de formularios
form_app = typer.Typer(help="Gestión de formularios")
form_app.command("create")(form_create)
form_app.command("list")(form_list)
form_app.command("show")(form_show)
form_app.command("delete")(form_delete)
form_app.command("publish")(form_publish)
form_app.command("stats")(form_stats)

app.add_typer(form_app, name="form")
app.command("fields")(fields_list)
app.command("design")(design)
app.command("preview")(preview)
app.command("fill")(fill)
app.command("submissions")(submissions)
app.command("export")(export)


@app.callback()
def main(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Nivel de logging (DEBUG, INFO, WARNING, ERROR)"),
    ] = None,
    theme: Annotated[
        ThemeName,
        typer.Option("--theme", help="Tema de colores"),
    ] = ThemeName.DEFAULT,
):
    """
    FormBuilder - Formularios con diseñador interactivo.

    El usuario se toma de FORMBUILDER_USER y la base de datos de
    FORMBUILDER_DB (por defecto ~/.formbuilder/formbuilder.db).
    """
    configure_logging(log_level or get_settings().log_level)
    CLITheme.set_theme(theme)


__all__ = [
    "app",
]
