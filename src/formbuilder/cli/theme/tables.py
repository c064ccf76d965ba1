"""
Funciones para crear e imprimir tablas Rich.
"""

from rich.table import Table
from rich.text import Text
from rich import box

from formbuilder.cli.theme.palette import get_console, get_palette
from formbuilder.cli.theme.styled import styled_status
from formbuilder.models import Form


def create_results_table(
    title: str = None,
    columns: list[tuple[str, str]] = None,  # [(nombre, justify), ...]
) -> Table:
    """Crea una tabla estilizada para resultados."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )

    if columns:
        for name, justify in columns:
            table.add_column(name, justify=justify)

    return table


def print_forms_table(forms: list[Form], title: str = None) -> None:
    """Imprime tabla de formularios."""
    table = create_results_table(
        title=title,
        columns=[
            ("ID", "left"),
            ("Nombre", "left"),
            ("Estado", "center"),
            ("Visitas", "right"),
            ("Respuestas", "right"),
            ("Creado", "left"),
        ],
    )
    for form in forms:
        table.add_row(
            form.id,
            Text(form.name),
            styled_status(form.published),
            str(form.visits),
            str(form.submissions),
            form.created_at[:10],
        )
    get_console().print(table)


def print_data_table(headers: list[str], rows: list[list], title: str = None) -> None:
    """Imprime una tabla genérica de texto."""
    table = create_results_table(title=title, columns=[(h, "left") for h in headers])
    for row in rows:
        table.add_row(*(Text(str(cell)) for cell in row))
    get_console().print(table)
