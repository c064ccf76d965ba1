"""
Comando CLI para listar los tipos de campo disponibles.
"""

from rich.text import Text

from formbuilder.cli.theme import create_results_table, get_console
from formbuilder.fields import FieldGroup, get_registry


GROUP_TITLES = {
    FieldGroup.LAYOUT: "Elementos de diseño",
    FieldGroup.INPUT: "Campos de entrada",
}


def fields_list() -> None:
    """Lista los tipos de campo registrados, por grupo."""
    registry = get_registry()
    console = get_console()

    for group, title in GROUP_TITLES.items():
        descriptors = registry.by_group(group)
        if not descriptors:
            continue
        table = create_results_table(
            title=title,
            columns=[("", "center"), ("Tipo", "left"), ("Nombre", "left")],
        )
        for descriptor in descriptors:
            table.add_row(Text(descriptor.icon), descriptor.tag, descriptor.label)
        console.print()
        console.print(table)
    console.print()
