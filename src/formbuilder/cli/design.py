"""
Diseñador interactivo de formularios.

Recorre un DesignerSession: cada acción del menú llama a una operación
del motor y vuelve a dibujar el lienzo.
"""

from typing import Annotated, Optional

import questionary
import typer
from rich.panel import Panel
from rich.text import Text
from rich import box

from formbuilder.cli.common import current_user_id, get_database, handle_errors
from formbuilder.cli.prompts import ask_property
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
from formbuilder.database import Database
from formbuilder.designer import DesignerSession
from formbuilder.errors import FormBuilderError, InvalidConfiguration
from formbuilder.fields import FieldGroup
from formbuilder.models import FieldInstance, Form


ACTION_ADD = "Agregar campo"
ACTION_EDIT = "Editar propiedades"
ACTION_MOVE = "Mover campo"
ACTION_REMOVE = "Eliminar campo"
ACTION_PREVIEW = "Vista previa"
ACTION_SAVE = "Guardar"
ACTION_QUIT = "Salir"


def render_canvas(session: DesignerSession) -> None:
    """Dibuja los campos en orden, resaltando el seleccionado."""
    console = get_console()
    p = get_palette()

    if len(session) == 0:
        console.print(Panel(
            Text("Agrega campos desde el menú", style=p.muted),
            border_style=p.border,
            box=box.ROUNDED,
        ))
        return

    for index, instance in enumerate(session.instances):
        descriptor = session.registry.resolve(instance.tag)
        selected = instance.id == session.selected_id
        console.print(Panel(
            descriptor.design_preview(instance),
            title=f"{index + 1}. {descriptor.label}",
            title_align="left",
            subtitle=instance.id,
            subtitle_align="right",
            border_style=p.accent if selected else p.border,
            box=box.HEAVY if selected else box.ROUNDED,
        ))


def _instance_choice(index: int, instance: FieldInstance) -> questionary.Choice:
    label = instance.label or instance.tag
    return questionary.Choice(f"{index + 1}. {label} ({instance.tag})", value=instance.id)


class DesignerMenu:
    """Menu del diseñador para un formulario."""

    def __init__(self, db: Database, user_id: str, form: Form, session: DesignerSession):
        self.db = db
        self.user_id = user_id
        self.form = form
        self.session = session

    def show(self) -> None:
        """Muestra el menu en un loop hasta salir."""
        while True:
            get_console().print()
            print_header(self.form.name, "cambios sin guardar" if self.session.dirty else None)
            render_canvas(self.session)

            choices = [ACTION_ADD]
            if len(self.session):
                choices += [ACTION_EDIT, ACTION_MOVE, ACTION_REMOVE, ACTION_PREVIEW]
            choices += [ACTION_SAVE, ACTION_QUIT]

            action = questionary.select(
                "¿Qué deseas hacer?",
                choices=choices,
                style=PROMPT_STYLE,
            ).ask()

            if action is None or action == ACTION_QUIT:
                if self._confirm_quit():
                    break
                continue

            try:
                if action == ACTION_ADD:
                    self._add()
                elif action == ACTION_EDIT:
                    self._edit()
                elif action == ACTION_MOVE:
                    self._move()
                elif action == ACTION_REMOVE:
                    self._remove()
                elif action == ACTION_PREVIEW:
                    self._preview()
                elif action == ACTION_SAVE:
                    self._save()
            except FormBuilderError as e:
                print_error(str(e))

    def _pick_instance(self, message: str) -> Optional[str]:
        choices = [_instance_choice(i, inst) for i, inst in enumerate(self.session.instances)]
        default = self.session.selected_id if self.session.selected is not None else None
        return questionary.select(
            message,
            choices=choices,
            default=default,
            style=PROMPT_STYLE,
        ).ask()

    def _add(self) -> None:
        choices = []
        for group, title in ((FieldGroup.LAYOUT, "Diseño"), (FieldGroup.INPUT, "Entrada")):
            choices.append(questionary.Separator(f"-- {title} --"))
            for descriptor in self.session.registry.by_group(group):
                choices.append(questionary.Choice(
                    f"{descriptor.icon} {descriptor.label}", value=descriptor.tag
                ))

        tag = questionary.select("Tipo de campo:", choices=choices, style=PROMPT_STYLE).ask()
        if tag is None:
            return

        position = questionary.text(
            f"Posición [1-{len(self.session) + 1}]:",
            default=str(len(self.session) + 1),
            style=PROMPT_STYLE,
        ).ask()
        if position is None:
            return
        at_index = int(position) - 1 if position.strip().lstrip("-").isdigit() else None

        instance = self.session.add_instance(tag, at_index)
        print_success(f"Campo {instance.id} agregado")

    def _edit(self) -> None:
        instance_id = self._pick_instance("Campo a editar:")
        if instance_id is None:
            return
        self.session.select(instance_id)

        instance = self.session.get_instance(instance_id)
        descriptor = self.session.registry.resolve(instance.tag)
        specs = descriptor.property_editor(instance)
        if not specs:
            print_info("Este campo no tiene propiedades.")
            return

        changes = {}
        for spec in specs:
            value = ask_property(spec)
            if value is None:
                print_info("Edición cancelada.")
                return
            changes[spec.key] = value

        try:
            self.session.patch_configuration(instance_id, changes)
        except InvalidConfiguration as e:
            print_error(str(e))
            return
        print_success("Propiedades actualizadas")

    def _move(self) -> None:
        instance_id = self._pick_instance("Campo a mover:")
        if instance_id is None:
            return
        position = questionary.text(
            f"Nueva posición [1-{len(self.session)}]:",
            validate=lambda t: t.strip().isdigit() or "Ingrese un número",
            style=PROMPT_STYLE,
        ).ask()
        if position is None:
            return
        target = self.session.move_instance(instance_id, int(position) - 1)
        self.session.select(instance_id)
        print_success(f"Campo movido a la posición {target + 1}")

    def _remove(self) -> None:
        instance_id = self._pick_instance("Campo a eliminar:")
        if instance_id is None:
            return
        if not questionary.confirm("¿Eliminar el campo?", default=False, style=PROMPT_STYLE).ask():
            return
        self.session.remove_instance(instance_id)
        print_success("Campo eliminado")

    def _preview(self) -> None:
        from formbuilder.cli.fill import render_fill_view

        render_fill_view(self.form.name, self.session.serialize(), self.session.registry)
        questionary.press_any_key_to_continue(style=PROMPT_STYLE).ask()

    def _save(self) -> None:
        self.form = self.db.save_definition(self.user_id, self.form.id, self.session.serialize())
        self.session.mark_saved()
        print_success("Formulario guardado")

    def _confirm_quit(self) -> bool:
        if not self.session.dirty:
            return True
        print_warning("Hay cambios sin guardar.")
        answer = questionary.select(
            "¿Qué deseas hacer?",
            choices=["Guardar y salir", "Salir sin guardar", "Volver"],
            style=PROMPT_STYLE,
        ).ask()
        if answer == "Guardar y salir":
            try:
                self._save()
            except FormBuilderError as e:
                print_error(str(e))
                return False
            return True
        return answer == "Salir sin guardar"


def design(
    form_id: Annotated[str, typer.Argument(help="ID del formulario a diseñar")],
) -> None:
    """
    Abre el diseñador interactivo de un formulario.

    Permite agregar, ordenar, configurar y eliminar campos. Los
    formularios publicados no pueden editarse.
    """
    db = get_database()
    with handle_errors():
        user_id = current_user_id()
        form = db.require_form(form_id, user_id)
        if form.published:
            print_error(f"El formulario '{form.name}' ya está publicado y no puede editarse.")
            raise typer.Exit(1)
        session = DesignerSession(db.load_definition(form.id), registry=db.registry)

    DesignerMenu(db, user_id, form, session).show()
