"""
Tests para el motor del diseñador (DesignerSession).
"""

import pytest

from formbuilder.designer import DesignerSession, clamp
from formbuilder.errors import (
    InstanceNotFound,
    InvalidConfiguration,
    InvalidDefinition,
    UnknownFieldType,
)


@pytest.fixture
def session(registry):
    """Sesión vacía."""
    return DesignerSession(registry=registry)


@pytest.fixture
def three_fields(session):
    """Sesión con tres campos: title, text, select."""
    a = session.add_instance("title")
    b = session.add_instance("text")
    c = session.add_instance("select")
    session.mark_saved()
    return session, a.id, b.id, c.id


class TestClamp:
    """Tests para clamp."""

    def test_clamp(self):
        """Limita a [0, upper]."""
        assert clamp(-3, 5) == 0
        assert clamp(2, 5) == 2
        assert clamp(9, 5) == 5


class TestAddInstance:
    """Tests para add_instance."""

    def test_add_appends_and_selects(self, session):
        """Sin posición se agrega al final y queda seleccionado."""
        first = session.add_instance("text")
        second = session.add_instance("number")

        assert session.ids() == [first.id, second.id]
        assert session.selected_id == second.id
        assert session.dirty is True

    def test_add_with_default_configuration(self, session):
        """El campo nuevo tiene la configuración por defecto del tipo."""
        instance = session.add_instance("textarea")
        assert instance.configuration.rows == 3
        assert instance.tag == "textarea"

    def test_add_at_index(self, three_fields):
        """Inserta en la posición indicada."""
        session, a, b, c = three_fields
        new = session.add_instance("date", at_index=1)
        assert session.ids() == [a, new.id, b, c]

    def test_add_index_clamped(self, three_fields):
        """Posiciones fuera de rango se limitan."""
        session, a, b, c = three_fields
        last = session.add_instance("date", at_index=99)
        first = session.add_instance("date", at_index=-5)
        assert session.ids()[0] == first.id
        assert session.ids()[-1] == last.id

    def test_ids_unique(self, session):
        """Los IDs generados no se repiten."""
        for _ in range(30):
            session.add_instance("separator")
        assert len(set(session.ids())) == 30

    def test_unknown_tag(self, session):
        """Un tipo desconocido no modifica la sesión."""
        with pytest.raises(UnknownFieldType):
            session.add_instance("signature")
        assert len(session) == 0
        assert session.dirty is False


class TestRemoveInstance:
    """Tests para remove_instance."""

    def test_remove(self, three_fields):
        """Elimina y conserva el orden del resto."""
        session, a, b, c = three_fields
        session.remove_instance(b)
        assert session.ids() == [a, c]
        assert session.dirty is True

    def test_remove_selected_clears_selection(self, three_fields):
        """Eliminar el seleccionado deja sin selección."""
        session, a, b, c = three_fields
        session.select(b)
        session.remove_instance(b)
        assert session.selected_id is None
        assert session.selected is None

    def test_remove_other_keeps_selection(self, three_fields):
        """Eliminar otro campo no cambia la selección."""
        session, a, b, c = three_fields
        session.select(a)
        session.remove_instance(c)
        assert session.selected_id == a

    def test_remove_missing(self, three_fields):
        """Un ID inexistente."""
        session, *_ = three_fields
        with pytest.raises(InstanceNotFound):
            session.remove_instance("nope")
        assert session.dirty is False

    def test_add_then_remove_restores_order(self, three_fields):
        """Agregar y luego eliminar el mismo campo deja los IDs como estaban."""
        session, a, b, c = three_fields
        added = session.add_instance("number", at_index=1)
        session.remove_instance(added.id)
        assert session.ids() == [a, b, c]


class TestMoveInstance:
    """Tests para move_instance."""

    def test_move_down(self, three_fields):
        """Mover al final."""
        session, a, b, c = three_fields
        assert session.move_instance(a, 2) == 2
        assert session.ids() == [b, c, a]

    def test_move_up(self, three_fields):
        """Mover al principio."""
        session, a, b, c = three_fields
        session.move_instance(c, 0)
        assert session.ids() == [c, a, b]

    def test_move_clamped(self, three_fields):
        """La posición final se limita a [0, len-1]."""
        session, a, b, c = three_fields
        assert session.move_instance(a, 50) == 2
        assert session.move_instance(a, -1) == 0

    def test_move_keeps_set_of_ids(self, three_fields):
        """Mover no agrega ni quita campos."""
        session, a, b, c = three_fields
        session.move_instance(b, 0)
        assert sorted(session.ids()) == sorted([a, b, c])

    def test_move_missing(self, three_fields):
        """Un ID inexistente."""
        session, *_ = three_fields
        with pytest.raises(InstanceNotFound):
            session.move_instance("nope", 0)

    def test_move_twice_same_index(self, three_fields):
        """Repetir el movimiento a la misma posición no cambia el orden."""
        session, a, b, c = three_fields
        session.move_instance(a, 1)
        once = session.ids()
        session.move_instance(a, 1)
        assert session.ids() == once == [b, a, c]


class TestSelect:
    """Tests para select."""

    def test_select_and_deselect(self, three_fields):
        """select(None) deselecciona."""
        session, a, b, c = three_fields
        session.select(b)
        assert session.selected.id == b
        session.select(None)
        assert session.selected is None

    def test_select_does_not_mark_dirty(self, three_fields):
        """Seleccionar no es una modificación."""
        session, a, *_ = three_fields
        session.select(a)
        assert session.dirty is False

    def test_select_unknown_id(self, three_fields):
        """Seleccionar un ID inexistente no falla pero selected es None."""
        session, *_ = three_fields
        session.select("ghost")
        assert session.selected is None


class TestUpdateConfiguration:
    """Tests para update_configuration y patch_configuration."""

    def test_update_replaces(self, three_fields):
        """La configuración se reemplaza completa."""
        session, a, b, c = three_fields
        session.update_configuration(b, {"label": "Nombre", "required": True})

        instance = session.get_instance(b)
        assert instance.configuration.label == "Nombre"
        assert instance.required is True
        assert instance.configuration.helper_text == "Helper text"
        assert session.dirty is True

    def test_update_keeps_id_and_tag(self, three_fields):
        """Nunca cambia el ID ni el tipo."""
        session, a, b, c = three_fields
        session.update_configuration(b, {"label": "Nombre"})
        instance = session.get_instance(b)
        assert (instance.id, instance.tag) == (b, "text")

    def test_invalid_update_is_atomic(self, three_fields):
        """Una configuración inválida no modifica nada."""
        session, a, b, c = three_fields
        before = session.get_instance(b).configuration

        with pytest.raises(InvalidConfiguration):
            session.update_configuration(b, {"label": "x"})

        assert session.get_instance(b).configuration is before
        assert session.dirty is False

    def test_update_missing(self, three_fields):
        """Un ID inexistente."""
        session, *_ = three_fields
        with pytest.raises(InstanceNotFound):
            session.update_configuration("nope", {})

    def test_patch_keeps_other_properties(self, three_fields):
        """patch_configuration solo cambia lo indicado."""
        session, a, b, c = three_fields
        session.update_configuration(c, {"label": "País", "options": ["UY", "AR"]})
        session.patch_configuration(c, {"required": True})

        config = session.get_instance(c).configuration
        assert config.label == "País"
        assert config.options == ["UY", "AR"]
        assert config.required is True

    def test_patch_accepts_alias(self, three_fields):
        """patch_configuration acepta claves camelCase."""
        session, a, b, c = three_fields
        session.patch_configuration(b, {"placeHolder": "Tu nombre"})
        assert session.get_instance(b).configuration.placeholder == "Tu nombre"

    def test_patch_unknown_key(self, three_fields):
        """Una propiedad que el tipo no tiene se rechaza sin modificar nada."""
        session, a, b, c = three_fields
        before = session.get_instance(b).configuration

        with pytest.raises(InvalidConfiguration, match="colour"):
            session.patch_configuration(b, {"colour": "red"})

        assert session.get_instance(b).configuration is before
        assert session.dirty is False

    def test_unchanged_configuration_not_dirty(self, three_fields):
        """Aplicar los mismos valores no marca cambios sin guardar."""
        session, a, b, c = three_fields
        label = session.get_instance(b).configuration.label
        session.patch_configuration(b, {"label": label})
        assert session.dirty is False


class TestSerialization:
    """Tests para serialize, load y JSON."""

    def test_serialize_is_a_copy(self, three_fields):
        """Modificar la copia no afecta la sesión."""
        session, a, b, c = three_fields
        snapshot = session.serialize()
        snapshot.pop()
        snapshot[0].id = "changed"
        assert session.ids() == [a, b, c]

    def test_serialize_copies_option_lists(self, three_fields):
        """Las listas de la configuración no se comparten con la copia."""
        session, a, b, c = three_fields
        session.update_configuration(c, {"options": ["red"]})
        session.mark_saved()

        snapshot = session.serialize()
        snapshot[2].configuration.options.append("blue")

        assert session.get_instance(c).configuration.options == ["red"]
        assert session.dirty is False

    def test_load_copies_option_lists(self, session, make_instance):
        """La definición cargada no comparte listas con la original."""
        original = make_instance("select", "s", options=["red"])
        session.load([original])
        original.configuration.options.append("blue")
        assert session.get_instance("s").configuration.options == ["red"]

    def test_load_resets_state(self, three_fields, registry):
        """load quita la selección y la marca de cambios."""
        session, a, b, c = three_fields
        snapshot = session.serialize()
        session.add_instance("date")

        session.load(snapshot)
        assert session.ids() == [a, b, c]
        assert session.selected_id is None
        assert session.dirty is False

    def test_load_duplicate_ids(self, session, make_instance):
        """IDs repetidos se rechazan."""
        with pytest.raises(InvalidDefinition):
            session.load([make_instance("text", "x"), make_instance("date", "x")])

    def test_json_roundtrip(self, three_fields, registry):
        """to_json / from_json reconstruyen la misma definición."""
        session, a, b, c = three_fields
        session.update_configuration(b, {"label": "Nombre"})

        restored = DesignerSession.from_json(session.to_json(), registry=registry)
        assert restored.ids() == [a, b, c]
        assert restored.get_instance(b).configuration.label == "Nombre"
        assert restored.dirty is False

    def test_mark_saved(self, session):
        """mark_saved limpia la marca de cambios."""
        session.add_instance("text")
        session.mark_saved()
        assert session.dirty is False
