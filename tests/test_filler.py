"""
Tests para el motor de llenado y validación (FillSession).
"""

import json

import pytest

from formbuilder.designer import DesignerSession
from formbuilder.errors import FormNotValid, InstanceNotFound
from formbuilder.fields import InputKind
from formbuilder.filler import FieldState, FillSession, FormState


@pytest.fixture
def contact_form(make_instance):
    """Formulario con título, nombre obligatorio, edad opcional y acepto obligatorio."""
    return [
        make_instance("title", "t"),
        make_instance("text", "name", label="Nombre", required=True),
        make_instance("number", "age", label="Edad"),
        make_instance("checkbox", "terms", label="Acepto", required=True),
    ]


@pytest.fixture
def session(contact_form, registry):
    return FillSession(contact_form, registry=registry)


class TestSetValue:
    """Tests para set_value."""

    def test_valid_value(self, session):
        """Guarda valor y validez."""
        assert session.set_value("name", "Ana") is True
        assert session.value_of("name") == "Ana"
        assert session.field_state("name") == FieldState.VALID

    def test_invalid_value_is_stored(self, session):
        """Un valor inválido se guarda igual, marcado como inválido."""
        assert session.set_value("age", "doce") is False
        assert session.value_of("age") == "doce"
        assert session.field_state("age") == FieldState.INVALID

    def test_value_can_be_corrected(self, session):
        """Un campo inválido vuelve a ser válido al corregirlo."""
        session.set_value("age", "doce")
        session.set_value("age", "12")
        assert session.field_state("age") == FieldState.VALID

    def test_unknown_field(self, session):
        """Un ID fuera de la definición."""
        with pytest.raises(InstanceNotFound):
            session.set_value("ghost", "x")

    def test_untouched_state(self, session):
        """Sin valor el campo está sin tocar."""
        assert session.field_state("name") == FieldState.UNTOUCHED
        assert session.value_of("name", "default") == "default"


class TestFormValidity:
    """Tests para is_form_valid e invalid_ids."""

    def test_required_untouched_blocks(self, session):
        """Los obligatorios sin valor bloquean; los opcionales no."""
        assert session.is_form_valid() is False
        assert session.invalid_ids() == ["name", "terms"]
        assert session.form_state == FormState.INCOMPLETE

    def test_all_valid(self, session):
        """Con los obligatorios completos el formulario es válido."""
        session.set_value("name", "Ana")
        session.set_value("terms", "true")
        assert session.is_form_valid() is True
        assert session.form_state == FormState.READY

    def test_optional_invalid_blocks(self, session):
        """Un opcional con valor inválido también bloquea."""
        session.set_value("name", "Ana")
        session.set_value("terms", "true")
        session.set_value("age", "muchos")
        assert session.invalid_ids() == ["age"]

    def test_validate_all_marks_untouched_required(self, session):
        """validate_all marca los obligatorios sin tocar."""
        session.set_value("name", "Ana")
        assert session.validate_all() == ["terms"]
        assert session.field_state("terms") == FieldState.INVALID
        assert session.field_state("age") == FieldState.UNTOUCHED

    def test_empty_form_is_valid(self, registry):
        """Un formulario sin campos es válido."""
        assert FillSession([], registry=registry).is_form_valid() is True


class TestSubmissionPayload:
    """Tests para build_submission_payload."""

    def test_not_valid(self, session):
        """Falla con la lista de campos inválidos."""
        session.set_value("name", "Ana")
        with pytest.raises(FormNotValid) as exc:
            session.build_submission_payload()
        assert exc.value.invalid_ids == ["terms"]

    def test_payload(self, session):
        """Incluye solo IDs de la definición con valor."""
        session.set_value("name", "Ana")
        session.set_value("terms", "true")
        payload = session.build_submission_payload()
        assert payload == {"name": "Ana", "terms": "true"}

    def test_payload_is_a_copy(self, session):
        """Modificar la respuesta no afecta la sesión."""
        session.set_value("name", "Ana")
        session.set_value("terms", "true")
        payload = session.build_submission_payload()
        payload["name"] = "Otro"
        assert session.value_of("name") == "Ana"

    def test_payload_json(self, session):
        """payload_json serializa la respuesta."""
        session.set_value("name", "Ana")
        session.set_value("terms", "true")
        assert json.loads(session.payload_json()) == {"name": "Ana", "terms": "true"}


class TestWidget:
    """Tests para widget."""

    def test_widget_reflects_state(self, session):
        """El widget lleva el valor y el estado inválido."""
        session.set_value("age", "x")
        widget = session.widget("age")
        assert widget.kind == InputKind.NUMBER
        assert widget.default == "x"
        assert widget.invalid is True

    def test_layout_widget(self, session):
        """Los campos de diseño no piden valor."""
        assert session.widget("t").kind == InputKind.NONE


class TestScenarios:
    """Escenarios completos diseñador -> llenado."""

    def test_required_toggle(self, registry):
        """Marcar obligatorio cambia la validez hasta que se completa."""
        designer = DesignerSession(registry=registry)
        a = designer.add_instance("text", 0)
        assert a.required is False

        fill = FillSession(designer.serialize(), registry=registry)
        assert fill.is_form_valid() is True

        designer.update_configuration(a.id, {"label": "Saludo", "required": True})
        fill = FillSession(designer.serialize(), registry=registry)
        assert fill.is_form_valid() is False

        fill.set_value(a.id, "hello")
        assert fill.is_form_valid() is True

    def test_required_select_value_outside_options(self, registry):
        """Un select obligatorio acepta valores que no están en las opciones."""
        designer = DesignerSession(registry=registry)
        s = designer.add_instance("select", 0)
        designer.update_configuration(s.id, {"options": ["red", "green"], "required": True})

        fill = FillSession(designer.serialize(), registry=registry)
        assert fill.set_value(s.id, "blue") is True
        assert fill.build_submission_payload() == {s.id: "blue"}

    def test_payload_has_no_extraneous_keys(self, registry):
        """Solo IDs presentes en la definición."""
        designer = DesignerSession(registry=registry)
        ids = [designer.add_instance(tag).id for tag in ("text", "date", "paragraph")]

        fill = FillSession(designer.serialize(), registry=registry)
        fill.set_value(ids[0], "a")
        fill.set_value(ids[1], "2024-01-01")
        assert set(fill.build_submission_payload()) <= set(ids)
