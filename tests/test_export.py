"""
Tests para la exportación de respuestas.
"""

import json

import pandas as pd
import pytest

from formbuilder.export import (
    SUBMITTED_AT,
    ExportFormat,
    export_columns,
    export_submissions,
    prepare_data,
)
from formbuilder.models import Form, Submission


@pytest.fixture
def definition(make_instance):
    return [
        make_instance("title", "t"),
        make_instance("text", "name", label="Nombre"),
        make_instance("select", "color", label="Color", options=["rojo", "verde"]),
    ]


@pytest.fixture
def form():
    return Form(id="abcd1234", user_id="ana", name="Encuesta", description="Colores")


@pytest.fixture
def items():
    return [
        Submission(id=1, form_id="abcd1234", content={"name": "Ana", "color": "rojo"},
                   created_at="2024-05-01T10:00:00"),
        Submission(id=2, form_id="abcd1234", content={"name": "Luis"},
                   created_at="2024-05-02T11:30:00"),
    ]


class TestPrepareData:
    """Tests para prepare_data."""

    def test_columns_are_input_labels(self, definition, registry):
        """Solo los campos de entrada generan columnas."""
        columns = export_columns(definition, registry)
        assert [c.header for c in columns] == ["Nombre", "Color"]

    def test_rows(self, definition, items, registry):
        """Una fila por respuesta; valores faltantes vacíos."""
        df = prepare_data(definition, items, registry)
        assert list(df.columns) == ["Nombre", "Color", SUBMITTED_AT]
        assert df.iloc[0]["Color"] == "rojo"
        assert df.iloc[1]["Color"] == ""

    def test_duplicate_labels(self, make_instance, registry):
        """Etiquetas repetidas no comparten columna."""
        definition = [
            make_instance("text", "a", label="Nombre"),
            make_instance("text", "b", label="Nombre"),
        ]
        items = [Submission(form_id="f", content={"a": "1", "b": "2"})]
        df = prepare_data(definition, items, registry)
        assert list(df.columns)[:2] == ["Nombre", "Nombre (2)"]

    def test_label_matching_submitted_at(self, make_instance, registry):
        """Un campo con etiqueta igual a la columna de fecha no pierde su valor."""
        definition = [make_instance("text", "a", label=SUBMITTED_AT)]
        items = [Submission(form_id="f", content={"a": "hola"}, created_at="2026-01-01T00:00:00")]

        df = prepare_data(definition, items, registry)

        assert list(df.columns) == [f"{SUBMITTED_AT} (2)", SUBMITTED_AT]
        assert df.iloc[0][f"{SUBMITTED_AT} (2)"] == "hola"
        assert df.iloc[0][SUBMITTED_AT] == "2026-01-01T00:00:00"

    def test_no_submissions(self, definition, registry):
        """Sin respuestas no hay nada que exportar."""
        with pytest.raises(ValueError):
            prepare_data(definition, [], registry)


class TestExportSubmissions:
    """Tests para los escritores."""

    def test_csv(self, tmp_path, form, definition, items, registry):
        """CSV con encabezados."""
        path = export_submissions(form, definition, items, ExportFormat.CSV, tmp_path / "out", registry)
        assert path.suffix == ".csv"
        df = pd.read_csv(path)
        assert list(df["Nombre"]) == ["Ana", "Luis"]

    def test_excel(self, tmp_path, form, definition, items, registry):
        """Excel con hoja de respuestas y hoja del formulario."""
        path = export_submissions(form, definition, items, ExportFormat.EXCEL, tmp_path / "out", registry)
        assert path.suffix == ".xlsx"
        sheets = pd.read_excel(path, sheet_name=None)
        assert set(sheets) == {"Respuestas", "Formulario"}
        assert len(sheets["Respuestas"]) == 2

    def test_json(self, tmp_path, form, definition, items, registry):
        """JSON con datos del formulario y respuestas."""
        path = export_submissions(form, definition, items, ExportFormat.JSON, tmp_path / "out.json", registry)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["form"]["name"] == "Encuesta"
        assert data["submissions"][0]["Nombre"] == "Ana"

    def test_html(self, tmp_path, form, definition, items, registry):
        """HTML con una tabla escapada."""
        items[0].content["name"] = "<b>Ana</b>"
        path = export_submissions(form, definition, items, ExportFormat.HTML, tmp_path / "out", registry)
        html = path.read_text(encoding="utf-8")
        assert "<th>Nombre</th>" in html
        assert "&lt;b&gt;Ana&lt;/b&gt;" in html

    def test_txt(self, tmp_path, form, definition, items, registry):
        """Texto separado por tabulaciones."""
        path = export_submissions(form, definition, items, ExportFormat.TXT, tmp_path / "out", registry)
        first_line = path.read_text(encoding="utf-8").splitlines()[0]
        assert first_line.split("\t") == ["Nombre", "Color", SUBMITTED_AT]
