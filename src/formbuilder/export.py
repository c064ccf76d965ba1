"""
Exportación de respuestas a diferentes formatos.

Cada columna corresponde a un campo de entrada de la definición
(encabezado = etiqueta del campo) más la fecha de envío.
"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import pandas as pd
from jinja2 import Environment, FileSystemLoader, select_autoescape

from formbuilder import __version__
from formbuilder.fields.base import FieldGroup
from formbuilder.fields.registry import FieldRegistry, get_registry
from formbuilder.models import FieldInstance, Form, Submission


# Directorio de templates
_TEMPLATE_DIR = Path(__file__).parent / "templates"

SUBMITTED_AT = "Submitted at"


class ExportFormat(str, Enum):
    """Formatos de exportación soportados."""
    CSV = "csv"
    EXCEL = "excel"
    JSON = "json"
    HTML = "html"
    TXT = "txt"

    @property
    def extension(self) -> str:
        return ".xlsx" if self is ExportFormat.EXCEL else f".{self.value}"


@dataclass
class ExportColumn:
    """Columna de la tabla exportada."""
    field_id: str
    header: str


def _create_jinja_env() -> Environment:
    """Crea entorno Jinja2 para los templates HTML."""
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def export_columns(
    instances: list[FieldInstance],
    registry: Optional[FieldRegistry] = None,
) -> list[ExportColumn]:
    """Columnas de datos: solo campos de entrada, en orden del formulario."""
    registry = registry or get_registry()
    columns = []
    for instance in instances:
        if registry.resolve(instance.tag).group is not FieldGroup.INPUT:
            continue
        columns.append(ExportColumn(field_id=instance.id, header=instance.label or instance.id))
    return columns


def _unique_headers(columns: list[ExportColumn]) -> list[str]:
    # Ninguna columna puede compartir encabezado con otra ni con SUBMITTED_AT
    taken = {SUBMITTED_AT}
    headers = []
    for column in columns:
        header = column.header
        count = 1
        while header in taken:
            count += 1
            header = f"{column.header} ({count})"
        taken.add(header)
        headers.append(header)
    return headers


def prepare_data(
    instances: list[FieldInstance],
    submissions: list[Submission],
    registry: Optional[FieldRegistry] = None,
) -> pd.DataFrame:
    """
    Genera la tabla de respuestas.

    Raises:
        ValueError: Si no hay respuestas para exportar
    """
    if not submissions:
        raise ValueError("El formulario no tiene respuestas para exportar.")

    columns = export_columns(instances, registry)
    headers = _unique_headers(columns)

    rows = []
    for submission in submissions:
        row: dict[str, Any] = {}
        for column, header in zip(columns, headers):
            value = submission.content.get(column.field_id)
            row[header] = "" if value is None else value
        row[SUBMITTED_AT] = submission.created_at
        rows.append(row)

    return pd.DataFrame(rows, columns=[*headers, SUBMITTED_AT])


# ============================================================================
# Escritores
# ============================================================================

def export_to_csv(df: pd.DataFrame, output_path: Path) -> None:
    df.to_csv(output_path, index=False)


def export_to_excel(df: pd.DataFrame, output_path: Path, form: Form) -> None:
    """Exporta a Excel: hoja de respuestas y hoja con datos del formulario."""
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Respuestas", index=False)

        info = pd.DataFrame({
            "Parámetro": ["Formulario", "ID", "Descripción", "Visitas", "Respuestas"],
            "Valor": [form.name, form.id, form.description, form.visits, form.submissions],
        })
        info.to_excel(writer, sheet_name="Formulario", index=False)


def export_to_json(df: pd.DataFrame, output_path: Path, form: Form) -> None:
    data = {
        "form": {
            "id": form.id,
            "name": form.name,
            "description": form.description,
        },
        "submissions": df.to_dict(orient="records"),
    }
    output_path.write_text(json.dumps(data, indent=2, ensure_ascii=False, default=str), encoding="utf-8")


def export_to_html(df: pd.DataFrame, output_path: Path, form: Form) -> None:
    env = _create_jinja_env()
    template = env.get_template("submissions.html.j2")
    html = template.render(
        form=form,
        headers=list(df.columns),
        rows=df.astype(str).values.tolist(),
        version=__version__,
    )
    output_path.write_text(html, encoding="utf-8")


def export_to_txt(df: pd.DataFrame, output_path: Path) -> None:
    """Texto separado por tabulaciones."""
    df.to_csv(output_path, index=False, sep="\t")


def export_submissions(
    form: Form,
    instances: list[FieldInstance],
    submissions: list[Submission],
    fmt: ExportFormat,
    output_path: Path,
    registry: Optional[FieldRegistry] = None,
) -> Path:
    """
    Exporta las respuestas de un formulario.

    Args:
        form: Formulario exportado
        instances: Definición del formulario
        submissions: Respuestas a exportar
        fmt: Formato de salida
        output_path: Archivo destino (se agrega la extensión si falta)

    Returns:
        Ruta del archivo escrito

    Raises:
        ValueError: Si no hay respuestas
    """
    df = prepare_data(instances, submissions, registry)

    output_path = Path(output_path)
    if not output_path.suffix:
        output_path = output_path.with_suffix(fmt.extension)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if fmt is ExportFormat.CSV:
        export_to_csv(df, output_path)
    elif fmt is ExportFormat.EXCEL:
        export_to_excel(df, output_path, form)
    elif fmt is ExportFormat.JSON:
        export_to_json(df, output_path, form)
    elif fmt is ExportFormat.HTML:
        export_to_html(df, output_path, form)
    else:
        export_to_txt(df, output_path)

    return output_path
