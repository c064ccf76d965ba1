"""
Tipos de campo de formulario.

Cada módulo define un tipo de campo (configuración, renders y
validación) y registry reúne todos los descriptores:
- Diseño: title, subtitle, paragraph, separator, spacer
- Entrada: text, number, textarea, date, select, checkbox
"""

from formbuilder.fields.base import (
    FieldGroup,
    FieldTypeDescriptor,
    FillWidget,
    InputKind,
    PropertyKind,
    PropertySpec,
)
from formbuilder.fields.registry import (
    FieldRegistry,
    build_default_registry,
    builtin_descriptors,
    get_registry,
)

__all__ = [
    # Descriptor
    "FieldGroup",
    "FieldTypeDescriptor",
    "FillWidget",
    "InputKind",
    "PropertyKind",
    "PropertySpec",
    # Registro
    "FieldRegistry",
    "build_default_registry",
    "builtin_descriptors",
    "get_registry",
]
