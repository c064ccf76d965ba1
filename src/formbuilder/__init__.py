"""
FormBuilder - Diseño y llenado de formularios desde la terminal.

Permite armar formularios a partir de campos tipados, guardar su
definición y luego completarlos con validación por campo.
"""

__version__ = "0.3.0"
