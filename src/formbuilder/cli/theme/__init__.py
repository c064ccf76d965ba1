"""
Sistema de temas para la interfaz CLI de FormBuilder.

El paquete esta organizado en modulos:
- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- styled: Funciones que retornan objetos Text estilizados
- printing: Funciones que imprimen directamente a consola
- tables: Funciones para crear e imprimir tablas Rich
"""

from formbuilder.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from formbuilder.cli.theme.styled import (
    styled_header,
    styled_label,
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
    styled_status,
)

from formbuilder.cli.theme.printing import (
    format_percent,
    print_header,
    print_field,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_form_info,
)

from formbuilder.cli.theme.tables import (
    create_results_table,
    print_forms_table,
    print_data_table,
)

__all__ = [
    # Palette
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # Styled
    "styled_header",
    "styled_label",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    "styled_status",
    # Printing
    "format_percent",
    "print_header",
    "print_field",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_form_info",
    # Tables
    "create_results_table",
    "print_forms_table",
    "print_data_table",
]
