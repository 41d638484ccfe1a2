"""
Sistema de temas para la interfaz CLI.

- palette: Paletas y gestión de tema (CLITheme, ColorPalette)
- printing: Funciones que imprimen directamente a consola y tablas
"""

from formulario.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
    set_theme,
)
from formulario.cli.theme.printing import (
    print_header,
    print_step,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_violations,
    create_fields_table,
)

__all__ = [
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    "set_theme",
    "print_header",
    "print_step",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_violations",
    "create_fields_table",
]
