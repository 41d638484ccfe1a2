"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from rich.console import Console
from rich.theme import Theme


class ThemeName(Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    MINIMAL = "minimal"


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    primary: str      # Títulos, barra de progreso
    secondary: str    # Subtítulos, número de sección
    accent: str       # Campos requeridos
    success: str
    warning: str
    error: str        # Violaciones
    info: str
    muted: str        # Descripciones, ayudas
    label: str        # Etiquetas de campo
    border: str


# Tema por defecto - colores pasteles
THEME_DEFAULT = ColorPalette(
    primary="#5f87af",
    secondary="#87afaf",
    accent="#af87af",
    success="#87af87",
    warning="#d7af5f",
    error="#d75f5f",
    info="#5f87af",
    muted="#808080",
    label="#afafaf",
    border="#5f5f5f",
)

# Tema minimalista - escala de grises
THEME_MINIMAL = ColorPalette(
    primary="#d0d0d0",
    secondary="#bcbcbc",
    accent="#e4e4e4",
    success="#bcbcbc",
    warning="#e4e4e4",
    error="#ffffff",
    info="#bcbcbc",
    muted="#808080",
    label="#a8a8a8",
    border="#585858",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None  # Recrear consola con el nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            cls._console = Console(theme=Theme({
                "title": f"bold {p.primary}",
                "subtitle": p.secondary,
                "required": p.accent,
                "violation": p.error,
                "muted": p.muted,
                "label": p.label,
            }))
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()


def set_theme(name: str) -> None:
    """Activa un tema por nombre; nombres desconocidos usan el default."""
    try:
        CLITheme.set_theme(ThemeName(name))
    except ValueError:
        CLITheme.set_theme(ThemeName.DEFAULT)
