"""
Excepciones propias de formulario.

Las violaciones de reglas de campo no son excepciones: se representan
como entradas en el mapa de errores de la sesión.
"""

from typing import Optional


class FormularioError(Exception):
    """Error base de formulario."""


class LoadFailure(FormularioError):
    """No se pudo obtener una definición de formulario utilizable."""

    def __init__(self, reason: str, identity: Optional[str] = None):
        self.reason = reason
        self.identity = identity
        if identity:
            super().__init__(f"No se pudo cargar el formulario para '{identity}': {reason}")
        else:
            super().__init__(f"No se pudo cargar el formulario: {reason}")


class InvalidTransition(FormularioError):
    """Operación no permitida en el estado actual de la sesión."""
