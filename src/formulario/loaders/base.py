"""
Clase base para fuentes de definiciones de formulario.
"""

from abc import ABC, abstractmethod
from typing import Optional

from formulario.models.form import FormDefinition


class FormLoader(ABC):
    """Fuente externa y asíncrona de definiciones de formulario."""

    @abstractmethod
    async def fetch(self, identity: Optional[str] = None) -> FormDefinition:
        """
        Obtiene la definición para una identidad.

        Raises:
            LoadFailure: Si no se obtuvo una definición utilizable
        """


class StaticLoader(FormLoader):
    """Loader que siempre retorna la misma definición."""

    def __init__(self, form: FormDefinition):
        self.form = form

    async def fetch(self, identity: Optional[str] = None) -> FormDefinition:
        return self.form
