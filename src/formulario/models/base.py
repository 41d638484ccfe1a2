"""
Clases base para modelos Pydantic.

Proporciona identificadores cortos, timestamps y la base inmutable
usada por la definición de formularios.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


def generate_id() -> str:
    """Genera un ID corto único (8 caracteres)."""
    return str(uuid.uuid4())[:8]


def generate_timestamp() -> str:
    """Genera timestamp ISO actual."""
    return datetime.now().isoformat()


class FrozenModel(BaseModel):
    """
    Modelo base inmutable.

    Una definición de formulario es de solo lectura una vez cargada:
    cualquier intento de asignar un atributo lanza ValidationError.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


class IdentifiedModel(BaseModel):
    """
    Modelo base con ID y timestamp de creación.

    Útil para registros que no cambian después de creados (envíos).
    """

    id: str = Field(default_factory=generate_id)
    timestamp: str = Field(default_factory=generate_timestamp)
