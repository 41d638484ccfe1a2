"""
Identidad del usuario (número de matrícula y nombre).

Se guarda en disco al iniciar sesión y se elimina al cerrarla.
"""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from formulario.errors import FormularioError
from formulario.models.base import generate_timestamp


class IdentityError(FormularioError):
    """El archivo de identidad existe pero no se puede leer."""


class UserIdentity(BaseModel):
    """Usuario que completa el formulario."""
    roll_number: str = Field(..., min_length=1, description="Número de matrícula")
    name: str = Field(..., min_length=1, description="Nombre completo")
    created_at: str = Field(default_factory=generate_timestamp)


class IdentityStore:
    """Persiste la identidad del usuario actual."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def save(self, identity: UserIdentity) -> Path:
        """Guarda la identidad, reemplazando la anterior."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(identity.model_dump(), f, indent=2, ensure_ascii=False)
        return self.path

    def load(self) -> Optional[UserIdentity]:
        """
        Retorna la identidad guardada o None si no hay sesión.

        Raises:
            IdentityError: Si el archivo está dañado
        """
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return UserIdentity(**data)
        except (OSError, ValueError, TypeError) as e:
            raise IdentityError(
                f"Identidad dañada en {self.path}. Usa 'formulario login' nuevamente."
            ) from e

    def clear(self) -> bool:
        """Elimina la identidad. Retorna True si existía."""
        if self.path.exists():
            self.path.unlink()
            return True
        return False
