"""Configuración de la aplicación (modelo Pydantic + archivo JSON opcional)."""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


DEFAULT_DATA_DIR = Path.home() / ".formulario"
CONFIG_FILENAME = "config.json"


class AppConfig(BaseModel):
    """Configuración de formulario."""
    data_dir: Path = Field(default=DEFAULT_DATA_DIR, description="Directorio de datos")
    forms_dir: Optional[Path] = Field(None, description="Directorio local de definiciones")
    api_base_url: Optional[str] = Field(None, description="URL base del servicio de formularios")
    request_timeout_s: float = Field(default=30.0, gt=0, description="Timeout HTTP (s)")
    theme: str = Field(default="default", description="Tema de la consola")

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("api_base_url debe comenzar con http:// o https://")
        return v.rstrip("/")

    @property
    def identity_path(self) -> Path:
        return self.data_dir / "identity.json"

    @property
    def submissions_dir(self) -> Path:
        return self.data_dir / "submissions"


def load_config(path: Optional[Path] = None) -> AppConfig:
    """
    Carga la configuración.

    Args:
        path: Archivo JSON. Default: ~/.formulario/config.json

    Returns:
        AppConfig con los valores del archivo, o defaults si no existe

    Raises:
        ValueError: Si el archivo existe pero no es válido
    """
    if path is None:
        path = DEFAULT_DATA_DIR / CONFIG_FILENAME
    path = Path(path)

    if not path.exists():
        return AppConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return AppConfig(**data)
    except (json.JSONDecodeError, ValidationError, TypeError) as e:
        raise ValueError(f"Configuración inválida en {path}: {e}") from e
