"""
Loader de definiciones desde archivos JSON locales.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

from formulario.errors import LoadFailure
from formulario.loaders.base import FormLoader
from formulario.loaders.wire import parse_form_definition
from formulario.models.form import FormDefinition


logger = logging.getLogger(__name__)

DEFAULT_FORM_FILE = "form.json"


def read_form_file(path: Path, identity: Optional[str] = None) -> FormDefinition:
    """
    Lee y convierte un archivo de definición.

    Raises:
        LoadFailure: Si el archivo no existe, no es JSON o no es válido
    """
    path = Path(path)
    if not path.exists():
        raise LoadFailure(f"archivo no encontrado: {path}", identity)
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, ValueError) as e:
        raise LoadFailure(f"no se pudo leer {path}: {e}", identity) from e
    return parse_form_definition(payload, identity)


class JsonFileLoader(FormLoader):
    """
    Busca `<forms_dir>/<identity>.json` y, si no existe, `<forms_dir>/form.json`.
    """

    def __init__(self, forms_dir: Path):
        self.forms_dir = Path(forms_dir)

    def resolve(self, identity: Optional[str] = None) -> Path:
        """
        Archivo que corresponde a una identidad.

        Raises:
            LoadFailure: Si la identidad no es un nombre de archivo simple
        """
        if identity:
            if identity in (".", "..") or Path(identity).name != identity or "\\" in identity:
                raise LoadFailure("identidad inválida para buscar un archivo", identity)
            candidate = self.forms_dir / f"{identity}.json"
            if candidate.exists():
                return candidate
        return self.forms_dir / DEFAULT_FORM_FILE

    async def fetch(self, identity: Optional[str] = None) -> FormDefinition:
        path = self.resolve(identity)
        logger.debug("Leyendo definición desde %s", path)
        return await asyncio.to_thread(read_form_file, path, identity)
