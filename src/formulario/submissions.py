"""
Registro de formularios enviados.

Cada envío se guarda como un archivo JSON con las respuestas completas.
Las respuestas parciales nunca se escriben a disco.
"""

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import Field

from formulario.models.base import IdentifiedModel


class Submission(IdentifiedModel):
    """Un formulario completado."""
    form_id: str
    form_title: str
    identity: Optional[str] = None
    answers: dict[str, Union[str, list[str]]] = Field(default_factory=dict)


class SubmissionManager:
    """Gestiona los envíos guardados."""

    def __init__(self, submissions_dir: Path):
        """
        Inicializa el gestor de envíos.

        Args:
            submissions_dir: Directorio donde se guardan los envíos
        """
        self.submissions_dir = Path(submissions_dir)
        self.submissions_dir.mkdir(parents=True, exist_ok=True)

    def _submission_path(self, submission_id: str) -> Path:
        return self.submissions_dir / f"{submission_id}.json"

    def _resolve(self, submission_id: str) -> Optional[Path]:
        """Archivo de un envío por ID completo o prefijo."""
        path = self._submission_path(submission_id)
        if path.exists():
            return path
        matches = sorted(self.submissions_dir.glob(f"{submission_id}*.json"))
        return matches[0] if matches else None

    def save(self, submission: Submission) -> Path:
        """Guarda un envío a disco."""
        path = self._submission_path(submission.id)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(submission.model_dump(), f, indent=2, ensure_ascii=False)
        return path

    def load(self, submission_id: str) -> Submission:
        """
        Carga un envío por ID (completo o prefijo).

        Raises:
            FileNotFoundError: Si no existe
        """
        path = self._resolve(submission_id)
        if path is None:
            raise FileNotFoundError(f"Envío no encontrado: {submission_id}")

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return Submission(**data)

    def list_submissions(self) -> list[dict]:
        """Lista resumida de envíos, más recientes primero."""
        items = []
        for path in self.submissions_dir.glob("*.json"):
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            items.append({
                "id": data["id"],
                "timestamp": data["timestamp"],
                "form_id": data["form_id"],
                "form_title": data["form_title"],
                "identity": data.get("identity"),
                "n_answers": len(data.get("answers", {})),
            })
        return sorted(items, key=lambda x: x["timestamp"], reverse=True)

    def delete(self, submission_id: str) -> bool:
        """Elimina un envío por ID completo o prefijo. Retorna True si existía."""
        path = self._resolve(submission_id)
        if path is not None:
            path.unlink()
            return True
        return False
