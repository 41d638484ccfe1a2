"""
Modelo de la definición de formulario: secciones ordenadas de campos.

La definición se construye fuera del núcleo (ver formulario.loaders) y
se trata como entrada de solo lectura.
"""

from typing import Optional

from pydantic import Field, field_validator

from formulario.models.base import FrozenModel
from formulario.models.field import FieldRule


class Section(FrozenModel):
    """Grupo contiguo de campos que se valida y muestra como una pantalla."""
    title: str
    fields: tuple[FieldRule, ...]
    description: str = ""
    section_id: Optional[int] = None

    @field_validator("fields")
    @classmethod
    def _check_fields(cls, v: tuple[FieldRule, ...]) -> tuple[FieldRule, ...]:
        if not v:
            raise ValueError("La sección debe tener al menos un campo")
        seen = set()
        for f in v:
            if f.field_id in seen:
                raise ValueError(f"fieldId duplicado en la sección: {f.field_id}")
            seen.add(f.field_id)
        return v

    def get_field(self, field_id: str) -> Optional[FieldRule]:
        """Obtiene un campo por su ID."""
        for f in self.fields:
            if f.field_id == field_id:
                return f
        return None

    @property
    def field_ids(self) -> list[str]:
        return [f.field_id for f in self.fields]


class FormDefinition(FrozenModel):
    """Formulario completo: título, ID y secciones en orden."""
    form_id: str
    form_title: str
    sections: tuple[Section, ...] = Field(..., min_length=1)

    @property
    def section_count(self) -> int:
        return len(self.sections)

    def section_at(self, index: int) -> Section:
        """
        Retorna la sección en la posición indicada.

        Raises:
            IndexError: Si el índice está fuera de [0, section_count)
        """
        if not 0 <= index < len(self.sections):
            raise IndexError(
                f"Sección {index} fuera de rango (0-{len(self.sections) - 1})"
            )
        return self.sections[index]

    def find_field(self, field_id: str) -> Optional[FieldRule]:
        """Busca un campo en cualquier sección."""
        for section in self.sections:
            fld = section.get_field(field_id)
            if fld is not None:
                return fld
        return None

    def iter_fields(self):
        """Itera (índice_sección, campo) en orden de presentación."""
        for idx, section in enumerate(self.sections):
            for fld in section.fields:
                yield idx, fld
