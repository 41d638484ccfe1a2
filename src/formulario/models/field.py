"""
Modelo de reglas de un campo del formulario.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, model_validator

from formulario.models.base import FrozenModel


class FieldKind(str, Enum):
    """Tipos de campo disponibles."""
    TEXT = "text"                    # Texto de una línea
    TEXTAREA = "textarea"            # Texto multilínea
    SINGLE_CHOICE = "single_choice"  # Una opción (dropdown, radio)
    MULTI_CHOICE = "multi_choice"    # Varias opciones (checkbox)

    @property
    def is_textual(self) -> bool:
        """Las reglas de longitud solo aplican a campos de texto."""
        return self in (FieldKind.TEXT, FieldKind.TEXTAREA)

    @property
    def is_choice(self) -> bool:
        return self in (FieldKind.SINGLE_CHOICE, FieldKind.MULTI_CHOICE)

    @property
    def holds_collection(self) -> bool:
        """True si la respuesta es una lista de strings."""
        return self is FieldKind.MULTI_CHOICE


class ChoiceOption(FrozenModel):
    """Una opción seleccionable de un campo de elección."""
    value: str
    label: str
    data_test_id: Optional[str] = None


class FieldRule(FrozenModel):
    """Definición de un campo y sus restricciones."""
    field_id: str = Field(..., min_length=1, description="Clave única del campo")
    label: str = ""
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    min_length: Optional[int] = Field(None, ge=0)
    max_length: Optional[int] = Field(None, ge=0)
    custom_message: Optional[str] = None
    placeholder: str = ""
    options: tuple[ChoiceOption, ...] = ()  # Para SINGLE_CHOICE/MULTI_CHOICE
    input_type: Optional[str] = None  # Tipo original en la definición (email, tel, ...)
    data_test_id: Optional[str] = None

    @model_validator(mode="after")
    def _check_length_bounds(self) -> "FieldRule":
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ValueError(
                f"Campo '{self.field_id}': minLength ({self.min_length}) "
                f"mayor que maxLength ({self.max_length})"
            )
        return self

    @property
    def display_label(self) -> str:
        """Etiqueta a mostrar (el ID si no hay etiqueta)."""
        return self.label or self.field_id

    def option_label(self, value: str) -> str:
        """Busca la etiqueta de una opción por su valor."""
        for opt in self.options:
            if opt.value == value:
                return opt.label
        return value
