"""
Modelos de datos de formulario.

Este módulo contiene los modelos Pydantic que describen un formulario.
"""

from formulario.models.base import (
    FrozenModel,
    IdentifiedModel,
    generate_id,
    generate_timestamp,
)
from formulario.models.field import FieldKind, ChoiceOption, FieldRule
from formulario.models.form import Section, FormDefinition

__all__ = [
    # Clases base
    "FrozenModel",
    "IdentifiedModel",
    "generate_id",
    "generate_timestamp",
    # Campos
    "FieldKind",
    "ChoiceOption",
    "FieldRule",
    # Formulario
    "Section",
    "FormDefinition",
]
