"""
formulario - Motor de formularios dinámicos multi-sección.

Recibe la definición de un formulario (secciones, campos y reglas),
guía al usuario sección por sección validando localmente cada una
antes de avanzar, y reporta el conjunto de respuestas completo.
"""

__version__ = "0.1.0"

from formulario.errors import FormularioError, LoadFailure, InvalidTransition
from formulario.models import (
    FieldKind,
    ChoiceOption,
    FieldRule,
    Section,
    FormDefinition,
)
from formulario.core import (
    AnswerStore,
    validate_section,
    validate_field,
    SessionStatus,
    FormSession,
    transition,
    FormNavigator,
)

__all__ = [
    "__version__",
    # Errores
    "FormularioError",
    "LoadFailure",
    "InvalidTransition",
    # Modelos
    "FieldKind",
    "ChoiceOption",
    "FieldRule",
    "Section",
    "FormDefinition",
    # Núcleo
    "AnswerStore",
    "validate_section",
    "validate_field",
    "SessionStatus",
    "FormSession",
    "transition",
    "FormNavigator",
]
