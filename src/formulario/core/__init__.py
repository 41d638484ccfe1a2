"""
Núcleo del motor de formularios.

- answers: Almacén inmutable de respuestas
- validation: Validación de una sección contra sus reglas
- session: Estados, eventos y función de transición pura
- navigator: Controlador con estado usado por la capa de presentación
"""

from formulario.core.answers import (
    AnswerValue,
    AnswerStore,
    is_empty_answer,
    check_answer_shape,
)
from formulario.core.validation import (
    REQUIRED_MESSAGE,
    MIN_LENGTH_MESSAGE,
    MAX_LENGTH_MESSAGE,
    ErrorMap,
    validate_field,
    validate_section,
)
from formulario.core.session import (
    SessionStatus,
    FormSession,
    LoadStarted,
    FormLoaded,
    LoadFailed,
    AnswerChanged,
    NextRequested,
    PrevRequested,
    ResetRequested,
    initial_session,
    transition,
)
from formulario.core.navigator import FormNavigator

__all__ = [
    # answers
    "AnswerValue",
    "AnswerStore",
    "is_empty_answer",
    "check_answer_shape",
    # validation
    "REQUIRED_MESSAGE",
    "MIN_LENGTH_MESSAGE",
    "MAX_LENGTH_MESSAGE",
    "ErrorMap",
    "validate_field",
    "validate_section",
    # session
    "SessionStatus",
    "FormSession",
    "LoadStarted",
    "FormLoaded",
    "LoadFailed",
    "AnswerChanged",
    "NextRequested",
    "PrevRequested",
    "ResetRequested",
    "initial_session",
    "transition",
    # navigator
    "FormNavigator",
]
