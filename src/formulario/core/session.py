"""
Máquina de estados de navegación como función de transición pura.

La sesión es un valor inmutable; `transition(session, event)` retorna la
sesión siguiente sin modificar la anterior. Estados:

    LOADING -> IN_PROGRESS(0) | ERROR
    IN_PROGRESS(i) -> IN_PROGRESS(i+1)     avance validado, i no es la última
    IN_PROGRESS(last) -> SUBMITTED         avance validado desde la última
    IN_PROGRESS(i) -> IN_PROGRESS(i-1)     retroceso, i > 0, sin validar
    cualquiera -> UNINITIALIZED            reset (logout)
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from formulario.core.answers import AnswerStore, AnswerValue, check_answer_shape
from formulario.core.validation import validate_section
from formulario.errors import InvalidTransition
from formulario.models.form import FormDefinition, Section


logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    """Estado de la sesión."""
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    ERROR = "error"
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"


_EMPTY_ERRORS: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class FormSession:
    """Estado completo del progreso de un usuario en un formulario."""
    status: SessionStatus = SessionStatus.UNINITIALIZED
    form: Optional[FormDefinition] = None
    section_index: int = 0
    answers: AnswerStore = field(default_factory=AnswerStore)
    errors: Mapping[str, str] = field(default_factory=lambda: _EMPTY_ERRORS)
    identity: Optional[str] = None
    load_error: Optional[str] = None

    @property
    def current_section(self) -> Optional[Section]:
        """Sección visible, solo mientras la sesión está en progreso."""
        if self.status is not SessionStatus.IN_PROGRESS or self.form is None:
            return None
        return self.form.section_at(self.section_index)

    @property
    def is_last_section(self) -> bool:
        return (
            self.status is SessionStatus.IN_PROGRESS
            and self.form is not None
            and self.section_index == self.form.section_count - 1
        )

    @property
    def can_go_back(self) -> bool:
        return self.status is SessionStatus.IN_PROGRESS and self.section_index > 0


# ============================================================================
# Eventos
# ============================================================================

@dataclass(frozen=True)
class LoadStarted:
    """Comienza la obtención de la definición para una identidad."""
    identity: Optional[str] = None


@dataclass(frozen=True)
class FormLoaded:
    """La definición se obtuvo correctamente."""
    form: FormDefinition


@dataclass(frozen=True)
class LoadFailed:
    """La obtención de la definición falló."""
    reason: str


@dataclass(frozen=True)
class AnswerChanged:
    """El usuario editó un campo."""
    field_id: str
    value: AnswerValue


@dataclass(frozen=True)
class NextRequested:
    """Pedido de avance (o envío desde la última sección)."""


@dataclass(frozen=True)
class PrevRequested:
    """Pedido de retroceso."""


@dataclass(frozen=True)
class ResetRequested:
    """Reset externo tras el envío o al cerrar sesión."""


SessionEvent = Union[
    LoadStarted, FormLoaded, LoadFailed, AnswerChanged,
    NextRequested, PrevRequested, ResetRequested,
]


# ============================================================================
# Transición
# ============================================================================

def initial_session() -> FormSession:
    """Sesión sin inicializar."""
    return FormSession()


def transition(session: FormSession, event: SessionEvent) -> FormSession:
    """
    Calcula la sesión siguiente a partir de la actual y un evento.

    Raises:
        InvalidTransition: Si el evento no se admite en el estado actual
        ValueError: Si AnswerChanged refiere a un campo inexistente
        TypeError: Si la forma de la respuesta no coincide con el campo
    """
    if isinstance(event, ResetRequested):
        return initial_session()

    if isinstance(event, LoadStarted):
        # Reintentar reconstruye la sesión desde cero
        return FormSession(status=SessionStatus.LOADING, identity=event.identity)

    if isinstance(event, FormLoaded):
        _require(session, SessionStatus.LOADING, event)
        return FormSession(
            status=SessionStatus.IN_PROGRESS,
            form=event.form,
            identity=session.identity,
        )

    if isinstance(event, LoadFailed):
        _require(session, SessionStatus.LOADING, event)
        return FormSession(
            status=SessionStatus.ERROR,
            identity=session.identity,
            load_error=event.reason,
        )

    if isinstance(event, AnswerChanged):
        _require(session, SessionStatus.IN_PROGRESS, event)
        return _apply_answer(session, event)

    if isinstance(event, NextRequested):
        _require(session, SessionStatus.IN_PROGRESS, event)
        return _apply_next(session)

    if isinstance(event, PrevRequested):
        _require(session, SessionStatus.IN_PROGRESS, event)
        if session.section_index == 0:
            return session
        return replace(
            session,
            section_index=session.section_index - 1,
            errors=_EMPTY_ERRORS,
        )

    raise TypeError(f"Evento desconocido: {event!r}")


def _require(session: FormSession, status: SessionStatus, event) -> None:
    if session.status is not status:
        raise InvalidTransition(
            f"{type(event).__name__} no permitido en estado {session.status.value}"
        )


def _apply_answer(session: FormSession, event: AnswerChanged) -> FormSession:
    fld = session.form.find_field(event.field_id)
    if fld is None:
        raise ValueError(f"Campo desconocido: {event.field_id}")
    check_answer_shape(fld, event.value)

    errors = session.errors
    if event.field_id in errors:
        remaining = {k: v for k, v in errors.items() if k != event.field_id}
        errors = MappingProxyType(remaining) if remaining else _EMPTY_ERRORS

    return replace(
        session,
        answers=session.answers.with_answer(event.field_id, event.value),
        errors=errors,
    )


def _apply_next(session: FormSession) -> FormSession:
    violations = validate_section(session.current_section, session.answers)
    if violations:
        logger.debug(
            "Sección %d con %d violaciones: %s",
            session.section_index, len(violations), ", ".join(violations),
        )
        return replace(session, errors=MappingProxyType(violations))

    if session.is_last_section:
        logger.debug("Formulario %s enviado", session.form.form_id)
        return replace(session, status=SessionStatus.SUBMITTED, errors=_EMPTY_ERRORS)

    return replace(
        session,
        section_index=session.section_index + 1,
        errors=_EMPTY_ERRORS,
    )
