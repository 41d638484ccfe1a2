"""
Controlador de navegación del formulario.

Envuelve la función de transición pura y mantiene la sesión actual y
el historial de sesiones. Es la interfaz que consume la capa de
presentación (CLI u otra).
"""

import logging
from typing import Optional, TYPE_CHECKING

from formulario.core.answers import AnswerValue
from formulario.core.session import (
    FormSession,
    SessionStatus,
    SessionEvent,
    initial_session,
    transition,
    LoadStarted,
    FormLoaded,
    LoadFailed,
    AnswerChanged,
    NextRequested,
    PrevRequested,
    ResetRequested,
)
from formulario.errors import InvalidTransition, LoadFailure
from formulario.models.form import FormDefinition, Section

if TYPE_CHECKING:
    from formulario.loaders.base import FormLoader
    from formulario.submissions import Submission


logger = logging.getLogger(__name__)


class FormNavigator:
    """Sesión de un usuario recorriendo un formulario sección por sección."""

    def __init__(self, session: Optional[FormSession] = None):
        self._session = session or initial_session()
        self.history: list[FormSession] = [self._session]

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------

    @property
    def session(self) -> FormSession:
        return self._session

    @property
    def status(self) -> SessionStatus:
        return self._session.status

    @property
    def section_index(self) -> int:
        return self._session.section_index

    @property
    def form(self) -> Optional[FormDefinition]:
        return self._session.form

    @property
    def current_section(self) -> Optional[Section]:
        return self._session.current_section

    @property
    def answers(self) -> dict[str, AnswerValue]:
        """Copia de las respuestas actuales."""
        return self._session.answers.snapshot()

    @property
    def errors(self) -> dict[str, str]:
        """Copia del mapa de errores de la sección actual."""
        return dict(self._session.errors)

    @property
    def load_error(self) -> Optional[str]:
        return self._session.load_error

    @property
    def is_last_section(self) -> bool:
        return self._session.is_last_section

    @property
    def can_go_back(self) -> bool:
        return self._session.can_go_back

    def progress(self) -> tuple[int, int]:
        """Retorna (sección_actual, total), con la sección numerada desde 1."""
        form = self._session.form
        if form is None:
            return 0, 0
        if self._session.status is SessionStatus.SUBMITTED:
            return form.section_count, form.section_count
        return self._session.section_index + 1, form.section_count

    # ------------------------------------------------------------------
    # Operaciones
    # ------------------------------------------------------------------

    def dispatch(self, event: SessionEvent) -> FormSession:
        """Aplica un evento y registra la sesión resultante."""
        new_session = transition(self._session, event)
        if new_session is not self._session:
            self._session = new_session
            self.history.append(new_session)
        return new_session

    async def initialize(self, loader: "FormLoader", identity: Optional[str] = None) -> bool:
        """
        Obtiene la definición y comienza en la primera sección.

        Args:
            loader: Fuente externa de la definición
            identity: Clave opaca del usuario (ej: número de matrícula)

        Returns:
            True si la sesión quedó en progreso, False si quedó en error
        """
        self.dispatch(LoadStarted(identity=identity))
        try:
            form = await loader.fetch(identity)
        except LoadFailure as e:
            logger.warning("Fallo al cargar formulario: %s", e.reason)
            self.dispatch(LoadFailed(reason=e.reason))
            return False

        self.dispatch(FormLoaded(form=form))
        logger.debug(
            "Formulario %s cargado (%d secciones)", form.form_id, form.section_count
        )
        return True

    def start(self, form: FormDefinition, identity: Optional[str] = None) -> None:
        """Inicializa con una definición ya disponible."""
        self.dispatch(LoadStarted(identity=identity))
        self.dispatch(FormLoaded(form=form))

    def set_answer(self, field_id: str, value: AnswerValue) -> None:
        """Escribe una respuesta y limpia el error de ese campo."""
        self.dispatch(AnswerChanged(field_id=field_id, value=value))

    def go_next(self) -> bool:
        """
        Valida la sección actual y avanza (o envía si es la última).

        Returns:
            True si avanzó o se envió, False si hubo violaciones
        """
        before = self._session
        after = self.dispatch(NextRequested())
        return (
            after.section_index != before.section_index
            or after.status is not before.status
        )

    def go_prev(self) -> bool:
        """
        Retrocede una sección sin validar.

        Returns:
            False si ya estaba en la primera sección
        """
        before = self._session
        after = self.dispatch(PrevRequested())
        return after is not before

    def reset(self) -> None:
        """Descarta respuestas, errores e identidad."""
        self.dispatch(ResetRequested())

    def submission(self) -> "Submission":
        """
        Construye el registro de envío de una sesión completada.

        Raises:
            InvalidTransition: Si el formulario aún no se envió
        """
        from formulario.submissions import Submission

        if self._session.status is not SessionStatus.SUBMITTED:
            raise InvalidTransition(
                f"El formulario no fue enviado (estado: {self._session.status.value})"
            )
        return Submission(
            form_id=self._session.form.form_id,
            form_title=self._session.form.form_title,
            identity=self._session.identity,
            answers=self._session.answers.snapshot(),
        )
