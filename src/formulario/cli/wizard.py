"""
Asistente interactivo: recorre el formulario sección por sección.

Cada sección muestra su progreso, pregunta los campos (con las
respuestas previas como default) y ofrece avanzar, volver o cancelar.
Si la validación falla se muestran las violaciones y solo se vuelven a
preguntar los campos inválidos.
"""

from enum import Enum
from typing import Optional

import questionary
from questionary import Choice, Style

from formulario.cli.theme import (
    get_palette,
    print_step,
    print_info,
    print_warning,
    print_violations,
)
from formulario.core.answers import AnswerValue
from formulario.core.navigator import FormNavigator
from formulario.core.session import SessionStatus
from formulario.models.field import FieldKind, FieldRule


class WizardAction(Enum):
    """Acción elegida al final de una sección."""
    NEXT = "next"
    BACK = "back"
    CANCEL = "cancel"


def get_wizard_style() -> Style:
    """Estilo de questionary basado en el tema actual."""
    p = get_palette()
    return Style([
        ('qmark', f'fg:{p.accent} bold'),
        ('question', 'bold'),
        ('answer', f'fg:{p.success} bold'),
        ('pointer', f'fg:{p.accent} bold'),
        ('highlighted', f'fg:{p.primary} bold'),
        ('selected', f'fg:{p.success} bold'),
        ('instruction', f'fg:{p.muted} italic'),
    ])


class FormWizard:
    """Presentación en terminal de un FormNavigator."""

    def __init__(self, navigator: FormNavigator):
        self.navigator = navigator
        self.style = get_wizard_style()

    def run(self) -> bool:
        """
        Ejecuta el asistente hasta enviar o cancelar.

        Returns:
            True si el formulario quedó enviado
        """
        nav = self.navigator
        while nav.status is SessionStatus.IN_PROGRESS:
            section = nav.current_section
            step, total = nav.progress()
            print_step(step, total, section.title)
            if section.description:
                print_info(section.description)

            pending_errors = nav.errors
            if pending_errors:
                print_violations(section, pending_errors)
                fields = [f for f in section.fields if f.field_id in pending_errors]
            else:
                fields = list(section.fields)

            answers = nav.answers
            for fld in fields:
                value = self.ask_field(fld, answers.get(fld.field_id))
                if value is None:
                    print_warning("Formulario cancelado")
                    return False
                nav.set_answer(fld.field_id, value)

            action = self.ask_action()
            if action is WizardAction.NEXT:
                if not nav.go_next():
                    print_warning("Corrige los campos marcados para continuar")
            elif action is WizardAction.BACK:
                nav.go_prev()
            else:
                print_warning("Formulario cancelado")
                return False

        return nav.status is SessionStatus.SUBMITTED

    def ask_field(self, fld: FieldRule, current: Optional[AnswerValue]) -> Optional[AnswerValue]:
        """Pregunta un campo. Retorna None si el usuario cancela (Ctrl+C)."""
        message = f"{fld.display_label}{' *' if fld.required else ''}:"

        if fld.kind is FieldKind.SINGLE_CHOICE:
            choices = [Choice(title=o.label, value=o.value) for o in fld.options]
            default = current if current in [o.value for o in fld.options] else None
            return questionary.select(
                message, choices=choices, default=default, style=self.style,
            ).ask()

        if fld.kind is FieldKind.MULTI_CHOICE:
            selected = current or []
            choices = [
                Choice(title=o.label, value=o.value, checked=o.value in selected)
                for o in fld.options
            ]
            return questionary.checkbox(message, choices=choices, style=self.style).ask()

        return questionary.text(
            message,
            default=current or "",
            instruction=fld.placeholder or None,
            multiline=fld.kind is FieldKind.TEXTAREA,
            style=self.style,
        ).ask()

    def ask_action(self) -> WizardAction:
        """Pregunta qué hacer al terminar la sección."""
        nav = self.navigator
        choices = [
            Choice(
                title="Enviar" if nav.is_last_section else "Siguiente >>",
                value=WizardAction.NEXT,
            ),
        ]
        if nav.can_go_back:
            choices.append(Choice(title="<< Anterior", value=WizardAction.BACK))
        choices.append(Choice(title="Cancelar", value=WizardAction.CANCEL))

        action = questionary.select(
            "¿Qué deseas hacer?", choices=choices, style=self.style,
        ).ask()
        return action or WizardAction.CANCEL
