"""
Motor de validación de secciones.

Para cada campo de la sección, en orden:

1. Requerido: respuesta ausente, string vacío o lista vacía.
2. Longitud mínima (solo campos de texto).
3. Longitud máxima (solo campos de texto).

La primera regla que falla determina el mensaje del campo; la regla de
requerido corta las demás. Los campos sin violación no aparecen en el
resultado. Las funciones son puras: leen las respuestas pero nunca las
modifican.
"""

from collections.abc import Mapping
from typing import Optional

from formulario.core.answers import AnswerValue, is_empty_answer
from formulario.models.field import FieldRule
from formulario.models.form import Section


REQUIRED_MESSAGE = "This field is required"
MIN_LENGTH_MESSAGE = "Minimum length is {n} characters"
MAX_LENGTH_MESSAGE = "Maximum length is {n} characters"


ErrorMap = dict[str, str]


def validate_field(field: FieldRule, value: Optional[AnswerValue]) -> Optional[str]:
    """
    Valida la respuesta de un campo.

    Args:
        field: Reglas del campo
        value: Respuesta actual (None si nunca se respondió)

    Returns:
        Mensaje de la violación, o None si el valor es válido
    """
    if field.required and is_empty_answer(value):
        return field.custom_message or REQUIRED_MESSAGE

    if not field.kind.is_textual or not isinstance(value, str):
        return None

    if field.min_length is not None and len(value) < field.min_length:
        return field.custom_message or MIN_LENGTH_MESSAGE.format(n=field.min_length)

    if field.max_length is not None and len(value) > field.max_length:
        return field.custom_message or MAX_LENGTH_MESSAGE.format(n=field.max_length)

    return None


def validate_section(section: Section, answers: Mapping[str, AnswerValue]) -> ErrorMap:
    """
    Calcula el mapa de errores de una sección.

    Args:
        section: Sección a validar
        answers: Respuestas actuales (no se modifican)

    Returns:
        Diccionario fieldId -> mensaje; vacío si la sección es válida
    """
    errors: ErrorMap = {}
    for field in section.fields:
        message = validate_field(field, answers.get(field.field_id))
        if message is not None:
            errors[field.field_id] = message
    return errors
