"""
Conversión del formato JSON del servicio de formularios a los modelos.

Formato esperado (con o sin envoltorio {"form": ...}):

    {"formTitle": ..., "formId": ...,
     "sections": [{"sectionId": 1, "title": ..., "description": ...,
                   "fields": [{"fieldId": ..., "type": "text", "label": ...,
                               "required": true, "minLength": 2,
                               "validation": {"message": ...},
                               "options": [{"value": ..., "label": ...}]}]}]}
"""

from typing import Any, Optional

from pydantic import ValidationError

from formulario.errors import LoadFailure
from formulario.models.field import FieldKind, FieldRule, ChoiceOption
from formulario.models.form import Section, FormDefinition


# Tipo de input del servicio -> tipo de campo
WIRE_KINDS: dict[str, FieldKind] = {
    "text": FieldKind.TEXT,
    "tel": FieldKind.TEXT,
    "email": FieldKind.TEXT,
    "date": FieldKind.TEXT,
    "textarea": FieldKind.TEXTAREA,
    "dropdown": FieldKind.SINGLE_CHOICE,
    "radio": FieldKind.SINGLE_CHOICE,
    "checkbox": FieldKind.MULTI_CHOICE,
}


def parse_form_definition(payload: Any, identity: Optional[str] = None) -> FormDefinition:
    """
    Construye un FormDefinition desde el JSON del servicio.

    Args:
        payload: Respuesta decodificada ({"form": {...}} o el formulario)
        identity: Solo para el mensaje de error

    Raises:
        LoadFailure: Si el payload no describe un formulario válido
    """
    if isinstance(payload, dict) and isinstance(payload.get("form"), dict):
        payload = payload["form"]
    if not isinstance(payload, dict):
        raise LoadFailure("la respuesta no contiene un formulario", identity)

    try:
        return FormDefinition(
            form_id=str(payload.get("formId", "")),
            form_title=payload.get("formTitle", ""),
            sections=[_parse_section(s) for s in payload.get("sections") or []],
        )
    except (ValidationError, ValueError, TypeError, KeyError, AttributeError) as e:
        raise LoadFailure(f"definición inválida: {e}", identity) from e


def _parse_section(data: dict) -> Section:
    return Section(
        section_id=data.get("sectionId"),
        title=data.get("title", ""),
        description=data.get("description") or "",
        fields=[_parse_field(f) for f in data.get("fields") or []],
    )


def _parse_field(data: dict) -> FieldRule:
    wire_type = data.get("type", "text")
    kind = WIRE_KINDS.get(wire_type)
    if kind is None:
        raise ValueError(f"Tipo de campo desconocido: {wire_type}")

    validation = data.get("validation") or {}
    return FieldRule(
        field_id=data.get("fieldId", ""),
        label=data.get("label", ""),
        kind=kind,
        required=bool(data.get("required", False)),
        # 0 equivale a no tener límite
        min_length=data.get("minLength") or None,
        max_length=data.get("maxLength") or None,
        custom_message=validation.get("message"),
        placeholder=data.get("placeholder") or "",
        options=[
            ChoiceOption(
                value=str(o["value"]),
                label=o.get("label", str(o["value"])),
                data_test_id=o.get("dataTestId"),
            )
            for o in data.get("options") or []
        ],
        input_type=wire_type,
        data_test_id=data.get("dataTestId"),
    )
