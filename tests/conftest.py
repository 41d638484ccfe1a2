"""Configuración de pytest para tests de formulario."""

import json

import pytest

from formulario.models import FieldKind, FieldRule, ChoiceOption, Section, FormDefinition


@pytest.fixture
def two_section_form():
    """Formulario de dos secciones: nombre requerido (mín 2) y preferencias."""
    return FormDefinition(
        form_id="F-001",
        form_title="Registro",
        sections=[
            Section(
                title="Datos personales",
                fields=[
                    FieldRule(field_id="name", label="Nombre", required=True, min_length=2),
                ],
            ),
            Section(
                title="Preferencias",
                fields=[
                    FieldRule(
                        field_id="color",
                        label="Color",
                        kind=FieldKind.SINGLE_CHOICE,
                        required=True,
                        options=[
                            ChoiceOption(value="red", label="Rojo"),
                            ChoiceOption(value="blue", label="Azul"),
                        ],
                    ),
                    FieldRule(field_id="notes", label="Notas", kind=FieldKind.TEXTAREA, max_length=10),
                ],
            ),
        ],
    )


@pytest.fixture
def single_section_form():
    """Formulario de una sola sección."""
    return FormDefinition(
        form_id="F-002",
        form_title="Encuesta",
        sections=[
            Section(
                title="Única",
                fields=[
                    FieldRule(field_id="email", required=True, input_type="email"),
                    FieldRule(
                        field_id="topics",
                        kind=FieldKind.MULTI_CHOICE,
                        required=True,
                        options=[
                            ChoiceOption(value="a", label="A"),
                            ChoiceOption(value="b", label="B"),
                        ],
                    ),
                ],
            ),
        ],
    )


@pytest.fixture
def wire_payload():
    """Respuesta del servicio de formularios."""
    return {
        "message": "Form fetched",
        "form": {
            "formTitle": "Student Survey",
            "formId": "form-7",
            "version": "1.0",
            "sections": [
                {
                    "sectionId": 1,
                    "title": "Basic",
                    "description": "Tell us about you",
                    "fields": [
                        {
                            "fieldId": "fullName",
                            "type": "text",
                            "label": "Full Name",
                            "placeholder": "Jane Doe",
                            "required": True,
                            "dataTestId": "name-input",
                            "validation": {"message": "Name is mandatory"},
                            "minLength": 2,
                            "maxLength": 40,
                        },
                        {
                            "fieldId": "phone",
                            "type": "tel",
                            "label": "Phone",
                            "required": False,
                        },
                    ],
                },
                {
                    "sectionId": 2,
                    "title": "Interests",
                    "description": "",
                    "fields": [
                        {
                            "fieldId": "year",
                            "type": "dropdown",
                            "label": "Year",
                            "required": True,
                            "options": [
                                {"value": "1", "label": "First", "dataTestId": "y1"},
                                {"value": "2", "label": "Second", "dataTestId": "y2"},
                            ],
                        },
                        {
                            "fieldId": "hobbies",
                            "type": "checkbox",
                            "label": "Hobbies",
                            "required": True,
                            "options": [
                                {"value": "music", "label": "Music"},
                                {"value": "sport", "label": "Sport"},
                            ],
                        },
                        {
                            "fieldId": "about",
                            "type": "textarea",
                            "label": "About",
                            "required": False,
                            "maxLength": 200,
                        },
                    ],
                },
            ],
        },
    }


@pytest.fixture
def forms_dir(tmp_path, wire_payload):
    """Directorio con una definición por defecto (form.json)."""
    d = tmp_path / "forms"
    d.mkdir()
    with open(d / "form.json", "w", encoding="utf-8") as f:
        json.dump(wire_payload, f)
    return d
