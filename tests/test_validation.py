"""Tests para el motor de validación de secciones."""

import pytest

from formulario.core import (
    AnswerStore,
    validate_field,
    validate_section,
    REQUIRED_MESSAGE,
)
from formulario.models import FieldKind, FieldRule, Section


def _section(*fields):
    return Section(title="S", fields=list(fields))


class TestRequired:
    """Regla de campo requerido."""

    @pytest.mark.parametrize("answers", [{}, {"a": ""}])
    def test_absent_or_empty_text(self, answers):
        section = _section(FieldRule(field_id="a", required=True))
        assert validate_section(section, answers) == {"a": REQUIRED_MESSAGE}

    def test_empty_collection(self):
        section = _section(FieldRule(field_id="m", kind=FieldKind.MULTI_CHOICE, required=True))
        assert validate_section(section, {"m": []}) == {"m": REQUIRED_MESSAGE}

    def test_custom_message_overrides_default(self):
        section = _section(FieldRule(field_id="a", required=True, custom_message="Falta a"))
        assert validate_section(section, {}) == {"a": "Falta a"}

    def test_required_short_circuits_length(self):
        fld = FieldRule(field_id="a", required=True, min_length=3)
        assert validate_field(fld, "") == REQUIRED_MESSAGE

    def test_whitespace_is_not_empty(self):
        fld = FieldRule(field_id="a", required=True)
        assert validate_field(fld, " ") is None


class TestLength:
    """Reglas de longitud."""

    def test_below_min_length(self):
        fld = FieldRule(field_id="a", min_length=3)
        assert validate_field(fld, "ab") == "Minimum length is 3 characters"

    def test_above_max_length(self):
        fld = FieldRule(field_id="a", max_length=3)
        assert validate_field(fld, "abcd") == "Maximum length is 3 characters"

    def test_within_bounds(self):
        fld = FieldRule(field_id="a", min_length=2, max_length=4)
        for value in ["ab", "abc", "abcd"]:
            assert validate_field(fld, value) is None

    def test_custom_message_used_for_length(self):
        fld = FieldRule(field_id="a", min_length=3, custom_message="Muy corto")
        assert validate_field(fld, "a") == "Muy corto"

    def test_optional_absent_skips_length(self):
        fld = FieldRule(field_id="a", min_length=3)
        assert validate_field(fld, None) is None

    def test_textarea_is_textual(self):
        fld = FieldRule(field_id="t", kind=FieldKind.TEXTAREA, max_length=5)
        assert validate_field(fld, "123456") == "Maximum length is 5 characters"

    def test_length_never_applies_to_choices(self):
        single = FieldRule(field_id="s", kind=FieldKind.SINGLE_CHOICE, required=True, min_length=5)
        multi = FieldRule(field_id="m", kind=FieldKind.MULTI_CHOICE, required=True, max_length=1)
        assert validate_field(single, "x") is None
        assert validate_field(multi, ["a", "b", "c"]) is None


class TestValidateSection:
    """Propiedades de validate_section."""

    def test_optional_fields_never_fail(self):
        section = _section(
            FieldRule(field_id="a"),
            FieldRule(field_id="b", kind=FieldKind.TEXTAREA),
            FieldRule(field_id="c", kind=FieldKind.MULTI_CHOICE),
        )
        for answers in [{}, {"a": "", "b": "x" * 500, "c": []}, {"a": "hola", "c": ["z"]}]:
            assert validate_section(section, answers) == {}

    def test_all_fields_checked(self):
        section = _section(
            FieldRule(field_id="a", required=True),
            FieldRule(field_id="b", min_length=4),
            FieldRule(field_id="c"),
        )
        errors = validate_section(section, {"b": "xy", "c": "ok"})
        assert set(errors) == {"a", "b"}

    def test_pure_and_idempotent(self):
        section = _section(
            FieldRule(field_id="a", required=True),
            FieldRule(field_id="b", max_length=1),
        )
        store = AnswerStore({"b": "long"})
        before = store.snapshot()

        first = validate_section(section, store)
        second = validate_section(section, store)

        assert first == second
        assert store.snapshot() == before
        assert "a" not in store

    def test_ignores_answers_of_other_sections(self):
        section = _section(FieldRule(field_id="a", required=True))
        assert validate_section(section, {"a": "ok", "other": ""}) == {}

    def test_multi_choice_required_scenario(self):
        section = _section(FieldRule(field_id="m", kind=FieldKind.MULTI_CHOICE, required=True))
        assert validate_section(section, {"m": []}) == {"m": REQUIRED_MESSAGE}
        assert validate_section(section, {"m": ["one"]}) == {}
