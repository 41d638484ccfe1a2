"""Tests para FormNavigator."""

import asyncio

import pytest

from formulario.core import FormNavigator, SessionStatus, REQUIRED_MESSAGE
from formulario.errors import InvalidTransition, LoadFailure
from formulario.loaders import FormLoader, JsonFileLoader, StaticLoader
from formulario.submissions import Submission


class FailingLoader(FormLoader):
    """Loader que siempre falla."""

    def __init__(self):
        self.calls = 0

    async def fetch(self, identity=None):
        self.calls += 1
        raise LoadFailure("servicio caído", identity)


@pytest.fixture
def navigator(two_section_form):
    nav = FormNavigator()
    assert asyncio.run(nav.initialize(StaticLoader(two_section_form), "RA1"))
    return nav


class TestInitialize:
    """Tests para initialize."""

    def test_success(self, navigator, two_section_form):
        assert navigator.status is SessionStatus.IN_PROGRESS
        assert navigator.section_index == 0
        assert navigator.form is two_section_form
        assert navigator.current_section.title == "Datos personales"
        assert navigator.answers == {}
        assert navigator.errors == {}

    def test_failure_enters_error(self):
        nav = FormNavigator()
        ok = asyncio.run(nav.initialize(FailingLoader(), "RA1"))
        assert ok is False
        assert nav.status is SessionStatus.ERROR
        assert nav.load_error == "servicio caído"
        assert nav.current_section is None

    def test_undecodable_file_enters_error(self, tmp_path):
        (tmp_path / "form.json").write_bytes(b"\xff\xfe\x00")
        nav = FormNavigator()
        assert asyncio.run(nav.initialize(JsonFileLoader(tmp_path), "RA1")) is False
        assert nav.status is SessionStatus.ERROR
        assert nav.load_error

    def test_traversing_identity_enters_error(self, forms_dir):
        nav = FormNavigator()
        assert asyncio.run(nav.initialize(JsonFileLoader(forms_dir), "../form")) is False
        assert nav.status is SessionStatus.ERROR

    def test_retry_after_failure(self, two_section_form):
        nav = FormNavigator()
        asyncio.run(nav.initialize(FailingLoader()))
        assert asyncio.run(nav.initialize(StaticLoader(two_section_form)))
        assert nav.status is SessionStatus.IN_PROGRESS

    def test_operations_before_initialize_rejected(self):
        nav = FormNavigator()
        with pytest.raises(InvalidTransition):
            nav.go_next()
        with pytest.raises(InvalidTransition):
            nav.set_answer("name", "x")


class TestScenarios:
    """Escenarios de navegación."""

    def test_two_sections(self, navigator):
        navigator.set_answer("name", "")
        assert navigator.go_next() is False
        assert navigator.errors == {"name": REQUIRED_MESSAGE}
        assert navigator.section_index == 0

        navigator.set_answer("name", "Al")
        assert navigator.errors == {}
        assert navigator.go_next() is True
        assert navigator.errors == {}
        assert navigator.section_index == 1

    def test_single_section_submit(self, single_section_form):
        nav = FormNavigator()
        nav.start(single_section_form, identity="RA9")
        assert nav.is_last_section
        nav.set_answer("email", "a@b.c")
        nav.set_answer("topics", ["b"])

        assert nav.go_next() is True
        assert nav.status is SessionStatus.SUBMITTED

    def test_failed_next_keeps_state(self, navigator):
        before = (navigator.status, navigator.section_index)
        navigator.go_next()
        navigator.go_next()
        assert (navigator.status, navigator.section_index) == before

    def test_set_answer_clears_field_error(self, navigator):
        navigator.go_next()
        assert "name" in navigator.errors
        navigator.set_answer("name", "x")
        assert "name" not in navigator.errors
        assert navigator.answers["name"] == "x"


class TestGoPrev:
    """Tests para go_prev."""

    def test_noop_at_first(self, navigator):
        history_len = len(navigator.history)
        assert navigator.go_prev() is False
        assert navigator.section_index == 0
        assert len(navigator.history) == history_len

    def test_decrements(self, navigator):
        navigator.set_answer("name", "Al")
        navigator.go_next()
        assert navigator.can_go_back
        assert navigator.go_prev() is True
        assert navigator.section_index == 0
        assert navigator.answers["name"] == "Al"


class TestProgressAndSubmission:
    """Progreso, envío y reset."""

    def test_progress(self, navigator):
        assert navigator.progress() == (1, 2)
        navigator.set_answer("name", "Al")
        navigator.go_next()
        assert navigator.progress() == (2, 2)

    def test_progress_uninitialized(self):
        assert FormNavigator().progress() == (0, 0)

    def test_submission_requires_submitted(self, navigator):
        with pytest.raises(InvalidTransition):
            navigator.submission()

    def test_submission_record(self, navigator):
        navigator.set_answer("name", "Al")
        navigator.go_next()
        navigator.set_answer("color", "red")
        navigator.go_next()

        submission = navigator.submission()
        assert isinstance(submission, Submission)
        assert submission.form_id == "F-001"
        assert submission.identity == "RA1"
        assert submission.answers == {"name": "Al", "color": "red"}

    def test_reset(self, navigator):
        navigator.set_answer("name", "Al")
        navigator.reset()
        assert navigator.status is SessionStatus.UNINITIALIZED
        assert navigator.answers == {}
        assert navigator.session.identity is None

    def test_history_records_transitions(self, navigator):
        statuses = [s.status for s in navigator.history]
        assert statuses == [
            SessionStatus.UNINITIALIZED,
            SessionStatus.LOADING,
            SessionStatus.IN_PROGRESS,
        ]
