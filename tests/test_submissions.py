"""Tests para SubmissionManager."""

import pytest

from formulario.submissions import Submission, SubmissionManager


@pytest.fixture
def manager(tmp_path):
    return SubmissionManager(tmp_path / "submissions")


@pytest.fixture
def submission():
    return Submission(
        form_id="F-001",
        form_title="Registro",
        identity="RA1",
        answers={"name": "Al", "topics": ["a", "b"]},
    )


class TestSubmissionManager:
    """Tests para SubmissionManager."""

    def test_creates_directory(self, tmp_path):
        SubmissionManager(tmp_path / "a" / "b")
        assert (tmp_path / "a" / "b").is_dir()

    def test_save_and_load(self, manager, submission):
        path = manager.save(submission)
        assert path.exists()

        loaded = manager.load(submission.id)
        assert loaded.form_id == "F-001"
        assert loaded.answers == {"name": "Al", "topics": ["a", "b"]}

    def test_load_by_prefix(self, manager, submission):
        manager.save(submission)
        assert manager.load(submission.id[:4]).id == submission.id

    def test_load_missing(self, manager):
        with pytest.raises(FileNotFoundError):
            manager.load("nope")

    def test_list(self, manager, submission):
        manager.save(submission)
        items = manager.list_submissions()
        assert len(items) == 1
        assert items[0]["id"] == submission.id
        assert items[0]["n_answers"] == 2
        assert items[0]["identity"] == "RA1"

    def test_delete(self, manager, submission):
        manager.save(submission)
        assert manager.delete(submission.id) is True
        assert manager.delete(submission.id) is False
        assert manager.list_submissions() == []

    def test_delete_by_prefix(self, manager, submission):
        manager.save(submission)
        assert manager.delete(submission.id[:4]) is True
        assert manager.list_submissions() == []
        assert manager.delete(submission.id[:4]) is False
