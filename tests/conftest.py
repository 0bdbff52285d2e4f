import pytest
import tempfile
from pathlib import Path
from git import Repo

from gitcommitlint.models import Message


@pytest.fixture
def make_message():
    """Build a Message, deriving raw text from subject and body."""
    def _make(subject=None, body=None, **fields):
        parts = [subject or "", body or ""]
        raw = "\n\n".join(part for part in parts if part) or "placeholder"
        return Message(raw=raw, subject=subject, body=body, **fields)

    return _make


@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository with a single ticketed commit."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)

        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content")

        repo.index.add(["test.txt"])
        repo.index.commit("feat(core): add initial content\n\nSets up the project.\nRefs #BOS-494\n")

        yield tmp_dir


@pytest.fixture
def temp_git_repo_without_ticket():
    """Create a temporary git repository whose HEAD commit lacks a ticket ID."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)

        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content")

        repo.index.add(["test.txt"])
        repo.index.commit("Initial commit")

        yield tmp_dir
