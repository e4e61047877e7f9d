from __future__ import annotations

from pathlib import Path

import pytest
from conftest import FailingFiles, FakeDialogs, FakeMessages, FakeRetype, FakeView

from trollpad.domain.models import Document, SaveOutcome, SaveState
from trollpad.services.dirty_tracker import DirtyTracker
from trollpad.services.file_service import FileService
from trollpad.services.save_gate import SaveGate
from trollpad.utils.constants import RETYPE_CANCELLED_NOTICE


class Harness:
    """One SaveGate over an in-memory view, with every collaborator reachable."""

    def __init__(
        self,
        text: str,
        *retyped: str | None,
        path: Path | None = None,
        files: FileService | None = None,
    ) -> None:
        self.view = FakeView(text)
        self.document = Document(path=path)
        self.tracker = DirtyTracker()
        self.tracker.attach(self.view.edit_events)
        self.tracker.mark_dirty()
        self.files = files or FileService()
        self.dialogs = FakeDialogs()
        self.retype = FakeRetype(*retyped)
        self.messages = FakeMessages()
        self.gate = SaveGate(
            document=self.document,
            text_source=self.view.get_editor_text,
            tracker=self.tracker,
            files=self.files,
            dialogs=self.dialogs,
            retype=self.retype,
            messages=self.messages,
            notify=self.view.show_status,
        )

    def snapshot(self):
        return (self.view.text, self.document.path, self.tracker.is_dirty())


def test_scenario_identical_retype_saves_and_cleans(tmp_path: Path):
    target = tmp_path / "doc.txt"
    h = Harness("hello\nworld", "hello\nworld", path=target)

    assert h.gate.request_save(False) is True

    assert target.read_bytes() == b"hello\nworld"
    assert h.tracker.is_dirty() is False
    assert h.gate.last_outcome is SaveOutcome.SAVED
    assert h.gate.last_state is SaveState.SAVED
    assert h.gate.state is SaveState.IDLE
    assert h.messages.errors == []
    assert h.messages.infos == [("Info", f"Saved successfully to: {target.absolute()}")]
    assert h.dialogs.save_calls == []  # existing target reused


def test_content_is_written_as_utf8(tmp_path: Path):
    target = tmp_path / "u.txt"
    text = "zażółć ✓\n"
    h = Harness(text, text, path=target)
    assert h.gate.request_save() is True
    assert target.read_bytes() == text.encode("utf-8")


def test_scenario_mismatch_rejects_with_report(tmp_path: Path):
    target = tmp_path / "doc.txt"
    h = Harness("hello\nworld", "hello world", path=target)
    before = h.snapshot()

    assert h.gate.request_save(False) is False

    assert not target.exists()
    assert h.snapshot() == before
    assert h.gate.last_outcome is SaveOutcome.MISMATCH
    assert h.gate.last_state is SaveState.REJECTED
    assert h.gate.state is SaveState.IDLE
    assert h.gate.last_report is not None and h.gate.last_report.locus == 5
    assert len(h.messages.errors) == 1
    title, text = h.messages.errors[0]
    assert "First difference at index 5" in text
    assert "Editor:  …hello\\nworld…" in text
    assert "Retyped: …hello world…" in text


def test_truncated_retype_rejected_at_boundary(tmp_path: Path):
    h = Harness("abc", "ab", path=tmp_path / "x.txt")
    assert h.gate.request_save() is False
    assert h.gate.last_report is not None and h.gate.last_report.locus == 2


def test_cancelled_retype_is_silent_and_changes_nothing(tmp_path: Path):
    target = tmp_path / "doc.txt"
    h = Harness("draft", None, path=target)
    before = h.snapshot()

    assert h.gate.request_save(False) is False

    assert h.snapshot() == before
    assert not target.exists()
    assert h.messages.errors == []
    assert h.messages.infos == []
    assert h.dialogs.save_calls == []
    assert h.view.statuses == [RETYPE_CANCELLED_NOTICE]
    assert h.gate.last_outcome is SaveOutcome.CANCELLED
    assert h.gate.state is SaveState.IDLE


def test_untitled_document_asks_for_target(tmp_path: Path):
    target = tmp_path / "new.txt"
    h = Harness("abc", "abc")
    h.dialogs.save_answers.append(target)

    assert h.gate.request_save(False) is True

    assert h.dialogs.save_calls == ["untitled.txt"]
    assert h.document.path == target
    assert target.read_text(encoding="utf-8") == "abc"


def test_aborted_target_selection_cancels_without_writing():
    h = Harness("abc", "abc")
    before = h.snapshot()

    assert h.gate.request_save(False) is False

    assert h.snapshot() == before
    assert h.gate.last_outcome is SaveOutcome.CANCELLED
    assert h.messages.errors == []


def test_force_choose_target_prompts_even_with_existing_path(tmp_path: Path):
    old = tmp_path / "old.txt"
    new = tmp_path / "new.txt"
    h = Harness("abc", "abc", path=old)
    h.dialogs.save_answers.append(new)

    assert h.gate.request_save(True) is True

    assert h.dialogs.save_calls == [str(old)]
    assert h.document.path == new
    assert new.exists() and not old.exists()


def test_write_failure_reports_and_keeps_state(tmp_path: Path):
    files = FailingFiles("disk full")
    h = Harness("abc", "abc", path=tmp_path / "doc.txt", files=files)
    before = h.snapshot()

    assert h.gate.request_save(False) is False

    assert files.write_attempts == 1
    assert h.snapshot() == before
    assert h.gate.last_outcome is SaveOutcome.IO_FAILURE
    assert h.gate.last_state is SaveState.REJECTED
    assert h.messages.errors == [("Save Error", "Failed to save file:\ndisk full")]


def test_write_failure_on_save_as_keeps_old_target(tmp_path: Path):
    old = tmp_path / "old.txt"
    h = Harness("abc", "abc", path=old, files=FailingFiles())
    h.dialogs.save_answers.append(tmp_path / "new.txt")

    assert h.gate.request_save(True) is False
    assert h.document.path == old


def test_snapshot_taken_at_request_time(tmp_path: Path):
    target = tmp_path / "doc.txt"
    h = Harness("original", "original", path=target)
    # the user keeps editing while the retype dialog is open
    h.retype.on_prompt = lambda: h.view.type(" plus more")

    assert h.gate.request_save(False) is True
    assert target.read_text(encoding="utf-8") == "original"


def test_retyping_the_later_edit_does_not_match_snapshot(tmp_path: Path):
    h = Harness("original", "original plus more", path=tmp_path / "doc.txt")
    h.retype.on_prompt = lambda: h.view.type(" plus more")

    assert h.gate.request_save(False) is False
    assert h.gate.last_outcome is SaveOutcome.MISMATCH


def test_same_retype_twice_gives_same_outcome(tmp_path: Path):
    h = Harness("a\nb", "a b", "a b", path=tmp_path / "doc.txt")
    first = (h.gate.request_save(False), h.gate.last_outcome, h.gate.last_report)
    second = (h.gate.request_save(False), h.gate.last_outcome, h.gate.last_report)
    assert first == second

    h2 = Harness("a\nb", "a\nb", "a\nb", path=tmp_path / "doc2.txt")
    assert h2.gate.request_save(False) is True
    assert h2.gate.request_save(False) is True
    assert h2.gate.last_outcome is SaveOutcome.SAVED


def test_reentrant_request_is_refused(tmp_path: Path):
    h = Harness("abc", "abc", path=tmp_path / "doc.txt")
    nested: list[bool] = []
    h.retype.on_prompt = lambda: nested.append(h.gate.request_save(False))

    assert h.gate.request_save(False) is True
    assert nested == [False]
    assert h.retype.calls == 1


def test_gate_returns_to_idle_when_a_collaborator_raises(tmp_path: Path):
    h = Harness("abc", path=tmp_path / "doc.txt")

    def boom(*_a, **_k):
        raise RuntimeError("dialog crashed")

    h.retype.prompt_retype = boom  # type: ignore[method-assign]
    with pytest.raises(RuntimeError):
        h.gate.request_save(False)
    assert h.gate.state is SaveState.IDLE


def test_crlf_document_is_written_back_with_crlf(tmp_path: Path):
    target = tmp_path / "dos.txt"
    h = Harness("a\nb\n", "a\nb\n", path=target)
    h.document.newline = "\r\n"

    assert h.gate.request_save(False) is True
    assert target.read_bytes() == b"a\r\nb\r\n"
