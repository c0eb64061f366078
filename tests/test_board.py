"""
Tests for the reminder board
"""

import pytest
from conftest import make_note

from habitiq.reminders.board import ReminderBoard, format_reminders


@pytest.fixture
def notes():
    return [
        make_note("n1", "I need to exercise tomorrow"),
        make_note("n2", "urgent: call the doctor asap"),
    ]


@pytest.fixture
def board(notes):
    board = ReminderBoard()
    board.refresh(notes)
    return board


def test_refresh_populates(board):
    assert len(board) == 2
    assert [r.text for r in board] == ["urgent: call the doctor asap", "exercise tomorrow"]


def test_complete_toggles(board):
    reminder_id = next(iter(board)).id

    assert board.complete(reminder_id).is_completed
    assert board.completed_count() == 1
    assert not board.complete(reminder_id).is_completed
    assert board.completed_count() == 0


def test_complete_unknown(board):
    assert board.complete("missing") is None
    assert board.dismiss("missing") is None


def test_active_filters(board):
    first, second = list(board)
    board.complete(first.id)
    board.dismiss(second.id)

    assert board.active() == []
    assert [r.id for r in board.active(show_completed=True)] == [first.id]
    assert board.completed_count() == 1


def test_dismissed_completed_not_counted(board):
    reminder_id = next(iter(board)).id
    board.complete(reminder_id)
    board.dismiss(reminder_id)
    assert board.completed_count() == 0


def test_flags_survive_refresh(board, notes):
    first, second = list(board)
    board.complete(first.id)
    board.dismiss(second.id)

    board.refresh(notes + [make_note("n3", "Need to buy groceries.")])

    assert board.get(first.id).is_completed
    assert board.get(second.id).is_dismissed
    assert len(board) == 3


def test_removed_note_drops_reminder(board, notes):
    board.refresh(notes[:1])
    assert [r.note_id for r in board] == ["n1"]


def test_clear(board):
    board.clear()
    assert len(board) == 0


def test_format_reminders(board):
    text = format_reminders(list(board))

    assert text.startswith("Reminders from your notes:")
    assert "1. [high] urgent: call the doctor asap (work)" in text
    assert "2. [medium] exercise tomorrow (fitness) - tomorrow" in text


def test_format_empty():
    assert format_reminders([]) == ""
