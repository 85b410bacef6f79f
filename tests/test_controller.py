"""Tests the notes controller."""
from __future__ import annotations

import pytest
from typing import List
from notestore import Note, NotesController, NotesState, StoreSettings, create_notes_store


@pytest.fixture
def subject() -> NotesController:
    return NotesController(create_notes_store(settings=StoreSettings()))


def test_view(subject: NotesController) -> None:
    assert subject.view == NotesState()


def test_user_flow(subject: NotesController) -> None:
    subject.add_note()
    subject.change_note(1, "Groceries\nmilk")
    subject.close_note()
    subject.add_note()
    subject.open_note(1)

    view = subject.view
    assert view.open_note == Note(id=1, content="Groceries\nmilk")
    assert view.open_note is not None
    assert view.open_note.title == "Groceries"
    assert [note.title for note in view.notes.values()] == ["Groceries", "Untitled"]


def test_attach(subject: NotesController) -> None:
    seen: List[NotesState] = []
    subject.attach(seen.append)

    subject.add_note()
    subject.change_note(1, "hi")

    assert [state.notes[1].content for state in seen] == ["", "hi"]


def test_detach(subject: NotesController) -> None:
    seen: List[NotesState] = []
    subject.attach(seen.append)

    subject.add_note()
    subject.detach()
    subject.detach()
    subject.add_note()

    assert len(seen) == 1


def test_attach_twice_raises(subject: NotesController) -> None:
    subject.attach(lambda state: None)

    with pytest.raises(RuntimeError, match="already attached"):
        subject.attach(lambda state: None)


def test_controllers_share_injected_store() -> None:
    store = create_notes_store(settings=StoreSettings())
    first = NotesController(store)
    second = NotesController(store)

    first.add_note()

    assert second.view.open_note_id == 1
    assert create_notes_store(settings=StoreSettings()).state == NotesState()
