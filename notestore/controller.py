"""Presentation-side access to a notes store."""
from __future__ import annotations
from typing import Callable, Optional

from .notes import CloseNote, CreateNote, NotesState, OpenNote, UpdateNote
from .store import Store, Unsubscribe


Listener = Callable[[NotesState], None]


class NotesController:
    """Turns user intents into note actions on an injected store.

    Args:
        store: The store to read from and dispatch to.
    """

    def __init__(self, store: Store[NotesState]) -> None:
        self._store = store
        self._unsubscribe: Optional[Unsubscribe] = None

    @property
    def view(self) -> NotesState:
        """The current notes state."""
        return self._store.get_state()

    def attach(self, listener: Listener) -> None:
        """Call ``listener`` with the new state after every dispatch."""
        if self._unsubscribe is not None:
            raise RuntimeError("Controller is already attached")

        self._unsubscribe = self._store.subscribe(
            lambda: listener(self._store.get_state())
        )

    def detach(self) -> None:
        """Stop notifying the attached listener."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def add_note(self) -> NotesState:
        return self._store.dispatch(CreateNote())

    def change_note(self, note_id: int, content: str) -> NotesState:
        return self._store.dispatch(UpdateNote(id=note_id, content=content))

    def open_note(self, note_id: int) -> NotesState:
        return self._store.dispatch(OpenNote(id=note_id))

    def close_note(self) -> NotesState:
        return self._store.dispatch(CloseNote())
