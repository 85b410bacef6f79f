"""Notes state, actions, and reducer."""
from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, NamedTuple, Optional, Type, Union

from .actions import get_type
from .config import StoreSettings
from .reducer import CaseReducer
from .store import Store, create_store

logger = logging.getLogger(__name__)

CREATE_NOTE = "CREATE_NOTE"
UPDATE_NOTE = "UPDATE_NOTE"
OPEN_NOTE = "OPEN_NOTE"
CLOSE_NOTE = "CLOSE_NOTE"

UNTITLED = "Untitled"


class Note(NamedTuple):
    """A single note."""

    id: int
    content: str = ""

    @property
    def title(self) -> str:
        """First line of the content, stripped, or "Untitled" if blank."""
        return self.content.split("\n")[0].strip() or UNTITLED


_NO_NOTES: Mapping[int, Note] = MappingProxyType({})


class NotesState(NamedTuple):
    """State of the notes application.

    Props:
        next_note_id: Id the next created note will get. Always greater
            than every key of ``notes``.
        notes: Read-only mapping of note id to note.
        open_note_id: Id of the note being edited, if any. Always a key
            of ``notes`` when set.
    """

    next_note_id: int = 1
    notes: Mapping[int, Note] = _NO_NOTES
    open_note_id: Optional[int] = None

    @property
    def open_note(self) -> Optional[Note]:
        """The note being edited, if any."""
        if self.open_note_id is None:
            return None
        return self.notes.get(self.open_note_id)


class CreateNote(NamedTuple):
    """Create an empty note and open it."""

    type = CREATE_NOTE


class UpdateNote(NamedTuple):
    """Replace the content of a note."""

    id: int
    content: str

    type = UPDATE_NOTE


class OpenNote(NamedTuple):
    """Open a note for editing."""

    id: int

    type = OPEN_NOTE


class CloseNote(NamedTuple):
    """Close the open note."""

    type = CLOSE_NOTE


NoteAction = Union[CreateNote, UpdateNote, OpenNote, CloseNote]

_NOTE_ACTION_CLASSES = (CreateNote, UpdateNote, OpenNote, CloseNote)

_ACTIONS_BY_TYPE: Dict[str, Type[Any]] = {
    action_cls.type: action_cls for action_cls in _NOTE_ACTION_CLASSES
}


def to_note_action(action: Any) -> Optional[NoteAction]:
    """Convert a record whose ``type`` names a note action into that action.

    The record may be a mapping or any object with attributes, such as a
    dataclass. Keys or attributes other than the action's fields are ignored.

    Returns:
        The note action, or None if the type is not a note action type.

    Raises:
        TypeError: A field required by the action is missing.
    """
    if isinstance(action, _NOTE_ACTION_CLASSES):
        return action

    type_ = get_type(action)

    if not isinstance(type_, str) or type_ not in _ACTIONS_BY_TYPE:
        return None

    action_cls = _ACTIONS_BY_TYPE[type_]

    if isinstance(action, Mapping):
        fields = {name: action[name] for name in action_cls._fields if name in action}
    else:
        fields = {
            name: getattr(action, name)
            for name in action_cls._fields
            if hasattr(action, name)
        }

    return action_cls(**fields)


_cases: CaseReducer[NotesState] = CaseReducer(NotesState)


@_cases.on(CreateNote)
def _create_note(state: NotesState, action: CreateNote) -> NotesState:
    note_id = state.next_note_id
    notes = dict(state.notes)
    notes[note_id] = Note(id=note_id)

    return state._replace(
        next_note_id=note_id + 1,
        notes=MappingProxyType(notes),
        open_note_id=note_id,
    )


@_cases.on(UpdateNote)
def _update_note(state: NotesState, action: UpdateNote) -> NotesState:
    note = state.notes.get(action.id)

    if note is None:
        logger.debug("Ignoring update of unknown note %r", action.id)
        return state

    notes = dict(state.notes)
    notes[action.id] = note._replace(content=action.content)

    return state._replace(notes=MappingProxyType(notes))


@_cases.on(OpenNote)
def _open_note(state: NotesState, action: OpenNote) -> NotesState:
    if action.id not in state.notes:
        logger.debug("Ignoring open of unknown note %r", action.id)
        return state

    return state._replace(open_note_id=action.id)


@_cases.on(CloseNote)
def _close_note(state: NotesState, action: CloseNote) -> NotesState:
    return state._replace(open_note_id=None)


def notes_reducer(state: Optional[NotesState], action: Any) -> NotesState:
    """Compute the next notes state.

    Unknown actions, and updates or opens of notes that do not exist,
    return ``state`` unchanged. Other records whose ``type`` names a note
    action, such as ``{"type": "CREATE_NOTE"}``, are converted with
    :func:`to_note_action` first.
    """
    note_action = to_note_action(action)

    if note_action is not None:
        action = note_action

    return _cases(state, action)


def create_notes_store(settings: Optional[StoreSettings] = None) -> Store[NotesState]:
    """Create a store holding the notes state."""
    return create_store(notes_reducer, settings=settings)
