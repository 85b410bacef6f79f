"""Notestore - a reducer-driven state store and a notes editor built on it."""
from .actions import INIT, InvalidAction, MissingType, NotAnObject, validate
from .config import StoreSettings, get_settings
from .controller import NotesController
from .notes import (
    CloseNote,
    CreateNote,
    Note,
    NotesState,
    OpenNote,
    UpdateNote,
    create_notes_store,
    notes_reducer,
)
from .reducer import CaseReducer, combine_reducers
from .store import Store, Subscription, SubscriptionStrategy, create_store

__all__ = [
    "INIT",
    "CaseReducer",
    "CloseNote",
    "CreateNote",
    "InvalidAction",
    "MissingType",
    "NotAnObject",
    "Note",
    "NotesController",
    "NotesState",
    "OpenNote",
    "Store",
    "StoreSettings",
    "Subscription",
    "SubscriptionStrategy",
    "UpdateNote",
    "combine_reducers",
    "create_notes_store",
    "create_store",
    "get_settings",
    "notes_reducer",
    "validate",
]
