"""Action validation."""
from __future__ import annotations
import collections.abc
import inspect
import logging
import numbers
from typing import Any, Mapping

logger = logging.getLogger(__name__)

INIT_ACTION_TYPE = "@@init"
INIT: Mapping[str, Any] = {"type": INIT_ACTION_TYPE}

_MISSING = object()
_PRIMITIVES = (str, bytes, bytearray, numbers.Number)


class InvalidAction(TypeError):
    """An action was rejected before reaching the reducer.

    Args:
        message: Description of the problem.
        action: The rejected action.
    """

    def __init__(self, message: str, action: Any) -> None:
        super().__init__(message)
        self.action = action


class NotAnObject(InvalidAction):
    """The action is None, a primitive, or a sequence."""


class MissingType(InvalidAction):
    """The action has no type discriminant."""


def _is_record(action: Any) -> bool:
    if action is None or isinstance(action, _PRIMITIVES):
        return False

    if inspect.isclass(action) or inspect.isroutine(action):
        return False

    # named tuples are records, plain tuples are not
    if isinstance(action, tuple):
        return hasattr(action, "_fields")

    if isinstance(action, collections.abc.Mapping):
        return True

    return not isinstance(action, (collections.abc.Sequence, collections.abc.Set))


def get_type(action: Any, default: Any = None) -> Any:
    """Get the ``type`` of a record without validating it."""
    if isinstance(action, collections.abc.Mapping):
        return action.get("type", default)

    return getattr(action, "type", default)


def validate(action: Any) -> Any:
    """Ensure an action is a record with a type discriminant.

    Returns:
        The action's type.

    Raises:
        NotAnObject: The action is None, a primitive, a class or function,
            or a sequence.
        MissingType: The action has no ``type``.
    """
    if not _is_record(action):
        logger.warning("Rejected action %r: not an object", action)
        raise NotAnObject("Action must be an object!", action)

    type_ = get_type(action, _MISSING)

    if type_ is _MISSING:
        logger.warning("Rejected action %r: missing type", action)
        raise MissingType("Action must have a type!", action)

    return type_


def action_type(action: Any) -> Any:
    """Get the type discriminant of a valid action."""
    return validate(action)
