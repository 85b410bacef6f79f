"""Reducer building blocks."""
from __future__ import annotations
from typing import Any, Callable, Generic, List, Optional, Tuple, Type, TypeVar

StateT = TypeVar("StateT")
CaseT = Callable[[StateT, Any], StateT]


class CaseReducer(Generic[StateT]):
    '''A reducer assembled from one case function per action class.

    Args:
        initial_state: Factory for the state used when the store has none.

    Example:
        ```python
        class Increment(NamedTuple):
            """Action to increment the counter."""

        counter = CaseReducer(int)

        @counter.on(Increment)
        def increment(state: int, action: Increment) -> int:
            return state + 1

        store = create_store(counter)
        ```
    '''

    def __init__(self, initial_state: Callable[[], StateT]) -> None:
        self._initial_state = initial_state
        self._cases: List[Tuple[Tuple[Type[Any], ...], CaseT[StateT]]] = []

    def on(
        self,
        *action_types: Type[Any],
    ) -> Callable[[CaseT[StateT]], CaseT[StateT]]:
        """Register a case function for one or more action classes."""
        if not action_types:
            raise TypeError("@on requires at least one action class")

        def _decorator(func: CaseT[StateT]) -> CaseT[StateT]:
            self._cases.append((action_types, func))
            return func

        return _decorator

    def __call__(self, state: Optional[StateT], action: Any) -> StateT:
        if state is None:
            state = self._initial_state()

        for action_types, case in self._cases:
            if isinstance(action, action_types):
                return case(state, action)

        return state


def combine_reducers(
    combine_states: Callable[..., StateT],
    **reducers: Callable[[Any, Any], Any],
) -> Callable[[Optional[StateT], Any], StateT]:
    '''Combine reducers that each own one named part of the state.

    Args:
        combine_states: A class or factory function that will return
            the computed state when passed the substates by name.
        **reducers: Sub-reducers, by substate name.

    Example:
        ```python
        class CombinedState(NamedTuple):
            counter: int
            notes: NotesState

        reducer = combine_reducers(
            CombinedState,
            counter=counter_reducer,
            notes=notes_reducer,
        )
        ```
    '''

    def _substate(state: Optional[StateT], name: str) -> Any:
        if state is None:
            return None
        try:
            return getattr(state, name)
        except AttributeError as e:
            raise TypeError(str(e)) from e

    def _reducer(state: Optional[StateT], action: Any) -> StateT:
        substates = {
            name: reducer(_substate(state, name), action)
            for name, reducer in reducers.items()
        }
        return combine_states(**substates)

    return _reducer
