"""Notestore stores."""
from __future__ import annotations
import collections
import contextlib
import enum
import logging
import threading
from anyio import Event
from typing import (
    Any,
    AsyncIterator,
    Callable,
    ContextManager,
    Deque,
    Dict,
    Generator,
    Generic,
    List,
    Optional,
    Tuple,
    TypeVar,
    cast,
)

from .actions import validate
from .config import StoreSettings, get_settings

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT")
Reducer = Callable[[Optional[StateT], Any], StateT]
Subscriber = Callable[[], None]
Unsubscribe = Callable[[], None]


class SubscriptionStrategy(str, enum.Enum):
    """How a change stream queues state changes it has not yet yielded.

    Props:
        LATEST: Keep only the newest pending change. The consumer always
            sees the store's current state, but skips intermediate states.
        EVERY: Keep every pending change. The consumer sees each state the
            store passed through, though the store may have moved on by
            the time a change is read.
    """

    LATEST = "latest"
    EVERY = "every"


class Subscription(AsyncIterator[Tuple[StateT, Any]]):
    """An async stream of ``(state, action)`` pairs from a store.

    Changes are queued by ``Store.dispatch``, which must run on the thread
    that opened the stream, i.e. the thread of the consuming event loop.
    """

    def __init__(self, strategy: SubscriptionStrategy) -> None:
        self._strategy = strategy
        self._thread_id = threading.get_ident()
        self._changed = Event()
        self._pending: Deque[Tuple[StateT, Any]] = collections.deque(
            maxlen=1 if strategy == SubscriptionStrategy.LATEST else None
        )

    def _push(self, state: StateT, action: Any) -> None:
        self._pending.append((state, action))
        self._changed.set()

    async def __anext__(self) -> Tuple[StateT, Any]:
        while not self._pending:
            await self._changed.wait()
            self._changed = Event()

        return self._pending.popleft()

    def __aiter__(self) -> AsyncIterator[Tuple[StateT, Any]]:
        return self


class _Registration:
    """A single subscribe call; the same handler may be registered twice."""

    __slots__ = ("handler",)

    def __init__(self, handler: Subscriber) -> None:
        self.handler = handler


class Store(Generic[StateT]):
    """A state store driven by a reducer.

    The reducer is called with ``None`` and the init action on creation
    to produce the starting state.

    Args:
        reducer: Pure function of ``(state, action)`` returning the next state.
        settings: Store settings. Defaults to the environment settings.
    """

    state: StateT

    def __init__(
        self,
        reducer: Reducer[StateT],
        settings: Optional[StoreSettings] = None,
    ) -> None:
        settings = settings or get_settings()
        self._reducer = reducer
        self._settings = settings
        self._log_level = logging.INFO if settings.log_actions else logging.DEBUG
        self._lock: ContextManager[Any] = (
            threading.RLock() if settings.thread_safe else contextlib.nullcontext()
        )
        self._subscribers: List[_Registration] = []
        self._subscriptions: Dict[Subscription[StateT], bool] = {}
        self._set_state(cast(StateT, None))
        self.dispatch({"type": settings.init_action_type})

    def get_state(self) -> StateT:
        """Get the current state snapshot."""
        return self.state

    @property
    def subscriber_count(self) -> int:
        """Number of active subscriber registrations."""
        return len(self._subscribers)

    def dispatch(self, action: Any) -> StateT:
        """Dispatch an action into the store.

        Subscribers registered when the notification pass starts are
        called in registration order. A subscriber may dispatch again;
        the nested dispatch completes, notifications included, before
        the outer pass continues.

        Returns:
            The state produced by this action.

        Raises:
            InvalidAction: The action is malformed. The store is unchanged
                and no subscriber is called.
            RuntimeError: A change stream is open on another thread. The
                store is unchanged.
        """
        type_ = validate(action)

        with self._lock:
            thread_id = threading.get_ident()
            if any(sub._thread_id != thread_id for sub in self._subscriptions):
                raise RuntimeError(
                    "Cannot dispatch from a thread other than the one "
                    "consuming an open change stream"
                )

            logger.log(self._log_level, "Dispatching %r", type_)
            state = self._reducer(self.state, action)
            self._set_state(state)

            for sub in list(self._subscriptions.keys()):
                sub._push(state, action)

            for registration in tuple(self._subscribers):
                registration.handler()

        return state

    def subscribe(self, handler: Subscriber) -> Unsubscribe:
        """Call ``handler`` with no arguments after every dispatch.

        Returns:
            A function that removes this registration. Calling it more
            than once does nothing.
        """
        registration = _Registration(handler)

        with self._lock:
            self._subscribers.append(registration)
            logger.debug("Subscribed %r (%d total)", handler, len(self._subscribers))

        def unsubscribe() -> None:
            with self._lock:
                if registration in self._subscribers:
                    self._subscribers.remove(registration)
                    logger.debug("Unsubscribed %r", handler)

        return unsubscribe

    @contextlib.contextmanager
    def changes(
        self,
        strategy: SubscriptionStrategy = SubscriptionStrategy.LATEST,
    ) -> Generator[Subscription[StateT], None, None]:
        """Create a stream of state changes for async consumers.

        While the stream is open, every dispatch must come from the thread
        that opened it; dispatching from another thread raises RuntimeError.

        Args:
            strategy: whether to receive the latest state change (default)
                or every state change.

        Returns:
            A context manager wrapping a subscription.
        """
        sub: Subscription[StateT] = Subscription(strategy=strategy)

        with self._lock:
            self._subscriptions[sub] = True
        try:
            yield sub
        finally:
            with self._lock:
                del self._subscriptions[sub]

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "state":
            raise TypeError("Cannot overwrite state attribute.")
        super().__setattr__(name, value)

    def _set_state(self, value: StateT) -> None:
        super().__setattr__("state", value)


def create_store(
    reducer: Reducer[StateT],
    settings: Optional[StoreSettings] = None,
) -> Store[StateT]:
    """Create a store and initialize its state from ``reducer``."""
    return Store(reducer, settings=settings)
