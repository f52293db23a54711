"""Synchronous observable state store.

The store owns a single state value.  The only way to change it is
:meth:`Store.dispatch`, which runs the current reducer and then notifies
every subscribed listener.  Subscriptions changed while listeners are being
notified take effect from the next dispatch.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any

from pyredux._redact import describe_for_log
from pyredux._types import Enhancer, Listener, Reducer
from pyredux.config import ReduxConfig
from pyredux.exceptions import (
    InvalidEnhancerError,
    InvalidListenerError,
    InvalidObserverError,
    InvalidReducerError,
    ReentrantDispatchError,
)
from pyredux.models.action import Action, ActionTypes, action_fields, coerce_action

_logger = logging.getLogger(__name__)


class Subscription:
    """Handle returned by :meth:`Observable.subscribe`."""

    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe = unsubscribe

    def unsubscribe(self) -> None:
        self._unsubscribe()


class Observable:
    """Minimal observable view over a store.

    Subscribing pushes the current state once, then pushes again after
    every dispatch until the subscription is cancelled.
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    def subscribe(self, observer: Any) -> Subscription:
        """Subscribe *observer*.

        *observer* is either an object with a ``next(state)`` method or a
        plain callable taking the state.  Objects with neither are accepted
        and receive nothing.
        """
        if observer is None:
            raise InvalidObserverError("Expected the observer to be an object, got None.")

        on_next = getattr(observer, "next", None)
        if on_next is None and callable(observer):
            on_next = observer

        def observe_state() -> None:
            if on_next is not None:
                on_next(self._store.get_state())

        observe_state()
        return Subscription(self._store.subscribe(observe_state))


class Store:
    """A live state container.

    Do not instantiate directly; use :func:`create_store`, which also runs
    the initial INIT dispatch.

    Listener bookkeeping is copy-on-write: ``_current_listeners`` is the
    snapshot iterated by the last dispatch and is never mutated in place,
    ``_next_listeners`` is the staging list that subscribe/unsubscribe edit.
    The two alias each other right after a dispatch; the staging list is
    forked on the first mutation after that.
    """

    def __init__(
        self,
        reducer: Reducer,
        preloaded_state: Any = None,
        *,
        config: ReduxConfig | None = None,
    ) -> None:
        if not callable(reducer):
            raise InvalidReducerError("Expected the reducer to be a function.")

        self._config = config if config is not None else ReduxConfig.from_env()
        self._current_reducer: Reducer = reducer
        self._current_state: Any = preloaded_state
        self._current_listeners: list[Listener] = []
        self._next_listeners: list[Listener] = self._current_listeners
        self._is_dispatching = False

    @property
    def is_dispatching(self) -> bool:
        return self._is_dispatching

    @property
    def listener_count(self) -> int:
        """Number of listeners that the next dispatch will notify."""
        return len(self._next_listeners)

    def _ensure_can_mutate_next_listeners(self) -> None:
        if self._next_listeners is self._current_listeners:
            self._next_listeners = list(self._current_listeners)

    def get_state(self) -> Any:
        """Return the current state."""
        return self._current_state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* to run after every dispatch.

        Subscribing or unsubscribing while listeners are being notified
        does not affect the dispatch in progress; the change applies from
        the next dispatch on.

        Returns
        -------
        Callable[[], None]
            Idempotent unsubscribe function.  Only its first call removes
            the registration; later calls do nothing.
        """
        if not callable(listener):
            raise InvalidListenerError("Expected listener to be a function.")

        is_subscribed = True
        self._ensure_can_mutate_next_listeners()
        self._next_listeners.append(listener)

        def unsubscribe() -> None:
            nonlocal is_subscribed
            if not is_subscribed:
                return
            is_subscribed = False

            self._ensure_can_mutate_next_listeners()
            # Identity match: listeners with a custom __eq__ must not remove each other.
            for index, registered in enumerate(self._next_listeners):
                if registered is listener:
                    del self._next_listeners[index]
                    break
            _logger.debug("Listener unsubscribed; %d remaining", len(self._next_listeners))

        return unsubscribe

    def dispatch(self, action: Any) -> Action:
        """Apply *action* through the current reducer and notify listeners.

        *action* may be an :class:`Action` or a plain mapping with a
        ``type`` key.  The validated :class:`Action` is returned.

        Raises
        ------
        InvalidActionError
            *action* is not an action record.
        InvalidActionTypeError
            *action* has no ``type``.
        ReentrantDispatchError
            Called from inside a reducer.
        """
        action = coerce_action(action)

        if self._is_dispatching:
            raise ReentrantDispatchError("Reducers may not dispatch actions.")

        if self._config.log_payloads:
            _logger.debug(
                "Dispatching action type=%s payload=%s",
                action.type,
                describe_for_log(
                    action_fields(action),
                    max_string=self._config.max_log_string,
                    redact_keys=self._config.redact_keys,
                ),
            )
        else:
            _logger.debug("Dispatching action type=%s", action.type)

        try:
            self._is_dispatching = True
            self._current_state = self._current_reducer(self._current_state, action)
        finally:
            self._is_dispatching = False

        listeners = self._current_listeners = self._next_listeners
        for listener in listeners:
            listener()

        return action

    def replace_reducer(self, next_reducer: Reducer) -> None:
        """Swap the reducer and re-derive state with an INIT dispatch.

        Used for code splitting or hot reloading of reducers.
        """
        if not callable(next_reducer):
            raise InvalidReducerError("Expected next_reducer to be a function.")

        _logger.debug("Replacing reducer with %r", next_reducer)
        self._current_reducer = next_reducer
        self.dispatch(Action(type=ActionTypes.INIT))

    def observable(self) -> Observable:
        """Return an :class:`Observable` view of this store."""
        return Observable(self)


def create_store(
    reducer: Reducer,
    preloaded_state: Any = None,
    enhancer: Enhancer | None = None,
    *,
    config: ReduxConfig | None = None,
) -> Store:
    """Create a store holding the state tree produced by *reducer*.

    Parameters
    ----------
    reducer : Callable
        ``(state, action) -> next_state``.  Receives ``None`` as the state
        on the first call and must return its initial state then.
    preloaded_state : Any
        Initial state, e.g. restored from a previous session.  With
        :func:`~pyredux.combine.combine_reducers` this must be a mapping
        with the same keys.  A callable passed here with no *enhancer* is
        taken as the enhancer.
    enhancer : Callable
        ``enhancer(create_store)`` must return a store creator with the same
        signature.  Applied once; chain several with
        :func:`~pyredux.compose.compose`.
    config : ReduxConfig or None
        Defaults to :meth:`ReduxConfig.from_env`.

    Returns
    -------
    Store
        A store already initialized with one INIT dispatch.
    """
    if callable(preloaded_state) and enhancer is None:
        enhancer = preloaded_state
        preloaded_state = None

    if enhancer is not None:
        if not callable(enhancer):
            raise InvalidEnhancerError("Expected the enhancer to be a function.")
        creator = create_store if config is None else functools.partial(create_store, config=config)
        return enhancer(creator)(reducer, preloaded_state)

    store = Store(reducer, preloaded_state, config=config)
    _logger.debug("Store created with reducer %r", reducer)
    store.dispatch(Action(type=ActionTypes.INIT))
    return store
