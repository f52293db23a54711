"""Custom exception hierarchy for pyredux."""

from __future__ import annotations

from typing import Any


class ReduxError(Exception):
    """Base exception for all pyredux errors."""


class InvalidEnhancerError(ReduxError):
    """Store enhancer was given but is not callable."""


class InvalidReducerError(ReduxError):
    """Reducer passed to ``create_store`` or ``replace_reducer`` is not callable."""


class InvalidActionError(ReduxError):
    """Dispatched value is not an action record.

    Only :class:`~pyredux.models.action.Action` instances and plain
    mappings are accepted.  Callables, sequences, strings, numbers and
    ``None`` are rejected before the reducer runs.
    """


class InvalidActionTypeError(InvalidActionError):
    """Action record has no ``type`` (missing or ``None``)."""


class ReentrantDispatchError(ReduxError):
    """``dispatch`` was called while a reducer was already running."""


class InvalidListenerError(ReduxError):
    """Listener passed to ``subscribe`` is not callable."""


class InvalidObserverError(ReduxError):
    """Observer passed to ``Observable.subscribe`` is ``None``."""


class InvalidActionCreatorsError(ReduxError):
    """``bind_action_creators`` received neither a callable nor a mapping."""


class ReducerSanityError(ReduxError):
    """A slice reducer failed its build-time probe.

    Raised lazily: ``combine_reducers`` captures the failure and the
    combined reducer raises it on every invocation.
    """

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class UndefinedSliceStateError(ReduxError):
    """A slice reducer returned ``None`` for a real action."""

    def __init__(
        self,
        message: str,
        *,
        key: str = "",
        action_type: Any = None,
    ) -> None:
        self.key = key
        self.action_type = action_type
        super().__init__(message)
