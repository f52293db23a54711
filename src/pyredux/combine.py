"""Compose slice reducers into a single reducer.

Each key of the mapping passed to :func:`combine_reducers` owns one slice of
a mapping-shaped state tree.  The combined reducer calls every slice reducer
with its slice and assembles the results.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pyredux import _diagnostics
from pyredux._types import Reducer
from pyredux.config import ReduxConfig
from pyredux.exceptions import ReducerSanityError, UndefinedSliceStateError
from pyredux.models.action import Action, ActionTypes, probe_unknown_action_type

_logger = logging.getLogger(__name__)


def _undefined_state_message(key: str, action: Action | None) -> str:
    action_type = action.type if action is not None else None
    action_name = f'"{action_type}"' if action_type is not None else "an action"
    return (
        f'Given action {action_name}, reducer "{key}" returned None. '
        "To ignore an action, you must explicitly return the previous state."
    )


def _unexpected_state_shape_message(
    input_state: Any,
    reducers: Mapping[str, Reducer],
    action: Action | None,
    unexpected_key_cache: set[Any],
) -> str | None:
    reducer_keys = list(reducers)
    if action is not None and action.type == ActionTypes.INIT:
        argument_name = "preloaded_state argument passed to create_store"
    else:
        argument_name = "previous state received by the reducer"

    if not reducer_keys:
        return (
            "Store does not have a valid reducer. Make sure the argument passed "
            "to combine_reducers is a mapping whose values are reducers."
        )

    expected = '", "'.join(str(key) for key in reducer_keys)
    if not isinstance(input_state, Mapping):
        return (
            f'The {argument_name} has unexpected type of "{type(input_state).__name__}". '
            f'Expected argument to be a mapping with the following keys: "{expected}"'
        )

    unexpected_keys = [key for key in input_state if key not in reducers and key not in unexpected_key_cache]
    unexpected_key_cache.update(unexpected_keys)

    if unexpected_keys:
        plural = "keys" if len(unexpected_keys) > 1 else "key"
        found = '", "'.join(str(key) for key in unexpected_keys)
        return (
            f'Unexpected {plural} "{found}" found in {argument_name}. '
            f'Expected to find one of the known reducer keys instead: "{expected}". '
            "Unexpected keys will be ignored."
        )
    return None


def _assert_reducer_sanity(reducers: Mapping[str, Reducer]) -> None:
    for key, reducer in reducers.items():
        initial_state = reducer(None, Action(type=ActionTypes.INIT))
        if initial_state is None:
            raise ReducerSanityError(
                f'Reducer "{key}" returned None during initialization. '
                "If the state passed to the reducer is None, you must "
                "explicitly return the initial state. The initial state may "
                "not be None.",
                key=key,
            )

        probe_type = probe_unknown_action_type()
        if reducer(None, Action(type=probe_type)) is None:
            raise ReducerSanityError(
                f'Reducer "{key}" returned None when probed with a random type. '
                f'Don\'t try to handle {ActionTypes.INIT} or other actions in the "@@redux/*" '
                "namespace. They are considered private. Instead, you must return the "
                "current state for any unknown actions, unless it is None, "
                "in which case you must return the initial state, regardless of the "
                "action type. The initial state may not be None.",
                key=key,
            )


def combine_reducers(
    reducers: Mapping[str, Any],
    *,
    config: ReduxConfig | None = None,
) -> Reducer:
    """Turn a mapping of slice reducers into one reducer.

    Values that are not callable are dropped (with a warning outside
    production).  Each remaining reducer is probed immediately; a reducer
    that returns ``None`` for the INIT action or for a random unknown action
    makes the combined reducer raise :class:`ReducerSanityError` on every
    call, starting with the first dispatch.

    The combined reducer returns the state it received, unchanged by
    identity, when no slice changed.  Otherwise it returns a new ``dict``.
    """
    config = config if config is not None else ReduxConfig.from_env()

    final_reducers: dict[str, Reducer] = {}
    for key, reducer in reducers.items():
        if config.diagnostics_enabled:
            if reducer is None:
                _diagnostics.warning(f'No reducer provided for key "{key}"')
            elif not callable(reducer):
                _diagnostics.warning(f'Reducer provided for key "{key}" is not callable; it will be ignored')
        if callable(reducer):
            final_reducers[key] = reducer

    final_reducer_keys = list(final_reducers)
    unexpected_key_cache: set[Any] = set()

    sanity_error: Exception | None = None
    try:
        _assert_reducer_sanity(final_reducers)
    except Exception as err:  # noqa: BLE001 - raised on first use instead
        _logger.debug("Deferring reducer sanity failure: %s", err)
        sanity_error = err

    def combination(state: Any = None, action: Action | None = None) -> Any:
        if sanity_error is not None:
            raise sanity_error

        if state is None:
            state = {}

        if config.diagnostics_enabled:
            message = _unexpected_state_shape_message(state, final_reducers, action, unexpected_key_cache)
            if message:
                _diagnostics.warning(message)

        has_changed = False
        next_state: dict[str, Any] = {}
        for key in final_reducer_keys:
            reducer = final_reducers[key]
            previous_state_for_key = state.get(key) if isinstance(state, Mapping) else None
            next_state_for_key = reducer(previous_state_for_key, action)
            if next_state_for_key is None:
                raise UndefinedSliceStateError(
                    _undefined_state_message(key, action),
                    key=key,
                    action_type=action.type if action is not None else None,
                )
            next_state[key] = next_state_for_key
            has_changed = has_changed or next_state_for_key is not previous_state_for_key

        return next_state if has_changed else state

    return combination
