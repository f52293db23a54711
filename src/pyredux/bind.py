"""Bind action creators to a store's ``dispatch``."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pyredux._types import Dispatch
from pyredux.exceptions import InvalidActionCreatorsError


def _bind_action_creator(action_creator: Callable[..., Any], dispatch: Dispatch) -> Callable[..., Any]:
    def bound(*args: Any, **kwargs: Any) -> Any:
        return dispatch(action_creator(*args, **kwargs))

    bound.__name__ = getattr(action_creator, "__name__", bound.__name__)
    bound.__doc__ = getattr(action_creator, "__doc__", None)
    return bound


def bind_action_creators(action_creators: Any, dispatch: Dispatch) -> Any:
    """Wrap action creators so that calling them dispatches their result.

    Parameters
    ----------
    action_creators : Callable or Mapping
        A single action creator, or a mapping of name to action creator.
        Non-callable mapping values are skipped.
    dispatch : Callable
        Usually ``store.dispatch``.

    Returns
    -------
    Callable or dict
        A bound function when given a callable, otherwise a ``dict`` with
        the same keys as the callable entries of *action_creators*.
    """
    if callable(action_creators):
        return _bind_action_creator(action_creators, dispatch)

    if not isinstance(action_creators, Mapping):
        received = "None" if action_creators is None else type(action_creators).__name__
        raise InvalidActionCreatorsError(
            f"bind_action_creators expected a mapping or a function, instead received {received}. "
            'Did you write "from actions import create_todo" instead of "import actions"?'
        )

    return {
        key: _bind_action_creator(action_creator, dispatch)
        for key, action_creator in action_creators.items()
        if callable(action_creator)
    }
