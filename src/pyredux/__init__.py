"""pyredux - Predictable, synchronous state container for Python."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyredux")
except PackageNotFoundError:
    __version__ = "0+local"
from pyredux.bind import bind_action_creators
from pyredux.combine import combine_reducers
from pyredux.compose import compose
from pyredux.config import ReduxConfig
from pyredux.exceptions import (
    InvalidActionCreatorsError,
    InvalidActionError,
    InvalidActionTypeError,
    InvalidEnhancerError,
    InvalidListenerError,
    InvalidObserverError,
    InvalidReducerError,
    ReducerSanityError,
    ReduxError,
    ReentrantDispatchError,
    UndefinedSliceStateError,
)
from pyredux.models import Action, ActionTypes
from pyredux.store import Observable, Store, Subscription, create_store

__all__ = [
    "__version__",
    "Action",
    "ActionTypes",
    "InvalidActionCreatorsError",
    "InvalidActionError",
    "InvalidActionTypeError",
    "InvalidEnhancerError",
    "InvalidListenerError",
    "InvalidObserverError",
    "InvalidReducerError",
    "Observable",
    "ReducerSanityError",
    "ReduxConfig",
    "ReduxError",
    "ReentrantDispatchError",
    "Store",
    "Subscription",
    "UndefinedSliceStateError",
    "bind_action_creators",
    "combine_reducers",
    "compose",
    "create_store",
]
