"""Data models shared by the store and the reducer composer."""

from pyredux.models.action import (
    PROBE_UNKNOWN_ACTION_PREFIX,
    Action,
    ActionTypes,
    action_fields,
    coerce_action,
    probe_unknown_action_type,
)

__all__ = [
    "PROBE_UNKNOWN_ACTION_PREFIX",
    "Action",
    "ActionTypes",
    "action_fields",
    "coerce_action",
    "probe_unknown_action_type",
]
