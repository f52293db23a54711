"""Action model and reserved action types."""

from __future__ import annotations

import secrets
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from pyredux.exceptions import InvalidActionError, InvalidActionTypeError

PROBE_UNKNOWN_ACTION_PREFIX = "@@redux/PROBE_UNKNOWN_ACTION_"


class ActionTypes(StrEnum):
    """Action types reserved by the library.

    Application reducers must not branch on these.  They are dispatched
    internally and should be handled like any other unrecognized action:
    return the current state, or the initial state when the current state
    is ``None``.
    """

    INIT = "@@redux/INIT"


class Action(BaseModel):
    """An immutable action record.

    ``type`` identifies the transition; any other keyword becomes a payload
    field readable as an attribute::

        Action(type="ADD_TODO", text="write tests").text

    Subclass to declare typed payload fields.  Payload field names must be
    strings.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Any

    @field_validator("type")
    @classmethod
    def _require_type(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("action type must not be None")
        return value


def action_fields(action: Action) -> dict[str, Any]:
    """Return every field of *action* except ``type``.

    A module-level function rather than a model attribute, so that no payload
    field name (``payload`` included) is shadowed.
    """
    return action.model_dump(exclude={"type"})


def probe_unknown_action_type() -> str:
    """Return an action type that no application reducer can recognize.

    A fresh random token is generated on every call.
    """
    return PROBE_UNKNOWN_ACTION_PREFIX + ".".join(secrets.token_hex(4))


def coerce_action(value: Any) -> Action:
    """Validate a dispatched value and return it as an :class:`Action`.

    Raises
    ------
    InvalidActionError
        *value* is neither an ``Action`` nor a mapping, or a mapping key is
        not a string.
    InvalidActionTypeError
        *value* has no ``type``, or its ``type`` is ``None``.
    """
    if isinstance(value, Action):
        return value

    if not isinstance(value, Mapping):
        raise InvalidActionError(
            f"Actions must be Action instances or plain mappings, got {type(value).__name__}."
        )

    if value.get("type") is None:
        raise InvalidActionTypeError(
            'Actions may not have an undefined "type" property. Have you misspelled a constant?'
        )

    bad_keys = [key for key in value if not isinstance(key, str)]
    if bad_keys:
        raise InvalidActionError(
            f"Action field names must be strings, got {', '.join(repr(key) for key in bad_keys)}."
        )

    try:
        return Action.model_validate(dict(value))
    except ValidationError as err:
        raise InvalidActionError(f"Action could not be validated: {err}") from err
