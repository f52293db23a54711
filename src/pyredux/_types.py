"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from pyredux.models.action import Action
    from pyredux.store import Store

# (previous_state, action) -> next_state; must never return None.
Reducer: TypeAlias = "Callable[[Any, Action], Any]"
Listener: TypeAlias = Callable[[], Any]
StoreCreator: TypeAlias = "Callable[..., Store]"
Enhancer: TypeAlias = "Callable[[StoreCreator], StoreCreator]"
Dispatch: TypeAlias = "Callable[[Any], Action]"
