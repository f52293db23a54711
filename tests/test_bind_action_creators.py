from __future__ import annotations

from typing import Any

import pytest

from pyredux import Action, InvalidActionCreatorsError, bind_action_creators, create_store


def todos(state: Any, action: Action) -> Any:
    if state is None:
        state = []
    if action.type == "ADD_TODO":
        return [*state, action.text]
    return state


def add_todo(text: str) -> dict[str, Any]:
    """Create an ADD_TODO action."""
    return {"type": "ADD_TODO", "text": text}


def clear_todos() -> Action:
    return Action(type="CLEAR")


def test_binds_single_function() -> None:
    store = create_store(todos)
    bound = bind_action_creators(add_todo, store.dispatch)

    result = bound("write docs")
    assert result == Action(type="ADD_TODO", text="write docs")
    assert store.get_state() == ["write docs"]
    assert bound.__name__ == "add_todo"
    assert bound.__doc__ == "Create an ADD_TODO action."


def test_binds_mapping_and_skips_non_callables() -> None:
    store = create_store(todos)
    bound = bind_action_creators(
        {"add_todo": add_todo, "clear_todos": clear_todos, "VERSION": "1.0", "nothing": None},
        store.dispatch,
    )

    assert set(bound) == {"add_todo", "clear_todos"}
    bound["add_todo"](text="a")
    bound["add_todo"]("b")
    assert store.get_state() == ["a", "b"]


def test_forwards_to_custom_dispatch() -> None:
    dispatched: list[Any] = []

    def dispatch(action: Any) -> str:
        dispatched.append(action)
        return "dispatched"

    bound = bind_action_creators({"add_todo": add_todo}, dispatch)
    assert bound["add_todo"]("x") == "dispatched"
    assert dispatched == [{"type": "ADD_TODO", "text": "x"}]


@pytest.mark.parametrize("bad", [None, 1, "add_todo", ["add_todo"]])
def test_rejects_invalid_input(bad: Any) -> None:
    store = create_store(todos)
    with pytest.raises(InvalidActionCreatorsError, match="expected a mapping or a function"):
        bind_action_creators(bad, store.dispatch)


def test_error_names_received_type() -> None:
    with pytest.raises(InvalidActionCreatorsError, match="instead received None"):
        bind_action_creators(None, lambda action: action)
