from __future__ import annotations

from typing import Any

from pyredux import Action, Store, compose, create_store


def test_identity_without_functions() -> None:
    sentinel = object()
    assert compose()(sentinel) is sentinel


def test_single_function_returned_as_is() -> None:
    def double(x: int) -> int:
        return x * 2

    assert compose(double) is double


def test_composes_right_to_left() -> None:
    def add_a(s: str) -> str:
        return s + "a"

    def add_b(s: str) -> str:
        return s + "b"

    def add_c(s: str) -> str:
        return s + "c"

    assert compose(add_a, add_b, add_c)("") == "cba"


def test_rightmost_takes_multiple_arguments() -> None:
    def square(x: int) -> int:
        return x * x

    def add(a: int, b: int = 0) -> int:
        return a + b

    assert compose(square, add)(1, b=2) == 9


def test_chains_store_enhancers() -> None:
    order: list[str] = []

    def tagging(tag: str) -> Any:
        def enhancer(create: Any) -> Any:
            def enhanced(reducer: Any, preloaded_state: Any = None) -> Store:
                order.append(tag)
                return create(reducer, preloaded_state)

            return enhanced

        return enhancer

    def reducer(state: Any, action: Action) -> Any:
        return state if state is not None else "ready"

    store = create_store(reducer, compose(tagging("outer"), tagging("inner")))
    assert store.get_state() == "ready"
    assert order == ["outer", "inner"]
