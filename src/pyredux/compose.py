"""Right-to-left function composition, used to chain store enhancers."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """Compose single-argument functions from right to left.

    ``compose(f, g, h)(*args)`` is ``f(g(h(*args)))``.  The rightmost
    function may take any arguments.  With no functions the result is the
    identity on its first argument.
    """
    if not funcs:
        return lambda arg: arg

    if len(funcs) == 1:
        return funcs[0]

    last = funcs[-1]
    rest = funcs[:-1]

    def composed(*args: Any, **kwargs: Any) -> Any:
        return functools.reduce(lambda acc, fn: fn(acc), reversed(rest), last(*args, **kwargs))

    return composed
