"""Function combinators: left-to-right composition and pointwise lifting.

    compose()(x) == x
    compose(f)(x) == f(x)
    compose(f, g)(x) == g(f(x))

    lift(h)(p) == h()
    lift(h, f1, ..., fn)(p) == h(f1(p), ..., fn(p))

Neither combinator knows anything about the values flowing through it,
so plain functions over colors, numbers or booleans can be combined into
functions over a shared point domain.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable


def _identity(x: Any) -> Any:
    return x


def compose(*fs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Chain unary functions, applying the first argument first.

    Each function's output is fed to the next one, so
    ``compose(f, g, h)(x) == h(g(f(x)))``.
    """
    if not fs:
        return _identity
    if len(fs) == 1:
        return fs[0]

    f, g, *rest = fs
    return compose(lambda x: g(f(x)), *rest)


def lift(h: Callable[..., Any], *fs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Turn an n-ary value function into a function of one point.

    Every ``f`` in *fs* is evaluated at the same point and the results
    are passed, in order, as the positional arguments of *h*.  Already
    computed arguments are bound into *h* with :func:`functools.partial`
    before recursing on the remaining functions.
    """
    if not fs:
        return lambda p: h()

    f, *rest = fs
    return lambda p: lift(partial(h, f(p)), *rest)(p)
