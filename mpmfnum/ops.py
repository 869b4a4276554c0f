"""Rounded operations dispatched to a rounding context."""

from __future__ import annotations

from typing import Any, Callable

from mpmfnum.number import Real
from mpmfnum.rounding import RoundingContext


def _operation(ctx: RoundingContext, name: str) -> Callable[..., Any]:
    op = getattr(ctx, name, None)
    if not callable(op):
        raise TypeError(f"{type(ctx).__name__} does not support the operation {name!r}")
    return op


def neg(ctx: RoundingContext, src: Real) -> Real:
    """Compute ``-x`` rounded under ``ctx``."""
    return _operation(ctx, "neg")(src)


def absolute(ctx: RoundingContext, src: Real) -> Real:
    """Compute ``|x|`` rounded under ``ctx``."""
    return _operation(ctx, "abs")(src)


def add(ctx: RoundingContext, src1: Real, src2: Real) -> Real:
    """Compute ``x + y`` rounded under ``ctx``."""
    return _operation(ctx, "add")(src1, src2)


def sub(ctx: RoundingContext, src1: Real, src2: Real) -> Real:
    """Compute ``x - y`` rounded under ``ctx``."""
    return _operation(ctx, "sub")(src1, src2)


def mul(ctx: RoundingContext, src1: Real, src2: Real) -> Real:
    """Compute ``x * y`` rounded under ``ctx``."""
    return _operation(ctx, "mul")(src1, src2)