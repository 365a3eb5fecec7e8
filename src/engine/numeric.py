"""Decimal context for engine arithmetic.

Degenerate but finite inputs (a rate that makes (1+r)^n == 1, a zero
denominator after rounding) yield Infinity or NaN, the way float math does,
instead of raising.
"""

import functools
from decimal import DivisionByZero, InvalidOperation, Overflow, localcontext


def non_trapping(func):
    """Run `func` with division-by-zero, invalid-operation and overflow traps off."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with localcontext() as ctx:
            ctx.traps[DivisionByZero] = False
            ctx.traps[InvalidOperation] = False
            ctx.traps[Overflow] = False
            return func(*args, **kwargs)

    return wrapper
