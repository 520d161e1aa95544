"""Fixnums are Python ints confined to the signed 64-bit range."""

from __future__ import annotations

FIXNUM_BITS = 64
FIXNUM_MIN = -(1 << (FIXNUM_BITS - 1))
FIXNUM_MAX = (1 << (FIXNUM_BITS - 1)) - 1


def is_fixnum(value: object) -> bool:
    # bool is an int subclass; it is never a fixnum
    return type(value) is int


def fits_fixnum(n: int) -> bool:
    return FIXNUM_MIN <= n <= FIXNUM_MAX
