"""Unique token generation for bus and subscription identity."""

from __future__ import annotations

import secrets

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    out: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def create_uniq_id() -> str:
    """Return a random 32-bit value rendered in base-36.

    Collisions are possible (about 1 in 2**32) and are not checked for.
    """
    return _to_base36(secrets.randbits(32))
