"""Pluggable source of random bytes."""

from __future__ import annotations

from typing import Callable, Optional

RandomFunc = Callable[[int], bytes]

_rand_func: Optional[RandomFunc] = None


class PrngUnavailableError(RuntimeError):
    """Raised when random bytes are requested but no generator is set."""


def set_prng(func: Optional[RandomFunc]) -> None:
    """Install the function that yields random bytes; None removes it."""
    global _rand_func
    _rand_func = func


def prng(length: int) -> bytes:
    """Return ``length`` random bytes from the installed generator."""
    if length < 0:
        raise ValueError("length must not be negative")
    if _rand_func is None:
        raise PrngUnavailableError("no random number generator configured")
    data = bytes(_rand_func(length))
    if len(data) != length:
        raise ValueError(
            f"random generator returned {len(data)} bytes, expected {length}"
        )
    return data