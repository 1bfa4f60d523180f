"""Explicit success/failure values.

Release operations report expected failures (a malformed tag, an unknown
bump kind, an unreachable git) as values instead of exceptions, so every
caller decides what a failure means for it:

    match parse_version("v1.2.3"):
        case Ok(version):
            print(version.to_tag())
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["Err", "Ok", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result carrying ``value``."""

    value: T

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the carried value."""
        return Ok(f(self.value))

    def flat_map[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain an operation that can itself fail."""
        return f(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result carrying ``error``."""

    error: E

    def map[T, U](self, f: Callable[[T], U]) -> Err[E]:
        return self

    def flat_map[T, U](self, f: Callable[[T], Result[U, E]]) -> Err[E]:
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
