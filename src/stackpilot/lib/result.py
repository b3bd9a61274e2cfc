"""Result type used instead of exceptions for expected failures.

Every operation that can fail in a known way returns either ``Ok(value)``
or ``Err(error)``. Callers branch with pattern matching:

    match overrides.load(path):
        case Ok(data):
            ...
        case Err(error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying an error dataclass."""

    error: E


type Result[T, E] = Ok[T] | Err[E]
