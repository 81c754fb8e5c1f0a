"""Ok/Err outcome types for operations a caller may choose to skip or abort on."""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    error: E


type Result[T, E] = Ok[T] | Err[E]


def partition[K, T, E](outcomes: Mapping[K, Result[T, E]]) -> tuple[dict[K, T], dict[K, E]]:
    """Split keyed outcomes into successful values and errors, preserving key order."""
    values: dict[K, T] = {}
    errors: dict[K, E] = {}
    for key, outcome in outcomes.items():
        match outcome:
            case Ok(value=value):
                values[key] = value
            case Err(error=error):
                errors[key] = error
    return values, errors

