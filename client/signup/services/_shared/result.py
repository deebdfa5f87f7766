"""Discriminated result returned by asynchronous gateway operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful resolution carrying the remote payload."""

    payload: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed resolution carrying the error object as received."""

    error: E


Result = Ok[Any] | Err[Any]

__all__ = ["Ok", "Err", "Result"]
