"""Tri-state result of an asynchronous operation.

A ``Resource`` is exactly one of :class:`Loading`, :class:`Success` or
:class:`Error`. Repositories emit them, state holders store the latest one
and controllers render it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Loading(Generic[T]):
    """Operation in flight; ``data`` may carry the previous value."""

    data: Optional[T] = None

    @property
    def message(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation completed. ``data`` is always present."""

    data: T

    def __post_init__(self) -> None:
        if self.data is None:
            raise ValueError("Success requires data")

    @property
    def message(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Error(Generic[T]):
    """Operation failed with a human-readable message."""

    message: str
    data: Optional[T] = None


Resource = Union[Loading[T], Success[T], Error[T]]


def fold(
    resource: Resource[T],
    *,
    on_loading: Callable[[Optional[T]], R],
    on_success: Callable[[T], R],
    on_error: Callable[[str, Optional[T]], R],
) -> R:
    """Dispatch on the three states; anything else is a programming error."""
    if isinstance(resource, Loading):
        return on_loading(resource.data)
    if isinstance(resource, Success):
        return on_success(resource.data)
    if isinstance(resource, Error):
        return on_error(resource.message, resource.data)
    raise TypeError(f"Not a Resource: {resource!r}")


def is_terminal(resource: Resource) -> bool:
    return isinstance(resource, (Success, Error))
