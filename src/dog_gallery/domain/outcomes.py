"""Uniform result shape for catalog requests."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class FailureKind(StrEnum):
    """Categories of request failure."""

    TRANSPORT_ERROR = "transport_error"
    API_ERROR = "api_error"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Success(Generic[T]):
    """A request that produced data."""

    data: T


@dataclass(frozen=True)
class Failure:
    """A request that failed, with a human-readable message."""

    kind: FailureKind
    message: str
    status_code: int | None = None


RequestOutcome = Success[T] | Failure
