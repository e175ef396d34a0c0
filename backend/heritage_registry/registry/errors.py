"""Registry error codes and the result envelope returned by every operation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class RegistryError(IntEnum):
    """Discrete failure codes surfaced verbatim to registry callers."""

    UNAUTHORIZED = 100
    INVALID_TITLE = 101
    INVALID_DESCRIPTION = 102
    INVALID_LOCATION = 103
    INVALID_HERITAGE_TYPE = 104
    INVALID_HASH = 105
    PROPOSAL_NOT_FOUND = 106
    PROPOSAL_EXISTS = 107
    INVALID_STATUS_TRANSITION = 108
    PROPOSAL_CLOSED = 109

    @property
    def label(self) -> str:
        """CamelCase name used in API payloads and logs."""

        return "".join(part.capitalize() for part in self.name.split("_"))


INPUT_ERRORS = frozenset(
    {
        RegistryError.INVALID_TITLE,
        RegistryError.INVALID_DESCRIPTION,
        RegistryError.INVALID_LOCATION,
        RegistryError.INVALID_HERITAGE_TYPE,
        RegistryError.INVALID_HASH,
    }
)


@dataclass(frozen=True, slots=True)
class RegistryResult(Generic[T]):
    """Success carries ``value``; failure carries ``error`` and no value."""

    ok: bool
    value: T | None = None
    error: RegistryError | None = None

    @classmethod
    def success(cls, value: T) -> "RegistryResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: RegistryError) -> "RegistryResult[T]":
        return cls(ok=False, error=error)
