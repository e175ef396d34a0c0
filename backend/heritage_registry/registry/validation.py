"""Submission field validation."""

from __future__ import annotations

from heritage_registry.registry.errors import RegistryError

MAX_TITLE_LENGTH = 120
MAX_DESCRIPTION_LENGTH = 2000
MAX_LOCATION_LENGTH = 100
MAX_HERITAGE_TYPE_LENGTH = 50
HASH_LENGTH = 32

_TEXT_LIMITS: tuple[tuple[int, RegistryError], ...] = (
    (MAX_TITLE_LENGTH, RegistryError.INVALID_TITLE),
    (MAX_DESCRIPTION_LENGTH, RegistryError.INVALID_DESCRIPTION),
    (MAX_LOCATION_LENGTH, RegistryError.INVALID_LOCATION),
    (MAX_HERITAGE_TYPE_LENGTH, RegistryError.INVALID_HERITAGE_TYPE),
)


def validate_submission(
    title: str,
    description: str,
    location: str,
    heritage_type: str,
    initial_hash: bytes,
) -> RegistryError | None:
    """Return the first failing field's error, or None when all fields are valid."""

    for value, (limit, error) in zip((title, description, location, heritage_type), _TEXT_LIMITS):
        if not _text_within(value, limit):
            return error
    if not is_valid_hash(initial_hash):
        return RegistryError.INVALID_HASH
    return None


def is_valid_hash(value: object) -> bool:
    return isinstance(value, (bytes, bytearray)) and len(value) == HASH_LENGTH


def _text_within(value: object, limit: int) -> bool:
    return isinstance(value, str) and 0 < len(value) <= limit
