"""Proposal status machine."""

from __future__ import annotations

from typing import Literal

from heritage_registry.registry.errors import RegistryError

ProposalStatus = Literal["pending", "approved", "rejected", "in-progress", "completed"]

STATUS_PENDING: ProposalStatus = "pending"
STATUS_APPROVED: ProposalStatus = "approved"
STATUS_REJECTED: ProposalStatus = "rejected"
STATUS_IN_PROGRESS: ProposalStatus = "in-progress"
STATUS_COMPLETED: ProposalStatus = "completed"

PROPOSAL_STATUS_VALUES: tuple[str, ...] = (
    STATUS_PENDING,
    STATUS_APPROVED,
    STATUS_REJECTED,
    STATUS_IN_PROGRESS,
    STATUS_COMPLETED,
)
PROPOSAL_STATUS_SET = frozenset(PROPOSAL_STATUS_VALUES)

_ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    STATUS_PENDING: frozenset({STATUS_APPROVED, STATUS_REJECTED}),
    STATUS_APPROVED: frozenset({STATUS_IN_PROGRESS}),
    STATUS_IN_PROGRESS: frozenset({STATUS_COMPLETED}),
    STATUS_REJECTED: frozenset(),
    STATUS_COMPLETED: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, successors in _ALLOWED_TRANSITIONS.items() if not successors
)


def is_known_status(value: object) -> bool:
    return isinstance(value, str) and value in PROPOSAL_STATUS_SET


def next_statuses(current: str) -> frozenset[str]:
    """Direct successors of ``current``; empty for terminal or unknown states."""

    return _ALLOWED_TRANSITIONS.get(current, frozenset())


def can_transition(current: str, new_status: str) -> bool:
    return new_status in next_statuses(current)


def check_transition(current: str, new_status: object) -> RegistryError | None:
    """Return the error blocking ``current -> new_status``, or None when legal.

    Unknown targets are rejected before the closed check, so asking a completed
    proposal to move to a bogus status reports an invalid transition.
    """

    if not is_known_status(new_status):
        return RegistryError.INVALID_STATUS_TRANSITION
    if current == STATUS_COMPLETED:
        return RegistryError.PROPOSAL_CLOSED
    if not can_transition(current, new_status):  # type: ignore[arg-type]
        return RegistryError.INVALID_STATUS_TRANSITION
    return None
