"""Typed registry records independent of persistence."""

from __future__ import annotations

from dataclasses import dataclass

from heritage_registry.registry.status import ProposalStatus


@dataclass(frozen=True, slots=True)
class CallContext:
    """Ambient caller identity and block height for one registry call."""

    caller: str
    block_height: int


@dataclass(frozen=True, slots=True)
class Proposal:
    """Restoration proposal snapshot.

    Snapshots are immutable; mutations produce a replacement via
    ``dataclasses.replace`` which the store then saves.
    """

    id: int
    title: str
    description: str
    location: str
    heritage_type: str
    initial_hash: bytes
    submitter: str
    status: ProposalStatus
    created_at: int
    updated_at: int
    verified_at: int | None = None
    task_count: int = 0
    nft_minted: bool = False
