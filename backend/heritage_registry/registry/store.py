"""Storage backends holding the id map, the hash index and the id counter."""

from __future__ import annotations

from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from heritage_registry.models.proposal import ProposalRecord
from heritage_registry.registry.types import Proposal


class ProposalStore(Protocol):
    """Logical map semantics the registry relies on."""

    def get(self, proposal_id: int) -> Proposal | None:
        """Return the proposal stored under ``proposal_id``."""

    def id_for_hash(self, initial_hash: bytes) -> int | None:
        """Return the id owning ``initial_hash``."""

    def next_id(self) -> int:
        """Return the id the next insert will receive."""

    def insert(self, proposal: Proposal) -> None:
        """Add a new proposal to both indexes and advance the counter."""

    def save(self, proposal: Proposal) -> None:
        """Replace an existing proposal snapshot."""


class InMemoryProposalStore:
    """Dict-backed store; the registry lock serializes access."""

    def __init__(self) -> None:
        self._proposals: dict[int, Proposal] = {}
        self._ids_by_hash: dict[bytes, int] = {}
        self._next_id = 0

    def get(self, proposal_id: int) -> Proposal | None:
        return self._proposals.get(proposal_id)

    def id_for_hash(self, initial_hash: bytes) -> int | None:
        return self._ids_by_hash.get(bytes(initial_hash))

    def next_id(self) -> int:
        return self._next_id

    def insert(self, proposal: Proposal) -> None:
        key = bytes(proposal.initial_hash)
        if proposal.id != self._next_id:
            raise ValueError(f"expected id {self._next_id}, got {proposal.id}")
        if key in self._ids_by_hash:
            raise ValueError("initial hash already indexed")
        self._proposals[proposal.id] = proposal
        self._ids_by_hash[key] = proposal.id
        self._next_id += 1

    def save(self, proposal: Proposal) -> None:
        if proposal.id not in self._proposals:
            raise KeyError(proposal.id)
        self._proposals[proposal.id] = proposal


class SqlProposalStore:
    """SQLAlchemy-backed store; each call runs in its own session."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get(self, proposal_id: int) -> Proposal | None:
        with self._session_factory() as db:
            record = db.get(ProposalRecord, proposal_id)
            return _to_proposal(record) if record is not None else None

    def id_for_hash(self, initial_hash: bytes) -> int | None:
        with self._session_factory() as db:
            return db.scalar(
                select(ProposalRecord.id).where(ProposalRecord.initial_hash == bytes(initial_hash))
            )

    def next_id(self) -> int:
        # Proposals are never deleted, so max(id) + 1 is the dense counter.
        with self._session_factory() as db:
            highest = db.scalar(select(func.max(ProposalRecord.id)))
            return 0 if highest is None else highest + 1

    def insert(self, proposal: Proposal) -> None:
        with self._session_factory() as db:
            db.add(
                ProposalRecord(
                    id=proposal.id,
                    title=proposal.title,
                    description=proposal.description,
                    location=proposal.location,
                    heritage_type=proposal.heritage_type,
                    initial_hash=bytes(proposal.initial_hash),
                    submitter=proposal.submitter,
                    status=proposal.status,
                    created_at=proposal.created_at,
                    updated_at=proposal.updated_at,
                    verified_at=proposal.verified_at,
                    task_count=proposal.task_count,
                    nft_minted=proposal.nft_minted,
                )
            )
            db.commit()

    def save(self, proposal: Proposal) -> None:
        with self._session_factory() as db:
            record = db.get(ProposalRecord, proposal.id)
            if record is None:
                raise KeyError(proposal.id)
            record.status = proposal.status
            record.updated_at = proposal.updated_at
            record.verified_at = proposal.verified_at
            record.task_count = proposal.task_count
            record.nft_minted = proposal.nft_minted
            db.commit()


def _to_proposal(record: ProposalRecord) -> Proposal:
    return Proposal(
        id=record.id,
        title=record.title,
        description=record.description,
        location=record.location,
        heritage_type=record.heritage_type,
        initial_hash=bytes(record.initial_hash),
        submitter=record.submitter,
        status=record.status,  # type: ignore[arg-type]
        created_at=record.created_at,
        updated_at=record.updated_at,
        verified_at=record.verified_at,
        task_count=record.task_count,
        nft_minted=record.nft_minted,
    )
