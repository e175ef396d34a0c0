"""Proposal registry: submission, lookup and lifecycle operations."""

from __future__ import annotations

import logging
from dataclasses import replace
from threading import Lock

from heritage_registry.registry.errors import RegistryError, RegistryResult
from heritage_registry.registry.status import STATUS_COMPLETED, STATUS_IN_PROGRESS, STATUS_PENDING, check_transition
from heritage_registry.registry.store import InMemoryProposalStore, ProposalStore
from heritage_registry.registry.types import CallContext, Proposal
from heritage_registry.registry.validation import validate_submission

logger = logging.getLogger(__name__)


class ProposalRegistry:
    """Keyed proposal store plus hash index, guarded by a single lock.

    Every operation validates against the current snapshot before writing
    anything, so a rejected call leaves the store untouched.
    """

    def __init__(self, store: ProposalStore | None = None) -> None:
        self._store: ProposalStore = store if store is not None else InMemoryProposalStore()
        self._lock = Lock()

    def submit_proposal(
        self,
        ctx: CallContext,
        *,
        title: str,
        description: str,
        location: str,
        heritage_type: str,
        initial_hash: bytes,
    ) -> RegistryResult[int]:
        """Validate and register a new pending proposal, returning its id."""

        error = validate_submission(title, description, location, heritage_type, initial_hash)
        if error is not None:
            return self._reject("submit_proposal", None, error)

        with self._lock:
            if self._store.id_for_hash(initial_hash) is not None:
                return self._reject("submit_proposal", None, RegistryError.PROPOSAL_EXISTS)

            proposal_id = self._store.next_id()
            self._store.insert(
                Proposal(
                    id=proposal_id,
                    title=title,
                    description=description,
                    location=location,
                    heritage_type=heritage_type,
                    initial_hash=bytes(initial_hash),
                    submitter=ctx.caller,
                    status=STATUS_PENDING,
                    created_at=ctx.block_height,
                    updated_at=ctx.block_height,
                )
            )

        logger.info(
            "registry.proposal_submitted proposal_id=%d submitter=%s block_height=%d",
            proposal_id,
            ctx.caller,
            ctx.block_height,
        )
        return RegistryResult.success(proposal_id)

    def get_proposal(self, proposal_id: int) -> Proposal | None:
        with self._lock:
            return self._store.get(proposal_id)

    def get_proposal_by_hash(self, initial_hash: bytes) -> int | None:
        with self._lock:
            return self._store.id_for_hash(initial_hash)

    def get_next_proposal_id(self) -> RegistryResult[int]:
        with self._lock:
            return RegistryResult.success(self._store.next_id())

    def update_proposal_status(
        self,
        ctx: CallContext,
        proposal_id: int,
        new_status: str,
    ) -> RegistryResult[bool]:
        """Move a proposal along the status graph; only its submitter may do so."""

        with self._lock:
            proposal = self._store.get(proposal_id)
            if proposal is None:
                return self._reject("update_proposal_status", proposal_id, RegistryError.PROPOSAL_NOT_FOUND)
            if proposal.submitter != ctx.caller:
                return self._reject("update_proposal_status", proposal_id, RegistryError.UNAUTHORIZED)
            error = check_transition(proposal.status, new_status)
            if error is not None:
                return self._reject("update_proposal_status", proposal_id, error)

            verified_at = ctx.block_height if new_status == STATUS_COMPLETED else proposal.verified_at
            self._store.save(
                replace(
                    proposal,
                    status=new_status,
                    updated_at=ctx.block_height,
                    verified_at=verified_at,
                )
            )

        logger.info(
            "registry.status_updated proposal_id=%d from=%s to=%s block_height=%d",
            proposal_id,
            proposal.status,
            new_status,
            ctx.block_height,
        )
        return RegistryResult.success(True)

    def increment_task_count(self, ctx: CallContext, proposal_id: int) -> RegistryResult[bool]:
        with self._lock:
            proposal = self._store.get(proposal_id)
            if proposal is None:
                return self._reject("increment_task_count", proposal_id, RegistryError.PROPOSAL_NOT_FOUND)
            if proposal.status != STATUS_IN_PROGRESS:
                return self._reject(
                    "increment_task_count",
                    proposal_id,
                    RegistryError.INVALID_STATUS_TRANSITION,
                )
            task_count = proposal.task_count + 1
            self._store.save(replace(proposal, task_count=task_count, updated_at=ctx.block_height))

        logger.info(
            "registry.task_counted proposal_id=%d task_count=%d block_height=%d",
            proposal_id,
            task_count,
            ctx.block_height,
        )
        return RegistryResult.success(True)

    def mark_nft_minted(self, ctx: CallContext, proposal_id: int) -> RegistryResult[bool]:
        """Flip the minted flag once; repeat calls report ``UNAUTHORIZED``."""

        with self._lock:
            proposal = self._store.get(proposal_id)
            if proposal is None:
                return self._reject("mark_nft_minted", proposal_id, RegistryError.PROPOSAL_NOT_FOUND)
            if proposal.nft_minted:
                return self._reject(
                    "mark_nft_minted",
                    proposal_id,
                    RegistryError.UNAUTHORIZED,
                    reason="already_minted",
                )
            self._store.save(replace(proposal, nft_minted=True, updated_at=ctx.block_height))

        logger.info(
            "registry.nft_marked proposal_id=%d block_height=%d",
            proposal_id,
            ctx.block_height,
        )
        return RegistryResult.success(True)

    @staticmethod
    def _reject(
        op: str,
        proposal_id: int | None,
        error: RegistryError,
        *,
        reason: str | None = None,
    ) -> RegistryResult:
        logger.info(
            "registry.call_rejected op=%s proposal_id=%s error=%s reason=%s",
            op,
            proposal_id,
            error.label,
            reason or error.label,
        )
        return RegistryResult.failure(error)
