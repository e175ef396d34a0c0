"""Proposal request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class ProposalSubmitRequest(BaseModel):
    """Submission payload.

    Fields are plain strings so length and hash checks come back as registry
    error codes instead of generic request validation errors.
    """

    title: str
    description: str
    location: str
    heritage_type: str
    initial_hash: str


class ProposalStatusUpdateRequest(BaseModel):
    """Requested status transition."""

    status: str


class ProposalRead(BaseModel):
    """Serialized proposal with the content hash rendered as hex."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    location: str
    heritage_type: str
    initial_hash: str
    submitter: str
    status: str
    created_at: int
    updated_at: int
    verified_at: int | None
    task_count: int
    nft_minted: bool

    @field_validator("initial_hash", mode="before")
    @classmethod
    def hash_to_hex(cls, value: object) -> object:
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).hex()
        return value


class ProposalCreated(BaseModel):
    """Id assigned to a new proposal."""

    id: int


class ProposalHashLookup(BaseModel):
    """Owner id of a content hash."""

    initial_hash: str
    id: int


class NextProposalIdRead(BaseModel):
    next_id: int


class ProposalActionResult(BaseModel):
    """Acknowledgement for a successful state-changing call."""

    id: int
    ok: bool
    block_height: int
