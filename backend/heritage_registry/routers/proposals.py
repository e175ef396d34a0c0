"""Restoration proposal routes."""

from fastapi import APIRouter, Depends, Header, HTTPException, Path

from heritage_registry.registry import (
    BlockClock,
    BlockHeightRegression,
    CallContext,
    ProposalRegistry,
    RegistryError,
    RegistryResult,
)
from heritage_registry.registry.errors import INPUT_ERRORS
from heritage_registry.schemas.common import ApiResponse
from heritage_registry.schemas.proposal import (
    NextProposalIdRead,
    ProposalActionResult,
    ProposalCreated,
    ProposalHashLookup,
    ProposalRead,
    ProposalStatusUpdateRequest,
    ProposalSubmitRequest,
)
from heritage_registry.services.registry import get_block_clock, get_registry

router = APIRouter(prefix="/proposals")

_ERROR_STATUS_CODES: dict[RegistryError, int] = {
    RegistryError.PROPOSAL_NOT_FOUND: 404,
    RegistryError.UNAUTHORIZED: 403,
    RegistryError.PROPOSAL_EXISTS: 409,
    RegistryError.INVALID_STATUS_TRANSITION: 409,
    RegistryError.PROPOSAL_CLOSED: 409,
}


def get_call_context(
    x_caller: str = Header(..., min_length=1),
    x_block_height: int | None = Header(default=None, ge=0),
    clock: BlockClock = Depends(get_block_clock),
) -> CallContext:
    """Build the ambient caller/height pair for a state-changing request."""

    if x_block_height is None:
        return CallContext(caller=x_caller, block_height=clock.advance())
    try:
        height = clock.observe(x_block_height)
    except BlockHeightRegression as exc:
        raise HTTPException(status_code=409, detail="Block height must not decrease") from exc
    return CallContext(caller=x_caller, block_height=height)


@router.post("", response_model=ApiResponse[ProposalCreated], status_code=201)
def submit_proposal(
    payload: ProposalSubmitRequest,
    ctx: CallContext = Depends(get_call_context),
    registry: ProposalRegistry = Depends(get_registry),
) -> ApiResponse[ProposalCreated]:
    """Register a new restoration proposal."""

    result = registry.submit_proposal(
        ctx,
        title=payload.title,
        description=payload.description,
        location=payload.location,
        heritage_type=payload.heritage_type,
        initial_hash=_decode_hash(payload.initial_hash),
    )
    return ApiResponse(data=ProposalCreated(id=_unwrap(result)))


@router.get("/next-id", response_model=ApiResponse[NextProposalIdRead])
def read_next_proposal_id(
    registry: ProposalRegistry = Depends(get_registry),
) -> ApiResponse[NextProposalIdRead]:
    return ApiResponse(data=NextProposalIdRead(next_id=_unwrap(registry.get_next_proposal_id())))


@router.get("/by-hash/{hash_hex}", response_model=ApiResponse[ProposalHashLookup])
def read_proposal_by_hash(
    hash_hex: str = Path(..., min_length=1),
    registry: ProposalRegistry = Depends(get_registry),
) -> ApiResponse[ProposalHashLookup]:
    """Look up which proposal owns a content hash."""

    initial_hash = _decode_hash(hash_hex)
    proposal_id = registry.get_proposal_by_hash(initial_hash)
    if proposal_id is None:
        raise HTTPException(status_code=404, detail="Proposal not found")
    return ApiResponse(data=ProposalHashLookup(initial_hash=initial_hash.hex(), id=proposal_id))


@router.get("/{proposal_id}", response_model=ApiResponse[ProposalRead])
def read_proposal(
    proposal_id: int = Path(..., ge=0),
    registry: ProposalRegistry = Depends(get_registry),
) -> ApiResponse[ProposalRead]:
    proposal = registry.get_proposal(proposal_id)
    if proposal is None:
        raise HTTPException(status_code=404, detail="Proposal not found")
    return ApiResponse(data=ProposalRead.model_validate(proposal))


@router.post("/{proposal_id}/status", response_model=ApiResponse[ProposalActionResult])
def update_proposal_status(
    payload: ProposalStatusUpdateRequest,
    proposal_id: int = Path(..., ge=0),
    ctx: CallContext = Depends(get_call_context),
    registry: ProposalRegistry = Depends(get_registry),
) -> ApiResponse[ProposalActionResult]:
    """Move a proposal to its next status (submitter only)."""

    result = registry.update_proposal_status(ctx, proposal_id, payload.status)
    return ApiResponse(data=_action_result(proposal_id, ctx, result))


@router.post("/{proposal_id}/tasks", response_model=ApiResponse[ProposalActionResult])
def increment_task_count(
    proposal_id: int = Path(..., ge=0),
    ctx: CallContext = Depends(get_call_context),
    registry: ProposalRegistry = Depends(get_registry),
) -> ApiResponse[ProposalActionResult]:
    """Count one completed restoration task."""

    result = registry.increment_task_count(ctx, proposal_id)
    return ApiResponse(data=_action_result(proposal_id, ctx, result))


@router.post("/{proposal_id}/nft-minted", response_model=ApiResponse[ProposalActionResult])
def mark_nft_minted(
    proposal_id: int = Path(..., ge=0),
    ctx: CallContext = Depends(get_call_context),
    registry: ProposalRegistry = Depends(get_registry),
) -> ApiResponse[ProposalActionResult]:
    """Record that the completion NFT was minted."""

    result = registry.mark_nft_minted(ctx, proposal_id)
    return ApiResponse(data=_action_result(proposal_id, ctx, result))


def _action_result(proposal_id: int, ctx: CallContext, result: RegistryResult[bool]) -> ProposalActionResult:
    return ProposalActionResult(id=proposal_id, ok=_unwrap(result), block_height=ctx.block_height)


def _unwrap(result: RegistryResult):
    if result.ok:
        return result.value
    raise _http_error(result.error)


def _http_error(error: RegistryError | None) -> HTTPException:
    if error is None:
        return HTTPException(status_code=500, detail="Registry call failed without an error code")
    status_code = 422 if error in INPUT_ERRORS else _ERROR_STATUS_CODES.get(error, 400)
    return HTTPException(status_code=status_code, detail={"code": int(error), "error": error.label})


def _decode_hash(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        raise _http_error(RegistryError.INVALID_HASH) from exc
