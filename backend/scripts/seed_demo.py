"""Seed a demo restoration proposal and drive it through its lifecycle.

Usage (from repository root):
    python backend/scripts/seed_demo.py

Usage (from backend directory):
    python scripts/seed_demo.py
    # or
    python -m scripts.seed_demo
"""

from __future__ import annotations

import argparse
import hashlib
import sys
from pathlib import Path

# Make `heritage_registry` imports work whether the script is run from repo root or backend/.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from heritage_registry.config import get_settings
from heritage_registry.registry import CallContext, ProposalRegistry
from heritage_registry.services.registry import build_registry


DEFAULT_CALLER = "ST1SUBMITTER"
DEMO_PROPOSAL = {
    "title": "Stabilise the north bastion",
    "description": "Repoint the lime mortar and replace cracked ashlar on the north bastion wall.",
    "location": "Old Town Fortress, Tallinn",
    "heritage_type": "fortification",
}


def demo_hash(fields: dict[str, str]) -> bytes:
    """Content hash for the demo proposal (sha256 over its text fields)."""

    digest = hashlib.sha256()
    for key in sorted(fields):
        digest.update(f"{key}={fields[key]}\n".encode("utf-8"))
    return digest.digest()


def run_lifecycle(registry: ProposalRegistry, caller: str, start_height: int) -> int:
    """Submit, approve, start, count one task, complete and mark minted."""

    height = start_height
    submitted = registry.submit_proposal(
        CallContext(caller=caller, block_height=height),
        initial_hash=demo_hash(DEMO_PROPOSAL),
        **DEMO_PROPOSAL,
    )
    if not submitted.ok:
        raise SystemExit(f"Submission failed: {submitted.error.label}")
    proposal_id = submitted.value

    steps = [
        lambda ctx: registry.update_proposal_status(ctx, proposal_id, "approved"),
        lambda ctx: registry.update_proposal_status(ctx, proposal_id, "in-progress"),
        lambda ctx: registry.increment_task_count(ctx, proposal_id),
        lambda ctx: registry.update_proposal_status(ctx, proposal_id, "completed"),
        lambda ctx: registry.mark_nft_minted(ctx, proposal_id),
    ]
    for step in steps:
        height += 1
        result = step(CallContext(caller=caller, block_height=height))
        if not result.ok:
            raise SystemExit(f"Lifecycle step failed for proposal {proposal_id}: {result.error.label}")
    return proposal_id


def parse_args() -> argparse.Namespace:
    """Parse script CLI arguments."""

    parser = argparse.ArgumentParser(description="Seed a demo restoration proposal lifecycle.")
    parser.add_argument(
        "--caller",
        default=DEFAULT_CALLER,
        help=f"Submitter identity (default: {DEFAULT_CALLER})",
    )
    parser.add_argument(
        "--start-height",
        type=int,
        default=100,
        help="Block height of the submission (default: 100)",
    )
    return parser.parse_args()


def main() -> None:
    """Seed demo data and print a short summary."""

    args = parse_args()
    settings = get_settings()
    registry = build_registry(settings)
    proposal_id = run_lifecycle(registry, args.caller, args.start_height)
    proposal = registry.get_proposal(proposal_id)

    print("Seed complete")
    print(f"backend={settings.registry_backend}")
    print(f"proposal_id={proposal_id}")
    print(f"status={proposal.status}")
    print(f"task_count={proposal.task_count}")
    print(f"nft_minted={proposal.nft_minted}")
    print(f"verified_at={proposal.verified_at}")
    print()
    print("Inspect:")
    print(f"  GET /proposals/{proposal_id}")
    print(f"  GET /proposals/by-hash/{demo_hash(DEMO_PROPOSAL).hex()}")


if __name__ == "__main__":
    main()
