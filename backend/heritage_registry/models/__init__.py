"""ORM models package exports."""

from heritage_registry.models.proposal import ProposalRecord

__all__ = ["ProposalRecord"]
