"""Heritage restoration proposal registry core."""

from heritage_registry.registry.clock import BlockClock, BlockHeightRegression
from heritage_registry.registry.errors import RegistryError, RegistryResult
from heritage_registry.registry.registry import ProposalRegistry
from heritage_registry.registry.status import PROPOSAL_STATUS_VALUES, ProposalStatus
from heritage_registry.registry.store import InMemoryProposalStore, ProposalStore, SqlProposalStore
from heritage_registry.registry.types import CallContext, Proposal
from heritage_registry.registry.validation import validate_submission

__all__ = [
    "PROPOSAL_STATUS_VALUES",
    "BlockClock",
    "BlockHeightRegression",
    "CallContext",
    "InMemoryProposalStore",
    "Proposal",
    "ProposalRegistry",
    "ProposalStatus",
    "ProposalStore",
    "RegistryError",
    "RegistryResult",
    "SqlProposalStore",
    "validate_submission",
]
