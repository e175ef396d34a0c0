"""SQLAlchemy metadata registry import for Alembic."""

from heritage_registry.models import ProposalRecord
from heritage_registry.models.base import Base

__all__ = ["Base", "ProposalRecord"]
