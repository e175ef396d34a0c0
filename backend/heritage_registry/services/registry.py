"""Registry wiring for the configured storage backend."""

from __future__ import annotations

import logging
from functools import lru_cache

from heritage_registry.config import Settings, get_settings
from heritage_registry.registry import BlockClock, InMemoryProposalStore, ProposalRegistry, SqlProposalStore

logger = logging.getLogger(__name__)


def build_registry(settings: Settings) -> ProposalRegistry:
    """Create a registry over the backend named in ``settings``."""

    if settings.registry_backend == "database":
        from heritage_registry.db.session import SessionLocal, engine
        from heritage_registry.models.base import Base

        if settings.auto_create_schema:
            Base.metadata.create_all(engine)
        logger.info("registry.backend_selected backend=database url=%s", engine.url.render_as_string())
        return ProposalRegistry(SqlProposalStore(SessionLocal))

    logger.info("registry.backend_selected backend=memory")
    return ProposalRegistry(InMemoryProposalStore())


@lru_cache
def get_registry() -> ProposalRegistry:
    """Return the process-wide registry."""

    return build_registry(get_settings())


@lru_cache
def get_block_clock() -> BlockClock:
    """Return the process-wide block height clock."""

    return BlockClock(get_settings().genesis_block_height)
