"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from heritage_registry.config import get_settings
from heritage_registry.routers import proposals
from heritage_registry.services.registry import get_block_clock, get_registry

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _warm_registry_state() -> None:
    """Build the registry and clock at process start so the first request is not slow."""

    try:
        registry = get_registry()
        clock = get_block_clock()
        next_id = registry.get_next_proposal_id().value
        logger.info("registry.warm_up next_proposal_id=%s block_height=%d", next_id, clock.current())
    except Exception:
        logger.exception("Registry warm-up failed; continuing without startup pre-warm.")


@asynccontextmanager
async def lifespan(_: FastAPI):
    _configure_logging()
    _warm_registry_state()
    yield


app = FastAPI(title=get_settings().app_name, version="0.1.0", lifespan=lifespan)

app.include_router(proposals.router, tags=["proposals"])


@app.get("/health")
def health() -> dict[str, str]:
    """Simple health check endpoint."""

    return {"status": "ok"}
