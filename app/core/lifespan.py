import contextlib
from contextlib import asynccontextmanager
import asyncio
import logging

from app.persistence.resume_store import init_db, purge_old_records

logger = logging.getLogger(__name__)

PURGE_INTERVAL_SECONDS = 3600


@asynccontextmanager
async def lifespan(app):
    init_db()

    stop_event = asyncio.Event()

    async def periodic_purge() -> None:
        while not stop_event.is_set():
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=PURGE_INTERVAL_SECONDS)
            except asyncio.TimeoutError:
                pass
            if stop_event.is_set():
                break
            try:
                deleted = purge_old_records()
                if deleted:
                    logger.info("resume_retention_purge deleted=%s", deleted)
            except Exception as exc:  # pragma: no cover - keeps the purge loop alive
                logger.warning("resume_retention_purge_failed: %s", exc)

    purge_task = asyncio.create_task(periodic_purge())
    yield
    stop_event.set()
    if not purge_task.done():
        purge_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await purge_task
