import asyncio
import logging
from sqlalchemy import text
from roomsplit.core.config import settings
from roomsplit.db.session import engine

logger = logging.getLogger(__name__)


async def wait_for_db(retries=None, delay=None):
    retries = settings.DB_CONNECT_RETRIES if retries is None else retries
    delay = settings.DB_RETRY_DELAY if delay is None else delay

    for i in range(retries):
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connected")
            return
        except Exception as e:
            logger.warning("Database not ready | [ %s/%s ] %s -> retrying...", i + 1, retries, e)
            await asyncio.sleep(delay)

    raise RuntimeError("Database unreachable after retries")
