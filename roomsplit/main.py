import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from roomsplit.core.config import settings
from roomsplit.core.db_check import wait_for_db
from roomsplit.db.session import Base, engine
from roomsplit.models import expense, room, room_member  # noqa: F401  registers tables
from roomsplit.api.v1.routes.system import router as system_router
from roomsplit.api.v1.routes.room import router as room_router
from roomsplit.api.v1.routes.expense import router as expense_router
from roomsplit.api.v1.routes.balance import router as balance_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("roomsplit")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await wait_for_db()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Roomsplit is ready")
    yield
    await engine.dispose()


app = FastAPI(title="Roomsplit Backend", lifespan=lifespan)

@app.get("/")
async def root():
    return {"message": "Roomsplit Backend is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(room_router, prefix="/api/v1/rooms")
app.include_router(expense_router, prefix="/api/v1/expenses")
app.include_router(balance_router, prefix="/api/v1/balances")
