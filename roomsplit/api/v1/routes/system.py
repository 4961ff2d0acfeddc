from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from roomsplit.services.system_services import check_db_service, system_metrics
from roomsplit.db.session import get_db

router = APIRouter()

@router.get("/health")
async def health():
    return {"status": "ok"}

@router.get("/health/db")
async def check_db():
    status = await check_db_service()
    if not status["db"]:
        return JSONResponse(status_code=503, content=status)
    return status

@router.get("/metrics")
async def metrics(
    db: AsyncSession = Depends(get_db)
):
    return await system_metrics(db)
