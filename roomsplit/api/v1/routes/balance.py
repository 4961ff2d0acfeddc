from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from roomsplit.db.session import get_db
from roomsplit.schemas.balances import RoomBalancesOut, SettlementBreakdown
from roomsplit.schemas.room import Member
from roomsplit.services.expense_services import get_room_balances, get_room_breakdown
from roomsplit.core.dependencies import get_current_member

router = APIRouter()

@router.get("/{room_id}", response_model=RoomBalancesOut)
async def room_balances(room_id: str, db: AsyncSession = Depends(get_db), member: Member = Depends(get_current_member)):
    return await get_room_balances(db, room_id, member.id)

@router.get("/{room_id}/breakdown", response_model=SettlementBreakdown)
async def my_breakdown(
    room_id: str,
    db: AsyncSession = Depends(get_db),
    member: Member = Depends(get_current_member),
):
    return await get_room_breakdown(db, room_id, member.id)
