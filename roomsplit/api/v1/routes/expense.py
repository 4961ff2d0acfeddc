from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from roomsplit.db.session import get_db
from roomsplit.schemas.expense import Expense, ExpenseCreate
from roomsplit.schemas.room import Member
from roomsplit.services.expense_services import create_expense, delete_expense, get_expenses_by_room
from roomsplit.core.dependencies import get_current_member

router = APIRouter()

@router.post("/{room_id}", response_model=Expense, status_code=201)
async def add_expense(room_id: str, data: ExpenseCreate, db: AsyncSession = Depends(get_db), member: Member = Depends(get_current_member)):
    return await create_expense(db, room_id, data, member)

@router.get("/{room_id}", response_model=List[Expense])
async def all_expenses(room_id: str, db: AsyncSession = Depends(get_db), member: Member = Depends(get_current_member)):
    return await get_expenses_by_room(db, room_id, member.id)

@router.delete("/{room_id}/{expense_id}")
async def del_expense(
    room_id: str,
    expense_id: str,
    db: AsyncSession = Depends(get_db),
    member: Member = Depends(get_current_member),
):
    return await delete_expense(db, room_id, expense_id, member_id=member.id)
