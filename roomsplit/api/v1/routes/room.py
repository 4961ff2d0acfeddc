from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from roomsplit.db.session import get_db
from roomsplit.services.room_services import create_room, join_room_by_code, remove_member, get_room, room_to_out
from roomsplit.schemas.room import Member, RoomCreate, RoomJoin, RoomOut
from roomsplit.core.dependencies import get_current_member, get_room_member

router = APIRouter()

@router.post("/", response_model=RoomOut, status_code=201)
async def create_new_room(
    data: RoomCreate,
    db: AsyncSession = Depends(get_db),
    member: Member = Depends(get_current_member)
):
    room = await create_room(db, data.name, member)
    return room_to_out(room)

@router.post("/join", response_model=RoomOut)
async def join_room(data: RoomJoin, db: AsyncSession = Depends(get_db), member: Member = Depends(get_current_member)):
    room = await join_room_by_code(db, data.code, member)
    return room_to_out(room)

@router.get("/{room_id}", response_model=RoomOut)
async def room_details(room_id: str, db: AsyncSession = Depends(get_db), member: Member = Depends(get_room_member)):
    return room_to_out(await get_room(db, room_id))

@router.delete("/{room_id}/members/{member_id}")
async def remove_room_member(
    room_id: str,
    member_id: str,
    db: AsyncSession = Depends(get_db),
    member: Member = Depends(get_current_member)
):
    return await remove_member(db, room_id, member_id, caller_id=member.id)
