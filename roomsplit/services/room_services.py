import logging
import secrets
from fastapi import HTTPException
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from roomsplit.core.config import settings
from roomsplit.models.room import Room
from roomsplit.models.room_member import RoomMember
from roomsplit.schemas.room import Member, RoomOut

logger = logging.getLogger(__name__)


def generate_room_code(length: int | None = None) -> str:
    length = length or settings.ROOM_CODE_LENGTH
    return secrets.token_hex((length + 1) // 2)[:length].upper()


def normalize_code(code: str) -> str:
    return code.strip().upper()


def room_to_out(room: Room) -> RoomOut:
    return RoomOut(
        id=room.id,
        name=room.name,
        code=room.code,
        created_by=room.created_by,
        created_at=room.created_at,
        members=[Member(id=m.member_id, name=m.name) for m in room.members],
    )


async def get_room(db: AsyncSession, room_id: str) -> Room:
    q = (
        select(Room)
        .options(selectinload(Room.members))
        .where(Room.id == room_id)
        .execution_options(populate_existing=True)
    )
    res = await db.execute(q)
    room = res.scalar_one_or_none()

    if not room:
        raise HTTPException(404, "Room does not exist")

    return room


async def _current_membership(db: AsyncSession, member_id: str) -> RoomMember | None:
    q = select(RoomMember).where(RoomMember.member_id == member_id)
    res = await db.execute(q)
    return res.scalar_one_or_none()


async def _unused_code(db: AsyncSession) -> str:
    while True:
        code = generate_room_code()
        taken = await db.scalar(select(func.count(Room.id)).where(Room.code == code))
        if not taken:
            return code


async def create_room(db: AsyncSession, name: str, creator: Member) -> Room:
    if await _current_membership(db, creator.id):
        raise HTTPException(
            409,
            "You can only be in one room. Leave your current room first to create a new one."
        )

    room = Room(name=name.strip() or "Room", code=await _unused_code(db), created_by=creator.id)
    db.add(room)
    await db.flush()

    db.add(RoomMember(room_id=room.id, member_id=creator.id, name=creator.name))

    await db.commit()
    logger.info("Room %s created by %s", room.id, creator.id)
    return await get_room(db, room.id)


async def join_room_by_code(db: AsyncSession, code: str, member: Member) -> Room:
    q = select(Room).where(Room.code == normalize_code(code))
    res = await db.execute(q)
    room = res.scalar_one_or_none()

    if not room:
        raise HTTPException(404, "Invalid invite code")

    existing = await _current_membership(db, member.id)
    if existing:
        if existing.room_id == room.id:
            return await get_room(db, room.id)
        raise HTTPException(
            409,
            "You can only be in one room. Leave your current room first to join another."
        )

    db.add(RoomMember(room_id=room.id, member_id=member.id, name=member.name))
    await db.commit()
    logger.info("Member %s joined room %s", member.id, room.id)
    return await get_room(db, room.id)


async def remove_member(db: AsyncSession, room_id: str, member_id: str, caller_id: str):
    room = await get_room(db, room_id)

    # the creator may remove anyone, everyone else may only leave
    if caller_id != room.created_by and caller_id != member_id:
        raise HTTPException(403, "Only the room creator can remove other members")

    q = select(RoomMember).where(
        RoomMember.room_id == room_id,
        RoomMember.member_id == member_id
    )
    res = await db.execute(q)
    membership = res.scalar_one_or_none()

    if not membership:
        raise HTTPException(404, "Member is not in this room")

    await db.delete(membership)
    await db.commit()
    logger.info("Member %s removed from room %s by %s", member_id, room_id, caller_id)

    return {"status": "removed"}
