from fastapi import Depends, Header, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from roomsplit.db.session import get_db
from roomsplit.models.room import Room
from roomsplit.models.room_member import RoomMember
from roomsplit.schemas.room import Member


async def get_current_member(
    x_member_id: str | None = Header(default=None),
    x_member_name: str | None = Header(default=None),
) -> Member:
    """
    The viewer as identified by the upstream identity layer.
    """
    if not x_member_id or not x_member_id.strip():
        raise HTTPException(status_code=401, detail="Missing member identity")

    return Member(id=x_member_id.strip(), name=(x_member_name or "User").strip() or "User")


async def check_room_membership(db: AsyncSession, room_id: str, member_id: str):
    q_room = select(Room).where(Room.id == room_id)
    res_room = await db.execute(q_room)
    room = res_room.scalar_one_or_none()

    if not room:
        raise HTTPException(404, "Room does not exist")

    q_member = select(RoomMember).where(
        RoomMember.room_id == room_id,
        RoomMember.member_id == member_id
    )

    res_member = await db.execute(q_member)
    member = res_member.scalar_one_or_none()

    if not member:
        raise HTTPException(403, "You are not a member of this room")

    return member


async def room_member_ids(db: AsyncSession, room_id: str) -> list[str]:
    q = select(RoomMember.member_id).where(RoomMember.room_id == room_id).order_by(RoomMember.id)
    res = await db.execute(q)
    return [row[0] for row in res.all()]


async def get_room_member(
    room_id: str,
    db: AsyncSession = Depends(get_db),
    member: Member = Depends(get_current_member),
) -> Member:
    await check_room_membership(db, room_id, member.id)
    return member
