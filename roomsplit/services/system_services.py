from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from roomsplit.core.db_check import wait_for_db
from roomsplit.core.utils import round2
from roomsplit.models.room import Room
from roomsplit.models.room_member import RoomMember
from roomsplit.models.expense import Expense


async def check_db_service():
    """Single connection attempt, no waiting."""
    try:
        await wait_for_db(retries=1, delay=0)
    except RuntimeError:
        return {"db": False, "message": "Database is unreachable"}
    return {"db": True, "message": "Database is connected"}


async def system_metrics(db: AsyncSession):
    """
    Room activity in one round trip: how many rooms, members and expenses
    exist, how much has been logged in total and the average room size.
    """
    q = select(
        select(func.count(Room.id)).scalar_subquery().label("rooms"),
        select(func.count(RoomMember.id)).scalar_subquery().label("members"),
        select(func.count(Expense.id)).scalar_subquery().label("expenses"),
        select(func.coalesce(func.sum(Expense.amount), 0)).scalar_subquery().label("total_spent"),
    )
    row = (await db.execute(q)).one()

    return {
        "rooms": row.rooms,
        "members": row.members,
        "expenses": row.expenses,
        "total_spent": round2(float(row.total_spent)),
        "avg_room_size": round2(row.members / row.rooms) if row.rooms else 0.0,
    }
