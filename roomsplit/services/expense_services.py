import logging
import math
from typing import List, Sequence
from fastapi import HTTPException
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from roomsplit.core.dependencies import check_room_membership, room_member_ids
from roomsplit.core.utils import round2
from roomsplit.models.expense import Expense as ExpenseRow
from roomsplit.schemas.balances import RoomBalancesOut, SettlementBreakdown
from roomsplit.schemas.expense import Expense, ExpenseCreate, Split
from roomsplit.schemas.room import Member
from roomsplit.services.balance_service import calculate_balances
from roomsplit.services.settlement_service import get_settlement_breakdown
from roomsplit.services.split_service import build_equal_splits
from roomsplit.services.validation_service import validate_expense_input

logger = logging.getLogger(__name__)


def expense_from_row(row: ExpenseRow) -> Expense:
    """
    Store row -> domain Expense. Amounts are normalized to 2 decimals and
    the JSON split list is checked before anything downstream sees it.
    """
    try:
        splits = [Split.model_validate(s) for s in (row.splits or [])]
        return Expense(
            id=row.id,
            title=row.title,
            amount=round2(float(row.amount)),
            paid_by=Member(id=row.paid_by_id, name=row.paid_by_name or "User") if row.paid_by_id else None,
            split_type=row.split_type,
            splits=[Split(user_id=s.user_id, amount=round2(s.amount)) for s in splits],
            created_at=row.created_at,
        )
    except ValidationError as e:
        logger.error("Stored expense %s is malformed: %s", row.id, e)
        raise HTTPException(500, f"Stored expense {row.id} is malformed")


def complete_custom_splits(amount: float, splits: Sequence[Split], payer_id: str) -> List[Split]:
    """
    Custom splits may list only the other members; the payer then takes
    whatever is left of the amount.
    """
    if any(s.user_id == payer_id for s in splits):
        return list(splits)

    if not any(s.amount > 0 for s in splits):
        raise HTTPException(400, "Add an amount for at least one other member")

    rest = round2(amount - sum(s.amount for s in splits))
    return [*splits, Split(user_id=payer_id, amount=max(0.0, rest))]


def resolve_splits(data: ExpenseCreate, payer_id: str, member_ids: Sequence[str]) -> List[Split]:
    if data.amount is None or not math.isfinite(data.amount) or data.amount <= 0:
        return []

    if data.split_type == "equal":
        participants = member_ids if data.participant_ids is None else data.participant_ids
        return build_equal_splits(data.amount, participants)

    return complete_custom_splits(data.amount, data.splits, payer_id)


async def load_room_expenses(db: AsyncSession, room_id: str) -> List[Expense]:
    q = (
        select(ExpenseRow)
        .where(ExpenseRow.room_id == room_id)
        .order_by(ExpenseRow.created_at.desc())
    )
    res = await db.execute(q)
    return [expense_from_row(row) for row in res.scalars().all()]


# ------------------------------------
# expense store
# ------------------------------------

async def create_expense(db: AsyncSession, room_id: str, data: ExpenseCreate, payer: Member) -> Expense:
    membership = await check_room_membership(db, room_id, payer.id)
    member_ids = await room_member_ids(db, room_id)

    splits = resolve_splits(data, payer.id, member_ids)

    split_ids = [s.user_id for s in splits]

    if len(split_ids) != len(set(split_ids)):
        raise HTTPException(400, "Duplicate members found in splits")

    if not set(split_ids) <= set(member_ids):
        raise HTTPException(400, "One or more members in splits are not in the room")

    result = validate_expense_input(data.amount, data.split_type, splits)
    if not result.valid:
        logger.warning("Rejected expense in room %s from %s: %s", room_id, payer.id, result.error)
        raise HTTPException(400, result.error)

    if not splits:
        raise HTTPException(400, "Choose at least one member to split with")

    expense = ExpenseRow(
        room_id=room_id,
        title=data.title.strip() or "Expense",
        amount=round2(data.amount),
        paid_by_id=payer.id,
        paid_by_name=membership.name,
        split_type=data.split_type,
        splits=[s.model_dump() for s in splits],
    )

    db.add(expense)
    await db.commit()
    await db.refresh(expense)

    logger.info("Expense %s (%s) stored in room %s", expense.id, expense.amount, room_id)
    return expense_from_row(expense)


async def get_expenses_by_room(db: AsyncSession, room_id: str, member_id: str) -> List[Expense]:
    await check_room_membership(db, room_id, member_id)
    return await load_room_expenses(db, room_id)


async def delete_expense(db: AsyncSession, room_id: str, expense_id: str, member_id: str):
    await check_room_membership(db, room_id, member_id)

    q = select(ExpenseRow).where(ExpenseRow.id == expense_id, ExpenseRow.room_id == room_id)
    res = await db.execute(q)
    expense = res.scalar_one_or_none()

    if not expense:
        raise HTTPException(404, "Expense not found")

    # only payer can delete
    if expense.paid_by_id != member_id:
        raise HTTPException(403, "You cannot delete this expense")

    await db.delete(expense)
    await db.commit()
    logger.info("Expense %s deleted from room %s", expense_id, room_id)

    return {"status": "deleted"}


# ------------------------------------
# balances, always from a fresh read
# ------------------------------------

async def get_room_balances(db: AsyncSession, room_id: str, member_id: str) -> RoomBalancesOut:
    await check_room_membership(db, room_id, member_id)

    expenses = await load_room_expenses(db, room_id)
    member_ids = await room_member_ids(db, room_id)

    return RoomBalancesOut(room_id=room_id, balances=calculate_balances(expenses, member_ids))


async def get_room_breakdown(db: AsyncSession, room_id: str, viewer_id: str) -> SettlementBreakdown:
    await check_room_membership(db, room_id, viewer_id)

    expenses = await load_room_expenses(db, room_id)
    return get_settlement_breakdown(expenses, viewer_id)
