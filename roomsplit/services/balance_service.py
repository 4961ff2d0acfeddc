from typing import Dict, Iterable, Sequence
from roomsplit.core.utils import round2
from roomsplit.schemas.expense import Expense


def payer_id_of(expense: Expense) -> str | None:
    if expense.paid_by is None or not expense.paid_by.id:
        return None
    return expense.paid_by.id


def calculate_balances(
    expenses: Sequence[Expense],
    member_ids: Iterable[str],
) -> Dict[str, float]:
    """
    Net balance per member: total paid minus total owed.

    Positive means the room owes the member, negative means the member owes
    the room. Every member in member_ids is present, at zero if they have no
    activity. The running total is rounded after every step.
    """
    balances: Dict[str, float] = {member_id: 0.0 for member_id in member_ids}

    for expense in expenses:
        payer_id = payer_id_of(expense)
        if payer_id is None:
            continue

        balances[payer_id] = round2(balances.get(payer_id, 0.0) + round2(expense.amount))

        for split in expense.splits:
            balances[split.user_id] = round2(
                balances.get(split.user_id, 0.0) - round2(split.amount)
            )

    return balances
