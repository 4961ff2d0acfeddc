from typing import Dict, List, Sequence
from roomsplit.core.utils import round2
from roomsplit.schemas.balances import CounterpartyAmount, SettlementBreakdown
from roomsplit.schemas.expense import Expense
from roomsplit.services.balance_service import payer_id_of


def _positive_entries(amounts: Dict[str, float]) -> List[CounterpartyAmount]:
    return [
        CounterpartyAmount(user_id=user_id, amount=round2(amount))
        for user_id, amount in amounts.items()
        if amount > 0
    ]


def get_settlement_breakdown(
    expenses: Sequence[Expense],
    viewer_id: str,
) -> SettlementBreakdown:
    """
    What the viewer gives to and gets from each other member.

    you_give[payer]  - the viewer's shares of expenses that payer covered
    you_get[member]  - that member's shares of expenses the viewer covered

    get_back is total paid minus total owed, clamped at zero. It is not the
    sum of you_get and the two can differ when the viewer both owes and is
    owed.
    """
    total_owed = 0.0
    total_paid = 0.0
    give: Dict[str, float] = {}
    get: Dict[str, float] = {}

    for expense in expenses:
        payer_id = payer_id_of(expense)
        if payer_id is None:
            continue

        for split in expense.splits:
            amount = round2(split.amount)

            if split.user_id == viewer_id and payer_id != viewer_id:
                total_owed = round2(total_owed + amount)
                give[payer_id] = round2(give.get(payer_id, 0.0) + amount)

            if payer_id == viewer_id and split.user_id != viewer_id:
                get[split.user_id] = round2(get.get(split.user_id, 0.0) + amount)

        if payer_id == viewer_id:
            total_paid = round2(total_paid + round2(expense.amount))

    return SettlementBreakdown(
        total_owed=total_owed,
        total_paid=total_paid,
        get_back=max(0.0, round2(total_paid - total_owed)),
        you_give=_positive_entries(give),
        you_get=_positive_entries(get),
    )
