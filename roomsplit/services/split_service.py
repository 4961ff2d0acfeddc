from typing import List, Sequence
from roomsplit.core.utils import to_cents
from roomsplit.schemas.expense import Split


def build_equal_splits(amount: float, participant_ids: Sequence[str]) -> List[Split]:
    """
    Divide amount as evenly as possible between participants.

    Works in integer cents; the leftover cents go one each to the earliest
    participants, so the shares always add up to round2(amount).
    An empty participant list gives an empty list.
    """
    n = len(participant_ids)
    if n == 0:
        return []

    total_cents = to_cents(amount)
    share_cents = total_cents // n
    remainder = total_cents - share_cents * n

    return [
        Split(user_id=user_id, amount=(share_cents + (1 if i < remainder else 0)) / 100)
        for i, user_id in enumerate(participant_ids)
    ]
