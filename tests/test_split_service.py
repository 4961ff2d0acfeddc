from roomsplit.core.utils import round2, to_cents
from roomsplit.services.split_service import build_equal_splits


def test_even_split():
    splits = build_equal_splits(100, ["a", "b"])
    assert [(s.user_id, s.amount) for s in splits] == [("a", 50), ("b", 50)]


def test_remainder_goes_to_earliest_participants():
    splits = build_equal_splits(100, ["a", "b", "c"])
    assert [(s.user_id, s.amount) for s in splits] == [("a", 33.34), ("b", 33.33), ("c", 33.33)]


def test_two_cent_remainder():
    splits = build_equal_splits(0.05, ["a", "b", "c"])
    assert [s.amount for s in splits] == [0.02, 0.02, 0.01]


def test_input_order_decides_who_gets_the_extra_cent():
    splits = build_equal_splits(100, ["c", "b", "a"])
    assert splits[0].user_id == "c"
    assert splits[0].amount == 33.34


def test_empty_participants():
    assert build_equal_splits(100, []) == []


def test_single_participant_gets_everything():
    splits = build_equal_splits(57.89, ["a"])
    assert len(splits) == 1
    assert splits[0].amount == 57.89


def test_amount_is_rounded_to_cents_first():
    splits = build_equal_splits(10.005, ["a", "b"])
    assert sum(to_cents(s.amount) for s in splits) == to_cents(10.005)


def test_shares_add_up_to_rounded_amount():
    cases = [
        (0.01, 1),
        (0.1, 2),
        (1, 3),
        (99.99, 4),
        (100, 7),
        (7.77, 3),
        (1000, 9),
        (0.07, 3),
        (1234.56, 11),
    ]
    for amount, n in cases:
        participants = [f"m{i}" for i in range(n)]
        splits = build_equal_splits(amount, participants)
        assert len(splits) == n
        assert sum(to_cents(s.amount) for s in splits) == to_cents(round2(amount))
        amounts = [s.amount for s in splits]
        assert to_cents(max(amounts)) - to_cents(min(amounts)) <= 1
