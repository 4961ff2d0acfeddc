import math
from decimal import Decimal
from typing import Sequence
from roomsplit.schemas.expense import Split, SplitType, ValidationResult

# split sum vs amount
SPLIT_TOLERANCE = Decimal("0.01")

VALID = ValidationResult(valid=True)


def validate_not_empty(amount: float | None) -> ValidationResult:
    if amount is None or amount == 0:
        return ValidationResult(valid=False, error="Amount required")
    return VALID


def validate_amount(amount: float) -> ValidationResult:
    if amount <= 0:
        return ValidationResult(valid=False, error="Amount must be greater than zero")
    if not math.isfinite(amount):
        return ValidationResult(valid=False, error="Amount must be a valid number")
    return VALID


def validate_split_totals(amount: float, splits: Sequence[Split]) -> ValidationResult:
    """
    Custom splits must add up to the amount (within one cent) and none may
    be negative. Sums are taken in Decimal so 40 + 59.99 is exactly 99.99.
    """
    if not all(math.isfinite(s.amount) for s in splits):
        return ValidationResult(valid=False, error="Split amounts must be valid numbers")

    total = sum((Decimal(str(s.amount)) for s in splits), Decimal("0"))
    expected = Decimal(str(amount))

    if abs(total - expected) > SPLIT_TOLERANCE:
        return ValidationResult(
            valid=False,
            error=f"Split total ({total:.2f}) must equal expense amount ({expected:.2f})",
        )

    if any(s.amount < 0 for s in splits):
        return ValidationResult(valid=False, error="Split amounts cannot be negative")

    return VALID


def validate_expense_input(
    amount: float | None,
    split_type: SplitType,
    splits: Sequence[Split],
) -> ValidationResult:
    """
    Run every check in order and return the first failure.

    Equal splits come from build_equal_splits, so their totals are not
    checked here.
    """
    result = validate_not_empty(amount)
    if not result.valid:
        return result

    result = validate_amount(amount)
    if not result.valid:
        return result

    if split_type == "custom":
        result = validate_split_totals(amount, splits)
        if not result.valid:
            return result

    return VALID
