from pydantic import BaseModel
from datetime import datetime
from typing import List, Literal
from roomsplit.schemas.room import Member

SplitType = Literal["equal", "custom"]

class Split(BaseModel):
    user_id: str
    amount: float

class Expense(BaseModel):
    id: str
    title: str
    amount: float
    paid_by: Member | None = None
    split_type: SplitType = "equal"
    splits: List[Split] = []
    created_at: datetime | None = None

class ExpenseCreate(BaseModel):
    title: str = "Expense"
    amount: float | None = None
    split_type: SplitType = "equal"
    # equal: who shares the cost, defaults to every room member
    participant_ids: List[str] | None = None
    # custom: explicit shares; the payer's own share may be left out
    splits: List[Split] = []

class ValidationResult(BaseModel):
    valid: bool
    error: str | None = None
