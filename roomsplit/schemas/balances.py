from pydantic import BaseModel
from typing import Dict, List

class CounterpartyAmount(BaseModel):
    user_id: str
    amount: float

class SettlementBreakdown(BaseModel):
    total_owed: float
    total_paid: float
    get_back: float
    you_give: List[CounterpartyAmount]
    you_get: List[CounterpartyAmount]

class RoomBalancesOut(BaseModel):
    room_id: str
    balances: Dict[str, float]
