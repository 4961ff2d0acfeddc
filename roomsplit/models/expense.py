import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, ForeignKey, Numeric, JSON
from sqlalchemy.sql import func
from roomsplit.db.session import Base

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    room_id = Column(String(36), ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False, default="Expense")
    amount = Column(Numeric(12, 2), nullable=False)
    paid_by_id = Column(String, nullable=False)
    paid_by_name = Column(String, nullable=True)
    split_type = Column(String, nullable=False, default="equal")
    # [{"user_id": ..., "amount": ...}]
    splits = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), server_default=func.now())
