from sqlalchemy import Column, ForeignKey, Integer, String, DateTime, func
from roomsplit.db.session import Base
from sqlalchemy.orm import relationship

class RoomMember(Base):
    __tablename__ = "room_members"

    id = Column(Integer, primary_key=True, index=True)

    room_id = Column(String(36), ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False)
    # one room per member
    member_id = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False, default="User")
    joined_at = Column(DateTime(timezone=True), server_default=func.now())

    room = relationship("Room", back_populates="members")
