from pydantic import BaseModel
from datetime import datetime
from typing import List

class Member(BaseModel):
    id: str
    name: str = "User"

class RoomCreate(BaseModel):
    name: str

class RoomJoin(BaseModel):
    code: str

class RoomOut(BaseModel):
    id: str
    name: str
    code: str
    created_by: str
    created_at: datetime | None = None
    members: List[Member] = []

    class Config:
        from_attributes = True
