# campus/schemas/room_status.py
from pydantic import BaseModel
from typing import Optional


class RoomStatusIn(BaseModel):
    whiteboard_cleaned: bool = False
    chairs_ordered: bool = False
    desks_cleaned: bool = False
    submitted_date_time: str
    submitter_id: int
    other_notes: Optional[str] = None


class RoomStatusUpdate(RoomStatusIn):
    id: int
    room_id: Optional[int] = None


class RoomStatusOut(BaseModel):
    id: int
    room_id: Optional[int]
    whiteboard_cleaned: bool
    chairs_ordered: bool
    desks_cleaned: bool
    submitted_date_time: Optional[str]
    submitter_id: Optional[int]
    other_notes: Optional[str]

    class Config:
        from_attributes = True
