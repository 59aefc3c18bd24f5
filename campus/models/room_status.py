# campus/models/room_status.py
"""
Room status audit trail. One row per submitted status report about a room.
submitted_date_time is stored as the submitter sent it and only matched exactly.
"""

from sqlalchemy import Column, Integer, String, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
from campus.database import Base


class RoomStatus(Base):
    __tablename__ = "room_status"

    id = Column(Integer, primary_key=True, autoincrement=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), index=True)
    whiteboard_cleaned = Column(Boolean, default=False, nullable=False)
    chairs_ordered = Column(Boolean, default=False, nullable=False)
    desks_cleaned = Column(Boolean, default=False, nullable=False)
    submitted_date_time = Column(String(50), index=True)
    submitter_id = Column(Integer, index=True)
    other_notes = Column(Text)

    room = relationship("Room", back_populates="current_status")

    def __repr__(self):
        return f"<RoomStatus {self.id} room={self.room_id} by={self.submitter_id}>"
