# campus/models/room.py
"""
Rooms table — one physical campus room.
Each room owns exactly one resource_metadata row and a history of room_status rows.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from campus.database import Base


class Room(Base):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    room_number = Column(String(20), nullable=False, index=True)
    max_occupancy = Column(Integer, index=True)
    building_id = Column(Integer, ForeignKey("buildings.id"))
    resource_metadata_id = Column(Integer, ForeignKey("resource_metadata.id"))

    building = relationship("Building")
    resource_metadata = relationship("ResourceMetadata")
    current_status = relationship(
        "RoomStatus", back_populates="room", order_by="RoomStatus.id"
    )

    def __repr__(self):
        return f"<Room {self.id} number={self.room_number} building={self.building_id}>"
