# campus/repositories/room_repository.py
"""Room store — lookups by id, room number and max occupancy, plus upsert."""

from typing import Optional
from campus.models.room import Room
from campus.repositories.base import SqlRepository


class RoomRepository(SqlRepository):
    model = Room

    def find_by_room_number(self, room_num: str) -> Optional[Room]:
        return self.db.query(Room).filter(Room.room_number == room_num).first()

    def find_by_max_occupancy(self, occupancy: int) -> list[Room]:
        return self.db.query(Room).filter(Room.max_occupancy == occupancy).all()
