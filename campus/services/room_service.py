# campus/services/room_service.py
"""
Room lifecycle: validation, multi-entity saves, soft delete and the status audit trail.

  - save()   persists a room, then its metadata, then each initial status linked back to it
  - update() never changes which building a room belongs to
  - delete() is a soft delete: metadata goes Inactive, rows stay queryable by id
"""

import re
from typing import Optional
from sqlalchemy.orm import Session
from campus.exceptions import InvalidInputError, ResourceNotFoundError
from campus.models.room import Room
from campus.models.room_status import RoomStatus
from campus.repositories import (
    ResourceMetadataRepository,
    RoomRepository,
    RoomStatusRepository,
)
from campus.services.metadata_service import ResourceMetadataService
from campus.utils.logger import get_logger

logger = get_logger(__name__)

# ASCII digits only: int() would also take padding, underscores and non-Latin digits
ROOM_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


class RoomService:
    def __init__(self, room_repository, status_repository, metadata_service):
        self.room_repository = room_repository
        self.status_repository = status_repository
        self.metadata_service = metadata_service

    # ── Rooms ────────────────────────────────────────────────────────────

    def find_all(self) -> list[Room]:
        return list(self.room_repository.find_all())

    def find_by_room_number(self, room_num: str) -> Room:
        """
        Look up a room by its number.
        Raises InvalidInputError for an empty, non-numeric, zero or negative number,
        ResourceNotFoundError when no room carries it.
        """
        if not room_num:
            logger.warning("Room lookup with empty room number")
            raise InvalidInputError("Room number must not be empty")
        if not isinstance(room_num, str) or not ROOM_NUMBER_PATTERN.fullmatch(room_num):
            logger.warning(f"Room lookup with non-numeric room number {room_num!r}")
            raise InvalidInputError(f"Room number '{room_num}' is not a number")
        if int(room_num) <= 0:
            logger.warning(f"Room lookup with non-positive room number {room_num!r}")
            raise InvalidInputError("Room number must be positive")

        room = self.room_repository.find_by_room_number(room_num)
        if room is None:
            raise ResourceNotFoundError(f"Room number '{room_num}' not found")
        return room

    def find_by_id(self, id: int) -> Room:
        if id <= 0:
            logger.warning(f"Room lookup with invalid id {id}")
            raise InvalidInputError("Room id must be positive")
        room = self.room_repository.find_by_id(id)
        if room is None:
            raise ResourceNotFoundError(f"Room {id} not found")
        return room

    def find_by_max_occupancy(self, occupancy: int) -> list[Room]:
        return list(self.room_repository.find_by_max_occupancy(occupancy))

    def find_by_resource_owner(self, owner_id: int) -> list[Room]:
        if owner_id < 1:
            logger.warning(f"Room lookup with invalid owner id {owner_id}")
            raise InvalidInputError("Owner id must be at least 1")

        # Linear scan; swap for a joined query if the rooms table grows large.
        rooms = [
            room for room in self.room_repository.find_all()
            if room.resource_metadata is not None
            and room.resource_metadata.resource_owner == owner_id
        ]
        if not rooms:
            raise ResourceNotFoundError(f"No rooms owned by {owner_id}")
        return rooms

    def save(self, room: Optional[Room]) -> Room:
        # Absent input keeps the not-found kind; callers only rely on it failing early.
        if room is None:
            raise ResourceNotFoundError("No room supplied")

        statuses = list(room.current_status or [])
        if room.resource_metadata is None:
            room.resource_metadata = self.metadata_service.create_default()

        persisted = self.room_repository.save(room)
        persisted.resource_metadata = self.metadata_service.save(persisted.resource_metadata)

        for status in statuses:
            if status.room is not persisted:
                status.room = persisted
            self.save_status(status)

        logger.info(
            f"Room {persisted.id} (number={persisted.room_number}) saved "
            f"with {len(statuses)} status record(s)"
        )
        return persisted

    def update(self, room: Room) -> Room:
        existing = self.room_repository.find_by_id(room.id)
        if existing is None:
            raise ResourceNotFoundError(f"Room {room.id} not found")

        room.building = existing.building
        room.building_id = existing.building_id
        updated = self.room_repository.save(room)
        logger.info(f"Room {updated.id} updated")
        return updated

    def delete(self, id: int) -> Room:
        """Soft delete: the room's metadata goes Inactive, nothing is removed."""
        if id <= 0:
            logger.warning(f"Room delete with invalid id {id}")
            raise InvalidInputError("Room id must be positive")

        room = self.room_repository.find_by_id(id)
        if room is None:
            raise ResourceNotFoundError(f"Room {id} not found")

        room.resource_metadata = self.metadata_service.deactivate_resource(room.resource_metadata)
        logger.info(f"Room {id} deactivated")
        return self.update(room)

    # ── Status audit trail ───────────────────────────────────────────────

    def find_all_status_by_submitter(self, id: int) -> list[RoomStatus]:
        return list(self.status_repository.find_all_by_submitter_id(id))

    def find_all_status_by_date(self, date: str) -> list[RoomStatus]:
        return list(self.status_repository.find_all_by_submitted_date_time(date))

    def find_status_by_id(self, id: int) -> Optional[RoomStatus]:
        return self.status_repository.find_by_id(id)

    def find_all_status(self) -> list[RoomStatus]:
        return list(self.status_repository.find_all())

    def save_status(self, status: RoomStatus) -> None:
        self.status_repository.save(status)

    def update_status(self, status: RoomStatus) -> RoomStatus:
        return self.status_repository.save(status)


def get_room_service(db: Session) -> RoomService:
    """Wire a RoomService to the repositories of one DB session."""
    return RoomService(
        room_repository=RoomRepository(db),
        status_repository=RoomStatusRepository(db),
        metadata_service=ResourceMetadataService(ResourceMetadataRepository(db)),
    )
