# campus/routers/rooms.py
"""Room CRUD + lookup endpoints. Delete is a soft delete."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from campus.database import get_db
from campus.dependencies import room_service
from campus.exceptions import InvalidInputError
from campus.models.resource_metadata import ResourceMetadata
from campus.models.room import Room
from campus.models.room_status import RoomStatus
from campus.repositories import BuildingRepository
from campus.schemas.room import RoomCreate, RoomUpdate, RoomOut
from campus.services.room_service import RoomService

router = APIRouter()


@router.get("/room", response_model=list[RoomOut], summary="List all rooms")
def list_rooms(service: RoomService = Depends(room_service)):
    return service.find_all()


@router.post("/room", response_model=RoomOut, status_code=status.HTTP_201_CREATED,
             summary="Create a room with its metadata and initial statuses")
def create_room(body: RoomCreate, service: RoomService = Depends(room_service),
                db: Session = Depends(get_db)):
    if body.building_id is not None and BuildingRepository(db).find_by_id(body.building_id) is None:
        raise InvalidInputError(f"Building {body.building_id} does not exist")

    metadata = None
    if body.resource_metadata is not None:
        metadata = ResourceMetadata(**body.resource_metadata.model_dump())
    room = Room(
        room_number=body.room_number,
        max_occupancy=body.max_occupancy,
        building_id=body.building_id,
        resource_metadata=metadata,
        current_status=[RoomStatus(**s.model_dump()) for s in body.current_status],
    )
    return service.save(room)


@router.put("/room", response_model=RoomOut, summary="Update a room (building is kept)")
def update_room(body: RoomUpdate, service: RoomService = Depends(room_service)):
    room = Room(id=body.id, room_number=body.room_number, max_occupancy=body.max_occupancy)
    return service.update(room)


@router.get("/room/number/{room_number}", response_model=RoomOut, summary="Find a room by number")
def get_room_by_number(room_number: str, service: RoomService = Depends(room_service)):
    return service.find_by_room_number(room_number)


@router.get("/room/occupancy/{occupancy}", response_model=list[RoomOut],
            summary="Rooms with an exact max occupancy")
def get_rooms_by_occupancy(occupancy: int, service: RoomService = Depends(room_service)):
    return service.find_by_max_occupancy(occupancy)


@router.get("/room/owner/{owner_id}", response_model=list[RoomOut], summary="Rooms owned by a user")
def get_rooms_by_owner(owner_id: int, service: RoomService = Depends(room_service)):
    return service.find_by_resource_owner(owner_id)


@router.get("/room/{id}", response_model=RoomOut, summary="Get a room by id")
def get_room(id: int, service: RoomService = Depends(room_service)):
    return service.find_by_id(id)


@router.delete("/room/{id}", response_model=RoomOut, summary="Soft delete a room")
def delete_room(id: int, service: RoomService = Depends(room_service)):
    """Marks the room's metadata Inactive. The room stays retrievable by id."""
    return service.delete(id)
