# campus/routers/room_status.py
"""
Room status audit trail endpoints.
Mounted before the rooms router so /room/status is not read as /room/{id}.
"""

from fastapi import APIRouter, Depends, status
from campus.dependencies import room_service
from campus.exceptions import InvalidInputError, ResourceNotFoundError
from campus.models.room_status import RoomStatus
from campus.schemas.room_status import RoomStatusIn, RoomStatusUpdate, RoomStatusOut
from campus.services.room_service import RoomService

router = APIRouter()


@router.get("/room/status", response_model=list[RoomStatusOut], summary="List all room statuses")
def list_statuses(service: RoomService = Depends(room_service)):
    return service.find_all_status()


@router.get("/room/status/submitter/{submitter_id}", response_model=list[RoomStatusOut],
            summary="Statuses submitted by a user")
def get_statuses_by_submitter(submitter_id: int, service: RoomService = Depends(room_service)):
    return service.find_all_status_by_submitter(submitter_id)


@router.get("/room/status/date", response_model=list[RoomStatusOut],
            summary="Statuses with an exact submitted date/time")
def get_statuses_by_date(date: str, service: RoomService = Depends(room_service)):
    return service.find_all_status_by_date(date)


@router.get("/room/status/{id}", response_model=RoomStatusOut, summary="Get a room status by id")
def get_status(id: int, service: RoomService = Depends(room_service)):
    room_status = service.find_status_by_id(id)
    if room_status is None:
        raise ResourceNotFoundError(f"Room status {id} not found")
    return room_status


@router.put("/room/status", response_model=RoomStatusOut, summary="Update a room status")
def update_status(body: RoomStatusUpdate, service: RoomService = Depends(room_service)):
    if service.find_status_by_id(body.id) is None:
        raise ResourceNotFoundError(f"Room status {body.id} not found")

    changes = body.model_dump(exclude_unset=True)
    if "room_id" in changes:
        # A status must stay attached to a stored room
        if changes["room_id"] is None:
            raise InvalidInputError("Room status must belong to a room")
        changes["room_id"] = service.find_by_id(changes["room_id"]).id
    return service.update_status(RoomStatus(**changes))


@router.post("/room/{room_id}/status", response_model=RoomStatusOut,
             status_code=status.HTTP_201_CREATED, summary="Submit a status for a room")
def add_status(room_id: int, body: RoomStatusIn, service: RoomService = Depends(room_service)):
    room = service.find_by_id(room_id)
    room_status = RoomStatus(**body.model_dump())
    room_status.room = room
    service.save_status(room_status)
    return room_status
