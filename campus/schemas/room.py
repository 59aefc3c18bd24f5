# campus/schemas/room.py
from pydantic import BaseModel, Field
from typing import Optional
from campus.schemas.resource_metadata import ResourceMetadataIn, ResourceMetadataOut
from campus.schemas.room_status import RoomStatusIn, RoomStatusOut


class RoomCreate(BaseModel):
    room_number: str
    max_occupancy: int
    building_id: Optional[int] = None
    resource_metadata: Optional[ResourceMetadataIn] = None
    current_status: list[RoomStatusIn] = Field(default_factory=list)


class RoomUpdate(BaseModel):
    id: int
    room_number: str
    max_occupancy: int


class RoomOut(BaseModel):
    id: int
    room_number: str
    max_occupancy: Optional[int]
    building_id: Optional[int]
    resource_metadata: Optional[ResourceMetadataOut]
    current_status: list[RoomStatusOut] = []

    class Config:
        from_attributes = True
