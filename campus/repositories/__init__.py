# campus/repositories/__init__.py
"""
Repositories package. Thin SQLAlchemy stores used by the service layer.
"""

from campus.repositories.building_repository import BuildingRepository
from campus.repositories.metadata_repository import ResourceMetadataRepository
from campus.repositories.room_repository import RoomRepository
from campus.repositories.room_status_repository import RoomStatusRepository

__all__ = [
    "BuildingRepository",
    "ResourceMetadataRepository",
    "RoomRepository",
    "RoomStatusRepository",
]
