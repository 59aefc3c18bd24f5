# campus/dependencies.py
"""FastAPI dependencies shared by the routers."""

from fastapi import Depends
from sqlalchemy.orm import Session
from campus.database import get_db
from campus.services.room_service import RoomService, get_room_service


def room_service(db: Session = Depends(get_db)) -> RoomService:
    """FastAPI dependency — a RoomService bound to the request's DB session."""
    return get_room_service(db)
