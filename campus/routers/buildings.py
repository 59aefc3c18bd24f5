# campus/routers/buildings.py
"""Minimal building endpoints so rooms have something to belong to."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from campus.database import get_db
from campus.exceptions import InvalidInputError, ResourceNotFoundError
from campus.models.building import Building
from campus.repositories import BuildingRepository, ResourceMetadataRepository
from campus.schemas.building import BuildingCreate, BuildingOut
from campus.services.metadata_service import ResourceMetadataService

router = APIRouter()


@router.get("/building", response_model=list[BuildingOut], summary="List buildings")
def list_buildings(db: Session = Depends(get_db)):
    return BuildingRepository(db).find_all()


@router.post("/building", response_model=BuildingOut, status_code=status.HTTP_201_CREATED,
             summary="Register a building")
def create_building(body: BuildingCreate, db: Session = Depends(get_db)):
    metadata_service = ResourceMetadataService(ResourceMetadataRepository(db))
    building = Building(
        name=body.name,
        abbr_name=body.abbr_name,
        physical_address=body.physical_address,
        resource_metadata=metadata_service.create_default(body.resource_owner),
    )
    return BuildingRepository(db).save(building)


@router.get("/building/{id}", response_model=BuildingOut, summary="Get a building by id")
def get_building(id: int, db: Session = Depends(get_db)):
    if id <= 0:
        raise InvalidInputError("Building id must be positive")
    building = BuildingRepository(db).find_by_id(id)
    if building is None:
        raise ResourceNotFoundError(f"Building {id} not found")
    return building
