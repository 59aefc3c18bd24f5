# campus/schemas/building.py
from pydantic import BaseModel
from typing import Optional


class BuildingCreate(BaseModel):
    name: str
    abbr_name: Optional[str] = None
    physical_address: Optional[str] = None
    resource_owner: Optional[int] = None


class BuildingOut(BaseModel):
    id: int
    name: str
    abbr_name: Optional[str]
    physical_address: Optional[str]

    class Config:
        from_attributes = True
