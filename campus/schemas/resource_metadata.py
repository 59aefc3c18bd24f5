# campus/schemas/resource_metadata.py
from pydantic import BaseModel
from typing import Optional
from campus.models.resource_metadata import ResourceState


class ResourceMetadataIn(BaseModel):
    resource_creator: Optional[int] = None
    resource_creation_date_time: Optional[str] = None
    last_modifier: Optional[int] = None
    last_modified_date_time: Optional[str] = None
    resource_owner: int


class ResourceMetadataOut(BaseModel):
    id: int
    resource_creator: Optional[int]
    resource_creation_date_time: Optional[str]
    last_modifier: Optional[int]
    last_modified_date_time: Optional[str]
    resource_owner: Optional[int]
    state: ResourceState
    active: bool

    class Config:
        from_attributes = True
