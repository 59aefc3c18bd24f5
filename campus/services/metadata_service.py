# campus/services/metadata_service.py
"""
Resource metadata helpers shared by every resource kind.
Used by room_service for creation and soft delete.
"""

from datetime import datetime
from typing import Optional
from campus.models.resource_metadata import ResourceMetadata, ResourceState
from campus.utils.logger import get_logger

logger = get_logger(__name__)


def _now() -> str:
    return datetime.utcnow().isoformat(timespec="seconds")


class ResourceMetadataService:
    def __init__(self, metadata_repository):
        self.metadata_repository = metadata_repository

    def save(self, metadata: ResourceMetadata) -> ResourceMetadata:
        if metadata.resource_creation_date_time is None:
            metadata.resource_creation_date_time = _now()
        return self.metadata_repository.save(metadata)

    def create_default(self, owner_id: Optional[int] = None) -> ResourceMetadata:
        """New, unsaved Active metadata stamped with the current time."""
        stamp = _now()
        return ResourceMetadata(
            resource_creator=owner_id,
            resource_creation_date_time=stamp,
            last_modifier=owner_id,
            last_modified_date_time=stamp,
            resource_owner=owner_id,
            state=ResourceState.ACTIVE,
        )

    def deactivate_resource(self, metadata: ResourceMetadata) -> ResourceMetadata:
        """Mark a resource Inactive. Calling it on inactive metadata changes nothing but the stamp."""
        metadata.state = ResourceState.INACTIVE
        metadata.last_modified_date_time = _now()
        saved = self.metadata_repository.save(metadata)
        logger.info(f"Resource metadata {saved.id} deactivated (owner={saved.resource_owner})")
        return saved
