# campus/repositories/metadata_repository.py
from campus.models.resource_metadata import ResourceMetadata
from campus.repositories.base import SqlRepository


class ResourceMetadataRepository(SqlRepository):
    model = ResourceMetadata
