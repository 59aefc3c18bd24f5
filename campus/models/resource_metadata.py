# campus/models/resource_metadata.py
"""
Ownership and lifecycle record shared by every resource kind (rooms, buildings).
Soft delete flips state from Active to Inactive; rows are never removed.
"""

import enum
from sqlalchemy import Column, Integer, String, Enum
from campus.database import Base


class ResourceState(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class ResourceMetadata(Base):
    __tablename__ = "resource_metadata"

    id = Column(Integer, primary_key=True, autoincrement=True)
    resource_creator = Column(Integer)
    resource_creation_date_time = Column(String(50))
    last_modifier = Column(Integer)
    last_modified_date_time = Column(String(50))
    resource_owner = Column(Integer, index=True)
    state = Column(
        Enum(ResourceState, name="resource_state", values_callable=lambda e: [m.value for m in e]),
        default=ResourceState.ACTIVE,
        nullable=False,
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("state", ResourceState.ACTIVE)
        super().__init__(**kwargs)

    @property
    def active(self) -> bool:
        return self.state == ResourceState.ACTIVE

    def __repr__(self):
        return f"<ResourceMetadata {self.id} owner={self.resource_owner} state={self.state}>"
