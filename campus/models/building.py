# campus/models/building.py
"""
Minimal building table. Owned by the building subsystem; rooms only keep a reference.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from campus.database import Base


class Building(Base):
    __tablename__ = "buildings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), nullable=False)
    abbr_name = Column(String(20))
    physical_address = Column(String(200))
    resource_metadata_id = Column(Integer, ForeignKey("resource_metadata.id"))

    resource_metadata = relationship("ResourceMetadata")

    def __repr__(self):
        return f"<Building {self.id} {self.abbr_name or self.name}>"
