# Campus Rooms — Database Models
# Import all models here for SQLAlchemy discovery

from campus.models.building import Building                  # noqa
from campus.models.resource_metadata import ResourceMetadata, ResourceState  # noqa
from campus.models.room import Room                          # noqa
from campus.models.room_status import RoomStatus             # noqa
