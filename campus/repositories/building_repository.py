# campus/repositories/building_repository.py
from campus.models.building import Building
from campus.repositories.base import SqlRepository


class BuildingRepository(SqlRepository):
    model = Building
