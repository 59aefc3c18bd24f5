# campus/repositories/room_status_repository.py
"""Room status store — the audit trail, queried by submitter or exact submission time."""

from campus.models.room_status import RoomStatus
from campus.repositories.base import SqlRepository


class RoomStatusRepository(SqlRepository):
    model = RoomStatus

    def find_all_by_submitter_id(self, submitter_id: int) -> list[RoomStatus]:
        return self.db.query(RoomStatus).filter(RoomStatus.submitter_id == submitter_id).all()

    def find_all_by_submitted_date_time(self, date: str) -> list[RoomStatus]:
        return self.db.query(RoomStatus).filter(RoomStatus.submitted_date_time == date).all()
