# campus/repositories/base.py
"""
Shared upsert/lookup behaviour for every repository.
Each save commits immediately, matching one unit of work per request.
"""

from sqlalchemy import inspect
from sqlalchemy.orm import Session


class SqlRepository:
    model = None

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list:
        return self.db.query(self.model).all()

    def find_by_id(self, id: int):
        """Returns the row or None."""
        return self.db.get(self.model, id)

    def save(self, obj):
        """
        Insert or update. Objects built outside the session that carry an id
        (e.g. from a request body) are merged onto the stored row.
        """
        state = inspect(obj)
        if obj.id is not None and (state.transient or state.detached):
            obj = self.db.merge(obj)
        else:
            self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj
