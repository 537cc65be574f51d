from typing import List
from sqlalchemy.orm import Session
from app.repositories.base import BaseRepository
from app.models.room import Slot

class SlotRepository(BaseRepository[Slot]):
    def __init__(self):
        super().__init__(Slot)

    def get_all(self, db: Session) -> List[Slot]:
        return db.query(Slot).order_by(Slot.slot_number).all()

slot_repository = SlotRepository()
