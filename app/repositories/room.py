from typing import Iterable, List, Optional, Tuple
from sqlalchemy import and_, or_
from sqlalchemy.orm import Session, joinedload
from app.repositories.base import BaseRepository, PaginationResult, paginate
from app.models.room import Room, Slot, Roomslot

class RoomRepository(BaseRepository[Room]):
    def __init__(self):
        super().__init__(Room)

    def get(self, db: Session, id: int) -> Optional[Room]:
        return (
            db.query(Room)
            .options(joinedload(Room.campus))
            .filter(Room.id == id)
            .first()
        )

    def get_rooms(self, db: Session, page: int, page_size: int) -> PaginationResult:
        query = db.query(Room).options(joinedload(Room.campus)).order_by(Room.code, Room.id)
        return paginate(query, page, page_size)

    def get_rooms_by_campus(self, db: Session, campus_id: int, page: int, page_size: int) -> PaginationResult:
        query = (
            db.query(Room)
            .options(joinedload(Room.campus))
            .filter(Room.campus_id == campus_id)
            .order_by(Room.code, Room.id)
        )
        return paginate(query, page, page_size)

    def get_by_code_and_campus(self, db: Session, code: str, campus_id: int) -> Optional[Room]:
        if not code or not code.strip():
            return None
        return (
            db.query(Room)
            .options(joinedload(Room.campus))
            .filter(Room.code == code, Room.campus_id == campus_id)
            .first()
        )

    def code_taken(self, db: Session, code: str, campus_id: int, exclude_id: Optional[int] = None) -> bool:
        query = db.query(Room).filter(Room.code == code, Room.campus_id == campus_id)
        if exclude_id is not None:
            query = query.filter(Room.id != exclude_id)
        return db.query(query.exists()).scalar()

    def create_with_roomslots(self, db: Session, obj_in: dict) -> Room:
        """Insert a room together with one Roomslot per seeded Slot."""
        try:
            room = Room(**obj_in)
            db.add(room)
            db.flush()
            for slot in db.query(Slot).order_by(Slot.slot_number).all():
                db.add(Roomslot(room_id=room.id, slot_id=slot.id))
            db.commit()
            db.refresh(room)
            return room
        except Exception as e:
            db.rollback()
            raise e

    def set_available(self, db: Session, room: Room, is_available: bool) -> Room:
        room.is_available = is_available
        db.commit()
        db.refresh(room)
        return room

class RoomslotRepository:
    def pairs_query(self, db: Session, pairs: List[Tuple[int, int]], lock: bool = False):
        query = (
            db.query(Roomslot)
            .options(joinedload(Roomslot.room, innerjoin=True))
            .filter(or_(*[
                and_(Roomslot.room_id == room_id, Roomslot.slot_id == slot_id)
                for room_id, slot_id in pairs
            ]))
            .order_by(Roomslot.room_id, Roomslot.slot_id)
        )
        if lock:
            query = query.with_for_update(of=Roomslot)
        return query

    def get_for_pairs(
        self,
        db: Session,
        pairs: Iterable[Tuple[int, int]],
        lock: bool = False
    ) -> List[Roomslot]:
        """Roomslot rows matching the (room_id, slot_id) pairs.

        With lock=True the rows are selected FOR UPDATE in key order, so two
        transactions touching the same pairs queue behind each other.
        """
        pairs = sorted(set(pairs))
        if not pairs:
            return []
        return self.pairs_query(db, pairs, lock).all()

room_repository = RoomRepository()
roomslot_repository = RoomslotRepository()
