from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from app.repositories.base import BaseRepository, PaginationResult, paginate
from app.models.booking import Booking, BookingStatus, ACTIVE_STATUSES
from app.models.room import Roomslot

class BookingRepository(BaseRepository[Booking]):
    def __init__(self):
        super().__init__(Booking)

    def _with_roomslots(self, db: Session):
        return db.query(Booking).options(
            selectinload(Booking.roomslots).selectinload(Roomslot.room),
            selectinload(Booking.roomslots).selectinload(Roomslot.slot),
        )

    def get(self, db: Session, id: int) -> Optional[Booking]:
        return self._with_roomslots(db).filter(Booking.id == id).first()

    def get_active_on_date(self, db: Session, booking_date: date) -> List[Booking]:
        """Bookings on that date that still hold their room/slot pairs."""
        return (
            db.query(Booking)
            .options(selectinload(Booking.roomslots))
            .filter(
                Booking.booking_date == booking_date,
                Booking.status.in_(ACTIVE_STATUSES)
            )
            .all()
        )

    def add(self, db: Session, booking: Booking, roomslots: List[Roomslot]) -> Booking:
        booking.roomslots = list(roomslots)
        db.add(booking)
        db.flush()
        return booking

    def get_by_user(self, db: Session, user_id: int, page: int, page_size: int) -> PaginationResult:
        query = (
            self._with_roomslots(db)
            .filter(Booking.user_id == user_id)
            .order_by(Booking.booking_date.desc(), Booking.requested_at.desc(), Booking.id.desc())
        )
        return paginate(query, page, page_size)

    def get_pending(self, db: Session, page: int, page_size: int) -> PaginationResult:
        query = (
            self._with_roomslots(db)
            .filter(Booking.status == BookingStatus.PENDING)
            .order_by(Booking.booking_date.asc(), Booking.requested_at.asc(), Booking.id.asc())
        )
        return paginate(query, page, page_size)

booking_repository = BookingRepository()
