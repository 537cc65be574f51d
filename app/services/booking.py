# app/services/booking.py
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from typing import List, Set, Tuple
from datetime import date, datetime, timedelta, timezone
import logging

from app.core.config import settings
from app.models.booking import Booking, BookingStatus
from app.models.user import User
from app.repositories.base import PaginationResult
from app.repositories.booking import booking_repository
from app.repositories.room import roomslot_repository
from app.schemas.booking import BookingCreate

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]

def _now() -> datetime:
    return datetime.now(timezone.utc)

def _today() -> date:
    """Calendar day on the same UTC clock as the booking timestamps."""
    return _now().date()

def _format_pairs(pairs) -> str:
    return ", ".join(f"room {room_id}/slot {slot_id}" for room_id, slot_id in sorted(pairs))

class BookingService:
    def __init__(self, booking_repo, roomslot_repo):
        self.booking_repo = booking_repo
        self.roomslot_repo = roomslot_repo

    # =========================================================================
    # CORE HELPERS
    # =========================================================================

    def _find_conflicts(self, db: Session, booking_date: date, pairs: Set[Pair]) -> List[Pair]:
        """Requested pairs already held by a Pending/Approved booking on that date."""
        taken = set()
        for booking in self.booking_repo.get_active_on_date(db, booking_date):
            taken |= booking.pairs & pairs
        return sorted(taken)

    def _get_or_404(self, db: Session, booking_id: int) -> Booking:
        booking = self.booking_repo.get(db, booking_id)
        if not booking:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Booking not found"
            )
        return booking

    # =========================================================================
    # CREATE
    # =========================================================================

    async def create_booking(self, db: Session, user_id: int, booking_in: BookingCreate) -> Booking:
        """Create a Pending booking for every requested (room, slot) pair on one date.

        The whole check-then-insert runs in the session's single transaction.
        Requested Roomslot rows are locked first, so a concurrent request for
        the same pairs waits until this one commits or rolls back and then
        sees its booking in the conflict check.
        """
        pairs = booking_in.pairs()
        if not pairs:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="At least one room slot must be selected"
            )

        earliest = _today() + timedelta(days=settings.MIN_BOOKING_LEAD_DAYS)
        if booking_in.booking_date < earliest:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Booking date must be on or after {earliest.isoformat()}"
            )

        try:
            roomslots = self.roomslot_repo.get_for_pairs(db, pairs, lock=True)

            conflicts = self._find_conflicts(db, booking_in.booking_date, pairs)
            if conflicts:
                logger.warning(
                    f"Booking conflict for user {user_id} on {booking_in.booking_date}: {_format_pairs(conflicts)}"
                )
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=f"Already booked on {booking_in.booking_date}: {_format_pairs(conflicts)}"
                )

            missing = pairs - {rs.pair for rs in roomslots}
            if missing:
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=f"Invalid room/slot selection: {_format_pairs(missing)}"
                )

            disabled = sorted({rs.room.code for rs in roomslots if not rs.room.is_available})
            if disabled:
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=f"Room not available: {', '.join(disabled)}"
                )

            booking = Booking(
                user_id=user_id,
                booking_date=booking_in.booking_date,
                status=BookingStatus.PENDING,
                requested_at=_now(),
            )
            self.booking_repo.add(db, booking, roomslots)
            db.commit()
        except HTTPException:
            db.rollback()
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating booking for user {user_id}: {e}")
            raise e

        logger.info(
            f"Booking {booking.id} created by user {user_id} for {booking.booking_date}: {_format_pairs(pairs)}"
        )
        return self.booking_repo.get(db, booking.id)

    # =========================================================================
    # STATUS TRANSITIONS
    # =========================================================================

    async def approve(self, db: Session, booking_id: int, reviewer: User) -> bool:
        booking = self._get_or_404(db, booking_id)
        if booking.status != BookingStatus.PENDING:
            logger.warning(f"Cannot approve booking {booking_id} in status {booking.status.value}")
            return False

        booking.status = BookingStatus.APPROVED
        booking.approved_at = _now()
        booking.reviewed_by_id = reviewer.id
        db.commit()
        logger.info(f"Booking {booking_id} approved by user {reviewer.id}")
        return True

    async def reject(self, db: Session, booking_id: int, reviewer: User) -> bool:
        booking = self._get_or_404(db, booking_id)
        if booking.status != BookingStatus.PENDING:
            logger.warning(f"Cannot reject booking {booking_id} in status {booking.status.value}")
            return False

        booking.status = BookingStatus.REJECTED
        booking.rejected_at = _now()
        booking.reviewed_by_id = reviewer.id
        db.commit()
        logger.info(f"Booking {booking_id} rejected by user {reviewer.id}")
        return True

    async def cancel(self, db: Session, booking_id: int, current_user: User) -> bool:
        booking = self._get_or_404(db, booking_id)
        if booking.user_id != current_user.id and not current_user.is_manager:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only cancel your own bookings"
            )

        if booking.status not in (BookingStatus.PENDING, BookingStatus.APPROVED):
            logger.warning(f"Cannot cancel booking {booking_id} in status {booking.status.value}")
            return False
        if _today() >= booking.booking_date:
            logger.warning(f"Cannot cancel booking {booking_id} on or after {booking.booking_date}")
            return False

        booking.status = BookingStatus.CANCELED
        booking.canceled_at = _now()
        db.commit()
        logger.info(f"Booking {booking_id} canceled by user {current_user.id}")
        return True

    # =========================================================================
    # READS
    # =========================================================================

    async def get_booking(self, db: Session, booking_id: int, current_user: User) -> Booking:
        booking = self._get_or_404(db, booking_id)
        if booking.user_id != current_user.id and not current_user.is_manager:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Permission denied"
            )
        return booking

    async def get_history(self, db: Session, user_id: int, page: int = 1, page_size: int = 10) -> PaginationResult:
        return self.booking_repo.get_by_user(db, user_id, page, page_size)

    async def get_pending(self, db: Session, page: int = 1, page_size: int = 10) -> PaginationResult:
        return self.booking_repo.get_pending(db, page, page_size)


booking_service = BookingService(booking_repository, roomslot_repository)
