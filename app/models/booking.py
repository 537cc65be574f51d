from sqlalchemy import Column, Integer, Date, Enum, TIMESTAMP, ForeignKey, ForeignKeyConstraint, Table
from sqlalchemy.orm import relationship
from app.models.base import Base, BaseModel
import enum

class BookingStatus(enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    CANCELED = "Canceled"

# Statuses that still hold their (room, slot) pairs for the booking date
ACTIVE_STATUSES = (BookingStatus.PENDING, BookingStatus.APPROVED)

booking_roomslots = Table(
    "booking_roomslots",
    Base.metadata,
    Column("booking_id", Integer, ForeignKey("bookings.id", ondelete="CASCADE"), primary_key=True),
    Column("room_id", Integer, primary_key=True),
    Column("slot_id", Integer, primary_key=True),
    ForeignKeyConstraint(["room_id", "slot_id"], ["roomslots.room_id", "roomslots.slot_id"]),
)

class Booking(BaseModel):
    __tablename__ = "bookings"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    booking_date = Column(Date, nullable=False, index=True)
    status = Column(Enum(BookingStatus, values_callable=lambda obj: [e.value for e in obj],
        native_enum=False), default=BookingStatus.PENDING, nullable=False, index=True)

    requested_at = Column(TIMESTAMP(timezone=True), nullable=False)
    approved_at = Column(TIMESTAMP(timezone=True))
    rejected_at = Column(TIMESTAMP(timezone=True))
    canceled_at = Column(TIMESTAMP(timezone=True))
    reviewed_by_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    user = relationship("User", back_populates="bookings", foreign_keys=[user_id])
    reviewed_by = relationship("User", foreign_keys=[reviewed_by_id])
    roomslots = relationship("Roomslot", secondary=booking_roomslots)

    @property
    def pairs(self):
        return {rs.pair for rs in self.roomslots}
