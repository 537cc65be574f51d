from sqlalchemy import Column, String, Integer, Boolean, Time, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.schema import UniqueConstraint
from app.models.base import Base, BaseModel

class Room(BaseModel):
    __tablename__ = "rooms"
    __table_args__ = (
        UniqueConstraint("code", "campus_id", name="uq_rooms_code_campus"),
    )

    campus_id = Column(Integer, ForeignKey("campuses.id"), nullable=False, index=True)
    code = Column(String(50), nullable=False)
    room_type = Column(String(50), nullable=False, default="classroom")
    capacity = Column(Integer, nullable=False, default=0)
    is_available = Column(Boolean, nullable=False, default=True)

    campus = relationship("Campus", back_populates="rooms")
    roomslots = relationship("Roomslot", back_populates="room", cascade="all, delete-orphan")

class Slot(Base):
    """Fixed time-of-day interval, seeded by migration."""
    __tablename__ = "slots"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slot_number = Column(Integer, nullable=False, unique=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)

    roomslots = relationship("Roomslot", back_populates="slot")

class Roomslot(Base):
    """A room during one slot, reusable across calendar dates."""
    __tablename__ = "roomslots"

    room_id = Column(Integer, ForeignKey("rooms.id"), primary_key=True)
    slot_id = Column(Integer, ForeignKey("slots.id"), primary_key=True)

    room = relationship("Room", back_populates="roomslots")
    slot = relationship("Slot", back_populates="roomslots")

    @property
    def pair(self):
        return (self.room_id, self.slot_id)
