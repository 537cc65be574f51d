from sqlalchemy import Column, String, Boolean, Integer
from sqlalchemy.orm import relationship
from app.models.base import BaseModel
import enum

class UserRole(enum.IntEnum):
    ADMIN = 0
    STUDENT = 1
    LECTURER = 2
    MANAGER = 3

# Roles allowed to review bookings and manage campuses, rooms and users
MANAGEMENT_ROLES = (UserRole.ADMIN, UserRole.MANAGER)

class User(BaseModel):
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(200), nullable=False)
    role = Column(Integer, default=int(UserRole.STUDENT), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    bookings = relationship("Booking", back_populates="user", foreign_keys="Booking.user_id")

    @property
    def is_manager(self) -> bool:
        return self.role in MANAGEMENT_ROLES
