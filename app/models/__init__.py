from .user import User
from .campus import Campus
from .room import Room, Slot, Roomslot
from .booking import Booking, BookingStatus, booking_roomslots
