from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date, datetime
from app.models.booking import BookingStatus
from app.schemas.room import RoomBrief
from app.schemas.slot import SlotResponse

class RoomSlotSelection(BaseModel):
    room_id: int
    slot_id: int

class BookingCreate(BaseModel):
    booking_date: date
    roomslots: List[RoomSlotSelection] = Field(..., description="Requested (room, slot) pairs; duplicates are collapsed")

    def pairs(self) -> set:
        return {(item.room_id, item.slot_id) for item in self.roomslots}

class RoomslotResponse(BaseModel):
    room_id: int
    slot_id: int
    room: Optional[RoomBrief] = None
    slot: Optional[SlotResponse] = None

    model_config = {
        "from_attributes": True
    }

class BookingResponse(BaseModel):
    id: int
    user_id: int
    booking_date: date
    status: BookingStatus
    requested_at: datetime
    approved_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None
    canceled_at: Optional[datetime] = None
    reviewed_by_id: Optional[int] = None
    roomslots: List[RoomslotResponse] = []

    model_config = {
        "from_attributes": True
    }
