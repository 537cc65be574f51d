from pydantic import BaseModel, Field, field_validator
from typing import Optional
from app.schemas.campus import CampusResponse

class RoomBase(BaseModel):
    code: str = Field(..., min_length=1, max_length=50)
    campus_id: int
    room_type: str = Field("classroom", min_length=1, max_length=50)
    capacity: int = Field(..., ge=0)

    @field_validator('code')
    def validate_code(cls, v):
        if not v.strip():
            raise ValueError('Room code cannot be empty')
        return v.strip()

class RoomCreate(RoomBase):
    is_available: bool = True

class RoomUpdate(RoomBase):
    is_available: bool

class RoomResponse(RoomBase):
    id: int
    is_available: bool
    campus: Optional[CampusResponse] = None

    model_config = {
        "from_attributes": True
    }

class RoomBrief(BaseModel):
    id: int
    code: str
    campus_id: int

    model_config = {
        "from_attributes": True
    }
