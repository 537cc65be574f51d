from pydantic import BaseModel, Field
from typing import Optional

class CampusBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = None

class CampusCreate(CampusBase):
    pass

class CampusUpdate(CampusBase):
    pass

class CampusResponse(CampusBase):
    id: int

    model_config = {
        "from_attributes": True
    }
