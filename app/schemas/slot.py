from pydantic import BaseModel
from datetime import time

class SlotResponse(BaseModel):
    id: int
    slot_number: int
    start_time: time
    end_time: time

    model_config = {
        "from_attributes": True
    }
