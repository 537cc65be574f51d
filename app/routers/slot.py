from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.core.database import get_db
from app.schemas.slot import SlotResponse
from app.services.slot import slot_service

router = APIRouter(prefix="/slots", tags=["Slots"])

@router.get("/", response_model=List[SlotResponse])
async def list_slots(db: Session = Depends(get_db)):
    """All time slots ordered by slot number"""
    return await slot_service.get_all(db)
