from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from app.core.database import get_db
from app.dependencies import get_current_manager_user
from app.schemas.campus import CampusCreate, CampusUpdate, CampusResponse
from app.services.campus import campus_service

router = APIRouter(prefix="/campuses", tags=["Campuses"])

@router.get("/", response_model=List[CampusResponse])
async def list_campuses(db: Session = Depends(get_db)):
    return await campus_service.get_all(db)

@router.get("/{campus_id}", response_model=CampusResponse)
async def get_campus(campus_id: int, db: Session = Depends(get_db)):
    campus = await campus_service.get(db, campus_id)
    if not campus:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Campus not found"
        )
    return campus

@router.post("/", response_model=CampusResponse, status_code=status.HTTP_201_CREATED)
async def create_campus(
    campus_in: CampusCreate,
    db: Session = Depends(get_db),
    current_user = Depends(get_current_manager_user)
):
    return await campus_service.create_campus(db, campus_in)

@router.put("/{campus_id}", response_model=CampusResponse)
async def update_campus(
    campus_id: int,
    campus_in: CampusUpdate,
    db: Session = Depends(get_db),
    current_user = Depends(get_current_manager_user)
):
    return await campus_service.update_campus(db, campus_id, campus_in)
