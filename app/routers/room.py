from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.dependencies import get_current_manager_user, PaginationParams
from app.schemas.pagination import Page
from app.schemas.room import RoomCreate, RoomUpdate, RoomResponse
from app.services.room import room_service

router = APIRouter(prefix="/rooms", tags=["Rooms"])

def _room_not_found():
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Room not found."
    )

@router.get("/", response_model=Page[RoomResponse])
async def list_rooms(
    pagination: PaginationParams = Depends(),
    db: Session = Depends(get_db)
):
    """Paginated list of rooms ordered by code"""
    result = await room_service.get_rooms(db, pagination.page, pagination.page_size)
    return Page[RoomResponse].from_result(result, RoomResponse)

@router.get("/by-campus", response_model=Page[RoomResponse])
async def list_rooms_by_campus(
    campus_id: int = Query(..., description="Campus to filter by"),
    pagination: PaginationParams = Depends(),
    db: Session = Depends(get_db)
):
    result = await room_service.get_rooms_by_campus(db, campus_id, pagination.page, pagination.page_size)
    return Page[RoomResponse].from_result(result, RoomResponse)

@router.get("/by-code-and-campus", response_model=RoomResponse)
async def get_room_by_code_and_campus(
    code: str = Query(..., min_length=1),
    campus_id: int = Query(...),
    db: Session = Depends(get_db)
):
    room = await room_service.get_room_by_code_and_campus(db, code, campus_id)
    if not room:
        raise _room_not_found()
    return room

@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(room_id: int, db: Session = Depends(get_db)):
    room = await room_service.get(db, room_id)
    if not room:
        raise _room_not_found()
    return room

@router.post("/", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_room(
    room_in: RoomCreate,
    db: Session = Depends(get_db),
    current_user = Depends(get_current_manager_user)
):
    """Create a room and make it bookable in every slot (manager only)"""
    return await room_service.create_room(db, room_in)

@router.put("/{room_id}", response_model=RoomResponse)
async def update_room(
    room_id: int,
    room_in: RoomUpdate,
    db: Session = Depends(get_db),
    current_user = Depends(get_current_manager_user)
):
    return await room_service.update_room(db, room_id, room_in)

@router.put("/{room_id}/enable", response_model=RoomResponse)
async def enable_room(
    room_id: int,
    db: Session = Depends(get_db),
    current_user = Depends(get_current_manager_user)
):
    room = await room_service.set_available(db, room_id, True)
    if not room:
        raise _room_not_found()
    return room

@router.put("/{room_id}/disable", response_model=RoomResponse)
async def disable_room(
    room_id: int,
    db: Session = Depends(get_db),
    current_user = Depends(get_current_manager_user)
):
    room = await room_service.set_available(db, room_id, False)
    if not room:
        raise _room_not_found()
    return room
