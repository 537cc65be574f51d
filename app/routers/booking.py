from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.dependencies import get_current_active_user, get_current_manager_user, PaginationParams
from app.models.user import User
from app.schemas.booking import BookingCreate, BookingResponse
from app.schemas.pagination import Page
from app.services.booking import booking_service

router = APIRouter(prefix="/bookings", tags=["Bookings"])

def _transition_failed(action: str):
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Booking cannot be {action} in its current state"
    )

@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking_in: BookingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """Request one or more room slots for a date; the booking starts as Pending"""
    return await booking_service.create_booking(db, current_user.id, booking_in)

@router.get("/history", response_model=Page[BookingResponse])
async def booking_history(
    pagination: PaginationParams = Depends(),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """Current user's bookings, newest date first"""
    result = await booking_service.get_history(db, current_user.id, pagination.page, pagination.page_size)
    return Page[BookingResponse].from_result(result, BookingResponse)

@router.get("/pending", response_model=Page[BookingResponse])
async def pending_bookings(
    pagination: PaginationParams = Depends(),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user)
):
    """Review queue, oldest date first (manager only)"""
    result = await booking_service.get_pending(db, pagination.page, pagination.page_size)
    return Page[BookingResponse].from_result(result, BookingResponse)

@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    return await booking_service.get_booking(db, booking_id, current_user)

@router.post("/{booking_id}/approve")
async def approve_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user)
):
    if not await booking_service.approve(db, booking_id, current_user):
        raise _transition_failed("approved")
    return {"message": "Booking approved"}

@router.post("/{booking_id}/reject")
async def reject_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user)
):
    if not await booking_service.reject(db, booking_id, current_user):
        raise _transition_failed("rejected")
    return {"message": "Booking rejected"}

@router.post("/{booking_id}/cancel")
async def cancel_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """Cancel a Pending or Approved booking before its date"""
    if not await booking_service.cancel(db, booking_id, current_user):
        raise _transition_failed("canceled")
    return {"message": "Booking canceled"}
