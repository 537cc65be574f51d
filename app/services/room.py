from typing import Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from app.services.base import BaseService
from app.repositories.room import room_repository
from app.repositories.campus import campus_repository
from app.repositories.base import PaginationResult
from app.models.room import Room
from app.schemas.room import RoomCreate, RoomUpdate
import logging

logger = logging.getLogger(__name__)

class RoomService(BaseService):
    def __init__(self):
        super().__init__(room_repository)
        self.campus_repo = campus_repository

    async def get_rooms(self, db: Session, page: int, page_size: int) -> PaginationResult:
        return self.repository.get_rooms(db, page, page_size)

    async def get_rooms_by_campus(self, db: Session, campus_id: int, page: int, page_size: int) -> PaginationResult:
        return self.repository.get_rooms_by_campus(db, campus_id, page, page_size)

    async def get_room_by_code_and_campus(self, db: Session, code: str, campus_id: int) -> Optional[Room]:
        return self.repository.get_by_code_and_campus(db, code, campus_id)

    def _ensure_campus(self, db: Session, campus_id: int) -> None:
        if not self.campus_repo.get(db, campus_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Campus not found"
            )

    async def create_room(self, db: Session, room_in: RoomCreate) -> Room:
        self._ensure_campus(db, room_in.campus_id)
        if self.repository.code_taken(db, room_in.code, room_in.campus_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Room code already exists in this campus."
            )
        room = self.repository.create_with_roomslots(db, room_in.model_dump())
        logger.info(f"Created room {room.code} (id={room.id}) in campus {room.campus_id}")
        return room

    async def update_room(self, db: Session, room_id: int, room_in: RoomUpdate) -> Room:
        room = self.repository.get(db, room_id)
        if not room:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Room not found."
            )
        self._ensure_campus(db, room_in.campus_id)
        if self.repository.code_taken(db, room_in.code, room_in.campus_id, exclude_id=room_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Room code already exists in this campus."
            )
        return self.repository.update(db, room, room_in.model_dump())

    async def set_available(self, db: Session, room_id: int, is_available: bool) -> Optional[Room]:
        room = self.repository.get(db, room_id)
        if not room:
            return None
        return self.repository.set_available(db, room, is_available)

room_service = RoomService()
