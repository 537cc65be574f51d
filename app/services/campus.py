from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from app.services.base import BaseService
from app.repositories.campus import campus_repository
from app.models.campus import Campus
from app.schemas.campus import CampusCreate, CampusUpdate

class CampusService(BaseService):
    def __init__(self):
        super().__init__(campus_repository)

    async def create_campus(self, db: Session, campus_in: CampusCreate) -> Campus:
        return self.repository.create(db, campus_in.model_dump())

    async def update_campus(self, db: Session, campus_id: int, campus_in: CampusUpdate) -> Campus:
        campus = self.repository.get(db, campus_id)
        if not campus:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Campus not found"
            )
        return self.repository.update(db, campus, campus_in.model_dump())

campus_service = CampusService()
