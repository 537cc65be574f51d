from typing import Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from app.services.base import BaseService
from app.repositories.user import user_repository
from app.models.user import User, UserRole
from app.schemas.token import RegisterRequest
from app.schemas.user import UserUpdate, ProfileUpdate, PasswordChange
from app.core.security import verify_password, get_password_hash
import logging

logger = logging.getLogger(__name__)

class UserService(BaseService):
    def __init__(self):
        super().__init__(user_repository)
        self.repository = user_repository

    async def register(self, db: Session, register_in: RegisterRequest) -> User:
        if self.repository.get_by_email(db, register_in.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User registration failed! User already existed."
            )

        role = UserRole.LECTURER if register_in.is_lecturer else UserRole.STUDENT
        user = self.repository.create(db, {
            "email": register_in.email,
            "full_name": register_in.full_name,
            "password_hash": get_password_hash(register_in.password),
            "role": int(role),
            "is_active": True,
        })
        logger.info(f"Registered user {user.email} with role {role.name}")
        return user

    async def authenticate_user(self, db: Session, email: str, password: str) -> Optional[User]:
        return self.repository.authenticate(db, email, password)

    async def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        return self.repository.get_by_email(db, email)

    async def update_user(
        self,
        db: Session,
        user_id: int,
        user_update: UserUpdate,
        current_user: Optional[User] = None
    ) -> User:
        user = await self.get(db, user_id)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )
        # managers may not lock themselves out through the generic update
        if current_user is not None and user.id == current_user.id:
            if user_update.is_active != user.is_active or int(user_update.role) != user.role:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="You cannot change your own role or active status"
                )
        if self.repository.email_taken(db, user_update.email, exclude_id=user_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered"
            )

        update_data = user_update.model_dump()
        update_data["role"] = int(update_data["role"])
        return self.repository.update(db, db_obj=user, obj_in=update_data)

    async def update_profile(self, db: Session, user: User, profile_update: ProfileUpdate) -> User:
        return self.repository.update(db, db_obj=user, obj_in=profile_update.model_dump())

    async def set_active(self, db: Session, user_id: int, is_active: bool) -> Optional[User]:
        user = await self.get(db, user_id)
        if not user:
            return None
        return self.repository.set_active(db, user, is_active)

    async def change_password(self, db: Session, user: User, password_change: PasswordChange) -> bool:
        if not password_change.new_password:
            return False
        if not verify_password(password_change.current_password, user.password_hash):
            return False

        self.repository.update_password(db, user, get_password_hash(password_change.new_password))
        return True


# Initialize service instance
user_service = UserService()
