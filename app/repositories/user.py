from typing import Optional
from sqlalchemy.orm import Session
from app.repositories.base import BaseRepository
from app.models.user import User
from app.core.security import verify_password

class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User)

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def email_taken(self, db: Session, email: str, exclude_id: Optional[int] = None) -> bool:
        query = db.query(User).filter(User.email == email)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return db.query(query.exists()).scalar()

    def authenticate(self, db: Session, email: str, password: str) -> Optional[User]:
        if not email or not password:
            return None
        user = self.get_by_email(db, email)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user

    def set_active(self, db: Session, user: User, is_active: bool) -> User:
        user.is_active = is_active
        db.commit()
        db.refresh(user)
        return user

    def update_password(self, db: Session, user: User, password_hash: str) -> User:
        user.password_hash = password_hash
        db.commit()
        db.refresh(user)
        return user

# Initialize repository instance
user_repository = UserRepository()
