from fastapi import Depends, HTTPException, status, Query
from app.core.security import get_current_user
from app.models.user import User, MANAGEMENT_ROLES

def get_current_active_user(
    current_user: User = Depends(get_current_user)
) -> User:
    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User is deactivated"
        )
    return current_user

def get_current_manager_user(
    current_user: User = Depends(get_current_active_user)
) -> User:
    if current_user.role not in MANAGEMENT_ROLES:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Permission denied"
        )
    return current_user

# Common query parameters
class PaginationParams:
    def __init__(
        self,
        page: int = Query(1, ge=1, description="Page number, starting at 1"),
        page_size: int = Query(10, ge=1, le=100, description="Number of records per page"),
    ):
        self.page = page
        self.page_size = page_size
