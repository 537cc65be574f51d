from dataclasses import dataclass, field
from typing import Generic, Type, TypeVar, List, Optional
from sqlalchemy.orm import Session, Query
import math

T = TypeVar("T")

@dataclass
class PaginationResult(Generic[T]):
    total_items: int
    total_pages: int
    current_page: int
    page_size: int
    items: List[T] = field(default_factory=list)

def paginate(query: Query, page: int, page_size: int) -> PaginationResult:
    """Skip/take over an already ordered query."""
    if query is None:
        raise ValueError("query is required")
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    if page <= 0:
        page = 1

    total_items = query.count()
    total_pages = math.ceil(total_items / page_size)
    items = query.offset((page - 1) * page_size).limit(page_size).all()

    return PaginationResult(
        total_items=total_items,
        total_pages=total_pages,
        current_page=page,
        page_size=page_size,
        items=items,
    )

class BaseRepository(Generic[T]):
    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, db: Session, id: int) -> Optional[T]:
        return db.get(self.model, id)

    def get_all(self, db: Session) -> List[T]:
        return db.query(self.model).order_by(self.model.id).all()

    def get_page(self, db: Session, page: int = 1, page_size: int = 10) -> PaginationResult:
        return paginate(db.query(self.model).order_by(self.model.id), page, page_size)

    def create(self, db: Session, obj_in: dict) -> T:
        db_obj = self.model(**obj_in)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(self, db: Session, db_obj: T, obj_in: dict) -> T:
        for field_name, value in obj_in.items():
            setattr(db_obj, field_name, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj
