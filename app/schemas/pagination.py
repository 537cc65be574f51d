from typing import Generic, List, Type, TypeVar
from pydantic import BaseModel
from app.repositories.base import PaginationResult

T = TypeVar("T", bound=BaseModel)

class Page(BaseModel, Generic[T]):
    total_items: int
    total_pages: int
    current_page: int
    page_size: int
    items: List[T]

    @classmethod
    def from_result(cls, result: PaginationResult, schema: Type[BaseModel]) -> "Page":
        return cls(
            total_items=result.total_items,
            total_pages=result.total_pages,
            current_page=result.current_page,
            page_size=result.page_size,
            items=[schema.model_validate(item) for item in result.items],
        )
