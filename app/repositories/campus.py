from app.repositories.base import BaseRepository
from app.models.campus import Campus

class CampusRepository(BaseRepository[Campus]):
    def __init__(self):
        super().__init__(Campus)

campus_repository = CampusRepository()
