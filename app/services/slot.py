from app.services.base import BaseService
from app.repositories.slot import slot_repository

class SlotService(BaseService):
    def __init__(self):
        super().__init__(slot_repository)

slot_service = SlotService()
