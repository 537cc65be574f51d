from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from app.models.base import BaseModel

class Campus(BaseModel):
    __tablename__ = "campuses"

    name = Column(String(100), nullable=False)
    address = Column(Text)

    rooms = relationship("Room", back_populates="campus")
