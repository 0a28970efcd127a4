from sqlalchemy import Column, String

from models.base_model import BaseModel, Base


class Role(BaseModel, Base):
    __tablename__ = "roles"

    name = Column(String(255), nullable=False, unique=True, index=True)
