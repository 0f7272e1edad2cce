from sqlalchemy import Column, Integer, String
from menuboard.models.base import Base


class StandardName(Base):
    __tablename__ = "standard_names"

    # Linked to Item.name by value only, never by foreign key
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, unique=True)
