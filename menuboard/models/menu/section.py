from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from menuboard.models.base import Base


class Section(Base):
    __tablename__ = "sections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    display_order = Column(Integer, nullable=False, default=0)

    # Items are deleted explicitly before the section row (see crud.menu.section)
    items = relationship("Item", back_populates="section", order_by="Item.id", passive_deletes=True)
