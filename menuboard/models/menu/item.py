import json
import logging

from sqlalchemy import Column, Integer, String, Float, Boolean, ForeignKey, Text, Index
from sqlalchemy.orm import relationship
from menuboard.models.base import Base

log = logging.getLogger(__name__)


class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False, default=0.0)
    available = Column(Boolean, nullable=False, default=True)
    image_url = Column(String, nullable=True)
    options = Column(Text, nullable=True)  # JSON list of option groups

    section = relationship("Section", back_populates="items")

    __table_args__ = (
        Index("idx_items_section", "section_id"),
        Index("idx_items_name", "name"),
    )

    @property
    def parsed_options(self) -> list:
        return decode_options(self.options, item_id=self.id)


def encode_options(groups) -> str:
    return json.dumps(groups or [])


def decode_options(raw, item_id=None) -> list:
    """Malformed options never break a read: they come back as []."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        log.warning("Failed to parse options for item %s", item_id)
        return []
    if not isinstance(value, list):
        log.warning("Options for item %s are not a list", item_id)
        return []
    return value
