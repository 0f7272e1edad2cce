from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, List

from .item import ItemRead, require_name


class SectionCreate(BaseModel):
    name: str
    display_order: Optional[int] = None

    @field_validator("name", mode="before")
    @classmethod
    def clean_name(cls, v):
        return require_name(v)


class SectionUpdate(BaseModel):
    name: Optional[str] = None
    display_order: Optional[int] = None

    @field_validator("name", mode="before")
    @classmethod
    def clean_name(cls, v):
        return None if v is None else require_name(v)


class SectionRead(BaseModel):
    id: int
    name: str
    display_order: int

    model_config = ConfigDict(from_attributes=True)


# ---------- Grouped menu (public read path) ----------
class MenuSection(SectionRead):
    items: List[ItemRead] = []
