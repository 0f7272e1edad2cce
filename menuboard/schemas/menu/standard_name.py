from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional

from .item import require_name


class StandardNameBase(BaseModel):
    name: str

    @field_validator("name", mode="before")
    @classmethod
    def clean_name(cls, v):
        return require_name(v)


class StandardNameCreate(StandardNameBase):
    pass


class StandardNameUpdate(StandardNameBase):
    pass


class StandardNameRead(StandardNameBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class StandardNameRenameResult(StandardNameRead):
    old_name: str
    # None when the item sync step failed (logged server side)
    items_updated: Optional[int] = None
