from pydantic import BaseModel, Field, field_validator
from typing import Optional, List

from .item import OptionGroup, parse_options, require_name


class ImportItem(BaseModel):
    """One item of an import document; absent fields fall back to defaults."""
    name: str
    description: Optional[str] = ""
    price: float = Field(0, ge=0)
    image_url: Optional[str] = ""
    options: List[OptionGroup] = []

    @field_validator("name", mode="before")
    @classmethod
    def clean_name(cls, v):
        return require_name(v)

    @field_validator("description", "image_url", mode="before")
    @classmethod
    def none_is_blank(cls, v):
        return "" if v is None else v

    @field_validator("price", mode="before")
    @classmethod
    def missing_price_is_zero(cls, v):
        return 0 if v in (None, "") else v

    @field_validator("options", mode="before")
    @classmethod
    def decode_options(cls, v):
        return parse_options(v)


class ImportResult(BaseModel):
    sections: int = 0
    items: int = 0
    errors: List[str] = []


class ImportResponse(BaseModel):
    message: str
    results: ImportResult
