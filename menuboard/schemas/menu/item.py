import json
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Any


# ---------- Options (size / add-on variants) ----------
# Unknown keys (sku, required, ...) are kept and stored as sent
class Choice(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = ""
    price: float = Field(0, ge=0)

    @field_validator("price", mode="before")
    @classmethod
    def blank_price_is_zero(cls, v):
        return 0 if v in (None, "") else v


class OptionGroup(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = ""
    choices: List[Choice] = []


def parse_options(value: Any):
    """Options arrive as a list, or as JSON text from multipart forms."""
    if value is None or value == "":
        return []
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except ValueError:
            raise ValueError("options must be valid JSON")
    if not isinstance(value, list):
        raise ValueError("options must be a list of option groups")
    return value


def require_name(v):
    v = (v or "").strip() if isinstance(v, str) or v is None else v
    if v == "":
        raise ValueError("Name is required")
    return v


# ---------- Item ----------
class ItemBase(BaseModel):
    name: str
    description: Optional[str] = ""
    price: float = Field(0, ge=0)
    available: bool = True
    image_url: Optional[str] = ""
    options: List[OptionGroup] = []

    @field_validator("name", mode="before")
    @classmethod
    def clean_name(cls, v):
        return require_name(v)

    @field_validator("options", mode="before")
    @classmethod
    def decode_options(cls, v):
        return parse_options(v)

    @field_validator("price", mode="before")
    @classmethod
    def blank_price_is_zero(cls, v):
        return 0 if v in (None, "") else v


class ItemCreate(ItemBase):
    section_id: int


class ItemUpdate(BaseModel):
    section_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    available: Optional[bool] = None
    image_url: Optional[str] = None
    options: Optional[List[OptionGroup]] = None

    @field_validator("name", mode="before")
    @classmethod
    def clean_name(cls, v):
        return None if v is None else require_name(v)

    @field_validator("options", mode="before")
    @classmethod
    def decode_options(cls, v):
        return None if v is None else parse_options(v)

    # empty form fields mean "leave as is"
    @field_validator("price", "section_id", mode="before")
    @classmethod
    def blank_is_unset(cls, v):
        return None if v == "" else v


class ItemRead(BaseModel):
    id: int
    section_id: int
    name: str
    description: Optional[str] = None
    price: float
    available: bool
    image_url: Optional[str] = None
    # decoded as stored; malformed text reads back as []
    options: List[Any] = []

    @classmethod
    def from_model(cls, item) -> "ItemRead":
        return cls(
            id=item.id,
            section_id=item.section_id,
            name=item.name,
            description=item.description,
            price=item.price if item.price is not None else 0,
            available=bool(item.available) if item.available is not None else True,
            image_url=item.image_url,
            options=item.parsed_options,
        )
