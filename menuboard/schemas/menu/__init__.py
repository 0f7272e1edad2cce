from .item import (
    Choice,
    OptionGroup,
    ItemCreate,
    ItemUpdate,
    ItemRead,
    parse_options,
)
from .section import (
    SectionCreate,
    SectionUpdate,
    SectionRead,
    MenuSection,
)
from .standard_name import (
    StandardNameCreate,
    StandardNameUpdate,
    StandardNameRead,
    StandardNameRenameResult,
)
from .importer import ImportItem, ImportResult, ImportResponse

__all__ = [
    "Choice",
    "OptionGroup",
    "ItemCreate",
    "ItemUpdate",
    "ItemRead",
    "parse_options",
    "SectionCreate",
    "SectionUpdate",
    "SectionRead",
    "MenuSection",
    "StandardNameCreate",
    "StandardNameUpdate",
    "StandardNameRead",
    "StandardNameRenameResult",
    "ImportItem",
    "ImportResult",
    "ImportResponse",
]
