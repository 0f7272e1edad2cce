from .section import Section
from .item import Item
from .standard_name import StandardName

__all__ = ["Section", "Item", "StandardName"]
