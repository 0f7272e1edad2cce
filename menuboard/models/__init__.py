from .base import Base
from .menu import Section, Item, StandardName
