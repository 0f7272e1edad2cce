from .menu_query import get_grouped_menu
from .search import filter_menu
from .importer import MenuImporter, import_menu

__all__ = [
    "get_grouped_menu",
    "filter_menu",
    "MenuImporter",
    "import_menu",
]
