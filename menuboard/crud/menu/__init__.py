from . import section, item, standard_name

__all__ = ["section", "item", "standard_name"]
