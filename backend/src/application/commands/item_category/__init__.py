"""ItemCategory commands."""

from .list_categories import ItemCategoryListCommand

__all__ = [
    "ItemCategoryListCommand",
]
