"""
ItemCategory Entity - A node of the category tree templates are filed under.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ItemCategory:
    id: int
    name: str
    key: Optional[str] = None
    description: str = ""
    parent_id: Optional[int] = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None
