"""
Market Entity - A marketplace identified by its receive key/address pair.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Market:
    id: int
    profile_id: int
    name: str
    receive_key: str
    receive_address: str
    is_default: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
