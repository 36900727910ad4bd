"""
Profile Entity - The owning account context for markets and templates.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Profile:
    id: int
    name: str
    address: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
