"""Market commands."""

from .add_market import MarketAddCommand
from .list_markets import MarketListCommand

__all__ = [
    "MarketAddCommand",
    "MarketListCommand",
]
