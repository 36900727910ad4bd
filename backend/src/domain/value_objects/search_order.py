"""
SearchOrder - Sort direction accepted by repository searches.
"""

from enum import Enum


class SearchOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @property
    def prisma_value(self) -> str:
        return self.value.lower()
