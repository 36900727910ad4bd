"""
ProposalType - Kind of governance proposal.
"""

from enum import Enum


class ProposalType(str, Enum):
    PUBLIC_VOTE = "PUBLIC_VOTE"
    ITEM_VOTE = "ITEM_VOTE"
