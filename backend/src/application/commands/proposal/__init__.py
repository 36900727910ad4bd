"""Proposal commands."""

from .get_proposal import ProposalGetCommand
from .list_proposals import ProposalListCommand

__all__ = [
    "ProposalGetCommand",
    "ProposalListCommand",
]
