"""
Lending Registry Models.

Pydantic models for the core entities of the lending registry:

- LoanableItem: catalog entries, tagged by kind
- Member: roster entries holding the ids of borrowed items
- Outcome: result of every borrow or return request
"""

from .item import ID_PATTERN, ItemKind, LoanableItem, describe_item
from .member import NO_ITEMS_BORROWED, Member
from .outcome import LoanAction, MissingEntity, Outcome, OutcomeKind, render_outcome

__all__ = [
    "ID_PATTERN",
    "NO_ITEMS_BORROWED",
    "ItemKind",
    "LoanAction",
    "LoanableItem",
    "Member",
    "MissingEntity",
    "Outcome",
    "OutcomeKind",
    "describe_item",
    "render_outcome",
]
