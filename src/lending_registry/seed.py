"""
Sample data for the Lending Registry.

Builds a registry populated with a small demonstration catalog: one item of
each kind and a single member. Used by the server when
``seed_sample_data`` is enabled and by the example script.
"""

import logging

from .models.item import LoanableItem
from .models.member import Member
from .registry import Registry

logger = logging.getLogger(__name__)

SAMPLE_ITEMS: list[LoanableItem] = [
    LoanableItem.light_novel("Secrets of the Silent Witch", "L001", author="Matsuri Isora"),
    LoanableItem.periodical("Bocchi the Rock", "M001", issue_date="2023-09"),
    LoanableItem.fiction("The Last Wish", "F001", duration_days=7),
]

SAMPLE_MEMBERS: list[Member] = [
    Member(id="MEM001", name="SomChai"),
]


def seed_registry(registry: Registry) -> Registry:
    """Add fresh copies of the sample items and members to ``registry``."""
    for item in SAMPLE_ITEMS:
        registry.add_item(item.model_copy(deep=True))
    for member in SAMPLE_MEMBERS:
        registry.add_member(member.model_copy(deep=True))

    logger.info(
        "Seeded registry with %d items and %d members",
        len(SAMPLE_ITEMS),
        len(SAMPLE_MEMBERS),
    )
    return registry


def build_sample_registry() -> Registry:
    return seed_registry(Registry())
