"""
Member model for the Lending Registry.

A member borrows items from the catalog. Members hold the ids of the items
they currently have on loan, never the item records themselves: the registry
owns the catalog and passes it in whenever a member needs to resolve an id.

Member resources can be accessed via:
- library://members/{member_id}/items
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from .item import ID_PATTERN, LoanableItem
from .outcome import LoanAction, Outcome

NO_ITEMS_BORROWED = "No items borrowed."


class Member(BaseModel):
    """
    Represents a member who can borrow items.

    ``borrowed_item_ids`` keeps borrow order. An id is appended only when the
    item accepted the loan and removed when the member returns it, so the list
    always mirrors the availability flags of the items it names.
    """

    id: str = Field(
        ...,
        description="Unique identifier for the member within the roster",
        pattern=ID_PATTERN,
        examples=["MEM001", "MEM002"],
    )

    name: str = Field(
        ...,
        description="Display name of the member",
        min_length=1,
        max_length=200,
        examples=["SomChai", "Jane Doe"],
    )

    borrowed_item_ids: list[str] = Field(
        default_factory=list,
        description="Ids of items currently on loan to this member, in borrow order",
    )

    @property
    def borrowed_count(self) -> int:
        return len(self.borrowed_item_ids)

    def has_borrowed(self, item_id: str) -> bool:
        return item_id in self.borrowed_item_ids

    def borrow_item(self, item: LoanableItem) -> Outcome:
        """
        Borrow ``item`` for this member.

        The availability check here is advisory; the item re-checks its own
        state. The item's outcome is returned unchanged.
        """
        if not item.is_available():
            return Outcome.already_borrowed(item.id, item.title)

        outcome = item.borrow(self.name)
        if outcome.ok:
            self.borrowed_item_ids.append(item.id)
        return outcome

    def return_item(self, item_id: str, catalog: Mapping[str, LoanableItem]) -> Outcome:
        """
        Return the item with ``item_id`` from this member's loans.

        Fails without touching the item when this member does not hold it,
        even if another member does.
        """
        if item_id not in self.borrowed_item_ids:
            return Outcome.not_borrowed(item_id, member_id=self.id, member_name=self.name)

        item = catalog.get(item_id)
        self.borrowed_item_ids.remove(item_id)
        if item is None:
            return Outcome.item_not_found(LoanAction.RETURN, item_id)
        return item.return_item()

    def list_borrowed_items(self, catalog: Mapping[str, LoanableItem]) -> str:
        """List the details of every held item, one per line."""
        if not self.borrowed_item_ids:
            return NO_ITEMS_BORROWED
        return "\n".join(
            catalog[item_id].get_details()
            for item_id in self.borrowed_item_ids
            if item_id in catalog
        )

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
        validate_default=True,
        json_schema_extra={
            "example": {
                "id": "MEM001",
                "name": "SomChai",
                "borrowed_item_ids": ["L001"],
            }
        },
        extra="forbid",
        str_strip_whitespace=True,
    )
