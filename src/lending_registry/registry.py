"""
Registry service for the Lending Registry.

The registry owns the catalog and the roster and is the single entry point for
borrow and return requests. It resolves ids, then delegates to the member,
which delegates to the item:

    Registry.borrow_item -> Member.borrow_item -> LoanableItem.borrow
    Registry.return_item -> Member.return_item -> LoanableItem.return_item

The registry only creates outcomes of its own when an id cannot be resolved;
every other outcome comes from the layer that decided it.

There is no shared registry instance. The server, the sample data builder and
the tests each construct and pass their own.
"""

import logging

from .models.item import LoanableItem
from .models.member import Member
from .models.outcome import LoanAction, Outcome

logger = logging.getLogger(__name__)


class Registry:
    """In-memory catalog of items and roster of members, keyed by id."""

    def __init__(self) -> None:
        self.items: dict[str, LoanableItem] = {}
        self.members: dict[str, Member] = {}

    # === Population ===

    def add_item(self, item: LoanableItem) -> None:
        """Add an item to the catalog, replacing any item with the same id.

        A replacement inherits the availability of the item it replaces, so a
        member holding the id can still return it.
        """
        old = self.items.get(item.id)
        if old is not None:
            logger.warning("Replacing catalog item %s", item.id)
            item.available = old.is_available()
        self.items[item.id] = item

    def add_member(self, member: Member) -> None:
        """Add a member to the roster, replacing any member with the same id."""
        if member.id in self.members:
            logger.warning("Replacing roster member %s", member.id)
        self.members[member.id] = member

    # === Lookup ===

    def find_member_by_id(self, member_id: str) -> Member | None:
        return self.members.get(member_id)

    def find_item_by_id(self, item_id: str) -> LoanableItem | None:
        return self.items.get(item_id)

    def holder_of(self, item_id: str) -> Member | None:
        """Return the member currently holding ``item_id``, if any."""
        for member in self.members.values():
            if member.has_borrowed(item_id):
                return member
        return None

    # === Circulation ===

    def borrow_item(self, member_id: str, item_id: str) -> Outcome:
        """Lend the item ``item_id`` to the member ``member_id``."""
        member = self.find_member_by_id(member_id)
        if member is None:
            logger.debug("Borrow refused: member %s not found", member_id)
            return Outcome.member_not_found(LoanAction.BORROW, member_id)

        item = self.find_item_by_id(item_id)
        if item is None:
            logger.debug("Borrow refused: item %s not found", item_id)
            return Outcome.item_not_found(LoanAction.BORROW, item_id)

        outcome = member.borrow_item(item)
        self._log_outcome(outcome, member_id)
        return outcome

    def return_item(self, member_id: str, item_id: str) -> Outcome:
        """
        Return the item ``item_id`` on behalf of the member ``member_id``.

        The item is resolved from the member's own loans, not the catalog, so
        a return for a catalogued item this member never borrowed fails.
        """
        member = self.find_member_by_id(member_id)
        if member is None:
            logger.debug("Return refused: member %s not found", member_id)
            return Outcome.member_not_found(LoanAction.RETURN, member_id)

        outcome = member.return_item(item_id, self.items)
        self._log_outcome(outcome, member_id)
        return outcome

    # === Reports ===

    def list_borrowed_items(self, member_id: str) -> str | None:
        """Listing of a member's loans, or None for an unknown member."""
        member = self.find_member_by_id(member_id)
        if member is None:
            return None
        return member.list_borrowed_items(self.items)

    def get_library_summary(self) -> str:
        item_summary = "\n".join(item.get_details() for item in self.items.values())
        member_summary = ", ".join(member.name for member in self.members.values())
        return f"Library Items:\n{item_summary}\n\nMembers:\n{member_summary}"

    def _log_outcome(self, outcome: Outcome, member_id: str) -> None:
        if outcome.ok:
            logger.info(
                "%s %s: item %s, member %s",
                outcome.action.value.capitalize(),
                outcome.kind.value,
                outcome.item_id,
                member_id,
            )
        else:
            logger.debug("%s refused: %s", outcome.action.value.capitalize(), outcome)
