"""
Outcome model for the Lending Registry.

Every borrow or return request produces an Outcome instead of raising. The
outcome kinds form a closed set, so callers branch on ``kind`` rather than on
message text:

- success: the availability transition was applied
- not_found: the member or item id is not registered
- already_borrowed: borrow attempted on an unavailable item
- not_borrowed: return attempted on an available item, or by a member who
  does not hold the item

The human-readable message is produced by ``render_outcome`` and is kept apart
from the data so MCP clients receive both.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OutcomeKind(str, Enum):
    """Closed set of results for loan requests."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ALREADY_BORROWED = "already_borrowed"
    NOT_BORROWED = "not_borrowed"


class LoanAction(str, Enum):
    """The request that produced an outcome."""

    BORROW = "borrow"
    RETURN = "return"


class MissingEntity(str, Enum):
    """Which side of a request failed to resolve."""

    MEMBER = "member"
    ITEM = "item"


class Outcome(BaseModel):
    """
    Result of a borrow or return request.

    Outcomes are immutable values. Each layer (item, member, registry) passes
    the deepest outcome upward unchanged and only creates its own when an id
    cannot be resolved.
    """

    kind: OutcomeKind = Field(..., description="Result kind")
    action: LoanAction = Field(..., description="Request that produced this outcome")

    item_id: str | None = Field(None, description="Identifier of the item involved")
    item_title: str | None = Field(None, description="Title of the item involved")
    member_id: str | None = Field(None, description="Identifier of the member involved")
    member_name: str | None = Field(None, description="Name of the member involved")
    missing: MissingEntity | None = Field(
        None,
        description="Unresolved entity, set only for not_found outcomes",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def ok(self) -> bool:
        """True when the transition was applied."""
        return self.kind == OutcomeKind.SUCCESS

    @property
    def message(self) -> str:
        return render_outcome(self)

    def __str__(self) -> str:
        return render_outcome(self)

    # === Factories ===

    @classmethod
    def success(
        cls,
        action: LoanAction,
        item_id: str,
        item_title: str,
        member_name: str | None = None,
    ) -> "Outcome":
        return cls(
            kind=OutcomeKind.SUCCESS,
            action=action,
            item_id=item_id,
            item_title=item_title,
            member_name=member_name,
        )

    @classmethod
    def already_borrowed(cls, item_id: str, item_title: str) -> "Outcome":
        return cls(
            kind=OutcomeKind.ALREADY_BORROWED,
            action=LoanAction.BORROW,
            item_id=item_id,
            item_title=item_title,
        )

    @classmethod
    def not_borrowed(
        cls,
        item_id: str,
        item_title: str | None = None,
        member_id: str | None = None,
        member_name: str | None = None,
    ) -> "Outcome":
        return cls(
            kind=OutcomeKind.NOT_BORROWED,
            action=LoanAction.RETURN,
            item_id=item_id,
            item_title=item_title,
            member_id=member_id,
            member_name=member_name,
        )

    @classmethod
    def member_not_found(cls, action: LoanAction, member_id: str) -> "Outcome":
        return cls(
            kind=OutcomeKind.NOT_FOUND,
            action=action,
            member_id=member_id,
            missing=MissingEntity.MEMBER,
        )

    @classmethod
    def item_not_found(cls, action: LoanAction, item_id: str) -> "Outcome":
        return cls(
            kind=OutcomeKind.NOT_FOUND,
            action=action,
            item_id=item_id,
            missing=MissingEntity.ITEM,
        )


def render_outcome(outcome: Outcome) -> str:
    """Render an outcome as a human-readable message."""
    if outcome.kind == OutcomeKind.SUCCESS:
        if outcome.action == LoanAction.BORROW:
            return f'Item "{outcome.item_title}" borrowed by {outcome.member_name}'
        return f'Item "{outcome.item_title}" returned'

    if outcome.kind == OutcomeKind.ALREADY_BORROWED:
        return f'Item "{outcome.item_title}" is already borrowed.'

    if outcome.kind == OutcomeKind.NOT_BORROWED:
        # A member-level refusal names the member; an item-level one names the title
        if outcome.member_name is not None:
            return (
                f"Item with ID {outcome.item_id} is not in "
                f"{outcome.member_name}'s borrowed list."
            )
        return f'Item "{outcome.item_title}" was not borrowed.'

    if outcome.missing == MissingEntity.MEMBER:
        return f"Member {outcome.member_id} not found"
    return f"Item {outcome.item_id} not found"
