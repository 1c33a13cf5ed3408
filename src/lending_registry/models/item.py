"""
Loanable item model for the Lending Registry.

Every catalog entry is a single ``LoanableItem`` record tagged with its kind.
The kinds differ only in descriptive metadata:

- light_novel: carries an ``author``
- periodical: carries an ``issue_date`` (e.g. "2023-09")
- fiction: carries a loan ``duration_days``

Borrow and return behaviour is implemented once on the record. The only
per-kind behaviour is ``describe_item``, a pure formatting function.

Items are exposed as MCP resources:
- library://items/list
- library://items/{item_id}
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .outcome import LoanAction, Outcome


class ItemKind(str, Enum):
    """Kinds of loanable items held in the catalog."""

    LIGHT_NOVEL = "light_novel"
    PERIODICAL = "periodical"
    FICTION = "fiction"


# Metadata field each kind must carry
# Identifier format shared by items, members and tool inputs
ID_PATTERN = r"^[A-Za-z0-9_-]{1,64}$"

REQUIRED_METADATA: dict[ItemKind, str] = {
    ItemKind.LIGHT_NOVEL: "author",
    ItemKind.PERIODICAL: "issue_date",
    ItemKind.FICTION: "duration_days",
}


class LoanableItem(BaseModel):
    """
    Represents a loanable item in the catalog.

    The ``available`` flag is the whole state machine: ``borrow`` is the only
    place it becomes false and ``return_item`` the only place it becomes true.
    Neither method raises; repeating a call on the same state yields a failure
    outcome and leaves the item unchanged.
    """

    id: str = Field(
        ...,
        description="Unique identifier for the item within the catalog",
        pattern=ID_PATTERN,
        examples=["L001", "M001", "F001"],
    )

    title: str = Field(
        ...,
        description="Display title of the item",
        min_length=1,
        max_length=500,
        examples=["Secrets of the Silent Witch", "Bocchi the Rock"],
    )

    kind: ItemKind = Field(..., description="Kind tag selecting the metadata and details format")

    available: bool = Field(
        default=True,
        description="Whether the item can currently be borrowed",
    )

    # Kind-specific metadata
    author: str | None = Field(
        None,
        description="Author of a light novel",
        max_length=200,
        examples=["Matsuri Isora"],
    )

    issue_date: str | None = Field(
        None,
        description="Issue of a periodical",
        max_length=50,
        examples=["2023-09"],
    )

    duration_days: int | None = Field(
        None,
        description="Loan duration of a fiction title, in days",
        ge=1,
        le=365,
        examples=[7, 14],
    )

    @model_validator(mode="after")
    def validate_kind_metadata(self) -> "LoanableItem":
        """Ensure the metadata required by the item's kind is present."""
        required = REQUIRED_METADATA[ItemKind(self.kind)]
        if getattr(self, required) is None:
            raise ValueError(f"{ItemKind(self.kind).value} items require '{required}'")
        return self

    # === Constructors ===

    @classmethod
    def light_novel(cls, title: str, item_id: str, author: str) -> "LoanableItem":
        return cls(id=item_id, title=title, kind=ItemKind.LIGHT_NOVEL, author=author)

    @classmethod
    def periodical(cls, title: str, item_id: str, issue_date: str) -> "LoanableItem":
        return cls(id=item_id, title=title, kind=ItemKind.PERIODICAL, issue_date=issue_date)

    @classmethod
    def fiction(cls, title: str, item_id: str, duration_days: int) -> "LoanableItem":
        return cls(id=item_id, title=title, kind=ItemKind.FICTION, duration_days=duration_days)

    # === Loan capability ===

    def is_available(self) -> bool:
        return self.available

    def borrow(self, borrower_name: str) -> Outcome:
        """
        Mark the item as borrowed by ``borrower_name``.

        Returns an already_borrowed outcome, with no state change, when the
        item is out on loan.
        """
        if not self.available:
            return Outcome.already_borrowed(self.id, self.title)

        self.available = False
        return Outcome.success(LoanAction.BORROW, self.id, self.title, member_name=borrower_name)

    def return_item(self) -> Outcome:
        """
        Mark the item as returned.

        Returns a not_borrowed outcome, with no state change, when the item
        is not out on loan.
        """
        if self.available:
            return Outcome.not_borrowed(self.id, item_title=self.title)

        self.available = True
        return Outcome.success(LoanAction.RETURN, self.id, self.title)

    def get_details(self) -> str:
        return describe_item(self)

    model_config = ConfigDict(
        # Availability changes are re-validated on assignment
        validate_assignment=True,
        use_enum_values=True,
        populate_by_name=True,
        validate_default=True,
        json_schema_extra={
            "example": {
                "id": "L001",
                "title": "Secrets of the Silent Witch",
                "kind": "light_novel",
                "available": True,
                "author": "Matsuri Isora",
            }
        },
        extra="forbid",
        str_strip_whitespace=True,
    )


def describe_item(item: LoanableItem) -> str:
    """Format a one-line description of an item according to its kind."""
    kind = ItemKind(item.kind)
    if kind == ItemKind.LIGHT_NOVEL:
        return f"LightNovel: {item.title} by {item.author} (ID: {item.id})"
    if kind == ItemKind.PERIODICAL:
        return f"Periodical: {item.title} Issue: {item.issue_date} (ID: {item.id})"
    return f"Fiction: {item.title} Duration: {item.duration_days} days (ID: {item.id})"
