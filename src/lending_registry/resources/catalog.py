"""Catalog Resources - Registry Read Access

Exposes the registry's catalog and roster via read-only resources.
Clients use these to browse items, check availability and see who holds what.

Resources:
- library://items/list - Every catalog item with availability counts
- library://items/{item_id} - Individual item details
- library://members/{member_id}/items - Items on loan to a member
- library://summary - Plain-text summary of the catalog and roster
"""

import logging
from typing import Any

from fastmcp.exceptions import ResourceError
from pydantic import BaseModel, Field

from ..models.item import LoanableItem
from ..registry import Registry

logger = logging.getLogger(__name__)


class ItemListResponse(BaseModel):
    """Response schema for the catalog listing."""

    items: list[LoanableItem] = Field(..., description="Every item in the catalog")
    total: int = Field(..., description="Number of items in the catalog")
    available: int = Field(..., description="Number of items that can be borrowed now")


class MemberLoansResponse(BaseModel):
    """Response schema for a member's current loans."""

    member_id: str = Field(..., description="Member identifier")
    name: str = Field(..., description="Member name")
    items: list[LoanableItem] = Field(..., description="Items on loan, in borrow order")
    listing: str = Field(..., description="Human-readable listing of the loans")


def build_catalog_resources(registry: Registry) -> list[dict[str, Any]]:
    """Create the catalog resource definitions bound to ``registry``."""

    async def list_items_handler() -> dict[str, Any]:
        """Returns the whole catalog."""
        logger.debug("MCP Resource Request - items/list")
        items = list(registry.items.values())
        response = ItemListResponse(
            items=items,
            total=len(items),
            available=sum(1 for item in items if item.is_available()),
        )
        return response.model_dump(mode="json")

    async def get_item_handler(item_id: str) -> dict[str, Any]:
        """Returns details for a specific item."""
        logger.debug("MCP Resource Request - items/%s", item_id)
        item = registry.find_item_by_id(item_id)
        if item is None:
            raise ResourceError(f"Item not found: {item_id}")

        data = item.model_dump(mode="json")
        data["details"] = item.get_details()
        holder = registry.holder_of(item_id)
        data["held_by"] = holder.id if holder else None
        return data

    async def get_member_items_handler(member_id: str) -> dict[str, Any]:
        """Returns the items a member currently has on loan."""
        logger.debug("MCP Resource Request - members/%s/items", member_id)
        member = registry.find_member_by_id(member_id)
        if member is None:
            raise ResourceError(f"Member not found: {member_id}")

        response = MemberLoansResponse(
            member_id=member.id,
            name=member.name,
            items=[
                registry.items[item_id]
                for item_id in member.borrowed_item_ids
                if item_id in registry.items
            ],
            listing=member.list_borrowed_items(registry.items),
        )
        return response.model_dump(mode="json")

    async def summary_handler() -> str:
        """Returns the plain-text library summary."""
        logger.debug("MCP Resource Request - summary")
        return registry.get_library_summary()

    return [
        {
            "uri": "library://items/list",
            "name": "Item Catalog",
            "description": "Browse every item in the catalog with its availability.",
            "mime_type": "application/json",
            "handler": list_items_handler,
        },
        {
            "uri": "library://items/{item_id}",
            "name": "Item Details",
            "description": "Get details and current holder of a specific item by id",
            "mime_type": "application/json",
            "handler": get_item_handler,
        },
        {
            "uri": "library://members/{member_id}/items",
            "name": "Member Loans",
            "description": "List the items a member currently has on loan",
            "mime_type": "application/json",
            "handler": get_member_items_handler,
        },
        {
            "uri": "library://summary",
            "name": "Library Summary",
            "description": "Plain-text summary of all items and members",
            "mime_type": "text/plain",
            "handler": summary_handler,
        },
    ]
