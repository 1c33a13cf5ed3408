"""
Circulation tools for the Lending Registry MCP Server.

Two MCP tools change loan state:
1. borrow_item: lend a catalog item to a member
2. return_item: take an item back from the member holding it

Tools are built around an explicit ``Registry`` by ``build_circulation_tools``.
Each handler validates its input with a Pydantic schema, runs the registry
operation, and turns the resulting ``Outcome`` into an MCP response:

- success: text content plus structured ``data``
- any other outcome kind: ``isError`` with the rendered message, so the LLM
  can adapt (pick another item, check the member id)
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ..models.item import ID_PATTERN
from ..models.outcome import Outcome
from ..registry import Registry

logger = logging.getLogger(__name__)


class LoanRequestInput(BaseModel):
    """
    Input schema shared by the borrow_item and return_item tools.

    Both tools address a loan by the member and the item involved.
    """

    member_id: str = Field(
        ...,
        description="Unique identifier of the member",
        pattern=ID_PATTERN,
        examples=["MEM001"],
    )

    item_id: str = Field(
        ...,
        description="Unique identifier of the catalog item",
        pattern=ID_PATTERN,
        examples=["L001", "M001", "F001"],
    )


def _error_response(text: str, outcome: Outcome | None = None) -> dict[str, Any]:
    response: dict[str, Any] = {
        "isError": True,
        "content": [{"type": "text", "text": text}],
    }
    if outcome is not None:
        response["data"] = {"outcome": outcome.model_dump(mode="json")}
    return response


def _outcome_response(registry: Registry, outcome: Outcome) -> dict[str, Any]:
    if not outcome.ok:
        return _error_response(outcome.message, outcome)

    data: dict[str, Any] = {"outcome": outcome.model_dump(mode="json")}
    item = registry.find_item_by_id(outcome.item_id) if outcome.item_id else None
    if item is not None:
        data["item"] = item.model_dump(mode="json")

    return {
        "content": [{"type": "text", "text": outcome.message}],
        "data": data,
    }


def build_circulation_tools(registry: Registry) -> list[dict[str, Any]]:
    """Create the circulation tool definitions bound to ``registry``."""

    async def borrow_item_handler(member_id: str, item_id: str) -> dict[str, Any]:
        """Lend ``item_id`` to ``member_id``."""
        try:
            params = LoanRequestInput(member_id=member_id, item_id=item_id)
        except ValidationError as e:
            logger.warning("Invalid borrow parameters: %s", e)
            return _error_response(f"Invalid borrow parameters: {e}")

        try:
            outcome = registry.borrow_item(params.member_id, params.item_id)
        except Exception as e:
            logger.exception("Unexpected error in borrow_item tool")
            return _error_response(f"An unexpected error occurred: {e!s}")

        return _outcome_response(registry, outcome)

    async def return_item_handler(member_id: str, item_id: str) -> dict[str, Any]:
        """Return ``item_id`` on behalf of ``member_id``."""
        try:
            params = LoanRequestInput(member_id=member_id, item_id=item_id)
        except ValidationError as e:
            logger.warning("Invalid return parameters: %s", e)
            return _error_response(f"Invalid return parameters: {e}")

        try:
            outcome = registry.return_item(params.member_id, params.item_id)
        except Exception as e:
            logger.exception("Unexpected error in return_item tool")
            return _error_response(f"An unexpected error occurred: {e!s}")

        return _outcome_response(registry, outcome)

    return [
        {
            "name": "borrow_item",
            "description": (
                "Borrow a catalog item for a member. Fails if the member or item "
                "does not exist or the item is already on loan."
            ),
            "inputSchema": LoanRequestInput.model_json_schema(),
            "handler": borrow_item_handler,
        },
        {
            "name": "return_item",
            "description": (
                "Return an item the member currently has on loan. Fails if the "
                "member does not exist or does not hold the item."
            ),
            "inputSchema": LoanRequestInput.model_json_schema(),
            "handler": return_item_handler,
        },
    ]
