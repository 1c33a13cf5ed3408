"""
Lending Registry MCP Server Package.

A small lending registry (a catalog of loanable items and a roster of
members) exposed over the Model Context Protocol.

Key Components:
- models: Pydantic models for items, members and loan outcomes
- registry: the service that owns the catalog and roster
- config: Configuration management with pydantic-settings
- resources: MCP resources (read-only endpoints)
- tools: MCP tools (operations with side effects)
"""

__version__ = "0.1.0"

from .models import ItemKind, LoanableItem, Member, Outcome, OutcomeKind
from .registry import Registry

__all__ = [
    "ItemKind",
    "LoanableItem",
    "Member",
    "Outcome",
    "OutcomeKind",
    "Registry",
    "__version__",
]
