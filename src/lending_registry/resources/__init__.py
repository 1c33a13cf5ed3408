"""Lending Registry MCP Resources Package

Resources are the read-only side of the server: they show the catalog, a
member's loans and the library summary. State changes go through the tools
package.
"""

from .catalog import ItemListResponse, MemberLoansResponse, build_catalog_resources

__all__ = [
    "ItemListResponse",
    "MemberLoansResponse",
    "build_catalog_resources",
]
