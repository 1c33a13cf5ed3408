"""
MCP Tools for the Lending Registry Server.

Tools are the actions with side effects: they change which member holds which
item. Read-only views live in the resources package.
"""

from .circulation import LoanRequestInput, build_circulation_tools

__all__ = [
    "LoanRequestInput",
    "build_circulation_tools",
]
