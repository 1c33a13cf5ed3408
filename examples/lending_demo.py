#!/usr/bin/env python3
"""Walk through a borrow and return against the sample catalog.

Run with the package installed:

    python examples/lending_demo.py
"""

from lending_registry.registry import Registry
from lending_registry.seed import build_sample_registry


def demonstrate_lending(registry: Registry) -> None:
    print("=== Lending Registry Demo ===\n")

    print(registry.get_library_summary())
    print()

    steps = [
        ("borrow", "MEM001", "L001"),
        ("borrow", "MEM001", "L001"),
        ("return", "MEM001", "F001"),
        ("borrow", "MEM999", "L001"),
        ("return", "MEM001", "L001"),
    ]
    for action, member_id, item_id in steps:
        if action == "borrow":
            outcome = registry.borrow_item(member_id, item_id)
        else:
            outcome = registry.return_item(member_id, item_id)
        print(f"{action:<7}{member_id} {item_id}: [{outcome.kind.value}] {outcome}")
        print(f"   Loans: {registry.list_borrowed_items(member_id)}")

    print()
    print(registry.find_item_by_id("F001").get_details())


if __name__ == "__main__":
    demonstrate_lending(build_sample_registry())
