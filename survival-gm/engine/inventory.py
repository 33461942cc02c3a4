"""
Inventory
---------
An inventory is a plain mapping of item name -> count.
Every stored count is positive; an item that runs out is removed, never kept at 0.
Scenes describe inventory as sparse deltas (only the items that changed).
"""

from typing import Dict, Mapping, Optional

Inventory = Dict[str, int]
InventoryChanges = Mapping[str, int]


def apply_inventory_changes(inventory: Mapping[str, int], changes: Optional[InventoryChanges] = None) -> Inventory:
    """
    Fold a delta mapping into an inventory and return the new inventory.
    Items without a delta are carried over. Items at or below zero are dropped.
    The input mapping is never modified.
    """
    updated = dict(inventory)
    if not changes:
        return updated
    for item, delta in changes.items():
        qty = updated.get(item, 0) + delta
        if qty <= 0:
            updated.pop(item, None)
        else:
            updated[item] = qty
    return updated


def format_inventory(inventory: Mapping[str, int]) -> str:
    return ", ".join(f"{item}: {count}" for item, count in inventory.items())
