"""
State Reconciler
----------------
Builds the next GameState from the previous one and a validated SceneResult.
Pure: inputs are never mutated, a fresh state is always returned.
"""

from typing import Optional

from engine.inventory import apply_inventory_changes
from engine.models import Base, BaseChanges, GameState, SceneResult


INITIAL_LOCATION = "Not established"
START_LOCATION = "Abandoned Warehouse"


def initial_state() -> GameState:
    return GameState(base=Base(location=INITIAL_LOCATION, fortification=0))


def merge_base(base: Base, changes: Optional[BaseChanges]) -> Base:
    """
    Shallow override. Fields present in the changes replace the old value;
    no additive semantics here, unlike inventory.
    """
    if changes is None:
        return base.model_copy()
    return base.model_copy(update=changes.model_dump(exclude_none=True))


def reconcile(previous: GameState, result: SceneResult) -> GameState:
    return GameState(
        story=result.story,
        choices=[choice.model_copy() for choice in result.choices],
        inventory=apply_inventory_changes(previous.inventory, result.inventory_changes),
        base=merge_base(previous.base, result.base_changes),
        is_game_over=result.is_game_over,
        game_over_text=result.game_over_text,
    )


def start_state(result: SceneResult) -> GameState:
    """
    State for a fresh run: the warehouse becomes the base, then the opening
    scene is folded in like any other turn.
    """
    seeded = initial_state()
    seeded.base = Base(location=START_LOCATION, fortification=0)
    return reconcile(seeded, result)
