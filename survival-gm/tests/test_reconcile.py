import sys
from pathlib import Path
import unittest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine.models import Base, BaseChanges, Choice, GameState, SceneResult  # noqa: E402
from engine.reconcile import (  # noqa: E402
    INITIAL_LOCATION,
    START_LOCATION,
    initial_state,
    merge_base,
    reconcile,
    start_state,
)


def make_state(inventory=None, location="Warehouse", fortification=0):
    return GameState(
        story="Old story.",
        choices=[Choice(text="Wait", prompt="I wait.")],
        inventory=dict(inventory or {}),
        base=Base(location=location, fortification=fortification),
    )


def make_scene(**overrides):
    fields = {
        "story": "New story.",
        "choices": [
            Choice(text="Search the office", prompt="I search the office."),
            Choice(text="Barricade the door", prompt="I barricade the door."),
        ],
        "is_game_over": False,
        "game_over_text": "",
    }
    fields.update(overrides)
    return SceneResult(**fields)


class TestReconcile(unittest.TestCase):
    def test_warehouse_scenario(self):
        previous = make_state({"scrap": 2}, location="Warehouse", fortification=0)
        scene = make_scene(
            inventory_changes={"scrap": -2, "wood": 3},
            base_changes=BaseChanges(fortification=1),
        )
        result = reconcile(previous, scene)
        self.assertEqual(result.inventory, {"wood": 3})
        self.assertEqual(result.base, Base(location="Warehouse", fortification=1))

    def test_empty_inventory_never_goes_negative(self):
        result = reconcile(make_state({}), make_scene(inventory_changes={"food": -1}))
        self.assertNotIn("food", result.inventory)

    def test_base_merge_is_override(self):
        previous = make_state(location="Gas Station", fortification=3)
        result = reconcile(previous, make_scene(base_changes=BaseChanges(fortification=5)))
        self.assertEqual(result.base.location, "Gas Station")
        self.assertEqual(result.base.fortification, 5)

    def test_base_location_override(self):
        previous = make_state(location="Warehouse", fortification=2)
        result = reconcile(previous, make_scene(base_changes=BaseChanges(location="Rooftop")))
        self.assertEqual(result.base, Base(location="Rooftop", fortification=2))

    def test_absent_deltas_leave_inventory_and_base_equal(self):
        previous = make_state({"meds": 1, "shiv": 1}, location="Clinic", fortification=4)
        result = reconcile(previous, make_scene(inventory_changes=None, base_changes=None))
        self.assertEqual(result.inventory, previous.inventory)
        self.assertEqual(result.base, previous.base)

    def test_replaces_story_choices_and_game_over_wholesale(self):
        scene = make_scene(story="They found you.", choices=[], is_game_over=True, game_over_text="You fall.")
        result = reconcile(make_state(), scene)
        self.assertEqual(result.story, "They found you.")
        self.assertEqual(result.choices, [])
        self.assertTrue(result.is_game_over)
        self.assertEqual(result.game_over_text, "You fall.")

    def test_previous_state_is_not_mutated(self):
        previous = make_state({"scrap": 2}, fortification=0)
        before = previous.model_dump()
        result = reconcile(
            previous,
            make_scene(inventory_changes={"scrap": -2}, base_changes=BaseChanges(fortification=9)),
        )
        self.assertEqual(previous.model_dump(), before)
        self.assertIsNot(result, previous)
        self.assertIsNot(result.inventory, previous.inventory)
        self.assertIsNot(result.base, previous.base)


class TestMergeBase(unittest.TestCase):
    def test_none_changes_returns_copy(self):
        base = Base(location="Warehouse", fortification=1)
        merged = merge_base(base, None)
        self.assertEqual(merged, base)
        self.assertIsNot(merged, base)

    def test_negative_fortification_is_kept(self):
        base = Base(location="Warehouse", fortification=1)
        self.assertEqual(merge_base(base, BaseChanges(fortification=-2)).fortification, -2)


class TestStartState(unittest.TestCase):
    def test_initial_state_is_empty(self):
        state = initial_state()
        self.assertEqual(state.inventory, {})
        self.assertEqual(state.base, Base(location=INITIAL_LOCATION, fortification=0))
        self.assertFalse(state.is_game_over)

    def test_start_state_moves_base_to_warehouse(self):
        state = start_state(make_scene())
        self.assertEqual(state.base, Base(location=START_LOCATION, fortification=0))
        self.assertEqual(state.story, "New story.")
        self.assertEqual(len(state.choices), 2)

    def test_start_state_applies_opening_deltas(self):
        state = start_state(make_scene(inventory_changes={"food": 1}))
        self.assertEqual(state.inventory, {"food": 1})

    def test_failed_opening_scene_ends_the_game(self):
        scene = make_scene(choices=[Choice(text="Retry", prompt="Retry")], is_game_over=True, game_over_text="Static.")
        self.assertTrue(start_state(scene).is_game_over)


if __name__ == "__main__":
    unittest.main()
