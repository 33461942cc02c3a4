"""
game_runner.py
--------------
Orchestrates one player's run: asks for scenes, folds them into state,
and tells the UI what to show. Shared by the web server and the CLI.
"""

import logging
from typing import Any, Dict, Optional

from engine.models import GameState
from engine.reconcile import reconcile, start_state

logger = logging.getLogger(__name__)

START_FAILED = "Failed to start the game. The apocalypse will have to wait."
ACTION_FAILED = "A mysterious force prevents you from acting. Please try again."
CHOICE_PROMPT = "What do you do?"


class Game:
    def __init__(self, ui, requester):
        self.ui = ui
        self.requester = requester
        self.state: Optional[GameState] = None

    @property
    def started(self) -> bool:
        return self.state is not None

    def start(self) -> None:
        self.ui.loading(True)
        try:
            scene = self.requester.request_initial_scene()
            self.state = start_state(scene)
        except Exception:
            logger.exception("Failed to start game")
            self.state = None
            self.ui.error(START_FAILED)
            return
        finally:
            self.ui.loading(False)
        self.render()

    def restart(self) -> None:
        self.state = None
        self.start()

    def choose(self, choice: Optional[int] = None, prompt: Optional[str] = None) -> None:
        """
        Advance one turn. `choice` is an index into the current choices;
        `prompt` is a raw action sent as-is.
        """
        if self.state is None:
            self.ui.error("No game in progress.")
            return
        if self.state.is_game_over:
            self.ui.error("The story is over. Restart to play again.")
            return

        if prompt is None:
            if not isinstance(choice, int) or not 0 <= choice < len(self.state.choices):
                self.ui.error("Invalid choice.")
                return
            prompt = self.state.choices[choice].prompt

        previous = self.state
        self.ui.loading(True)
        try:
            scene = self.requester.request_next_scene(prompt, previous)
            self.state = reconcile(previous, scene)
        except Exception:
            logger.exception("Failed to advance game")
            self.state = previous
            self.ui.error(ACTION_FAILED)
            return
        finally:
            self.ui.loading(False)
        self.render()

    def render(self) -> None:
        state = self.state
        if state is None:
            return
        if state.is_game_over:
            self.ui.game_over(state.game_over_text, {"story": state.story})
            return
        self.ui.status(state.inventory, state.base.model_dump())
        self.ui.scene(state.story)
        if not self.ui.is_blocking:
            self.ui.choice(CHOICE_PROMPT, [c.text for c in state.choices])

    def handle_input(self, player_input: Dict[str, Any], session=None) -> None:
        action = player_input.get("action")
        if action == "start":
            self.start()
        elif action == "restart":
            self.restart()
        elif action == "choose":
            self.choose(choice=player_input.get("choice"), prompt=player_input.get("prompt"))
        else:
            self.ui.error(f"Unknown action: {action}")
