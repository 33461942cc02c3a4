"""
Scene Requester
---------------
Asks the model for the next scene and turns the reply into a SceneResult.
Any failure (transport, non-JSON, wrong shape) ends in the fallback scene,
so the game always lands in a state it can display.
"""

import json
import logging
from typing import Any, Dict

from pydantic import ValidationError

from ai.prompts import INITIAL_SCENE_PROMPT, SYSTEM_INSTRUCTION, build_next_scene_prompt
from engine.models import Choice, GameState, SceneResult

logger = logging.getLogger(__name__)


DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.8

# Hints for the model only; any item name is accepted back.
KNOWN_ITEMS = ("scrap", "wood", "food", "meds", "shiv", "spear")

MIN_CHOICES = 2
MAX_CHOICES = 4


RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "story": {
            "type": "string",
            "description": (
                "The next part of the story in a suspenseful, second-person perspective. "
                "Describe the environment and events. Should be one to two paragraphs long."
            ),
        },
        "choices": {
            "type": "array",
            "description": (
                "A list of 2 to 4 choices the player can make. These should include narrative choices, "
                "scavenging for specific materials (scrap, wood, food), crafting items, and fortifying the base."
            ),
            "minItems": MIN_CHOICES,
            "maxItems": MAX_CHOICES,
            "items": {
                "type": "object",
                "properties": {
                    "text": {
                        "type": "string",
                        "description": (
                            "The text displayed on the choice button for the player. E.g., 'Search for scrap metal', "
                            "'Barricade the windows with wood', 'Craft a shiv from scrap'."
                        ),
                    },
                    "prompt": {
                        "type": "string",
                        "description": (
                            "The prompt to send back to the AI if this choice is selected. "
                            "E.g., 'I search the garage for scrap metal.'"
                        ),
                    },
                },
                "required": ["text", "prompt"],
            },
        },
        "inventoryChanges": {
            "type": "object",
            "description": (
                "Optional. An object representing changes to the player's inventory. Positive numbers for items "
                "gained, negative for items used/lost. E.g., { 'scrap': 5, 'food': -1 }. "
                "Only include items that have changed."
            ),
            "properties": {item: {"type": "integer"} for item in KNOWN_ITEMS},
        },
        "baseChanges": {
            "type": "object",
            "description": "Optional. An object representing changes to the player's base. E.g., { 'fortification': 1 }.",
            "properties": {
                "location": {"type": "string"},
                "fortification": {"type": "integer"},
            },
        },
        "isGameOver": {
            "type": "boolean",
            "description": (
                "Set to true if the player's action has resulted in their death "
                "or the end of this particular story arc."
            ),
        },
        "gameOverText": {
            "type": "string",
            "description": (
                "If isGameOver is true, this text describes the player's final moments "
                "or the outcome of their story."
            ),
        },
    },
    "required": ["story", "choices", "isGameOver", "gameOverText"],
}


FALLBACK_STORY = (
    "An unexpected silence falls. The connection to your instincts has been severed by a strange, "
    "otherworldly force. The path ahead is unclear."
)
FALLBACK_CHOICE_TEXT = "Try to reconnect..."
FALLBACK_CHOICE_PROMPT = "Try to start the game again."
FALLBACK_GAME_OVER_TEXT = "The system failed. You are lost in the static."


class SceneRequestError(ValueError):
    """Raised when a model reply cannot be turned into a SceneResult."""


def fallback_scene() -> SceneResult:
    """Fresh copy of the terminal scene used whenever generation fails."""
    return SceneResult(
        story=FALLBACK_STORY,
        choices=[Choice(text=FALLBACK_CHOICE_TEXT, prompt=FALLBACK_CHOICE_PROMPT)],
        is_game_over=True,
        game_over_text=FALLBACK_GAME_OVER_TEXT,
    )


def check_choice_count(scene: SceneResult) -> None:
    """
    A scene that continues must offer 2-4 choices.
    A terminal scene may offer none, but never more than 4.
    """
    count = len(scene.choices)
    if count > MAX_CHOICES:
        raise SceneRequestError(f"Scene offers {count} choices (max {MAX_CHOICES}).")
    if not scene.is_game_over and count < MIN_CHOICES:
        raise SceneRequestError(f"Scene continues with {count} choices (min {MIN_CHOICES}).")


def parse_scene(raw: str) -> SceneResult:
    try:
        payload = json.loads(raw.strip())
    except json.JSONDecodeError as e:
        raise SceneRequestError(f"Scene payload is not JSON: {e}") from e
    if not isinstance(payload, dict):
        raise SceneRequestError("Scene payload is not a JSON object.")
    try:
        scene = SceneResult.model_validate(payload)
    except ValidationError as e:
        raise SceneRequestError(f"Scene payload failed validation: {e}") from e
    check_choice_count(scene)
    return scene


# =========================
# REQUESTER
# =========================

class SceneRequester:
    def __init__(self, openai_client, model: str = DEFAULT_MODEL, *, temperature: float = DEFAULT_TEMPERATURE):
        """
        openai_client: already-authenticated OpenAI client
        model: e.g. "gpt-4o-mini"
        """
        self.client = openai_client
        self.model = model
        self.temperature = temperature

    def request_initial_scene(self) -> SceneResult:
        return self.generate_scene(INITIAL_SCENE_PROMPT)

    def request_next_scene(self, action_prompt: str, state: GameState) -> SceneResult:
        return self.generate_scene(build_next_scene_prompt(action_prompt, state))

    def generate_scene(self, prompt: str) -> SceneResult:
        logger.debug("Requesting scene model=%s prompt=%r", self.model, prompt)
        try:
            response = self.client.responses.create(
                model=self.model,
                input=[
                    {"role": "system", "content": SYSTEM_INSTRUCTION},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                text={
                    "format": {
                        "type": "json_schema",
                        "name": "scene_result",
                        "schema": RESPONSE_SCHEMA,
                        "strict": False,
                    }
                },
            )
            return parse_scene(self._extract_text(response))
        except SceneRequestError as e:
            logger.warning("Rejected scene from model: %s", e)
        except Exception as e:
            logger.error("Error generating scene: %s", e)
        return fallback_scene()

    # =========================
    # INTERNALS
    # =========================

    def _extract_text(self, response) -> str:
        """
        Pull the output text out of a Responses API reply.
        """
        parts = []
        for item in getattr(response, "output", None) or []:
            if getattr(item, "type", None) == "message":
                for c in item.content:
                    if getattr(c, "type", None) == "output_text":
                        parts.append(c.text)

        text = "".join(parts).strip()
        if not text:
            raise SceneRequestError("Model returned no output text.")
        return text
