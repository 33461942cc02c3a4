from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class _Model(BaseModel):
    # Python side uses snake_case; the browser client speaks camelCase.
    model_config = ConfigDict(populate_by_name=True)


class Choice(_Model):
    text: StrictStr
    prompt: StrictStr


class Base(_Model):
    location: StrictStr
    fortification: StrictInt


class BaseChanges(_Model):
    location: Optional[StrictStr] = None
    fortification: Optional[StrictInt] = None


class SceneResult(_Model):
    """
    One generated scene, as returned by the model.
    Inventory changes are additive deltas; base changes are overrides.
    """

    story: StrictStr
    choices: List[Choice]
    inventory_changes: Optional[Dict[StrictStr, StrictInt]] = Field(default=None, alias="inventoryChanges")
    base_changes: Optional[BaseChanges] = Field(default=None, alias="baseChanges")
    is_game_over: StrictBool = Field(alias="isGameOver")
    game_over_text: StrictStr = Field(alias="gameOverText")


class GameState(_Model):
    story: str = ""
    choices: List[Choice] = Field(default_factory=list)
    inventory: Dict[str, int] = Field(default_factory=dict)
    base: Base
    is_game_over: bool = Field(default=False, alias="isGameOver")
    game_over_text: str = Field(default="", alias="gameOverText")
