"""
Shared UI event payloads.
The web client renders these; the server also returns full state snapshots.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from engine.models import GameState


def build_status_update(inventory: Dict[str, int], base: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": "status",
        "inventory": dict(inventory),
        "base": dict(base),
    }


def build_state_payload(state: Optional[GameState]) -> Dict[str, Any]:
    if state is None:
        return {"ok": False, "error": "No game in progress."}
    return {"ok": True, "state": state.model_dump(by_alias=True)}
