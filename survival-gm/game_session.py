import threading
from typing import Dict, Any, List

BUSY = "Still waiting on the last move. Hold on."


class GameSession:
    """
    One browser session. Only one step runs at a time; a step that arrives
    while another is in flight is rejected and changes nothing.
    """

    def __init__(self, game):
        self.game = game
        self.events: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def emit(self, event: Dict[str, Any]):
        self.events.append(event)

    def step(self, player_input: Dict[str, Any]):
        if not self._lock.acquire(blocking=False):
            return [{"type": "error", "text": BUSY, "data": None}]
        try:
            self.events = []
            self.game.handle_input(player_input, self)
            return self.events
        finally:
            self._lock.release()

    def drain(self) -> List[Dict[str, Any]]:
        evs = self.events[:]
        self.events = []
        return evs
