from ui.events import build_status_update
from ui.provider import UIProvider


class WebProvider(UIProvider):
    is_blocking = False

    def __init__(self, session):
        self.session = session

    def scene(self, text, data=None):
        self.session.emit({"type": "scene", "text": text, "data": data})

    def status(self, inventory, base):
        self.session.emit(build_status_update(inventory, base))

    def game_over(self, text, data=None):
        self.session.emit({"type": "game_over", "text": text, "data": data})

    def loading(self, active):
        self.session.emit({"type": "loading", "active": bool(active)})

    def system(self, text, data=None):
        self.session.emit({"type": "system", "text": text, "data": data})

    def error(self, text, data=None):
        self.session.emit({"type": "error", "text": text, "data": data})

    def choice(self, prompt, options, data=None):
        self.session.emit({
            "type": "choice",
            "prompt": prompt,
            "options": options
        })
        return None
