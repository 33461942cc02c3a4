from __future__ import annotations

from typing import Any, Dict, List, Optional
from ui.provider import UIProvider


class CLIProvider(UIProvider):
    is_blocking = True

    def scene(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        print()
        print(text)
        print()

    def status(self, inventory: Dict[str, int], base: Dict[str, Any]) -> None:
        items = ", ".join(f"{name} x{count}" for name, count in inventory.items()) or "nothing"
        print(f"[Inventory] {items}")
        print(f"[Base] {base.get('location')} (fortification {base.get('fortification')})")

    def game_over(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        print()
        print("GAME OVER")
        print(text)
        print()

    def loading(self, active: bool) -> None:
        if active:
            print("...")

    def system(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        print(text)

    def error(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        print(f"[ERROR] {text}")

    def choice(self, prompt: str, options: List[str], data: Optional[Dict[str, Any]] = None) -> int:
        print()
        if prompt:
            print(prompt)
        for i, opt in enumerate(options, start=1):
            print(f"{i}. {opt}")

        while True:
            raw = input("> ").strip()
            try:
                sel = int(raw)
                if 1 <= sel <= len(options):
                    return sel - 1
            except ValueError:
                pass
            self.error(f"Enter a number from 1 to {len(options)}.")
