import argparse
import logging
import sys

from game_context import ConfigError, build_requester, configure_logging, load_settings
from game_runner import Game
from ui.cli_provider import CLIProvider
from ui.ui import UI

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Zombie survival, narrated by an LLM.")
    parser.add_argument("--model", help="Model to use (default: SURVIVAL_GM_MODEL or gpt-4o-mini).")
    parser.add_argument("--log-level", default="WARNING", help="Logging level for the terminal session.")
    return parser.parse_args(argv)


def run(game: Game) -> None:
    ui = game.ui
    game.start()
    while True:
        state = game.state
        if state is None or state.is_game_over:
            again = ui.choice("Play again?", ["Restart", "Quit"])
            if again != 0:
                ui.system("The city swallows the rest of your story.")
                return
            game.restart()
            continue

        sel = ui.choice("What do you do?", [c.text for c in state.choices])
        game.choose(choice=sel)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)
    try:
        requester = build_requester(load_settings(model=args.model))
    except ConfigError as e:
        sys.exit(str(e))

    ui = UI(CLIProvider())
    ui.system("ZOMBIE SURVIVAL\nScavenge. Craft. Survive.\n")
    try:
        run(Game(ui, requester))
    except (KeyboardInterrupt, EOFError):
        print()


if __name__ == "__main__":
    main()
