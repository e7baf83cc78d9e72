"""
Console front end: main menu, introduction, the per-turn loop, and the
win and credits screens. All game logic lives in GameMaster; this module only
reads lines and prints what comes back.
"""
import logging
from typing import Callable

import config
from core.game_master import HELP_LINES, GameMaster
from core.game_state import GameSession, SessionState, new_session

TITLE_BANNER = f"""
╔══════════════════════════════════════╗
║          {config.GAME_TITLE}          ║
╚══════════════════════════════════════╝"""

WIN_BANNER = """
╔══════════════════════════════════════╗
║         Congratulations!!!           ║
║                                      ║
║    You've solved the forest mystery  ║
║        and opened the ancient door!  ║
╚══════════════════════════════════════╝"""

CREDITS_BANNER = f"""
╔══════════════════════════════════════╗
║             Credits                  ║
╚══════════════════════════════════════╝

Game Design & Development:
------------------------
[{config.CREDITS_AUTHOR}]

Special Thanks:
-------------
To all adventure game enthusiasts!"""


class Game:
    """Drives menus and sessions over a pair of line-oriented I/O callables."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        game_master: GameMaster = None,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.game_master = game_master or GameMaster()
        self.session: GameSession = None

    def start(self):
        """Main menu loop. Returns when the player chooses Exit or input runs out."""
        while True:
            self.output_fn(TITLE_BANNER)
            self.output_fn("\n1. New Game")
            self.output_fn("2. Credits")
            self.output_fn("3. Exit")

            try:
                choice = self.input_fn("\nEnter your choice (1-3): ").strip()
            except EOFError:
                logging.info("Input closed at main menu.")
                return

            if choice == "1":
                self.play()
            elif choice == "2":
                self.output_fn(CREDITS_BANNER)
            elif choice == "3":
                self.output_fn("\nThanks for playing! Goodbye!")
                return
            else:
                self.output_fn("\nInvalid choice. Please try again.")

    def play(self) -> SessionState:
        """Runs one session from the introduction until it's won or quit."""
        self.session = new_session()
        self.show_introduction()

        while self.session.is_running:
            if not self.session.awaiting_quit_confirmation:
                self.show_status()
            prompt = "(y/n): " if self.session.awaiting_quit_confirmation else "\nWhat would you like to do? > "
            try:
                command = self.input_fn(prompt)
            except EOFError:
                logging.info("Input closed mid-session; abandoning session.")
                return self.session.state

            result = self.game_master.process_command(command, self.session)
            for message in result.messages:
                self.output_fn(f"\n{message}")

        if self.session.state is SessionState.WON:
            self.output_fn(WIN_BANNER)
        return self.session.state

    def show_introduction(self):
        self.output_fn(f"═══ Welcome to {config.GAME_TITLE} ═══\n")
        self.output_fn("You find yourself at the entrance of an ancient forest,")
        self.output_fn("where legends speak of a mysterious door guarding untold secrets...\n")
        self.output_fn("Available Commands:")
        self.output_fn("━━━━━━━━━━━━━━━━━")
        for line in HELP_LINES:
            self.output_fn(f"• {line}")

    def show_status(self):
        status = self.game_master.status(self.session)
        self.output_fn(f"\n═══ {status.location_name} ═══")
        self.output_fn(status.description)
        self.output_fn("\nExits: " + ", ".join(status.exits))
        if status.inventory:
            self.output_fn(f"Inventory: {', '.join(status.inventory)}")
