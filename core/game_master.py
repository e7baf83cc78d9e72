"""
This module defines the GameMaster, which interprets player commands and
executes them against the session's Player and World.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from thefuzz import process

import config
from core.game_state import GameSession, MoveOutcome, SessionState
from core.world import Direction, KeyOutcome

HELP_LINES = [
    "Movement: n (North), s (South), e (East), w (West)",
    "look - Examine your surroundings",
    "inventory - Check your items",
    "talk - Speak with characters",
    "take - Pick up items",
    "use key - Use the key",
    "help - Show this help message",
    "quit - Exit to main menu",
]

UNKNOWN_COMMAND = "I don't understand that command. Type 'help' for available commands."
BLOCKED_MOVE = "You can't go that way! A dense thicket blocks your path."
QUIT_PROMPT = "Are you sure you want to quit? (y/n)"
SESSION_OVER = "The adventure is over."


@dataclass
class CommandResult:
    """Narrative produced by one command and the session state after it."""

    messages: List[str] = field(default_factory=list)
    state: SessionState = SessionState.RUNNING

    @property
    def text(self) -> str:
        return "\n".join(self.messages)


@dataclass
class StatusReport:
    """Read-only snapshot of what the player currently sees."""

    location_name: str
    description: str
    exits: List[str]
    inventory: List[str]
    position: List[int]
    turns: int


class GameMaster:
    """
    Maps fixed keyword commands to handlers that mutate the session.

    Exactly one command is processed per call. Invalid input never raises;
    it is reported back as narrative and the session keeps running.
    """

    def __init__(self):
        self._handlers: Dict[str, Callable[[GameSession, str], List[str]]] = {
            "look": self._cmd_look,
            "inventory": self._cmd_inventory,
            "talk": self._cmd_talk,
            "take": self._cmd_take,
            "use key": self._cmd_use_key,
            "help": self._cmd_help,
            "quit": self._cmd_quit,
        }
        for letter in ("n", "s", "e", "w"):
            self._handlers[letter] = self._cmd_move

    # --- Main Processing Logic ---

    def process_command(self, command: str, session: GameSession) -> CommandResult:
        """
        Processes a single line of player input.

        Args:
            command: Raw text typed by the player.
            session: The session to act on.

        Returns:
            A CommandResult with the narrative lines and the resulting state.
        """
        normalized = (command or "").strip().lower()

        if session.state.is_terminal:
            logging.warning("Command '%s' received after session ended (%s).", normalized, session.state.value)
            return CommandResult([SESSION_OVER], session.state)

        session.turns += 1
        logging.info(
            "Processing command: '%s' at %s (turn %d)", normalized, session.player.position, session.turns
        )

        if session.awaiting_quit_confirmation:
            return self._confirm_quit(normalized, session)

        handler = self._handlers.get(normalized)
        if handler is None:
            return CommandResult(self._unknown_command(normalized), session.state)

        return CommandResult(handler(session, normalized), session.state)

    def status(self, session: GameSession) -> StatusReport:
        """Current location, exits and inventory, for display by a front end."""
        player, world = session.player, session.world
        name, description = world.describe(player.x, player.y)
        return StatusReport(
            location_name=name,
            description=description,
            exits=world.exit_names(player.x, player.y),
            inventory=list(player.inventory),
            position=[player.x, player.y],
            turns=session.turns,
        )

    @property
    def commands(self) -> List[str]:
        """All recognised command words."""
        return list(self._handlers)

    # --- Command Handlers ---

    def _cmd_move(self, session: GameSession, letter: str) -> List[str]:
        direction = Direction.from_command(letter)
        outcome = session.player.move(direction, session.world)
        if outcome is MoveOutcome.BLOCKED:
            return [BLOCKED_MOVE]
        return [f"You move {direction.display_name}."]

    def _cmd_look(self, session: GameSession, command: str) -> List[str]:
        player = session.player
        return [session.world.examine(player.x, player.y)]

    def _cmd_inventory(self, session: GameSession, command: str) -> List[str]:
        items = session.player.inventory
        if not items:
            return ["Your inventory is empty."]
        return ["You are carrying:"] + [f"• {item}" for item in items]

    def _cmd_talk(self, session: GameSession, command: str) -> List[str]:
        player = session.player
        return [session.world.talk(player.x, player.y)]

    def _cmd_take(self, session: GameSession, command: str) -> List[str]:
        player = session.player
        return [session.world.take_item(player.x, player.y, player)]

    def _cmd_use_key(self, session: GameSession, command: str) -> List[str]:
        player = session.player
        outcome = session.world.try_use_key(player.x, player.y, player)
        if outcome is KeyOutcome.UNLOCKED:
            session.state = SessionState.WON
            logging.info("Session won after %d turns.", session.turns)
        return [outcome.message]

    def _cmd_help(self, session: GameSession, command: str) -> List[str]:
        return ["Available Commands:"] + HELP_LINES

    def _cmd_quit(self, session: GameSession, command: str) -> List[str]:
        session.awaiting_quit_confirmation = True
        return [QUIT_PROMPT]

    def _confirm_quit(self, answer: str, session: GameSession) -> CommandResult:
        session.awaiting_quit_confirmation = False
        if answer == "y":
            session.state = SessionState.QUIT_CONFIRMED
            logging.info("Player quit after %d turns.", session.turns)
            return CommandResult(["You leave the forest behind."], session.state)
        return CommandResult(["You continue your adventure."], session.state)

    def _unknown_command(self, command: str) -> List[str]:
        logging.info("Unrecognized command: '%s'", command)
        messages = [UNKNOWN_COMMAND]
        suggestion = self._suggest(command)
        if suggestion:
            messages.append(f"Did you mean '{suggestion}'?")
        return messages

    def _suggest(self, command: str) -> str:
        """Closest multi-letter command to what was typed, using thefuzz. Empty if none is close."""
        if not command:
            return ""
        known_words = [c for c in self._handlers if len(c) > 1]
        match = process.extractOne(command, known_words, score_cutoff=config.SUGGESTION_SCORE_CUTOFF)
        if not match:
            return ""
        best_match, score = match[0], match[1]
        logging.debug("Suggesting '%s' for '%s' (score %d)", best_match, command, score)
        return best_match
