"""
This module defines the Player and GameSession classes, which together hold
all dynamic state of a single playthrough.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

import config
from core.world import Direction, World


class MoveOutcome(Enum):
    MOVED = "moved"
    BLOCKED = "blocked"


class SessionState(Enum):
    """Lifecycle of a session. WON and QUIT_CONFIRMED are terminal."""

    RUNNING = "running"
    WON = "won"
    QUIT_CONFIRMED = "quit_confirmed"

    @property
    def is_terminal(self) -> bool:
        return self is not SessionState.RUNNING


class Player:
    """
    Tracks the player's position on the grid and the items they carry.
    """

    def __init__(self, x: int = 0, y: int = 0):
        self.x = x
        self.y = y
        # Ordered by pickup time, no duplicates
        self._inventory: List[str] = []

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def inventory(self) -> Tuple[str, ...]:
        """Read-only view of the carried items, in the order they were taken."""
        return tuple(self._inventory)

    def has_item(self, item_name: str) -> bool:
        return item_name in self._inventory

    def receive(self, item_name: str) -> bool:
        """
        Adds an item to the inventory unless it's already there.

        Only World.take_item should call this.

        Returns:
            True if the item was added, False if the player already had it.
        """
        if item_name in self._inventory:
            return False
        self._inventory.append(item_name)
        return True

    def move(self, direction: Direction, world: World) -> MoveOutcome:
        """
        Steps one cell in the given direction if the world allows it.

        Args:
            direction: The direction to move in.
            world: The World used to validate the target cell.

        Returns:
            MoveOutcome.MOVED if the position changed, MoveOutcome.BLOCKED otherwise.
        """
        new_x = self.x + direction.dx
        new_y = self.y + direction.dy
        if not world.is_valid(new_x, new_y):
            logging.info(
                "Move %s from (%d, %d) blocked.", direction.display_name, self.x, self.y
            )
            return MoveOutcome.BLOCKED

        self.x, self.y = new_x, new_y
        logging.debug("Player moved %s to (%d, %d).", direction.display_name, new_x, new_y)
        return MoveOutcome.MOVED


@dataclass
class GameSession:
    """The one active Player/World pair plus the session's running status."""

    player: Player
    world: World
    state: SessionState = SessionState.RUNNING
    # Set by "quit"; the next command is read as the y/n answer
    awaiting_quit_confirmation: bool = False
    turns: int = 0

    @property
    def is_running(self) -> bool:
        return self.state is SessionState.RUNNING


def new_session() -> GameSession:
    """Starts a fresh session: player at the start position, empty inventory, new World."""
    start_x, start_y = config.START_POSITION
    session = GameSession(player=Player(start_x, start_y), world=World.forest_mystery())
    logging.info("New session started at (%d, %d).", start_x, start_y)
    return session
