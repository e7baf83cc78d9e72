"""
This module defines the World class: the fixed grid of Locations, its bounds
and adjacency logic, and the actions that are scoped to a single location.
"""
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from entities.forest_mystery import FOREST_MYSTERY_LOCATIONS
from entities.location import Location

if TYPE_CHECKING:
    from core.game_state import Player


class Direction(Enum):
    """Compass directions with their display name and unit offset (dx, dy)."""

    NORTH = ("North", 0, -1)
    SOUTH = ("South", 0, 1)
    EAST = ("East", 1, 0)
    WEST = ("West", -1, 0)

    def __init__(self, display_name: str, dx: int, dy: int):
        self.display_name = display_name
        self.dx = dx
        self.dy = dy

    @classmethod
    def from_command(cls, command: str) -> Optional["Direction"]:
        """Maps the one-letter movement commands (n/s/e/w) to a Direction."""
        return _COMMAND_DIRECTIONS.get(command)


_COMMAND_DIRECTIONS = {
    "n": Direction.NORTH,
    "s": Direction.SOUTH,
    "e": Direction.EAST,
    "w": Direction.WEST,
}


class KeyOutcome(Enum):
    """Narrative outcome of trying to use the key at a location."""

    UNLOCKED = "The key fits perfectly! With a deep rumbling sound, the ancient door begins to open..."
    MISSING_KEY = "The door remains firmly shut. You'll need to find the right key to open it."
    NOTHING_TO_UNLOCK = "There's nothing here that requires a key."

    @property
    def message(self) -> str:
        return self.value


class World:
    """
    A fixed-size, fully populated grid of Locations.

    Cells are addressed as (x, y) with x growing East and y growing South.
    Which cell holds the key and which cell is the goal is read from the
    Location roles, so none of the logic below depends on coordinates.
    """

    def __init__(self, width: int, height: int, locations: Dict[Tuple[int, int], Location]):
        if width <= 0 or height <= 0:
            raise ValueError(f"World dimensions must be positive, got {width}x{height}.")
        missing = [
            (x, y)
            for y in range(height)
            for x in range(width)
            if (x, y) not in locations
        ]
        if missing:
            raise ValueError(f"World grid is not fully populated, missing cells: {missing}")
        extra = [pos for pos in locations if not (0 <= pos[0] < width and 0 <= pos[1] < height)]
        if extra:
            raise ValueError(f"Locations outside the {width}x{height} grid: {extra}")

        self.width = width
        self.height = height
        self._locations: Dict[Tuple[int, int], Location] = dict(locations)
        logging.debug("Initialized %dx%d World with %d locations.", width, height, len(locations))

    @classmethod
    def from_data(cls, location_data: List[Dict[str, Any]]) -> "World":
        """Creates a World from a list of location dictionaries carrying 'x' and 'y'.

        The grid size is derived from the largest coordinates present, and every
        cell of that grid must be supplied exactly once.
        """
        locations: Dict[Tuple[int, int], Location] = {}
        for i, data in enumerate(location_data):
            try:
                x, y = data["x"], data["y"]
                if not isinstance(x, int) or not isinstance(y, int):
                    raise TypeError("'x' and 'y' must be integers")
                if x < 0 or y < 0:
                    raise ValueError(f"negative coordinates ({x}, {y})")
                if (x, y) in locations:
                    raise ValueError(f"duplicate location at ({x}, {y})")
                locations[(x, y)] = Location.from_data(data)
            except KeyError as e:
                raise ValueError(f"Failed to process location data at index {i}: missing {e}") from e
            except (ValueError, TypeError) as e:
                raise ValueError(f"Failed to process location data at index {i}: {e}") from e

        if not locations:
            raise ValueError("World needs at least one location.")
        width = max(x for x, _ in locations) + 1
        height = max(y for _, y in locations) + 1
        return cls(width, height, locations)

    @classmethod
    def forest_mystery(cls) -> "World":
        """Builds the fixed 2x2 map of The Forest Mystery."""
        return cls.from_data(FOREST_MYSTERY_LOCATIONS)

    # --- Grid Queries ---

    def is_valid(self, x: int, y: int) -> bool:
        """True iff (x, y) lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_location(self, x: int, y: int) -> Optional[Location]:
        """Returns the Location at (x, y), or None outside the grid."""
        if not self.is_valid(x, y):
            return None
        return self._locations[(x, y)]

    def available_exits(self, x: int, y: int) -> List[Direction]:
        """Directions leading to a valid neighbouring cell, always in N, S, E, W order."""
        return [d for d in Direction if self.is_valid(x + d.dx, y + d.dy)]

    def exit_names(self, x: int, y: int) -> List[str]:
        return [d.display_name for d in self.available_exits(x, y)]

    def describe(self, x: int, y: int) -> Optional[Tuple[str, str]]:
        """Returns (name, description) of the cell, or None for an invalid cell."""
        location = self.get_location(x, y)
        if location is None:
            return None
        return location.name, location.description

    # --- Location-Scoped Actions ---

    def examine(self, x: int, y: int) -> str:
        location = self.get_location(x, y)
        if location is None:
            return ""
        return f"{location.description}\n\nAs you look around more carefully: {location.examine_text}"

    def talk(self, x: int, y: int) -> str:
        location = self.get_location(x, y)
        if location is None:
            return ""
        return location.talk_text

    def take_item(self, x: int, y: int, player: "Player") -> str:
        """
        Tries to take what lies at (x, y).

        If the location holds an item the player doesn't carry yet, it's added
        to the inventory. Repeating the action never adds it a second time.

        Returns:
            The narrative text, prefixed by a pickup line when an item was added.
        """
        location = self.get_location(x, y)
        if location is None:
            return ""

        if location.holds_item and not player.has_item(location.item):
            player.receive(location.item)
            logging.info("Player picked up '%s' at (%d, %d).", location.item, x, y)
            item_name = location.item.lower()
            return f"You carefully pick up the {item_name}.\n\n{location.take_text}"
        return location.take_text

    def try_use_key(self, x: int, y: int, player: "Player") -> KeyOutcome:
        """Works out what happens when the key is used at (x, y). Never changes state."""
        location = self.get_location(x, y)
        if location is None or not location.is_goal:
            return KeyOutcome.NOTHING_TO_UNLOCK
        if not player.has_item(location.unlocked_by):
            return KeyOutcome.MISSING_KEY
        return KeyOutcome.UNLOCKED

    def use_key(self, x: int, y: int, player: "Player") -> bool:
        """True iff (x, y) is the goal and the player holds the item that opens it."""
        return self.try_use_key(x, y, player) is KeyOutcome.UNLOCKED
