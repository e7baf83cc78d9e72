"""
This module defines the Location class, the immutable record of a single map
cell's narrative content.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Location:
    """
    Represents a single cell of the game map.

    All text here is fixed for the lifetime of a session. Special behavior of a
    cell is expressed through its roles rather than through its coordinates.

    Attributes:
        name: Display name of the location (e.g., "Forest Entrance").
        description: Shown whenever the player arrives or looks around.
        examine_text: Extra detail revealed by the "look" command.
        take_text: Shown when the player tries to take something here.
        talk_text: Shown when the player tries to talk here.
        item: Name of the collectible lying here, if any (the key cell).
        unlocked_by: Name of the item that opens this location (the goal cell).
    """

    name: str
    description: str
    examine_text: str
    take_text: str
    talk_text: str
    item: Optional[str] = None
    unlocked_by: Optional[str] = None

    def __post_init__(self):
        """Validate required fields after initialization."""
        # take_text comes before examine_text since examine falls back to it
        for field_name in ("name", "description", "take_text", "examine_text", "talk_text"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise TypeError(f"Location '{field_name}' must be a string.")
            if not value:
                raise ValueError(f"Location '{field_name}' cannot be empty.")

    @property
    def holds_item(self) -> bool:
        return self.item is not None

    @property
    def is_goal(self) -> bool:
        return self.unlocked_by is not None

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "Location":
        """Creates a Location from a plain mapping.

        Expected keys are 'name', 'description', 'take' and 'talk'. 'examine'
        falls back to the 'take' text when absent. 'item' and 'unlocked_by'
        are optional role markers.

        Raises:
            ValueError: If a required field is missing or empty.
            TypeError: If a field has the wrong type.
        """
        if not isinstance(data, dict):
            raise TypeError("Location data must be a dictionary.")

        take_text = data.get("take", "")
        return cls(
            name=data.get("name", ""),
            description=data.get("description", ""),
            examine_text=data.get("examine", take_text),
            take_text=take_text,
            talk_text=data.get("talk", ""),
            item=data.get("item"),
            unlocked_by=data.get("unlocked_by"),
        )
