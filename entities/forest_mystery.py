"""Map data for The Forest Mystery: one entry per grid cell, keyed by (x, y)."""

import config

FOREST_MYSTERY_LOCATIONS = [
    # Starting location
    {
        "x": 0,
        "y": 0,
        "name": "Forest Entrance",
        "description": (
            "You stand at the entrance to an ancient forest. Tall trees loom overhead, "
            "their branches swaying gently in the breeze. A narrow path leads south and east."
        ),
        "take": "The ground is covered in leaves and twigs, but nothing of interest catches your eye.",
        "talk": "The rustling leaves seem to whisper ancient secrets, but there's no one here to talk to.",
    },
    # Location with the sage
    {
        "x": 0,
        "y": 1,
        "name": "Mystic Clearing",
        "description": (
            "Sunlight filters through the canopy into a peaceful clearing. "
            "An elderly sage in flowing robes stands here, deep in meditation."
        ),
        "take": "The clearing is well-kept, with nothing to take.",
        "talk": (
            "The sage opens his eyes and speaks: 'Seeker, the ancient door to the east guards "
            "great mysteries. But only those who possess the sacred key may pass. I sense such "
            "a key lies within an abandoned dwelling beyond the trees...'"
        ),
    },
    # Location with the key
    {
        "x": 1,
        "y": 0,
        "name": "Abandoned Hut",
        "description": (
            "A weathered wooden hut stands in a shadowy grove. Its door hangs slightly ajar, "
            "and something catches the light within."
        ),
        "take": "You discover an ornate key with strange markings! Its craftsmanship suggests great importance.",
        "talk": "The hut is long abandoned, with only echoes of its former inhabitants.",
        "item": config.KEY_ITEM_NAME,
    },
    # Location with the door (end game)
    {
        "x": 1,
        "y": 1,
        "name": "Ancient Door",
        "description": (
            "An imposing stone door dominates this area. Strange symbols are carved into its "
            "surface, and a peculiar keyhole gleams at its center."
        ),
        "take": "The door is firmly sealed - there's nothing to take.",
        "talk": "The ancient door stands silent, waiting for its key.",
        "unlocked_by": config.KEY_ITEM_NAME,
    },
]
