"""Unit tests for the World grid and its location-scoped actions."""

import pytest

import config
from core.game_state import Player
from core.world import Direction, KeyOutcome, World
from entities.forest_mystery import FOREST_MYSTERY_LOCATIONS

KEY = config.KEY_ITEM_NAME

# --- Fixtures ---


@pytest.fixture
def world() -> World:
    return World.forest_mystery()


@pytest.fixture
def player() -> Player:
    return Player()


@pytest.fixture
def player_with_key() -> Player:
    p = Player()
    p.receive(KEY)
    return p


# --- Construction Tests ---


def test_forest_mystery_is_two_by_two(world):
    assert world.width == 2
    assert world.height == 2
    for x in range(2):
        for y in range(2):
            assert world.get_location(x, y) is not None


def test_from_data_duplicate_cell():
    """Two entries for the same cell are rejected."""
    data = FOREST_MYSTERY_LOCATIONS + [dict(FOREST_MYSTERY_LOCATIONS[0])]
    with pytest.raises(ValueError, match="duplicate location at \\(0, 0\\)"):
        World.from_data(data)


def test_from_data_missing_cell():
    """The grid must be fully populated."""
    with pytest.raises(ValueError, match="not fully populated"):
        World.from_data(FOREST_MYSTERY_LOCATIONS[:3])


def test_from_data_missing_coordinates():
    data = [dict(FOREST_MYSTERY_LOCATIONS[0])]
    del data[0]["x"]
    with pytest.raises(ValueError, match="index 0"):
        World.from_data(data)


def test_from_data_invalid_location():
    data = [dict(loc) for loc in FOREST_MYSTERY_LOCATIONS]
    data[2]["description"] = ""
    with pytest.raises(ValueError, match="index 2"):
        World.from_data(data)


def test_from_data_empty():
    with pytest.raises(ValueError, match="at least one location"):
        World.from_data([])


# --- Grid Query Tests ---


@pytest.mark.parametrize("x, y", [(0, 0), (0, 1), (1, 0), (1, 1)])
def test_is_valid_inside(world, x, y):
    assert world.is_valid(x, y)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (2, 0), (0, 2), (2, 2), (-1, -1), (5, 1)])
def test_is_valid_outside(world, x, y):
    assert not world.is_valid(x, y)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, ["South", "East"]),
        (1, 1, ["North", "West"]),
        (0, 1, ["North", "East"]),
        (1, 0, ["South", "West"]),
    ],
)
def test_available_exits(world, x, y, expected):
    """Exits are the valid neighbours, always listed North, South, East, West."""
    assert world.exit_names(x, y) == expected
    assert [d.display_name for d in world.available_exits(x, y)] == expected


def test_describe(world):
    assert world.describe(0, 0)[0] == "Forest Entrance"
    assert world.describe(0, 1)[0] == "Mystic Clearing"
    assert world.describe(1, 0)[0] == "Abandoned Hut"
    assert world.describe(1, 1)[0] == "Ancient Door"
    name, description = world.describe(1, 1)
    assert "stone door" in description


def test_descriptions_match_exits(world):
    """The narrative points the player along paths that actually exist."""
    _, entrance = world.describe(0, 0)
    assert "A narrow path leads south and east." in entrance
    assert world.exit_names(0, 0) == ["South", "East"]

    sage = world.talk(0, 1)
    assert "the ancient door to the east" in sage
    assert "East" in world.exit_names(0, 1)
    assert "to the south" not in sage


def test_describe_invalid_cell(world):
    assert world.describe(3, 3) is None


def test_examine_includes_description_and_detail(world):
    text = world.examine(0, 0)
    assert text.startswith(world.describe(0, 0)[1])
    assert "As you look around more carefully:" in text
    assert "leaves and twigs" in text


def test_talk_to_sage(world):
    assert "Seeker" in world.talk(0, 1)


# --- Take Tests ---


def test_take_key_adds_it_once(world, player):
    """Taking at the key cell twice leaves exactly one key in the inventory."""
    first = world.take_item(1, 0, player)
    second = world.take_item(1, 0, player)
    assert player.inventory == (KEY,)
    assert "You carefully pick up the ornate key." in first
    assert "pick up" not in second
    assert "ornate key with strange markings" in second


@pytest.mark.parametrize("x, y", [(0, 0), (0, 1), (1, 1)])
def test_take_elsewhere_adds_nothing(world, player, x, y):
    text = world.take_item(x, y, player)
    assert player.inventory == ()
    assert text == world.get_location(x, y).take_text


# --- Use Key Tests ---


def test_use_key_at_goal_with_key(world, player_with_key):
    assert world.use_key(1, 1, player_with_key) is True
    assert world.try_use_key(1, 1, player_with_key) is KeyOutcome.UNLOCKED


def test_use_key_at_goal_without_key(world, player):
    assert world.use_key(1, 1, player) is False
    assert world.try_use_key(1, 1, player) is KeyOutcome.MISSING_KEY


@pytest.mark.parametrize("x, y", [(0, 0), (0, 1), (1, 0)])
def test_use_key_elsewhere(world, player, player_with_key, x, y):
    """Only the goal cell ever accepts the key."""
    for p in (player, player_with_key):
        assert world.use_key(x, y, p) is False
        assert world.try_use_key(x, y, p) is KeyOutcome.NOTHING_TO_UNLOCK
    assert player_with_key.inventory == (KEY,)


def test_direction_offsets():
    assert (Direction.NORTH.dx, Direction.NORTH.dy) == (0, -1)
    assert (Direction.SOUTH.dx, Direction.SOUTH.dy) == (0, 1)
    assert (Direction.EAST.dx, Direction.EAST.dy) == (1, 0)
    assert (Direction.WEST.dx, Direction.WEST.dy) == (-1, 0)
    assert Direction.from_command("e") is Direction.EAST
    assert Direction.from_command("east") is None
