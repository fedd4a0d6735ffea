"""Enumeration types shared by the simulator core and the presentation layer."""

from __future__ import annotations

from enum import Enum, IntEnum


class Direction(IntEnum):
    """Heading of the car, as an ordinal in clockwise order."""

    NORTH = 0
    """Facing the top edge (y decreases when moving forward)."""

    EAST = 1
    """Facing the right edge (x increases when moving forward)."""

    SOUTH = 2
    """Facing the bottom edge (y increases when moving forward)."""

    WEST = 3
    """Facing the left edge (x decreases when moving forward)."""

    def turned_left(self) -> "Direction":
        return Direction((self.value + 3) % 4)

    def turned_right(self) -> "Direction":
        return Direction((self.value + 1) % 4)

    @property
    def delta(self) -> tuple[int, int]:
        """Grid offset of one forward step in this direction."""
        return _DELTAS[self]

    @property
    def degrees(self) -> int:
        """Clockwise heading in degrees, North being 0."""
        return self.value * 90


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


class Command(Enum):
    """A single program instruction."""

    FORWARD = "forward"
    TURN_LEFT = "left"
    TURN_RIGHT = "right"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_token(cls, token: str) -> "Command":
        """Parse a command from its short (F/L/R) or long name.

        Raises:
            ValueError: if the token names no command.
        """
        key = token.strip().lower()
        for command in cls:
            if key in (command.value, command.symbol.lower()):
                return command
        raise ValueError(f"Unknown command token: {token!r}")


_SYMBOLS: dict[Command, str] = {
    Command.FORWARD: "F",
    Command.TURN_LEFT: "L",
    Command.TURN_RIGHT: "R",
}


class Mode(Enum):
    """Game mode, selecting which entities are placed and which rules apply."""

    BASIC = "basic"
    PICK_FOOD = "pick_food"
    OBSTACLES = "obstacles"


class Outcome(Enum):
    """Status of the simulation state machine."""

    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Succeeded and Failed stay put until an explicit reset."""
        return self in (Outcome.SUCCEEDED, Outcome.FAILED)
