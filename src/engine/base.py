"""
Pig - Game Engine Base Classes

This module defines the foundational data structures, enums and ruleset
constants used throughout the game engine. Value objects are immutable
(frozen dataclasses) so they can be handed to observers safely.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from src.engine.validators import validate_die_values, validate_player_name


# Ruleset constants (fixed for this game)
DIE_SIDES = 6
TURN_ENDING_FACE = 1
WIN_THRESHOLD = 100

# Animated roll pacing
MIN_ROLL_FRAMES = 5
MAX_ROLL_FRAMES = 10
ROLL_FRAME_INTERVAL = 0.15

DEFAULT_PLAYER_NAMES = ("Player One", "Player Two")


class PlayerId(Enum):
    """The two fixed player slots, valued by their seat index."""
    ONE = 0
    TWO = 1

    @property
    def index(self) -> int:
        return self.value

    @property
    def other(self) -> "PlayerId":
        """The opposing seat."""
        return PlayerId.TWO if self is PlayerId.ONE else PlayerId.ONE


class GamePhase(Enum):
    """Lifecycle of a game."""
    NOT_STARTED = "not_started"
    AWAITING_ROLL = "awaiting_roll"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a die roll.

    A plain roll holds a single face. An animated roll holds every face
    shown in sequence; only the last one counts for the game.

    Attributes:
        values: Tuple of die face values, in the order they were shown
    """
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate die values are within valid range."""
        validate_die_values(self.values, DIE_SIDES)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @property
    def face(self) -> int:
        """The face the roll resolves to (the last one shown)."""
        return self.values[-1]

    @property
    def preview_faces(self) -> tuple[int, ...]:
        """Faces shown before the resolving one."""
        return self.values[:-1]

    @classmethod
    def single(cls, value: int) -> "DiceRoll":
        """Create a one-face roll."""
        return cls(values=(value,))

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values))


@dataclass(frozen=True)
class RollOutcome:
    """
    Result of a resolved roll.

    Attributes:
        roll: The dice that were shown
        roller: Player who rolled
        is_bust: Whether the turn-ending face came up
        points_rolled: At-risk total after the roll (0 on a bust)
        active_player: Player whose turn it is after the roll
    """
    roll: DiceRoll
    roller: PlayerId
    is_bust: bool
    points_rolled: int
    active_player: PlayerId

    @property
    def face(self) -> int:
        return self.roll.face


@dataclass(frozen=True)
class HoldOutcome:
    """
    Result of a hold.

    Attributes:
        holder: Player who held
        banked: Points moved from at-risk into the holder's total
        total_points: Holder's banked total after the hold
        is_winner: Whether the hold reached the win threshold
    """
    holder: PlayerId
    banked: int
    total_points: int
    is_winner: bool


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    The rules themselves are fixed; only the display names vary.

    Attributes:
        player_one_name: Display name for the first seat
        player_two_name: Display name for the second seat
    """
    player_one_name: str = DEFAULT_PLAYER_NAMES[0]
    player_two_name: str = DEFAULT_PLAYER_NAMES[1]

    def __post_init__(self) -> None:
        """Validate configuration."""
        validate_player_name(self.player_one_name)
        validate_player_name(self.player_two_name)
        if self.player_one_name.strip() == self.player_two_name.strip():
            raise ValueError("Player names must be distinct.")

    def name_for(self, player_id: PlayerId) -> str:
        """Display name for a seat."""
        if player_id is PlayerId.ONE:
            return self.player_one_name.strip()
        return self.player_two_name.strip()
