"""
Pig - Player Record

Players are created once per engine and reused across games. Only the
engine mutates them; observers read ``total_points`` when notified.
"""

from dataclasses import dataclass

from src.engine.base import PlayerId
from src.engine.validators import validate_score


@dataclass(eq=False)
class Player:
    """
    A seat at the table and its banked score.

    Attributes:
        id: Fixed seat identifier
        name: Display name
        total_points: Banked score for the current game
    """
    id: PlayerId
    name: str
    total_points: int = 0

    def reset_total_points(self) -> None:
        self.total_points = 0

    def add_points(self, points: int) -> int:
        """Bank points and return the new total."""
        self.total_points += validate_score(points)
        return self.total_points

    def __str__(self) -> str:
        return self.name
