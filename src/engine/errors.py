"""Pig - Engine Exceptions"""

from src.engine.base import GamePhase


class GameStateError(RuntimeError):
    """An operation was called when the game state does not allow it.

    Attributes:
        operation: Name of the rejected operation
        phase: Game phase at the time of the call
    """

    def __init__(self, operation: str, phase: GamePhase, reason: str) -> None:
        self.operation = operation
        self.phase = phase
        super().__init__(f"Cannot {operation}: {reason} (phase={phase.value}).")
