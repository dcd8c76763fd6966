"""
Pig Game Engine.

Pure Python game logic with zero UI dependencies.
Handles die rolls, turn scoring, banking, win detection and the
observer notifications a front end renders from.
"""

from src.engine.base import (
    TURN_ENDING_FACE,
    WIN_THRESHOLD,
    DiceRoll,
    GameConfig,
    GamePhase,
    HoldOutcome,
    PlayerId,
    RollOutcome,
)
from src.engine.errors import GameStateError
from src.engine.game import GameEngine
from src.engine.messages import GameMessages
from src.engine.observer import GameObserver, NullObserver
from src.engine.pig import PigEngine
from src.engine.player import Player

__all__ = [
    # Constants
    "TURN_ENDING_FACE",
    "WIN_THRESHOLD",
    # Data Classes
    "DiceRoll",
    "GameConfig",
    "HoldOutcome",
    "Player",
    "RollOutcome",
    # Enums
    "GamePhase",
    "PlayerId",
    # Errors
    "GameStateError",
    # Observers
    "GameMessages",
    "GameObserver",
    "NullObserver",
    # Engines
    "GameEngine",
    "PigEngine",
]
