"""
Pig - Test Configuration and Fixtures

Common fixtures and helpers for all test modules.
"""

from typing import Any

import pytest

from src.engine import DiceRoll, GameEngine, Player


class RecordingObserver:
    """Observer that records every notification in call order.

    Each entry is ``(handler_name, payload)``. Player payloads are stored
    as ``(name, total_points)`` snapshots taken at notification time.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def die_shown(self, face: int) -> None:
        self.calls.append(("die_shown", face))

    def points_rolled_changed(self, value: int) -> None:
        self.calls.append(("points_rolled_changed", value))

    def player_score_changed(self, player: Player) -> None:
        self.calls.append(("player_score_changed", (player.name, player.total_points)))

    def turn_will_change(self, next_player: Player) -> None:
        self.calls.append(("turn_will_change", next_player.name))

    def game_log_updated(self, text: str) -> None:
        self.calls.append(("game_log_updated", text))

    def game_won(self, title: str, message: str, action_label: str) -> None:
        self.calls.append(("game_won", (title, message, action_label)))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def of(self, name: str) -> list[Any]:
        return [payload for call, payload in self.calls if call == name]

    def clear(self) -> None:
        self.calls.clear()


def roll_faces(engine: GameEngine, *faces: int) -> None:
    """Resolve one roll per face."""
    for face in faces:
        engine.roll(DiceRoll.single(face))


def bank_points(engine: GameEngine, points: int) -> None:
    """Accumulate ``points`` for the active player with 2-6 rolls, then hold."""
    remaining = points
    while remaining > 0:
        face = 6 if remaining >= 8 or remaining == 6 else min(remaining, 4)
        if remaining - face == 1:
            face -= 1
        engine.roll(DiceRoll.single(face))
        remaining -= face
    engine.hold()


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def engine(recorder: RecordingObserver) -> GameEngine:
    """An engine with a game already started and the log cleared."""
    game = GameEngine(observer=recorder)
    game.begin_new_game()
    recorder.clear()
    return game


@pytest.fixture
def fresh_engine(recorder: RecordingObserver) -> GameEngine:
    """An engine on which no game has been started."""
    return GameEngine(observer=recorder)
