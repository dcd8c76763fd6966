"""
Pig - Observer Protocol

The engine reports every state change through these handlers, called
synchronously and in a fixed order per operation. Observers render;
they never change game state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.engine.player import Player


@runtime_checkable
class GameObserver(Protocol):
    """Receiver of engine notifications."""

    def die_shown(self, face: int) -> None:
        """A die face was drawn. Presentation only."""

    def points_rolled_changed(self, value: int) -> None:
        """The active player's at-risk total changed."""

    def player_score_changed(self, player: Player) -> None:
        """A player's banked total changed; read ``player.total_points``."""

    def turn_will_change(self, next_player: Player) -> None:
        """The active player flipped to ``next_player``."""

    def game_log_updated(self, text: str) -> None:
        """A human-readable status line for the last action."""

    def game_won(self, title: str, message: str, action_label: str) -> None:
        """The game ended; fired once per game."""


class NullObserver:
    """Observer that ignores every notification."""

    def die_shown(self, face: int) -> None:
        pass

    def points_rolled_changed(self, value: int) -> None:
        pass

    def player_score_changed(self, player: Player) -> None:
        pass

    def turn_will_change(self, next_player: Player) -> None:
        pass

    def game_log_updated(self, text: str) -> None:
        pass

    def game_won(self, title: str, message: str, action_label: str) -> None:
        pass
