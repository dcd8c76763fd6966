"""
Session-state observer.

Mirrors engine notifications into a mutable mapping so Streamlit can
render them on the next rerun. At runtime the mapping is
``st.session_state``; any dict works.
"""

from __future__ import annotations

from typing import Any, Callable, MutableMapping

from src.engine.base import PlayerId
from src.engine.player import Player

# Session keys
DIE_FACE = "pig_die_face"
POINTS_ROLLED = "pig_points_rolled"
SCORES = "pig_scores"
ACTIVE_NAME = "pig_active_name"
ACTIVE_SEAT = "pig_active_seat"
GAME_LOG = "pig_game_log"
HOLD_ENABLED = "pig_hold_enabled"
WIN_ALERT = "pig_win_alert"


class SessionObserver:
    """Writes each notification into ``state``.

    Args:
        state: Mapping the page renders from.
        on_die_shown: Optional hook called with every face shown, used to
            repaint the die while an animated roll plays.
    """

    def __init__(
        self,
        state: MutableMapping[str, Any],
        on_die_shown: Callable[[int], None] | None = None,
    ) -> None:
        self._state = state
        self.on_die_shown = on_die_shown
        state.setdefault(DIE_FACE, None)
        state.setdefault(POINTS_ROLLED, 0)
        state.setdefault(SCORES, {pid.name: 0 for pid in PlayerId})
        state.setdefault(ACTIVE_NAME, "")
        state.setdefault(ACTIVE_SEAT, None)
        state.setdefault(GAME_LOG, "")
        state.setdefault(HOLD_ENABLED, False)
        state.setdefault(WIN_ALERT, None)

    def die_shown(self, face: int) -> None:
        self._state[DIE_FACE] = face
        if self.on_die_shown is not None:
            self.on_die_shown(face)

    def points_rolled_changed(self, value: int) -> None:
        self._state[POINTS_ROLLED] = value
        # Hold stays disabled until something is at risk
        self._state[HOLD_ENABLED] = value > 0

    def player_score_changed(self, player: Player) -> None:
        scores = dict(self._state[SCORES])
        scores[player.id.name] = player.total_points
        self._state[SCORES] = scores
        self._state[HOLD_ENABLED] = False

    def turn_will_change(self, next_player: Player) -> None:
        self._state[ACTIVE_NAME] = next_player.name
        self._state[ACTIVE_SEAT] = next_player.id.name
        self._state[POINTS_ROLLED] = 0
        self._state[HOLD_ENABLED] = False

    def game_log_updated(self, text: str) -> None:
        self._state[GAME_LOG] = text

    def game_won(self, title: str, message: str, action_label: str) -> None:
        self._state[WIN_ALERT] = {
            "title": title,
            "message": message,
            "action_label": action_label,
        }

    def clear_win_alert(self) -> None:
        self._state[WIN_ALERT] = None

    def reset_display(self) -> None:
        """Clear the die and win alert before a new game starts."""
        self._state[DIE_FACE] = None
        self._state[POINTS_ROLLED] = 0
        self._state[HOLD_ENABLED] = False
        self._state[WIN_ALERT] = None
