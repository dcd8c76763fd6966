"""Turn control buttons — Roll, Hold, New Game."""

from __future__ import annotations

import streamlit as st


def render_turn_controls(
    can_roll: bool,
    hold_enabled: bool,
    points_rolled: int,
) -> str | None:
    """Render the turn-action buttons.

    Returns:
        ``"roll"``, ``"hold"``, ``"new_game"``, or ``None`` if no action taken.
    """
    cols = st.columns(3)

    with cols[0]:
        if st.button(
            "Roll",
            key="btn_roll",
            use_container_width=True,
            disabled=not can_roll,
            type="primary",
        ):
            return "roll"

    with cols[1]:
        if st.button(
            f"Hold {points_rolled} pts" if points_rolled > 0 else "Hold",
            key="btn_hold",
            use_container_width=True,
            disabled=not (can_roll and hold_enabled),
        ):
            return "hold"

    with cols[2]:
        if st.button("New Game", key="btn_new_game", use_container_width=True):
            return "new_game"

    return None
