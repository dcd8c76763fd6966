"""Scoreboard component — both players' banked scores and turn indicator."""

from __future__ import annotations

import streamlit as st

from src.engine.player import Player


def render_scoreboard(
    players: tuple[Player, ...],
    scores: dict[str, int],
    active_seat: str | None,
    points_rolled: int,
    target_score: int,
) -> None:
    """Render the scoreboard panel.

    Args:
        players: Both players, in seat order.
        scores: Banked score per seat name, as last reported by the engine.
        active_seat: Seat name (``PlayerId.name``) of the player whose turn it is.
        points_rolled: At-risk points of the active player.
        target_score: Score needed to win.
    """
    html = ['<div class="scoreboard">']
    html.append(f'<div class="scoreboard-title">Scoreboard &mdash; {target_score} to Win</div>')

    for player in players:
        is_active = player.id.name == active_seat
        row_classes = ["player-row"]
        if is_active:
            row_classes.append("active")

        indicator = "&#9654; " if is_active else ""

        delta_html = ""
        if is_active and points_rolled > 0:
            delta_html = f'<span class="score-delta">+{points_rolled}</span>'

        html.append(
            f'<div class="{" ".join(row_classes)}">'
            f'<span class="name">{indicator}{player.name}</span>'
            f'<span class="score">{scores.get(player.id.name, 0)}{delta_html}</span>'
            f"</div>"
        )

    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)
