"""Dice tray component — the single Pig die."""

from __future__ import annotations

import streamlit as st

_PIPS = {1: "&#9856;", 2: "&#9857;", 3: "&#9858;", 4: "&#9859;", 5: "&#9860;", 6: "&#9861;"}


def die_html(face: int | None) -> str:
    """HTML for one die; a placeholder before the first roll."""
    if face is None:
        return (
            '<div class="dice-tray">'
            '<span class="dice-hint">Roll the die to begin your turn.</span>'
            "</div>"
        )
    classes = "die bust" if face == 1 else "die"
    return f'<div class="dice-tray"><div class="{classes}">{_PIPS[face]}</div></div>'


def render_dice_tray(face: int | None, target=None) -> None:
    """Render the die into ``target`` (an ``st.empty()`` slot) or the page."""
    slot = target if target is not None else st
    slot.markdown(die_html(face), unsafe_allow_html=True)
