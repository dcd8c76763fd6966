"""Visual theme for Pig."""

from src.ui.themes.animations import (
    load_css,
    render_game_log,
    render_victory_animation,
)

__all__ = [
    "load_css",
    "render_game_log",
    "render_victory_animation",
]
