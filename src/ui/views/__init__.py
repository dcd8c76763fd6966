"""Page renderers for Pig."""

from src.ui.views.game import render_game_page

__all__ = ["render_game_page"]
