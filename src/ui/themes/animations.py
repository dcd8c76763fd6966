"""CSS injection and HTML animation helpers for the Pig theme."""

from pathlib import Path

import streamlit as st


def load_css() -> None:
    """Inject the Pig CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "pig.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_game_log(text: str) -> None:
    """Render the engine's latest status line."""
    lines = "<br>".join(text.splitlines()) if text else "&nbsp;"
    st.markdown(f'<div class="game-log">{lines}</div>', unsafe_allow_html=True)


def render_victory_animation(title: str, message: str) -> None:
    """Render the victory overlay with glow animation."""
    body = "<br>".join(message.splitlines())
    st.markdown(
        '<div class="victory-overlay">'
        '<span class="crown">&#9813;</span>'
        f"<h1>{title}</h1>"
        f"<p>{body}</p>"
        "</div>",
        unsafe_allow_html=True,
    )
