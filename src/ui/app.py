"""Pig — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st


_PIG_RULES = """\
**Goal:** First to **100 points** wins!

**Each turn:**
- **Roll** the die as often as you like
- Rolling **2-6** adds the face value to your turn points
- Rolling a **1** loses your turn points and passes the die
- **Hold** to bank your turn points and pass the die

Banked points are never lost.
"""


def _render_sidebar_rules() -> None:
    """Show the rules in the sidebar."""
    with st.sidebar:
        st.markdown("### Pig Rules")
        st.markdown(_PIG_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Pig",
        page_icon="🐷",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    from src.ui.themes import load_css
    load_css()

    from src.ui.views import render_game_page
    render_game_page()

    _render_sidebar_rules()


if __name__ == "__main__":
    main()
