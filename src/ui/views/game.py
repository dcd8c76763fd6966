"""Game page — die, scoreboard, log and controls for one local Pig game."""

from __future__ import annotations

import asyncio
import logging

import streamlit as st

from src.config import Settings, configure_logging, get_settings
from src.engine import WIN_THRESHOLD, GameEngine
from src.ui.components import render_dice_tray, render_scoreboard, render_turn_controls
from src.ui.observer import (
    ACTIVE_SEAT,
    DIE_FACE,
    GAME_LOG,
    HOLD_ENABLED,
    POINTS_ROLLED,
    SCORES,
    WIN_ALERT,
    SessionObserver,
)
from src.ui.themes import render_game_log, render_victory_animation

logger = logging.getLogger(__name__)

_ENGINE_KEY = "pig_engine"
_OBSERVER_KEY = "pig_observer"


def _session_game(settings: Settings) -> tuple[GameEngine, SessionObserver]:
    """Get the engine for this browser session, creating it on first use."""
    ss = st.session_state
    if _ENGINE_KEY not in ss:
        configure_logging(settings.log_level, settings.debug)
        observer = SessionObserver(ss)
        engine = GameEngine(observer=observer, config=settings.game_config())
        ss[_ENGINE_KEY] = engine
        ss[_OBSERVER_KEY] = observer
        _start_new_game(engine, observer)
        logger.info("Created game engine for new session")
    return ss[_ENGINE_KEY], ss[_OBSERVER_KEY]


def _start_new_game(engine: GameEngine, observer: SessionObserver) -> None:
    observer.reset_display()
    engine.begin_new_game()


def render_game_page() -> None:
    settings = get_settings()
    engine, observer = _session_game(settings)
    ss = st.session_state

    st.title("Pig")
    render_game_log(ss[GAME_LOG])

    die_slot = st.empty()
    render_dice_tray(ss[DIE_FACE], die_slot)

    render_scoreboard(
        players=engine.players,
        scores=ss[SCORES],
        active_seat=ss[ACTIVE_SEAT],
        points_rolled=ss[POINTS_ROLLED],
        target_score=WIN_THRESHOLD,
    )

    alert = ss[WIN_ALERT]
    if alert is not None:
        render_victory_animation(alert["title"], alert["message"])
        if st.button(alert["action_label"], key="btn_win_action", type="primary"):
            _start_new_game(engine, observer)
            st.rerun()
        return

    action = render_turn_controls(
        can_roll=engine.can_roll,
        hold_enabled=ss[HOLD_ENABLED],
        points_rolled=ss[POINTS_ROLLED],
    )

    if action == "roll":
        _handle_roll(engine, observer, die_slot, settings)
    elif action == "hold":
        engine.hold()
        st.rerun()
    elif action == "new_game":
        _start_new_game(engine, observer)
        st.rerun()


def _handle_roll(
    engine: GameEngine,
    observer: SessionObserver,
    die_slot,
    settings: Settings,
) -> None:
    """Roll, repainting the die for each animation frame when enabled."""
    if settings.animate_rolls:
        observer.on_die_shown = lambda face: render_dice_tray(face, die_slot)
        try:
            asyncio.run(engine.roll_animated(interval=settings.roll_frame_interval))
        finally:
            observer.on_die_shown = None
    else:
        engine.roll()
    st.rerun()
