"""
Pig - Game Engine

Stateful two-player turn machine built on the stateless ``PigEngine``
rules. The engine owns both players, the at-risk points of the current
turn and the per-player roll counts, and reports every change to a
single observer.

Each operation updates state first and then delivers its notifications
in order, so an observer reading the engine from inside a handler always
sees the finished result of the operation.
"""

from __future__ import annotations

import asyncio
import logging
import random

from src.engine.base import (
    ROLL_FRAME_INTERVAL,
    DiceRoll,
    GameConfig,
    GamePhase,
    HoldOutcome,
    PlayerId,
    RollOutcome,
)
from src.engine.errors import GameStateError
from src.engine.messages import DEFAULT_MESSAGES, GameMessages
from src.engine.observer import GameObserver, NullObserver
from src.engine.pig import PigEngine
from src.engine.player import Player

logger = logging.getLogger(__name__)


class GameEngine:
    """Two-player Pig game.

    Args:
        observer: Receiver of notifications (ignored if omitted).
        config: Player display names.
        messages: Game-log templates.
        rng: Random source for die draws; module-level random by default.
    """

    def __init__(
        self,
        observer: GameObserver | None = None,
        config: GameConfig | None = None,
        messages: GameMessages | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or GameConfig()
        self._messages = messages or DEFAULT_MESSAGES
        self._observer: GameObserver = observer or NullObserver()
        self._rng = rng
        self._players = tuple(
            Player(id=pid, name=self._config.name_for(pid)) for pid in PlayerId
        )
        self._active = PlayerId.ONE
        self._points_rolled = 0
        self._roll_counts = {pid: 0 for pid in PlayerId}
        self._phase = GamePhase.NOT_STARTED
        self._winner: PlayerId | None = None
        self._rolling = False

    # -- Queries ---------------------------------------------------------

    @property
    def observer(self) -> GameObserver:
        return self._observer

    def set_observer(self, observer: GameObserver | None) -> None:
        """Replace the registered observer."""
        self._observer = observer or NullObserver()

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def players(self) -> tuple[Player, ...]:
        return self._players

    def player(self, player_id: PlayerId) -> Player:
        return self._players[player_id.index]

    @property
    def active_player_id(self) -> PlayerId:
        return self._active

    @property
    def current_player(self) -> Player:
        return self.player(self._active)

    @property
    def next_player(self) -> Player:
        return self.player(PigEngine.next_player(self._active))

    @property
    def points_rolled(self) -> int:
        """At-risk points of the current turn."""
        return self._points_rolled

    def roll_count(self, player_id: PlayerId) -> int:
        return self._roll_counts[player_id]

    @property
    def winner(self) -> Player | None:
        if self._winner is None:
            return None
        return self.player(self._winner)

    @property
    def is_game_over(self) -> bool:
        return self._phase is GamePhase.GAME_OVER

    @property
    def is_rolling(self) -> bool:
        """True while an animated roll is playing."""
        return self._rolling

    @property
    def can_roll(self) -> bool:
        return self._phase is GamePhase.AWAITING_ROLL and not self._rolling

    @property
    def can_hold(self) -> bool:
        """Holding is allowed whenever rolling is, even with 0 points at risk."""
        return self.can_roll

    # -- Operations ------------------------------------------------------

    def begin_new_game(self) -> None:
        """Reset scores, roll counts and turn, and start from player one."""
        if self._rolling:
            self._reject("begin a new game", "a roll is still being shown")

        self._points_rolled = 0
        self._roll_counts = {pid: 0 for pid in PlayerId}
        self._active = PlayerId.ONE
        self._winner = None
        self._phase = GamePhase.AWAITING_ROLL
        for player in self._players:
            player.reset_total_points()

        logger.info(
            "New game: %s vs %s", self._players[0].name, self._players[1].name
        )
        for player in self._players:
            self._observer.player_score_changed(player)
        self._observer.turn_will_change(self.current_player)
        self._observer.game_log_updated(
            self._messages.welcome_text(self.current_player.name)
        )

    def roll(self, dice: DiceRoll | None = None) -> RollOutcome:
        """Roll for the active player.

        Args:
            dice: Optional pre-determined roll. When it holds several
                faces only the last one is resolved.

        Returns:
            RollOutcome describing the resolved face and the new turn state.

        Raises:
            GameStateError: If no game is in progress or a roll is pending.
        """
        self._require_turn("roll")
        if dice is None:
            dice = PigEngine.roll_dice(self._rng)
        return self._resolve_roll(dice)

    async def roll_animated(
        self,
        frames: DiceRoll | None = None,
        interval: float = ROLL_FRAME_INTERVAL,
    ) -> RollOutcome:
        """Roll while showing a sequence of faces.

        Every face before the last is reported through ``die_shown`` only,
        ``interval`` seconds apart. The roll is then resolved once against
        the last face. A cancelled animation still resolves.

        Args:
            frames: Optional pre-determined faces (random 5-10 faces
                when omitted).
            interval: Seconds between faces.

        Raises:
            GameStateError: If no game is in progress or a roll is pending.
        """
        self._require_turn("roll")
        if frames is None:
            frames = PigEngine.roll_frames(rng=self._rng)

        self._rolling = True
        try:
            for face in frames.preview_faces:
                self._observer.die_shown(face)
                await asyncio.sleep(interval)
        finally:
            self._rolling = False
            outcome = self._resolve_roll(frames)
        return outcome

    def hold(self) -> HoldOutcome:
        """Bank the at-risk points and pass the turn.

        Returns:
            HoldOutcome with the banked amount and whether it won the game.

        Raises:
            GameStateError: If no game is in progress or a roll is pending.
        """
        self._require_turn("hold")

        holder = self.current_player
        banked = self._points_rolled
        new_total, has_won = PigEngine.bank(holder.total_points, banked)

        holder.add_points(banked)
        self._points_rolled = 0
        self._active = PigEngine.next_player(self._active)
        if has_won:
            self._phase = GamePhase.GAME_OVER
            self._winner = holder.id

        logger.debug("%s holds %d (total %d)", holder.name, banked, new_total)
        self._observer.player_score_changed(holder)
        self._observer.turn_will_change(self.current_player)
        self._observer.points_rolled_changed(0)

        if has_won:
            rolls = self._roll_counts[holder.id]
            logger.info("%s won with %d points in %d rolls", holder.name, new_total, rolls)
            self._observer.game_log_updated(self._messages.victory_text(holder.name))
            self._observer.game_won(
                self._messages.win_title,
                self._messages.win_message_text(holder.name, new_total, rolls),
                self._messages.win_action,
            )
        else:
            self._observer.game_log_updated(
                self._messages.held_text(holder.name, banked, self.current_player.name)
            )

        return HoldOutcome(
            holder=holder.id,
            banked=banked,
            total_points=new_total,
            is_winner=has_won,
        )

    # -- Internals -------------------------------------------------------

    def _resolve_roll(self, dice: DiceRoll) -> RollOutcome:
        """Apply a roll to the turn state and notify."""
        roller = self.current_player
        new_score, dice, is_bust = PigEngine.process_roll(self._points_rolled, dice)

        self._roll_counts[roller.id] += 1
        self._points_rolled = new_score
        if is_bust:
            self._active = PigEngine.next_player(self._active)

        logger.debug(
            "%s rolled %d (bust=%s, at risk=%d)",
            roller.name, dice.face, is_bust, self._points_rolled,
        )
        self._observer.die_shown(dice.face)
        if is_bust:
            self._observer.game_log_updated(
                self._messages.bust_text(roller.name, dice.face, self.current_player.name)
            )
            self._observer.turn_will_change(self.current_player)
        else:
            self._observer.game_log_updated(
                self._messages.rolled_text(roller.name, dice.face)
            )
        self._observer.points_rolled_changed(self._points_rolled)

        return RollOutcome(
            roll=dice,
            roller=roller.id,
            is_bust=is_bust,
            points_rolled=self._points_rolled,
            active_player=self._active,
        )

    def _require_turn(self, operation: str) -> None:
        if self._rolling:
            self._reject(operation, "a roll is still being shown")
        if self._phase is GamePhase.NOT_STARTED:
            self._reject(operation, "no game has been started")
        if self._phase is GamePhase.GAME_OVER:
            self._reject(operation, "the game is over")

    def _reject(self, operation: str, reason: str) -> None:
        logger.warning("Rejected %s: %s", operation, reason)
        raise GameStateError(operation, self._phase, reason)
