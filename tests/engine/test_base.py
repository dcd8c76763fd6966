"""
Pig - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

import pytest
from src.engine.base import (
    DiceRoll,
    GameConfig,
    GamePhase,
    HoldOutcome,
    PlayerId,
    RollOutcome,
)
from src.engine.errors import GameStateError
from src.engine.player import Player
from src.engine.validators import (
    validate_die_values,
    validate_frame_count,
    validate_player_name,
    validate_score,
)


class TestPlayerId:
    """Tests for PlayerId enum."""

    def test_indices(self):
        assert PlayerId.ONE.index == 0
        assert PlayerId.TWO.index == 1

    def test_other(self):
        assert PlayerId.ONE.other is PlayerId.TWO
        assert PlayerId.TWO.other is PlayerId.ONE

    def test_exactly_two_seats(self):
        assert len(PlayerId) == 2


class TestGamePhase:
    def test_phase_values(self):
        assert {p.value for p in GamePhase} == {"not_started", "awaiting_roll", "game_over"}


class TestDiceRoll:
    """Tests for DiceRoll dataclass."""

    def test_single(self):
        roll = DiceRoll.single(4)
        assert roll.values == (4,)
        assert roll.face == 4
        assert roll.preview_faces == ()

    def test_face_is_last_value(self):
        roll = DiceRoll.from_sequence([2, 6, 3])
        assert roll.face == 3
        assert roll.preview_faces == (2, 6)

    def test_invalid_value_raises(self):
        with pytest.raises(ValueError, match="Invalid die value 7"):
            DiceRoll(values=(1, 2, 7))

    def test_zero_value_raises(self):
        with pytest.raises(ValueError, match="Invalid die value 0"):
            DiceRoll(values=(0,))

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="At least 1"):
            DiceRoll(values=())

    def test_indexing(self):
        roll = DiceRoll(values=(1, 2, 3))
        assert roll[0] == 1
        assert roll[2] == 3
        assert len(roll) == 3

    def test_frozen(self):
        roll = DiceRoll.single(2)
        with pytest.raises(AttributeError):
            roll.values = (3,)


class TestOutcomes:
    def test_roll_outcome_face(self):
        outcome = RollOutcome(
            roll=DiceRoll.from_sequence([5, 4]),
            roller=PlayerId.ONE,
            is_bust=False,
            points_rolled=4,
            active_player=PlayerId.ONE,
        )
        assert outcome.face == 4

    def test_hold_outcome_fields(self):
        outcome = HoldOutcome(holder=PlayerId.TWO, banked=9, total_points=30, is_winner=False)
        assert outcome.holder is PlayerId.TWO
        assert outcome.banked == 9


class TestGameConfig:
    """Tests for GameConfig dataclass."""

    def test_defaults(self):
        config = GameConfig()
        assert config.name_for(PlayerId.ONE) == "Player One"
        assert config.name_for(PlayerId.TWO) == "Player Two"

    def test_names_are_stripped(self):
        config = GameConfig(player_one_name="  Ada ", player_two_name="Grace")
        assert config.name_for(PlayerId.ONE) == "Ada"

    def test_empty_name_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            GameConfig(player_one_name="   ")

    def test_long_name_raises(self):
        with pytest.raises(ValueError, match="at most 30"):
            GameConfig(player_two_name="x" * 31)

    def test_duplicate_names_raise(self):
        with pytest.raises(ValueError, match="distinct"):
            GameConfig(player_one_name="Sam", player_two_name="Sam")


class TestPlayer:
    def test_add_points(self):
        player = Player(id=PlayerId.ONE, name="Ada")
        assert player.add_points(12) == 12
        assert player.add_points(0) == 12

    def test_add_negative_points_raises(self):
        player = Player(id=PlayerId.ONE, name="Ada")
        with pytest.raises(ValueError, match="negative"):
            player.add_points(-3)
        assert player.total_points == 0

    def test_reset(self):
        player = Player(id=PlayerId.TWO, name="Grace", total_points=44)
        player.reset_total_points()
        assert player.total_points == 0

    def test_str_is_name(self):
        assert str(Player(id=PlayerId.ONE, name="Ada")) == "Ada"


class TestGameStateError:
    def test_message_and_fields(self):
        err = GameStateError("roll", GamePhase.GAME_OVER, "the game is over")
        assert err.operation == "roll"
        assert err.phase is GamePhase.GAME_OVER
        assert "game_over" in str(err)
        assert isinstance(err, RuntimeError)


class TestValidators:
    """Tests for validation utilities."""

    def test_validate_die_values_ok(self):
        assert validate_die_values([1, 6, 3]) == (1, 6, 3)

    def test_validate_die_values_rejects_bool(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_die_values([True])

    def test_validate_die_values_max_count(self):
        with pytest.raises(ValueError, match="At most 2"):
            validate_die_values([1, 2, 3], max_count=2)

    def test_validate_frame_count(self):
        assert validate_frame_count(5, 5, 10) == 5
        with pytest.raises(ValueError, match="between 5 and 10"):
            validate_frame_count(4, 5, 10)

    def test_validate_score(self):
        assert validate_score(0) == 0
        with pytest.raises(ValueError, match="must be an integer"):
            validate_score(1.5)

    def test_validate_player_name(self):
        assert validate_player_name(" Ada ") == "Ada"
        with pytest.raises(ValueError, match="must be a string"):
            validate_player_name(None)
