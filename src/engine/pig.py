"""
Pig - Rules Engine

Single-die push-your-luck game. Roll a D6: 2-6 adds face value to the
turn score, rolling 1 = bust (lose all turn points, pass the die). Hold
to bank the turn score. First to 100 wins.

All methods are stateless class methods operating on immutable data.
The stateful turn machine lives in ``src.engine.game``.
"""

import random

from src.engine.base import (
    DIE_SIDES,
    MAX_ROLL_FRAMES,
    MIN_ROLL_FRAMES,
    TURN_ENDING_FACE,
    WIN_THRESHOLD,
    DiceRoll,
    PlayerId,
)
from src.engine.validators import validate_frame_count, validate_score


class PigEngine:
    """
    Stateless rules for Pig.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    NUM_DICE = 1
    SIDES = DIE_SIDES
    TURN_ENDING_FACE = TURN_ENDING_FACE
    WIN_THRESHOLD = WIN_THRESHOLD

    @classmethod
    def roll_dice(cls, rng: random.Random | None = None) -> DiceRoll:
        """Roll a single D6.

        Args:
            rng: Optional random source (module-level random by default)

        Returns:
            DiceRoll with one random value (1-6)
        """
        source = rng or random
        return DiceRoll.single(source.randint(1, cls.SIDES))

    @classmethod
    def roll_frames(
        cls,
        count: int | None = None,
        rng: random.Random | None = None,
    ) -> DiceRoll:
        """Draw the faces shown by an animated roll.

        Each face is an independent draw; only the last one resolves
        the roll.

        Args:
            count: Number of faces to draw (random 5-10 when omitted)
            rng: Optional random source

        Returns:
            DiceRoll holding every face in display order
        """
        source = rng or random
        if count is None:
            count = source.randint(MIN_ROLL_FRAMES, MAX_ROLL_FRAMES)
        else:
            validate_frame_count(count, 1, MAX_ROLL_FRAMES)
        return DiceRoll.from_sequence(
            [source.randint(1, cls.SIDES) for _ in range(count)]
        )

    @classmethod
    def is_bust(cls, dice: DiceRoll | tuple[int, ...]) -> bool:
        """Check if a roll is a bust (resolves to a 1).

        Args:
            dice: A DiceRoll or tuple of die values

        Returns:
            True if the resolving die shows the turn-ending face
        """
        values = dice.values if isinstance(dice, DiceRoll) else dice
        return values[-1] == cls.TURN_ENDING_FACE

    @classmethod
    def process_roll(
        cls,
        turn_score: int,
        roll: DiceRoll | None = None,
        rng: random.Random | None = None,
    ) -> tuple[int, DiceRoll, bool]:
        """Process a complete roll: roll dice, check bust, update turn score.

        Args:
            turn_score: Current accumulated turn score
            roll: Optional pre-determined roll (for testing)
            rng: Optional random source used when no roll is given

        Returns:
            Tuple of (new_turn_score, dice_roll, is_bust)
        """
        validate_score(turn_score)
        if roll is None:
            roll = cls.roll_dice(rng)

        if cls.is_bust(roll):
            return (0, roll, True)

        return (turn_score + roll.face, roll, False)

    @classmethod
    def bank(cls, total_points: int, turn_score: int) -> tuple[int, bool]:
        """Bank a turn score.

        Args:
            total_points: Player's banked score before the hold
            turn_score: At-risk points being banked

        Returns:
            Tuple of (new_total, has_won)
        """
        new_total = validate_score(total_points) + validate_score(turn_score)
        return (new_total, cls.has_won(new_total))

    @classmethod
    def has_won(cls, total_points: int) -> bool:
        """Exactly reaching the threshold wins."""
        return total_points >= cls.WIN_THRESHOLD

    @classmethod
    def next_player(cls, player_id: PlayerId) -> PlayerId:
        return player_id.other
