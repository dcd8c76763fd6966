"""
Pig - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence


MAX_NAME_LENGTH = 30


def validate_die_values(
    values: Sequence[int],
    sides: int = 6,
    min_count: int = 1,
    max_count: int | None = None
) -> tuple[int, ...]:
    """
    Validate and normalize die values.

    Args:
        values: Sequence of die values to validate
        sides: Number of faces on the die (determines valid range)
        min_count: Minimum number of values required
        max_count: Maximum number of values allowed (None = no limit)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} die value(s) required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} die values allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= sides):
            raise ValueError(
                f"Invalid die value {value} at index {i}. Must be between 1 and {sides}."
            )

    return values_tuple


def validate_frame_count(count: int, min_frames: int, max_frames: int) -> int:
    """
    Validate the number of faces drawn for an animated roll.

    Args:
        count: Number of frames requested
        min_frames: Smallest allowed count
        max_frames: Largest allowed count

    Returns:
        Validated count

    Raises:
        ValueError: If count is outside the allowed range
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Frame count must be an integer, got {type(count).__name__}.")

    if not (min_frames <= count <= max_frames):
        raise ValueError(
            f"Frame count must be between {min_frames} and {max_frames}, got {count}."
        )

    return count


def validate_score(score: int) -> int:
    """
    Validate a score value.

    Raises:
        ValueError: If score is not a non-negative integer
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_player_name(name: str) -> str:
    """
    Validate a player display name.

    Returns:
        The name with surrounding whitespace removed

    Raises:
        ValueError: If name is empty or too long
    """
    if not isinstance(name, str):
        raise ValueError(f"Player name must be a string, got {type(name).__name__}.")

    stripped = name.strip()
    if not stripped:
        raise ValueError("Player name cannot be empty.")

    if len(stripped) > MAX_NAME_LENGTH:
        raise ValueError(
            f"Player name must be at most {MAX_NAME_LENGTH} characters, got {len(stripped)}."
        )

    return stripped
