"""
Pig - Game Log Messages

Text templates for the game log and the win alert. Pass a customized
``GameMessages`` to the engine to localize the wording.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameMessages:
    """
    Format templates used by the engine.

    Placeholders:
        {player}: name of the acting player
        {next_player}: name of the player taking over
        {face}: die face rolled
        {points}: points held
        {score}: winner's final score
        {rolls}: winner's roll count for the game
    """
    welcome: str = "Welcome to Pig, {player}!\nPress 'Roll' to begin."
    rolled: str = "{player} rolled a {face}."
    bust: str = "{player} rolled a {face}.\n{next_player}, you're up!"
    held: str = "{player} holds with {points}.\n{next_player}, you're up!"
    victory: str = "{player} has won!"
    win_title: str = "Winner!"
    win_message: str = "{player},\nyou won with a score of {score} in {rolls} rolls."
    win_action: str = "New Game"

    def welcome_text(self, player: str) -> str:
        return self.welcome.format(player=player)

    def rolled_text(self, player: str, face: int) -> str:
        return self.rolled.format(player=player, face=face)

    def bust_text(self, player: str, face: int, next_player: str) -> str:
        return self.bust.format(player=player, face=face, next_player=next_player)

    def held_text(self, player: str, points: int, next_player: str) -> str:
        return self.held.format(player=player, points=points, next_player=next_player)

    def victory_text(self, player: str) -> str:
        return self.victory.format(player=player)

    def win_message_text(self, player: str, score: int, rolls: int) -> str:
        return self.win_message.format(player=player, score=score, rolls=rolls)


DEFAULT_MESSAGES = GameMessages()
