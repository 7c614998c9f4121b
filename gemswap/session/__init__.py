"""
Session - Turn processing on top of a Board.

Components:
- GameLoop: Processes one move to completion before the next
- TurnResult: What a turn did
"""

from .game_loop import GameLoop, TurnResult

__all__ = [
    "GameLoop",
    "TurnResult",
]
