from backend.models.board import Board, Direction
from backend.models.cards import GARDEN_SYMBOLS, MATCH_SYMBOLS, SYMBOL_SETS, Card
from backend.models.scoreboard import Mark, Scoreboard

__all__ = [
    "Board",
    "Card",
    "Direction",
    "GARDEN_SYMBOLS",
    "MATCH_SYMBOLS",
    "Mark",
    "SYMBOL_SETS",
    "Scoreboard",
]
