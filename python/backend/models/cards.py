"""Card model for the memory match game."""

from __future__ import annotations

from dataclasses import dataclass

# Symbol sets offered by the games page.
MATCH_SYMBOLS: tuple[str, ...] = ("🧠", "💜", "✨", "🌸", "🦋", "🌟", "💎", "🎯")
GARDEN_SYMBOLS: tuple[str, ...] = ("🌸", "🌺", "🌻", "🌷", "🌹", "🌼", "🍀", "🌿")

SYMBOL_SETS: dict[str, tuple[str, ...]] = {
    "match": MATCH_SYMBOLS,
    "garden": GARDEN_SYMBOLS,
}


@dataclass(frozen=True)
class Card:
    id: int
    symbol: str
