"""Memory match — flip two cards at a time and find every pair."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from enum import StrEnum

from backend.models.cards import MATCH_SYMBOLS, Card

logger = logging.getLogger(__name__)


class FlipResult(StrEnum):
    IGNORED = "ignored"
    FLIPPED = "flipped"
    MATCH = "match"
    MISMATCH = "mismatch"


class MemoryMatch:
    """A single memory match round.

    At most two cards are face up.  A mismatched pair stays face up until
    :meth:`settle` turns it back down; frontends call it after a short
    delay so the player can see both symbols.
    """

    def __init__(
        self,
        symbols: Sequence[str] = MATCH_SYMBOLS,
        rng: random.Random | None = None,
    ) -> None:
        if not symbols:
            raise ValueError("Memory match needs at least one symbol.")
        if len(set(symbols)) != len(symbols):
            raise ValueError(f"Symbols must be distinct, got {list(symbols)}.")
        self.symbols = tuple(symbols)
        self._rng = rng
        self.reset()

    @staticmethod
    def deal(symbols: Sequence[str], rng: random.Random | None = None) -> list[Card]:
        """Return two cards per symbol in uniformly shuffled order."""
        rng = rng or random
        pool = [*symbols, *symbols]
        rng.shuffle(pool)
        return [Card(id=i, symbol=s) for i, s in enumerate(pool)]

    def reset(self) -> None:
        self.cards: list[Card] = self.deal(self.symbols, self._rng)
        self.face_up: list[int] = []
        self.matched: set[int] = set()
        self.moves: int = 0

    # -- actions --------------------------------------------------------------

    def flip(self, index: int) -> FlipResult:
        if (
            self.won
            or not 0 <= index < len(self.cards)
            or len(self.face_up) == 2
            or index in self.face_up
            or index in self.matched
        ):
            return FlipResult.IGNORED

        self.face_up.append(index)
        if len(self.face_up) < 2:
            return FlipResult.FLIPPED

        self.moves += 1
        first, second = self.face_up
        if self.cards[first].symbol != self.cards[second].symbol:
            return FlipResult.MISMATCH

        self.matched.update(self.face_up)
        self.face_up.clear()
        if self.won:
            logger.debug("memory match won in %d moves", self.moves)
        return FlipResult.MATCH

    def settle(self) -> None:
        """Turn a pending mismatch face down again."""
        if len(self.face_up) == 2:
            self.face_up.clear()

    # -- queries --------------------------------------------------------------

    @property
    def pending_mismatch(self) -> bool:
        return len(self.face_up) == 2

    def is_visible(self, index: int) -> bool:
        return index in self.face_up or index in self.matched

    @property
    def pairs_found(self) -> int:
        return len(self.matched) // 2

    @property
    def won(self) -> bool:
        return len(self.matched) == len(self.cards)
