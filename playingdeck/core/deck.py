"""
The Deck class.

A deck keeps two lists: the undrawn cards (index 0 is the top) and the drawn
cards, in the order they left the undrawn list. Cards only move from undrawn
to drawn one draw or discard at a time, and back again all at once through
full_shuffle(). The total number of cards never changes.

A deck is not thread-safe. Callers sharing one deck between threads must
serialize access themselves.
"""

from __future__ import annotations
import logging
import random
from typing import List, Optional

from playingdeck.core.card import Card, SUITS, VALUES, new_joker
from playingdeck.core.exceptions import EmptyDeckError, InsufficientCardsError
from playingdeck.core.rules import (
    DEFAULT_JOKERS,
    DEFAULT_SHUFFLE_PASSES,
    FULL_SHUFFLE_PASSES,
)

logger = logging.getLogger(__name__)


class Deck:
    """
    A standard 52-card deck plus any number of jokers.

    Usage:
        deck = Deck(jokers=2)
        deck.shuffle()
        hand = deck.draw_many(5)
        deck.discard()
        deck.full_shuffle()

    The random source can be injected for reproducible shuffles:
        deck = Deck(rng=random.Random(42))
    """

    def __init__(self, jokers: int = DEFAULT_JOKERS, rng: Optional[random.Random] = None):
        """
        Build a fresh, unshuffled deck.

        Args:
            jokers: Number of jokers placed under the standard cards
            rng: Random source used by shuffle(); a new unseeded
                random.Random() when omitted

        Raises:
            ValueError: If jokers is negative.
        """
        if jokers < 0:
            raise ValueError(f"Joker count must be non-negative, got {jokers}")

        self._rng = rng if rng is not None else random.Random()
        self._cards: List[Card] = []
        self._drawn: List[Card] = []

        for suit in SUITS:
            for value in VALUES:
                self._add_card(Card(value, suit))
        for _ in range(jokers):
            self._add_card(new_joker())

        logger.debug(f"Built deck with {len(self._cards)} cards ({jokers} jokers)")

    def _add_card(self, card: Card) -> None:
        self._cards.append(card)

    @property
    def count(self) -> int:
        """Total number of cards in the deck, drawn or not."""
        return len(self._cards) + len(self._drawn)

    @property
    def remaining_count(self) -> int:
        """Number of undrawn cards."""
        return len(self._cards)

    @property
    def undrawn_cards(self) -> List[Card]:
        """Undrawn cards, top first."""
        return self._cards.copy()

    @property
    def drawn_cards(self) -> List[Card]:
        """Drawn and discarded cards, in the order they were taken."""
        return self._drawn.copy()

    def draw(self) -> Card:
        """
        Draw the top card.

        Raises:
            EmptyDeckError: If no undrawn cards remain.
        """
        if not self._cards:
            raise EmptyDeckError()

        card = self._cards.pop(0)
        self._drawn.append(card)
        return card

    def draw_many(self, amount: int) -> List[Card]:
        """
        Draw `amount` cards from the top, top card first.

        Drawing zero cards is allowed and returns an empty list.

        Raises:
            ValueError: If amount is negative.
            InsufficientCardsError: If fewer than `amount` cards remain.
        """
        if amount < 0:
            raise ValueError(f"Cannot draw a negative number of cards: {amount}")
        if amount > len(self._cards):
            raise InsufficientCardsError(amount, len(self._cards))

        drawn = self._cards[:amount]
        self._cards = self._cards[amount:]
        self._drawn.extend(drawn)
        return drawn

    def discard(self) -> None:
        """
        Move the top card to the drawn cards without returning it.

        Raises:
            EmptyDeckError: If no undrawn cards remain.
        """
        self.draw()

    def discard_many(self, amount: int) -> None:
        """
        Discard `amount` cards from the top.

        Raises:
            ValueError: If amount is negative.
            InsufficientCardsError: If fewer than `amount` cards remain.
        """
        self.draw_many(amount)

    def shuffle(self, amount: int = DEFAULT_SHUFFLE_PASSES) -> None:
        """
        Randomize the order of the undrawn cards `amount` times.

        Drawn cards are left alone. Each pass picks a uniformly random card
        out of the remaining working set until it is empty, which gives a
        uniform permutation. Does nothing when amount is zero or negative.
        """
        if amount <= 0:
            return

        self._cards = self._permute(self._cards, amount)
        logger.debug(f"Shuffled {len(self._cards)} undrawn cards {amount} times")

    def full_shuffle(self) -> None:
        """Put every drawn card back underneath the undrawn ones, then shuffle."""
        returned = len(self._drawn)
        self._cards = self._permute(self._cards + self._drawn, FULL_SHUFFLE_PASSES)
        self._drawn = []
        logger.debug(f"Returned {returned} drawn cards and shuffled {len(self._cards)} cards")

    def _permute(self, cards: List[Card], passes: int) -> List[Card]:
        # Works on copies; the deck is only updated once every pass is done
        for _ in range(passes):
            working = list(cards)
            cards = []
            while working:
                cards.append(working.pop(self._rng.randrange(len(working))))
        return cards

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self.remaining_count}/{self.count} cards remaining)"
