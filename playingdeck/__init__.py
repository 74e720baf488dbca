"""
playingdeck - a standard playing-card deck

Cards are immutable (value, suit) pairs with optional jokers. A Deck tracks
which cards are still undrawn and which have been drawn, and supports
drawing, discarding and shuffling.

Usage:
    from playingdeck import Deck, Card, Value, Suit
    from playingdeck.schemas import DeckConfig, build_deck
"""

__version__ = "0.1.0"

from playingdeck.core.card import Card, Suit, Value, new_card, new_joker
from playingdeck.core.deck import Deck
from playingdeck.core.exceptions import DeckError, EmptyDeckError, InsufficientCardsError

__all__ = [
    "Card",
    "Suit",
    "Value",
    "new_card",
    "new_joker",
    "Deck",
    "DeckError",
    "EmptyDeckError",
    "InsufficientCardsError",
    "__version__",
]
