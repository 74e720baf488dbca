"""
playingdeck core - cards and the deck state machine.
"""

from playingdeck.core.card import Card, Suit, Value, SUITS, VALUES, new_card, new_joker
from playingdeck.core.deck import Deck
from playingdeck.core.exceptions import DeckError, EmptyDeckError, InsufficientCardsError

__all__ = [
    "Card",
    "Suit",
    "Value",
    "SUITS",
    "VALUES",
    "new_card",
    "new_joker",
    "Deck",
    "DeckError",
    "EmptyDeckError",
    "InsufficientCardsError",
]
