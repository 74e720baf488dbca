"""
Card values, suits and the Card class.

A card is a (value, suit) pair. Jokers are marked by a sentinel in either
tag, so Card(Value.TWO, Suit.JOKER) is still a joker.
"""

from __future__ import annotations
from typing import Any, Dict, List
from enum import IntEnum


class Suit(IntEnum):
    """Card suits. JOKER is the sentinel used for jokers."""
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    SPADES = 4
    JOKER = 5

    def __str__(self) -> str:
        return SUIT_NAMES[self]


class Value(IntEnum):
    """Card values from Two to Ace. JOKER is the sentinel used for jokers."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14
    JOKER = 15

    def __str__(self) -> str:
        return VALUE_NAMES[self]


# String mappings
SUIT_NAMES = {
    Suit.CLUBS: "Clubs",
    Suit.DIAMONDS: "Diamonds",
    Suit.HEARTS: "Hearts",
    Suit.SPADES: "Spades",
    Suit.JOKER: "Joker",
}

VALUE_NAMES = {
    Value.TWO: "Two",
    Value.THREE: "Three",
    Value.FOUR: "Four",
    Value.FIVE: "Five",
    Value.SIX: "Six",
    Value.SEVEN: "Seven",
    Value.EIGHT: "Eight",
    Value.NINE: "Nine",
    Value.TEN: "Ten",
    Value.JACK: "Jack",
    Value.QUEEN: "Queen",
    Value.KING: "King",
    Value.ACE: "Ace",
    Value.JOKER: "Joker",
}

# All the values and suits of a normal playing card deck, in build order.
VALUES: List[Value] = [v for v in Value if v is not Value.JOKER]
SUITS: List[Suit] = [s for s in Suit if s is not Suit.JOKER]


def _tag_name(names: Dict[Any, str], tag: Any) -> str:
    # Unknown tags render like the joker sentinel
    return names.get(tag, "Joker")


class Card:
    """
    An immutable playing card.

    Cards are compared and hashed by their two tags, so two cards built from
    the same value and suit are interchangeable. No range checking is done:
    out-of-range tags are the caller's business.

    Usage:
        card = Card(Value.TWO, Suit.HEARTS)
        str(card)       # "Two of Hearts"
        card.is_joker   # False
    """

    __slots__ = ("_value", "_suit")

    def __init__(self, value: Value, suit: Suit):
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_suit", suit)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through __init__, bypassing __setattr__
        return (Card, (self._value, self._suit))

    @property
    def value(self) -> Value:
        return self._value

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def is_joker(self) -> bool:
        """True if either the value or the suit is the joker sentinel."""
        return self._value == Value.JOKER or self._suit == Suit.JOKER

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._value == other._value and self._suit == other._suit
        return False

    def __hash__(self) -> int:
        return hash((self._value, self._suit))

    def __repr__(self) -> str:
        return f"Card({self})"

    def __str__(self) -> str:
        if self.is_joker:
            return "Joker"
        value = _tag_name(VALUE_NAMES, self._value)
        suit = _tag_name(SUIT_NAMES, self._suit)
        return f"{value} of {suit}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "value": int(self._value),
            "suit": int(self._suit),
            "text": str(self),
            "joker": self.is_joker,
        }


def new_card(value: Value, suit: Suit) -> Card:
    """Return a card with the given value and suit."""
    return Card(value, suit)


def new_joker() -> Card:
    """Return a joker card."""
    return Card(Value.JOKER, Suit.JOKER)
