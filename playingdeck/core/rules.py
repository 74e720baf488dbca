"""
Deck constants.

A standard deck is every suit crossed with every value, built suit by suit:
Two of Clubs is the top card of a fresh deck and Ace of Spades is the last
non-joker card. Jokers go underneath.
"""

from playingdeck.core.card import SUITS, VALUES

# Deck composition
STANDARD_DECK_SIZE = len(SUITS) * len(VALUES)  # 52
DEFAULT_JOKERS = 0

# Shuffling
DEFAULT_SHUFFLE_PASSES = 1
FULL_SHUFFLE_PASSES = 10
# A deck built from a DeckConfig comes out in build order unless asked otherwise
BUILD_SHUFFLE_PASSES = 0
