"""
Pytest configuration and shared fixtures for playingdeck tests.
"""

import random

import pytest
from playingdeck.core.card import Card, Suit, Value
from playingdeck.core.deck import Deck


@pytest.fixture
def rng():
    """A seeded random source for reproducible shuffles."""
    return random.Random(1234)


@pytest.fixture
def deck(rng):
    """Create a fresh unshuffled deck without jokers."""
    return Deck(jokers=0, rng=rng)


@pytest.fixture
def joker_deck(rng):
    """Create a fresh unshuffled deck with two jokers."""
    return Deck(jokers=2, rng=rng)


@pytest.fixture
def empty_deck(deck):
    """A deck with every card drawn."""
    deck.draw_many(deck.remaining_count)
    return deck


@pytest.fixture
def two_of_hearts():
    return Card(Value.TWO, Suit.HEARTS)
