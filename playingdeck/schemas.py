"""
Pydantic schemas for deck configuration and state snapshots.
"""

import random
from typing import List, Optional
from pydantic import BaseModel, Field

from playingdeck.core.deck import Deck
from playingdeck.core.rules import BUILD_SHUFFLE_PASSES, DEFAULT_JOKERS


# ============= Configuration =============

class DeckConfig(BaseModel):
    """Settings for building a deck."""
    jokers: int = Field(ge=0, default=DEFAULT_JOKERS, description="Jokers added under the standard 52 cards")
    shuffle_passes: int = Field(ge=0, default=BUILD_SHUFFLE_PASSES, description="Shuffle passes applied after building")
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible random source")


# ============= State Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    value: int
    suit: int
    text: str
    joker: bool


class DeckStateSchema(BaseModel):
    """Complete deck state."""
    count: int
    remaining: int
    undrawn: List[CardSchema] = []
    drawn: List[CardSchema] = []


def build_deck(config: DeckConfig) -> Deck:
    """Build a deck from a validated DeckConfig, shuffling it if asked."""
    rng = random.Random(config.seed) if config.seed is not None else None
    deck = Deck(jokers=config.jokers, rng=rng)
    deck.shuffle(config.shuffle_passes)
    return deck


def deck_state(deck: Deck) -> DeckStateSchema:
    """Return the current deck state as a serializable schema."""
    return DeckStateSchema(
        count=deck.count,
        remaining=deck.remaining_count,
        undrawn=[CardSchema(**card.to_dict()) for card in deck.undrawn_cards],
        drawn=[CardSchema(**card.to_dict()) for card in deck.drawn_cards],
    )
