"""
Tests for deck configuration and snapshot schemas.
"""

import pytest
from pydantic import ValidationError

from playingdeck.core.deck import Deck
from playingdeck.schemas import CardSchema, DeckConfig, DeckStateSchema, build_deck, deck_state


class TestDeckConfig:
    """Tests for DeckConfig validation and build_deck."""

    def test_defaults(self):
        config = DeckConfig()
        assert config.jokers == 0
        assert config.shuffle_passes == 0
        assert config.seed is None

    def test_default_config_builds_ordered_deck(self):
        assert build_deck(DeckConfig()).undrawn_cards == Deck().undrawn_cards

    def test_negative_jokers_rejected(self):
        with pytest.raises(ValidationError):
            DeckConfig(jokers=-1)

    def test_negative_shuffle_passes_rejected(self):
        with pytest.raises(ValidationError):
            DeckConfig(shuffle_passes=-2)

    def test_build_deck_unshuffled(self):
        deck = build_deck(DeckConfig(jokers=3))
        assert deck.count == 55
        assert deck.undrawn_cards == Deck(3).undrawn_cards

    def test_build_deck_seeded_shuffle(self):
        config = DeckConfig(jokers=1, shuffle_passes=2, seed=99)
        deck1 = build_deck(config)
        deck2 = build_deck(config)
        assert deck1.undrawn_cards == deck2.undrawn_cards
        assert deck1.undrawn_cards != Deck(1).undrawn_cards


class TestSnapshot:
    """Tests for deck_state()."""

    def test_snapshot_of_fresh_deck(self, joker_deck):
        state = deck_state(joker_deck)
        assert isinstance(state, DeckStateSchema)
        assert state.count == 54
        assert state.remaining == 54
        assert state.drawn == []
        assert state.undrawn[0] == CardSchema(value=2, suit=1, text="Two of Clubs", joker=False)
        assert state.undrawn[-1].joker
        assert state.undrawn[-1].text == "Joker"

    def test_snapshot_after_draw(self, deck):
        deck.draw_many(3)
        state = deck_state(deck)
        assert state.remaining == 49
        assert [c.text for c in state.drawn] == ["Two of Clubs", "Three of Clubs", "Four of Clubs"]

    def test_snapshot_serializes(self, deck):
        deck.draw()
        data = deck_state(deck).model_dump()
        assert data["count"] == 52
        assert data["drawn"][0]["text"] == "Two of Clubs"
