"""
Deck errors.

Both are recoverable: the deck is left exactly as it was before the failing
call. They subclass ValueError so callers catching ValueError keep working.
"""


class DeckError(ValueError):
    """Base class for deck failures."""

    def __init__(self, message: str, requested: int = 0, remaining: int = 0):
        super().__init__(message)
        self.requested = requested
        self.remaining = remaining


class EmptyDeckError(DeckError):
    """Raised when drawing or discarding a single card from an empty deck."""

    def __init__(self):
        super().__init__("No cards remaining in the deck", requested=1, remaining=0)


class InsufficientCardsError(DeckError):
    """Raised when asking for more cards than remain undrawn."""

    def __init__(self, requested: int, remaining: int):
        super().__init__(
            f"Cannot take {requested} cards, only {remaining} remain",
            requested=requested,
            remaining=remaining,
        )
