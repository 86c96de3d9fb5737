"""Card zones for one player in a headless Pokémon TCG simulation.

Holds the deck, hand, discard pile and prize cards of a single player.
Every shuffle and random selection takes the game's :class:`SeededRNG`
explicitly so a game can be replayed from its seed.
"""

from __future__ import annotations

import logging
import uuid
from typing import Literal

from pydantic import BaseModel, Field

from ptcg_sim.sim.core.rng import SeededRNG

logger = logging.getLogger(__name__)

DEFAULT_PRIZE_COUNT = 6
OPENING_HAND_SIZE = 7


# ---------------------------------------------------------------------------
# CardInstance
# ---------------------------------------------------------------------------

class CardInstance(BaseModel):
    """A single physical card.

    Each copy has its own ``id`` so it can be tracked across zones even
    when a deck holds four copies of the same ``card_id``.
    """

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    card_id: str
    """References the card record, e.g. ``"base1-58"``."""

    name: str = ""
    is_basic_pokemon: bool = False


# ---------------------------------------------------------------------------
# CardZones
# ---------------------------------------------------------------------------

class CardZones(BaseModel):
    """The deck, hand, discard and prize zones of one player.

    Index 0 of ``deck`` is the top of the deck.  Unlike the discard-reshuffle
    of deckbuilders, drawing from an empty deck simply draws nothing; the
    caller decides whether that loses the game.
    """

    deck: list[CardInstance] = Field(default_factory=list)
    hand: list[CardInstance] = Field(default_factory=list)
    discard: list[CardInstance] = Field(default_factory=list)
    prizes: list[CardInstance] = Field(default_factory=list)

    # -- queries -------------------------------------------------------------

    @property
    def deck_size(self) -> int:
        return len(self.deck)

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    @property
    def prizes_remaining(self) -> int:
        return len(self.prizes)

    def has_basic_in_hand(self) -> bool:
        return any(c.is_basic_pokemon for c in self.hand)

    # -- drawing -------------------------------------------------------------

    def draw_cards(self, n: int) -> list[CardInstance]:
        """Draw up to *n* cards from the top of the deck into the hand.

        Returns the cards actually drawn (fewer than *n* if the deck runs
        out).
        """
        drawn: list[CardInstance] = []
        for _ in range(n):
            if not self.deck:
                break
            card = self.deck.pop(0)
            self.hand.append(card)
            drawn.append(card)
        return drawn

    def shuffle_deck(self, rng: SeededRNG) -> None:
        """Shuffle the deck in-place."""
        rng.shuffle(self.deck)

    # -- setup ---------------------------------------------------------------

    def deal_opening_hand(
        self, rng: SeededRNG, hand_size: int = OPENING_HAND_SIZE
    ) -> int:
        """Shuffle and draw an opening hand, mulliganing until it has a Basic.

        Returns the number of mulligans taken.
        """
        if hand_size < 1:
            raise ValueError(f"hand_size must be >= 1, got {hand_size}")
        if not any(c.is_basic_pokemon for c in self.deck + self.hand):
            raise ValueError("Deck contains no Basic Pokémon; cannot deal a hand")

        mulligans = 0
        self.shuffle_hand_into_deck(rng)
        self.draw_cards(hand_size)
        while not self.has_basic_in_hand():
            mulligans += 1
            logger.debug("Mulligan %d: no Basic Pokémon in opening hand", mulligans)
            self.shuffle_hand_into_deck(rng)
            self.draw_cards(hand_size)
        return mulligans

    def set_prizes(self, count: int = DEFAULT_PRIZE_COUNT) -> None:
        """Move the top *count* cards of the deck face down as prizes."""
        if count > len(self.deck):
            raise ValueError(
                f"Cannot set {count} prizes from a deck of {len(self.deck)}"
            )
        self.prizes.extend(self.deck[:count])
        del self.deck[:count]

    def take_prize(self, index: int) -> CardInstance:
        """Move the prize card at *index* into the hand."""
        if not 0 <= index < len(self.prizes):
            raise ValueError(
                f"Prize index {index} out of range ({len(self.prizes)} remaining)"
            )
        card = self.prizes.pop(index)
        self.hand.append(card)
        return card

    # -- pile movement -------------------------------------------------------

    def shuffle_hand_into_deck(self, rng: SeededRNG) -> None:
        """Put the whole hand into the deck, then shuffle the deck."""
        self.deck.extend(self.hand)
        self.hand.clear()
        rng.shuffle(self.deck)

    def discard_random_from_hand(
        self, n: int, rng: SeededRNG
    ) -> list[CardInstance]:
        """Discard *n* cards chosen at random from the hand.

        Cards land in the discard pile in the order they were picked.
        """
        # Select by position; copied cards can share an ``id``.
        positions = rng.pick_n(range(len(self.hand)), n)
        chosen = [self.hand[i] for i in positions]
        taken = set(positions)
        self.hand = [c for i, c in enumerate(self.hand) if i not in taken]
        self.discard.extend(chosen)
        return chosen

    def add_to_deck(
        self,
        card: CardInstance,
        position: Literal["top", "random", "bottom"] = "top",
        rng: SeededRNG | None = None,
    ) -> None:
        """Insert a card into the deck at the given *position*.

        ``"random"`` requires an *rng* instance.
        """
        if position == "top":
            self.deck.insert(0, card)
        elif position == "bottom":
            self.deck.append(card)
        elif position == "random":
            if rng is None:
                raise ValueError("rng is required when position='random'")
            idx = rng.next_int(0, len(self.deck))
            self.deck.insert(idx, card)
        else:
            raise ValueError(f"Invalid position: {position!r}")
