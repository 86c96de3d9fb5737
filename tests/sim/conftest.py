"""Shared fixtures and helpers for simulation tests."""

from __future__ import annotations

import pytest

from ptcg_sim.sim.core.card_zones import CardInstance
from ptcg_sim.sim.core.rng import SeededRNG


@pytest.fixture
def rng() -> SeededRNG:
    """Fresh RNG on the seed the golden-vector tests are pinned to."""
    return SeededRNG(42)


def make_card(card_id: str, basic: bool = False) -> CardInstance:
    return CardInstance(card_id=card_id, name=card_id, is_basic_pokemon=basic)


def card_ids(cards: list[CardInstance]) -> list[str]:
    return [c.card_id for c in cards]
