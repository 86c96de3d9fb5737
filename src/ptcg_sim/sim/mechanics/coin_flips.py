"""Coin-flip mechanics -- flip conditions and heads-scaled damage."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ptcg_sim.sim.core.rng import HEADS, CoinResult

if TYPE_CHECKING:
    from ptcg_sim.sim.core.rng import SeededRNG

logger = logging.getLogger(__name__)


@dataclass
class CoinFlipOutcome:
    """Result of flipping one or more coins for an effect."""

    results: list[CoinResult] = field(default_factory=list)
    heads: int = 0
    tails: int = 0
    passed: bool = False

    @property
    def message(self) -> str:
        label = "Coin flips" if len(self.results) > 1 else "Coin flip"
        faces = ", ".join("Heads" if r is HEADS else "Tails" for r in self.results)
        return f"{label}: {faces}"


def flip_coin_condition(
    rng: SeededRNG, count: int = 1, required_heads: int = 1
) -> CoinFlipOutcome:
    """Flip *count* coins; the condition passes on at least *required_heads*."""
    results = rng.flip_coins(count)
    heads = sum(1 for r in results if r is HEADS)
    outcome = CoinFlipOutcome(
        results=results,
        heads=heads,
        tails=count - heads,
        passed=heads >= required_heads,
    )
    logger.debug("%s (passed=%s)", outcome.message, outcome.passed)
    return outcome


def damage_per_heads(
    rng: SeededRNG, coins: int, damage: int
) -> tuple[int, CoinFlipOutcome]:
    """'Flip N coins. This attack does X damage times the number of heads.'"""
    outcome = flip_coin_condition(rng, count=coins, required_heads=1)
    return outcome.heads * damage, outcome


def damage_until_tails(rng: SeededRNG, damage: int) -> tuple[int, int]:
    """'Flip a coin until you get tails. X damage for each heads.'

    Returns ``(damage, heads)``.
    """
    heads = rng.flip_until_tails()
    logger.debug("Flipped %d heads before tails", heads)
    return heads * damage, heads
