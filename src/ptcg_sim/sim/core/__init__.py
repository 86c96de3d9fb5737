"""Core simulation primitives for the Pokémon TCG simulator."""

from ptcg_sim.sim.core.card_zones import CardInstance, CardZones
from ptcg_sim.sim.core.rng import (
    HEADS,
    TAILS,
    CoinResult,
    RNGSnapshot,
    SeededRNG,
    create_rng,
    generate_seed,
)

__all__ = [
    # rng
    "SeededRNG",
    "RNGSnapshot",
    "CoinResult",
    "HEADS",
    "TAILS",
    "create_rng",
    "generate_seed",
    # card_zones
    "CardInstance",
    "CardZones",
]
