"""Game mechanics for the Pokémon TCG simulator.

Usage::

    from ptcg_sim.sim.mechanics import (
        flip_coin_condition, damage_per_heads, damage_until_tails,
    )
"""

# -- coin flips --------------------------------------------------------------
from .coin_flips import (
    CoinFlipOutcome,
    damage_per_heads,
    damage_until_tails,
    flip_coin_condition,
)

__all__ = [
    "CoinFlipOutcome",
    "flip_coin_condition",
    "damage_per_heads",
    "damage_until_tails",
]
