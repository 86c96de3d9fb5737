"""Seeded random number generator for deterministic Pokémon TCG simulation.

Every random decision in a game (coin flips, deck shuffles, random discards,
...) goes through a single :class:`SeededRNG` so that a game can be replayed
exactly from its seed, or resumed mid-game from an :class:`RNGSnapshot`.

The generator is a linear congruential generator with the glibc constants
below.  Saved seeds and replays are only valid against these exact values.
"""

from __future__ import annotations

import hashlib
import logging
import time
from enum import IntEnum
from typing import Any, Mapping, Sequence, TypeVar

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

T = TypeVar("T")

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2**31


class CoinResult(IntEnum):
    """Outcome of a single coin flip."""

    TAILS = 0
    HEADS = 1


HEADS = CoinResult.HEADS
TAILS = CoinResult.TAILS


class RNGSnapshot(BaseModel):
    """Immutable ``{seed, state}`` pair that can rebuild an RNG mid-sequence.

    Safe to persist or transmit: it holds plain integers and never refers
    back to the RNG that produced it.
    """

    model_config = {"frozen": True, "strict": True}

    seed: int = Field(ge=0, lt=LCG_MODULUS)
    state: int = Field(ge=0, lt=LCG_MODULUS)


def generate_seed() -> int:
    """Return a 31-bit seed derived from the wall clock."""
    return time.time_ns() % LCG_MODULUS


def _check_31_bit(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {value!r}")
    if not 0 <= value < LCG_MODULUS:
        raise ValueError(
            f"{name} must be in [0, {LCG_MODULUS}), got {value}"
        )
    return value


class SeededRNG:
    """Deterministic RNG whose whole future is fixed by its seed.

    Parameters
    ----------
    seed:
        31-bit non-negative integer.  When omitted a seed is derived from
        the wall clock; read it back through :attr:`seed` to reproduce the
        game later.

    Instances are not thread-safe.  One instance belongs to one
    game-resolution loop; callers sharing it across threads must serialize
    their draws or the replay guarantee is lost.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = generate_seed()
            logger.debug("No seed given, derived seed %d from clock", seed)
        self._seed = _check_31_bit("seed", seed)
        self._state = self._seed

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> int:
        """Return the seed this RNG was initialised with."""
        return self._seed

    @property
    def state(self) -> int:
        """Return the current internal LCG state."""
        return self._state

    # -- core draw -----------------------------------------------------------

    def _next(self) -> float:
        self._state = (LCG_MULTIPLIER * self._state + LCG_INCREMENT) % LCG_MODULUS
        return self._state / LCG_MODULUS

    def random(self) -> float:
        """Return a random float in the half-open interval ``[0.0, 1.0)``."""
        return self._next()

    def next_int(self, low: int, high: int) -> int:
        """Return a random integer *N* such that ``low <= N <= high``."""
        if low > high:
            raise ValueError(f"next_int requires low <= high, got {low} > {high}")
        return int(self._next() * (high - low + 1)) + low

    # -- coins ---------------------------------------------------------------

    def flip_coin(self) -> CoinResult:
        # A draw of exactly 0.5 is heads.
        return TAILS if self._next() < 0.5 else HEADS

    def flip_coins(self, count: int) -> list[CoinResult]:
        """Flip *count* coins and return the results in flip order."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return [self.flip_coin() for _ in range(count)]

    def flip_until_tails(self) -> int:
        """Flip until tails comes up; return the number of heads before it."""
        heads = 0
        while self.flip_coin() is HEADS:
            heads += 1
        return heads

    # -- sequences -----------------------------------------------------------

    def shuffle(self, lst: list[T]) -> list[T]:
        """Shuffle *lst* in-place and return the same list.

        Backward Fisher-Yates: for ``i`` from the last index down to 1,
        swap ``lst[i]`` with ``lst[next_int(0, i)]``.  Replays depend on this
        exact draw order.
        """
        for i in range(len(lst) - 1, 0, -1):
            j = self.next_int(0, i)
            lst[i], lst[j] = lst[j], lst[i]
        return lst

    def shuffled(self, seq: Sequence[T]) -> list[T]:
        """Return a shuffled copy of *seq*, leaving *seq* untouched."""
        return self.shuffle(list(seq))

    def pick(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        if not seq:
            raise ValueError("Cannot pick from an empty sequence")
        return seq[self.next_int(0, len(seq) - 1)]

    def pick_n(self, seq: Sequence[T], n: int) -> list[T]:
        """Return *n* distinct elements of *seq*, drawn without replacement.

        If *n* covers the whole sequence this is :meth:`shuffled`.
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        if n >= len(seq):
            return self.shuffled(seq)

        pool = list(seq)
        picked: list[T] = []
        for _ in range(n):
            picked.append(pool.pop(self.next_int(0, len(pool) - 1)))
        return picked

    # -- state management ----------------------------------------------------

    def set_state(self, state: int) -> None:
        """Overwrite the internal state.  Only meant for snapshot restore."""
        self._state = _check_31_bit("state", state)

    def reset(self) -> None:
        """Rewind to the start of the sequence, as if freshly constructed."""
        self._state = self._seed

    def snapshot(self) -> RNGSnapshot:
        return RNGSnapshot(seed=self._seed, state=self._state)

    @classmethod
    def from_snapshot(cls, snapshot: RNGSnapshot | Mapping[str, int]) -> SeededRNG:
        """Rebuild an RNG whose next draw matches the snapshotted one."""
        if not isinstance(snapshot, RNGSnapshot):
            snapshot = RNGSnapshot.model_validate(snapshot)
        rng = cls(snapshot.seed)
        rng.set_state(snapshot.state)
        logger.debug(
            "Restored RNG seed=%d at state=%d", snapshot.seed, snapshot.state
        )
        return rng

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> SeededRNG:
        """Create a child RNG derived from this RNG's seed, state and *name*.

        Forking does not consume any draws from the parent.  The same
        *name* forked at the same point always yields the same child, so
        sub-systems (e.g. ``"setup"``, ``"attacks"``) can get their own
        stream without perturbing each other.
        """
        digest = hashlib.sha256(
            f"{self._seed}:{self._state}:{name}".encode()
        ).digest()
        child_seed = int.from_bytes(digest[:8], "big") % LCG_MODULUS
        logger.debug("Forked %r from seed=%d -> seed=%d", name, self._seed, child_seed)
        return type(self)(child_seed)

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"SeededRNG(seed={self._seed}, state={self._state})"


def create_rng(seed: int | None = None) -> SeededRNG:
    """Create a new :class:`SeededRNG`, optionally with an explicit seed."""
    return SeededRNG(seed)
