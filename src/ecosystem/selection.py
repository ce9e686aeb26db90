"""Roulette wheel (fitness-proportionate) parent selection."""

import logging

import numpy as np

from ecosystem.exceptions import InvalidPopulationError

_LOG = logging.getLogger(__name__)


def roulette_wheel(fitness: np.ndarray, n_draws: int, rng: np.random.Generator) -> np.ndarray:
    """Draw indices with probability proportional to fitness.

    Each draw is independent and made with replacement. For fitness values f_i
    with total W = Σ f_j, index i is drawn with probability p_i = f_i / W.

    The wheel is a cumulative-weight array searched with a uniform draw in
    [0, W). An individual with zero fitness occupies an empty interval and is
    never drawn while some other individual has positive fitness. When W is 0
    every individual is drawn with equal probability instead.

    Individuals with infinite fitness outweigh all others and are drawn
    uniformly among themselves. Finite weights whose total overflows are
    rescaled by their maximum before building the wheel.

    Fitness values must be non-negative. Negative weights are not checked and
    give undefined draws.

    Args:
        fitness: Fitness values, shape (n,).
        n_draws: Number of indices to draw.
        rng: Random number generator for reproducibility.

    Returns:
        Array of drawn indices with shape (n_draws,) and dtype np.intp.

    Raises:
        InvalidPopulationError: If fitness is empty.
        ValueError: If fitness is not 1D or n_draws is negative.

    Example:
        >>> rng = np.random.default_rng(42)
        >>> idx = roulette_wheel(np.array([0.0, 0.0, 100.0]), 5, rng)
        >>> idx
        array([2, 2, 2, 2, 2])
    """
    fitness = np.asarray(fitness, dtype=np.float64)
    if fitness.ndim != 1:
        raise ValueError(f"fitness must be 1D, got shape {fitness.shape}")
    if fitness.shape[0] == 0:
        raise InvalidPopulationError("roulette wheel selection requires at least one individual")
    if n_draws < 0:
        raise ValueError(f"n_draws must be non-negative, got {n_draws}")

    pop_size = fitness.shape[0]

    infinite = np.isposinf(fitness)
    if infinite.any():
        candidates = np.flatnonzero(infinite)
        _LOG.debug(
            "%d of %d individuals have infinite fitness, selecting uniformly among them", candidates.size, pop_size
        )
        return candidates[rng.integers(0, candidates.size, size=n_draws)].astype(np.intp)

    with np.errstate(over="ignore"):
        cumulative = np.cumsum(fitness)
    if not np.isfinite(cumulative[-1]):
        # Finite weights whose sum overflows; rescaling keeps the proportions
        cumulative = np.cumsum(fitness / fitness.max())
    total = cumulative[-1]

    if total == 0:
        _LOG.debug("Total fitness is zero, selecting uniformly among %d individuals", pop_size)
        return rng.integers(0, pop_size, size=n_draws).astype(np.intp)

    draws = rng.uniform(0.0, total, size=n_draws)
    selected = np.searchsorted(cumulative, draws, side="right")

    # Rounding in uniform() can land exactly on the total; map it to the last
    # individual with positive weight
    selected[selected == pop_size] = np.searchsorted(cumulative, total, side="left")

    return selected.astype(np.intp)
