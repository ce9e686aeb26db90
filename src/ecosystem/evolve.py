"""Driver loop that breeds an ecosystem for a fixed number of generations.

Example:
    >>> eco = Ecosystem([PiApproximator(rng.uniform(-10, 10), rng) for _ in range(10)], seed=42)
    >>> result = evolve(eco, mutation_rate=0.1, n_generations=50)
    >>> result.generations
    50
    >>> best = result.best

Example with callback for early stopping:
    >>> def close_enough(eco: Ecosystem, gen: int) -> bool:
    ...     return abs(eco.fittest().value - math.pi) < 1e-3
    >>>
    >>> result = evolve(eco, mutation_rate=0.1, n_generations=1000, callback=close_enough)
"""

import logging
import math
from collections.abc import Callable

import numpy as np

from ecosystem.ecosystem import Ecosystem
from ecosystem.results import EvolutionResult

_LOG = logging.getLogger(__name__)


def evolve(
    ecosystem: Ecosystem,
    mutation_rate: float,
    n_generations: int,
    callback: Callable[[Ecosystem, int], bool] | None = None,
) -> EvolutionResult:
    """Advance an ecosystem generation by generation and track the fittest.

    Args:
        ecosystem: The ecosystem to evolve. It is advanced in place.
        mutation_rate: Rate passed to every ``advance_generation`` call.
        n_generations: Maximum number of generations to breed.
        callback: Optional callback called before each generation.
            Signature: (ecosystem: Ecosystem, generation: int) -> bool
            If callback returns True, evolution stops early.

    Returns:
        EvolutionResult with the final fittest organism, its fitness, and the
        best fitness after every completed generation.

    Raises:
        ValueError: If n_generations is negative or mutation_rate is invalid.
    """
    if n_generations < 0:
        raise ValueError(f"n_generations must be non-negative, got {n_generations}")
    if math.isnan(mutation_rate) or mutation_rate < 0:
        raise ValueError(f"mutation rate must be non-negative, got {mutation_rate}")

    history: list[float] = []
    fitness: np.ndarray | None = None

    for gen in range(n_generations):
        if callback is not None and callback(ecosystem, gen):
            _LOG.debug("Callback stopped evolution before generation %d", gen)
            break

        ecosystem.advance_generation(mutation_rate)
        fitness = ecosystem.evaluate()
        history.append(float(fitness.max()))

    if fitness is None:
        fitness = ecosystem.evaluate()
    best_idx = int(np.argmax(fitness))
    best = ecosystem[best_idx]
    best_fitness = float(fitness[best_idx])

    _LOG.info("Evolved %d generations, best fitness %.6g", len(history), best_fitness)

    return EvolutionResult(
        best=best,
        best_fitness=best_fitness,
        history=np.array(history, dtype=np.float64),
        generations=len(history),
    )
