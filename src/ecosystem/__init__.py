"""ecosystem: a small genetic algorithms library.

Organisms are user-defined candidate solutions implementing ``fitness``,
``breed`` and ``mutate``. An Ecosystem evolves a fixed-size population of
them with fitness-proportionate (roulette wheel) parent selection and full
generational replacement.

Example:
    >>> import math
    >>> import numpy as np
    >>> from ecosystem import Ecosystem
    >>> rng = np.random.default_rng(0)
    >>> class PiApproximator:
    ...     def __init__(self, value): self.value = value
    ...     def fitness(self): return 1.0 / abs(math.pi - self.value)
    ...     def breed(self, other): return PiApproximator((self.value + other.value) / 2)
    ...     def mutate(self, rate): self.value += rng.uniform(-rate, rate)
    >>> eco = Ecosystem([PiApproximator(v) for v in rng.uniform(-10, 10, size=10)], seed=42)
    >>> for _ in range(50):
    ...     eco.advance_generation(0.1)
    >>> len(eco)
    10
"""

from ecosystem.ecosystem import Ecosystem
from ecosystem.evolve import evolve
from ecosystem.exceptions import InvalidPopulationError
from ecosystem.protocols import Organism
from ecosystem.results import EvolutionResult
from ecosystem.selection import roulette_wheel

__all__ = [
    # Engine
    "Ecosystem",
    "evolve",
    # Capability interface
    "Organism",
    # Selection
    "roulette_wheel",
    # Result types
    "EvolutionResult",
    # Errors
    "InvalidPopulationError",
]
