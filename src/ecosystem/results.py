"""Result type returned by the evolve driver.

The class is a frozen dataclass; the history array is copied on
construction to ensure immutability.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class EvolutionResult:
    """Outcome of running an ecosystem for a number of generations.

    Attributes:
        best: The fittest organism of the final population.
        best_fitness: Fitness of ``best``.
        history: Fitness of the fittest organism after each completed
            generation, shape (generations,).
        generations: Number of generations completed.

    Example:
        >>> result = EvolutionResult(
        ...     best=organism,
        ...     best_fitness=4.2,
        ...     history=np.array([1.0, 2.5, 4.2]),
        ...     generations=3,
        ... )
        >>> result.improvement
        3.2
    """

    best: Any
    best_fitness: float
    history: np.ndarray
    generations: int

    def __post_init__(self) -> None:
        """Validate shapes and copy the history for immutability.

        Raises:
            TypeError: If history is not a numpy array or generations is not an integer.
            ValueError: If history is not 1D or its length differs from generations.
        """
        if not isinstance(self.history, np.ndarray):
            raise TypeError(f"history must be a numpy array, got {type(self.history).__name__}")
        if self.history.ndim != 1:
            raise ValueError(f"history must be 1D, got shape {self.history.shape}")
        if not isinstance(self.generations, (int, np.integer)):
            raise TypeError(f"generations must be an integer, got {type(self.generations).__name__}")
        if self.history.shape[0] != self.generations:
            raise ValueError(
                f"history has {self.history.shape[0]} elements, expected {self.generations} to match generations"
            )

        object.__setattr__(self, "history", self.history.astype(np.float64))

    @property
    def improvement(self) -> float:
        """Best fitness gained between the first and last completed generation.

        Returns 0.0 when fewer than two generations were completed.
        """
        if self.generations < 2:
            return 0.0
        return float(self.history[-1] - self.history[0])
