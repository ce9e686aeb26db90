"""The Ecosystem: a fixed-size population evolved by generational replacement.

Each call to ``advance_generation`` replaces every organism at once:

1. Evaluate every organism's fitness once (a consistent snapshot).
2. Draw two parents per child with roulette wheel selection.
3. Breed each pair and mutate the child in place with the given rate.
4. Publish the children as the new population.

There is no elitism: the previous generation is discarded entirely. The
population size never changes.

Example:
    >>> eco = Ecosystem(organisms, seed=42)
    >>> for _ in range(50):
    ...     eco.advance_generation(0.1)
    >>> best = eco.fittest()
"""

import logging
import math
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

import numpy as np

from ecosystem.exceptions import InvalidPopulationError
from ecosystem.protocols import Organism
from ecosystem.selection import roulette_wheel

_LOG = logging.getLogger(__name__)

OrganismT = TypeVar("OrganismT", bound=Organism)
T = TypeVar("T")


def _fitness(organism: Organism) -> float:
    return organism.fitness()


def _breed_child(mother: OrganismT, father: OrganismT, rate: float) -> OrganismT:
    child = mother.breed(father)
    child.mutate(rate)
    return child


class Ecosystem(Generic[OrganismT]):
    """A fixed-size population of organisms evolved generation by generation.

    The ecosystem owns its member list. Callers see the members through
    read-only accessors (indexing, iteration, the ``organisms`` tuple) and may
    not replace them.

    Attributes:
        generation: Number of generations bred since construction.
        n_workers: Number of parallel workers used for fitness evaluation and
            child construction. 1 means sequential, -1 means all cores.

    Example:
        >>> eco = Ecosystem([PiApproximator(v) for v in values], seed=42)
        >>> eco.advance_generation(0.1)
        >>> eco.generation
        1
        >>> len(eco) == len(values)
        True
    """

    def __init__(
        self,
        organisms: Iterable[OrganismT],
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        n_workers: int = 1,
    ) -> None:
        """Create an ecosystem from an initial set of organisms.

        Args:
            organisms: Initial organisms, all of the same type. The population
                size is fixed to their count.
            seed: Seed for the selection random number generator. Mutually
                exclusive with rng. If neither is given, system entropy is used.
            rng: Random number generator used for parent selection.
            n_workers: Number of parallel workers. Use 1 for sequential
                execution, -1 for all CPU cores.

        Raises:
            InvalidPopulationError: If organisms is empty or mixes types.
            TypeError: If a member does not implement the Organism protocol.
            ValueError: If both seed and rng are given, or n_workers is invalid.
        """
        members = list(organisms)
        if not members:
            raise InvalidPopulationError("an ecosystem requires at least one organism")

        first_type = type(members[0])
        for i, organism in enumerate(members):
            if not isinstance(organism, Organism):
                raise TypeError(
                    f"organism {i} must implement fitness, breed and mutate, got {type(organism).__name__}"
                )
            if type(organism) is not first_type:
                raise InvalidPopulationError(
                    f"all organisms must share one type: organism {i} is {type(organism).__name__}, "
                    f"expected {first_type.__name__}"
                )

        if seed is not None and rng is not None:
            raise ValueError("pass either seed or rng, not both")
        if n_workers < 1 and n_workers != -1:
            raise ValueError(f"n_workers must be positive or -1 (all cores), got {n_workers}")

        self._organisms: list[OrganismT] = members
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self.n_workers = n_workers
        self.generation = 0

        _LOG.debug("Created ecosystem of %d %s organisms", len(members), first_type.__name__)

    def __len__(self) -> int:
        """Return the number of organisms in the ecosystem."""
        return len(self._organisms)

    def __getitem__(self, idx: int) -> OrganismT:
        """Return the organism at the given index."""
        return self._organisms[idx]

    def __iter__(self) -> Iterator[OrganismT]:
        return iter(tuple(self._organisms))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)}, generation={self.generation})"

    @property
    def organisms(self) -> tuple[OrganismT, ...]:
        """Snapshot of the current organisms, in population order."""
        return tuple(self._organisms)

    def evaluate(self) -> np.ndarray:
        """Evaluate every organism's fitness once.

        Returns:
            Fitness values with shape (n,) and dtype float64, in population order.
        """
        if self.n_workers == 1:
            values = [organism.fitness() for organism in self._organisms]
        else:
            values = self._parallel(_fitness, [(organism,) for organism in self._organisms])
        return np.array(values, dtype=np.float64)

    def fittest(self) -> OrganismT:
        """Return the organism with the highest fitness.

        Fitness is evaluated afresh on every call. When several organisms share
        the highest fitness, the one with the lowest index is returned.
        """
        return self._organisms[int(np.argmax(self.evaluate()))]

    def advance_generation(self, rate: float) -> None:
        """Replace the population with the next generation.

        Every organism's fitness is evaluated exactly once. For each of the n
        slots, two parents are drawn independently by roulette wheel selection
        (with replacement, so an organism may be paired with itself), bred, and
        the child is mutated with ``rate``. The children replace the whole
        population at once; if breeding or mutation raises, the population is
        left unchanged.

        Args:
            rate: Non-negative mutation rate passed unchanged to each child's
                ``mutate``.

        Raises:
            ValueError: If rate is negative or NaN.
        """
        if math.isnan(rate) or rate < 0:
            raise ValueError(f"mutation rate must be non-negative, got {rate}")

        pop_size = len(self._organisms)
        fitness = self.evaluate()

        # Consecutive draws (2i, 2i+1) are the mother and father of child i
        parent_idx = roulette_wheel(fitness, 2 * pop_size, self._rng).reshape(pop_size, 2)
        pairs = [(self._organisms[m], self._organisms[f]) for m, f in parent_idx]

        if self.n_workers == 1:
            children = [_breed_child(mother, father, rate) for mother, father in pairs]
        else:
            children = self._parallel(_breed_child, [(mother, father, rate) for mother, father in pairs])

        self._organisms = list(children)
        self.generation += 1

        _LOG.debug(
            "Bred generation %d: %d children, parent mean fitness %.6g",
            self.generation,
            pop_size,
            float(fitness.mean()),
        )

    def breed_next_generation(self, mutation_rate: float) -> None:
        """Alias of advance_generation."""
        self.advance_generation(mutation_rate)

    def _parallel(self, fn: Callable[..., T], args_list: list[tuple]) -> list[T]:
        """Apply fn to each argument tuple on joblib threads, preserving order."""
        from joblib import Parallel, delayed

        return Parallel(n_jobs=self.n_workers, prefer="threads")(delayed(fn)(*args) for args in args_list)
