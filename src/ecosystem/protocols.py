"""Protocol definition for the organisms evolved by an ecosystem.

An organism is any user-defined candidate solution that can report how fit it
is, produce a child with another organism of the same type, and perturb itself
in place. The engine never inspects an organism's representation; it only
calls these three methods.

Example usage:
    ```python
    class PiApproximator:
        def __init__(self, value: float, rng: np.random.Generator) -> None:
            self.value = value
            self.rng = rng

        def fitness(self) -> float:
            return 1.0 / abs(math.pi - self.value)

        def breed(self, other: "PiApproximator") -> "PiApproximator":
            return PiApproximator((self.value + other.value) / 2, self.rng)

        def mutate(self, rate: float) -> None:
            self.value += self.rng.uniform(-rate, rate)
    ```
"""

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Organism(Protocol):
    """Protocol for candidate solutions evolved by an Ecosystem.

    Implementations own any randomness they need inside ``breed`` and
    ``mutate``. The engine guarantees that ``fitness`` is read from a parent
    before any child of the same generation is mutated, and that ``mutate`` is
    called exactly once on every freshly bred child.
    """

    def fitness(self) -> float:
        """Evaluate the organism's fitness.

        Returns:
            A real number where higher is better. Used directly as a selection
            weight, so it must be non-negative.
        """
        ...

    def breed(self, other: Self) -> Self:
        """Create a new child from this organism and another.

        Args:
            other: The second parent. May be the same object as ``self``.

        Returns:
            A new organism. Neither parent may be modified.
        """
        ...

    def mutate(self, rate: float) -> None:
        """Mutate the organism in place.

        Args:
            rate: Non-negative magnitude of the perturbation, in a unit defined
                by the implementation.
        """
        ...
