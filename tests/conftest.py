"""Shared test fixtures for ecosystem tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- Organism implementations with fixed, counted, or scalar fitness
"""

import math

import numpy as np
import pytest


class FixedOrganism:
    """Organism with a constant fitness that records every breeding.

    Children inherit the mother's fitness and tag. ``breed_log`` is shared
    across a lineage so tests can count how often each tag was chosen as a
    parent.
    """

    def __init__(self, tag: str, value: float, breed_log: list | None = None) -> None:
        self.tag = tag
        self.value = value
        self.breed_log = breed_log if breed_log is not None else []
        self.mutations: list[float] = []

    def fitness(self) -> float:
        return self.value

    def breed(self, other: "FixedOrganism") -> "FixedOrganism":
        self.breed_log.append((self.tag, other.tag))
        return FixedOrganism(self.tag, self.value, self.breed_log)

    def mutate(self, rate: float) -> None:
        self.mutations.append(rate)


class CountingOrganism:
    """Organism that counts calls to fitness on itself."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.fitness_calls = 0

    def fitness(self) -> float:
        self.fitness_calls += 1
        return self.value

    def breed(self, other: "CountingOrganism") -> "CountingOrganism":
        return CountingOrganism((self.value + other.value) / 2)

    def mutate(self, rate: float) -> None:
        self.value += rate


class PiApproximator:
    """Scalar organism whose fitness grows as its value approaches pi."""

    def __init__(self, value: float, rng: np.random.Generator) -> None:
        self.value = value
        self.rng = rng

    def fitness(self) -> float:
        return 1.0 / abs(math.pi - self.value)

    def breed(self, other: "PiApproximator") -> "PiApproximator":
        return PiApproximator((self.value + other.value) / 2, self.rng)

    def mutate(self, rate: float) -> None:
        self.value += self.rng.uniform(-rate, rate)


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def fixed_population():
    """Build FixedOrganisms tagged by index from a list of fitness values.

    Returns a factory: (values) -> (organisms, breed_log).
    """

    def build(values: list[float]) -> tuple[list[FixedOrganism], list[tuple[str, str]]]:
        breed_log: list[tuple[str, str]] = []
        organisms = [FixedOrganism(str(i), v, breed_log) for i, v in enumerate(values)]
        return organisms, breed_log

    return build


@pytest.fixture
def pi_population():
    """Build a population of PiApproximators with initial values in [-10, 10).

    Returns a factory: (size, seed) -> list of PiApproximator.
    """

    def build(size: int = 10, seed: int = 0) -> list[PiApproximator]:
        gen = np.random.default_rng(seed)
        return [PiApproximator(gen.uniform(-10.0, 10.0), gen) for _ in range(size)]

    return build
