"""Exceptions raised by the ecosystem engine."""


class InvalidPopulationError(ValueError):
    """Raised when a population has no members or mixes organism types.

    Selection weights are undefined for an empty population, so an ecosystem
    refuses to be built without at least one organism.
    """
