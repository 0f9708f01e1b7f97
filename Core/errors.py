"""
PocketCoach Errors
Exceptions raised by the muscle load and set classification rules.
"""


class CoachError(Exception):
    """Base class for every error raised by the core."""


class NotFoundError(CoachError, LookupError):
    """A name referenced by a workout is missing from the catalog or roster."""

    kind = "item"

    def __init__(self, name: str):
        super().__init__(f"{self.kind} not found: {name!r}")
        self.name = name


class MuscleNotFoundError(NotFoundError):
    kind = "muscle"


class ExerciseNotFoundError(NotFoundError):
    kind = "exercise"


class DegenerateInputError(CoachError, ValueError):
    """Input too small to produce a meaningful result (e.g. an empty roster)."""


class CatalogError(CoachError):
    """An exercise catalog file could not be read or validated."""
