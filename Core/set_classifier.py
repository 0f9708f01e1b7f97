"""
PocketCoach Set Performance Classifier
Compares performed sets with programmed sets and decides whether a program
advances to its next cycle.
"""
import logging
import math
from typing import Mapping

from models import ExerciseSet, SetTally, SetTier

log = logging.getLogger("set_classifier")

# RPE assumed when a set has none recorded (maximum effort)
DEFAULT_RPE = 10

# Minimum RPE drop for a single-dimension improvement to count as extraordinary
MUCH_EASIER_RPE_DROP = 2


def is_satisfactory_set(performed: ExerciseSet, expected: ExerciseSet) -> bool:
    """At least the programmed reps at at least the programmed weight."""
    return performed.reps >= expected.reps and performed.weight >= expected.weight


def is_great_set(performed: ExerciseSet, expected: ExerciseSet) -> bool:
    """
    Programmed reps and weight met, or one of them beaten at a lower RPE while
    the other is matched. A missing RPE counts as 10 on either side.
    """
    performed_rpe = DEFAULT_RPE if performed.rpe is None else performed.rpe
    expected_rpe = DEFAULT_RPE if expected.rpe is None else expected.rpe
    was_easier = performed_rpe < expected_rpe

    same_reps = performed.reps == expected.reps
    same_weight = performed.weight == expected.weight
    more_reps = performed.reps > expected.reps
    more_weight = performed.weight > expected.weight

    if (same_reps or more_reps) and (same_weight or more_weight):
        return True
    return was_easier and ((same_reps and more_weight) or (same_weight and more_reps))


def is_extraordinary_set(performed: ExerciseSet, expected: ExerciseSet) -> bool:
    """
    More reps and more weight at a lower RPE, or one of them beaten with the
    other matched at an RPE more than 2 points lower. Needs both RPEs recorded.
    """
    if performed.rpe is None or expected.rpe is None:
        return False

    was_easier = performed.rpe < expected.rpe
    was_much_easier = expected.rpe - performed.rpe > MUCH_EASIER_RPE_DROP

    same_reps = performed.reps == expected.reps
    same_weight = performed.weight == expected.weight
    more_reps = performed.reps > expected.reps
    more_weight = performed.weight > expected.weight

    if more_reps and more_weight and was_easier:
        return True
    return was_much_easier and ((same_reps and more_weight) or (same_weight and more_reps))


def classify_set(performed: ExerciseSet, expected: ExerciseSet) -> SetTier:
    """Highest tier the performed set reaches."""
    if is_extraordinary_set(performed, expected):
        return SetTier.EXTRAORDINARY
    if is_great_set(performed, expected):
        return SetTier.GREAT
    if is_satisfactory_set(performed, expected):
        return SetTier.SATISFACTORY
    return SetTier.FAILED


def tally_sets(achieved: list[ExerciseSet], programmed: list[ExerciseSet]) -> SetTally:
    """
    Count satisfactory, great and extraordinary sets, pairing achieved and
    programmed sets by position. Achieved sets past the programmed count are
    ignored. A set can count towards several tiers.
    """
    satisfactory = great = extraordinary = 0
    for performed, expected in zip(achieved, programmed):
        if is_satisfactory_set(performed, expected):
            satisfactory += 1
        if is_great_set(performed, expected):
            great += 1
        if is_extraordinary_set(performed, expected):
            extraordinary += 1

    return SetTally(
        programmed=len(programmed),
        satisfactory=satisfactory,
        great=great,
        extraordinary=extraordinary,
    )


def meets_or_exceeds_programming(achieved: list[ExerciseSet], programmed: list[ExerciseSet]) -> bool:
    """
    Whether an exercise's achieved sets earn progression to the next cycle:
    every programmed set satisfied, or at least half of them great, or any
    one extraordinary.
    """
    if not achieved:
        return False

    tally = tally_sets(achieved, programmed)
    log.debug("Set tally: %s", tally)

    if tally.satisfactory == len(programmed):
        return True
    if tally.great >= math.ceil(len(programmed) / 2):
        return True
    return tally.extraordinary > 0


def should_advance(results: Mapping[str, tuple[list[ExerciseSet], list[ExerciseSet]]]) -> bool:
    """
    Advance a program only when every exercise of the workout meets or exceeds
    its programming. `results` maps exercise name -> (achieved, programmed).
    """
    if not results:
        return False

    held_back = [
        name for name, (achieved, programmed) in results.items()
        if not meets_or_exceeds_programming(achieved, programmed)
    ]
    if held_back:
        log.info("Repeating cycle, programming not met for: %s", ", ".join(held_back))
        return False
    return True
