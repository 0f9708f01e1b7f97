"""
PocketCoach Muscle Load Accountant
Depletes per-muscle capacity across a workout and summarizes the result.

Every muscle starts a workout at full capacity. Each time an exercise involves
a muscle, a demerit depending on its focus tier is subtracted. Capacity is not
clamped, so values below zero mean the muscle was overtrained.
"""
import logging
from typing import Iterable, Optional, Union

from errors import DegenerateInputError, MuscleNotFoundError
from models import ExerciseDefinition, FocusTier, MuscleCapacity, MuscleUsage, UsageReport
from muscle_map import Catalog, all_muscles, default_catalog, get_exercise

log = logging.getLogger("muscle_load")

FULL_CAPACITY = 100

DEMERITS: dict[FocusTier, int] = {
    FocusTier.PRIMARY: 50,
    FocusTier.SECONDARY: 25,
    FocusTier.TERTIARY: 10,
}

# Muscles listed in each of the most/least worked sections
REPORT_SIZE = 3


def init_capacity(muscles: Iterable[str]) -> MuscleCapacity:
    """Every muscle in the roster at full capacity. Duplicates collapse."""
    capacity = {muscle: FULL_CAPACITY for muscle in muscles}
    if not capacity:
        raise DegenerateInputError("Cannot track capacity for an empty muscle roster")
    log.debug("Initialized capacity for %d muscles", len(capacity))
    return capacity


def demerit_for(focus: Union[FocusTier, str, None]) -> int:
    """Capacity cost of one involvement at the given focus; unknown tiers cost 0."""
    tier = FocusTier.parse(focus)
    return DEMERITS.get(tier, 0)


def apply_usage(
        capacity: MuscleCapacity,
        muscle: str,
        focus: Union[FocusTier, str, None],
) -> MuscleCapacity:
    """Return a new capacity mapping with one involvement of `muscle` subtracted."""
    if muscle not in capacity:
        raise MuscleNotFoundError(muscle)

    demerit = demerit_for(focus)
    updated = dict(capacity)
    updated[muscle] = capacity[muscle] - demerit
    log.debug("%s: -%d (%s) -> %s", muscle, demerit, focus, updated[muscle])
    return updated


def apply_exercise(capacity: MuscleCapacity, exercise: ExerciseDefinition) -> MuscleCapacity:
    """Apply every muscle involvement of an exercise, in catalog order."""
    log.debug("Applying exercise %s", exercise.name)
    for involvement in exercise.muscles:
        capacity = apply_usage(capacity, involvement.muscle, involvement.focus)
    return capacity


def apply_workout(
        capacity: MuscleCapacity,
        workout: list[str],
        catalog: Catalog,
) -> MuscleCapacity:
    """Apply each exercise of a workout. Unknown exercise names raise."""
    for name in workout:
        capacity = apply_exercise(capacity, get_exercise(catalog, name))
    return capacity


def compute_report(capacity: MuscleCapacity, workout_label: str) -> UsageReport:
    """
    Summarize a capacity mapping.

    score = 100 - (total demerits / number of muscles in the roster)

    Ranking is ascending by remaining capacity, so the most worked muscles come
    first. Ties keep roster order.
    """
    if not capacity:
        raise DegenerateInputError("Cannot score a workout without any muscles")
    if len(capacity) < REPORT_SIZE:
        raise DegenerateInputError(
            f"Need at least {REPORT_SIZE} muscles to report most/least worked, got {len(capacity)}"
        )

    total_demerits = sum(FULL_CAPACITY - value for value in capacity.values())
    score = FULL_CAPACITY - total_demerits / len(capacity)

    ranking = tuple(
        MuscleUsage(muscle=muscle, capacity=value)
        for muscle, value in sorted(capacity.items(), key=lambda item: item[1])
    )

    report = UsageReport(
        workout=workout_label,
        score=score,
        total_demerits=total_demerits,
        ranking=ranking,
        most_worked=tuple(usage.muscle for usage in ranking[:REPORT_SIZE]),
        least_worked=tuple(usage.muscle for usage in ranking[-REPORT_SIZE:]),
    )
    return report.model_copy(update={"text": format_report(report)})


def format_score(score: float) -> str:
    """Full precision, without a trailing .0 on whole numbers."""
    score = float(score)
    return str(int(score)) if score.is_integer() else str(score)


def format_report(report: UsageReport) -> str:
    """Render the plain-text report block."""
    lines = [
        "==========",
        "  REPORT  ",
        "==========",
        f"[your workout]: {report.workout}",
        f"[score]: {format_score(report.score)}",
        f"[most worked]: {','.join(report.most_worked)}",
        f"[least worked]: {','.join(report.least_worked)}",
    ]
    return "\n".join(lines) + "\n"


def report_for_workout(
        workout: list[str],
        catalog: Optional[Catalog] = None,
        taxonomy: Optional[dict[str, list[str]]] = None,
) -> UsageReport:
    """Start from full capacity, apply a workout and report on it."""
    catalog = default_catalog() if catalog is None else catalog
    capacity = init_capacity(all_muscles(taxonomy))
    capacity = apply_workout(capacity, workout, catalog)
    return compute_report(capacity, ",".join(workout))
