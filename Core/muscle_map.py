"""
PocketCoach Muscle Mapping Module
Muscle taxonomy and the exercise catalog the load accountant reads from.
"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from errors import CatalogError, ExerciseNotFoundError
from models import ExerciseDefinition, FocusTier, MuscleInvolvement

log = logging.getLogger("muscle_map")

Catalog = dict[str, ExerciseDefinition]

# Muscle group -> member muscles
MUSCLE_GROUPS: dict[str, list[str]] = {
    "back": ["upper_back", "lats", "traps"],
    "arms": ["biceps", "triceps"],
    "shoulders": ["rear_delts", "side_delts", "front_delts"],
    "chest": ["upper_chest", "lower_chest"],
    "legs": ["quads", "glutes", "hamstrings", "calves"],
    "core": ["abs", "lower_back", "obliques"],
}

# ============================================================
# Default Exercise Catalog
# Same layout as catalog JSON files:
#   name -> {"weight": starting weight, "muscles": [{muscle_name, decimal, focus}]}
# ============================================================

DEFAULT_EXERCISES: dict[str, dict] = {
    "tbar": {
        "weight": 45,
        "muscles": [
            {"muscle_name": "upper_back", "decimal": 0.45, "focus": "primary"},
            {"muscle_name": "rear_delts", "decimal": 0.2, "focus": "secondary"},
            {"muscle_name": "biceps", "decimal": 0.17, "focus": "tertiary"},
            {"muscle_name": "traps", "decimal": 0.18, "focus": "secondary"},
        ],
    },
    "pull_up": {
        "weight": 160,
        "muscles": [
            {"muscle_name": "upper_back", "decimal": 0.45, "focus": "primary"},
            {"muscle_name": "rear_delts", "decimal": 0.2, "focus": "tertiary"},
            {"muscle_name": "biceps", "decimal": 0.17, "focus": "secondary"},
            {"muscle_name": "lats", "decimal": 0.18, "focus": "secondary"},
        ],
    },
    "cable_row": {
        "weight": 160,
        "muscles": [
            {"muscle_name": "upper_back", "decimal": 0.45, "focus": "secondary"},
            {"muscle_name": "rear_delts", "decimal": 0.2, "focus": "secondary"},
            {"muscle_name": "biceps", "decimal": 0.17, "focus": "tertiary"},
            {"muscle_name": "lats", "decimal": 0.18, "focus": "primary"},
            {"muscle_name": "lower_back", "decimal": 0.18, "focus": "secondary"},
        ],
    },
    "lateral_raise": {
        "weight": 30,
        "muscles": [
            {"muscle_name": "side_delts", "decimal": 0.25, "focus": "secondary"},
            {"muscle_name": "traps", "decimal": 0.25, "focus": "secondary"},
        ],
    },
    "tricep_pushdown": {
        "weight": 75,
        "muscles": [
            {"muscle_name": "triceps", "decimal": 0.5, "focus": "primary"},
        ],
    },
    "glute_bridge": {
        "weight": 75,
        "muscles": [
            {"muscle_name": "glutes", "decimal": 0.5, "focus": "primary"},
            {"muscle_name": "abs", "decimal": 0.5, "focus": "secondary"},
        ],
    },
    "standing_calve_raise": {
        "weight": 150,
        "muscles": [
            {"muscle_name": "calves", "decimal": 0.5, "focus": "primary"},
        ],
    },
    "cable_pullover": {
        "weight": 70,
        "muscles": [
            {"muscle_name": "lats", "decimal": 0.5, "focus": "primary"},
            {"muscle_name": "upper_back", "decimal": 0.5, "focus": "secondary"},
            {"muscle_name": "abs", "decimal": 0.5, "focus": "secondary"},
        ],
    },
}

# Pull-focused day used by the report script when no workout is given
DEMO_WORKOUT = [
    "tbar", "pull_up", "lateral_raise", "cable_row",
    "standing_calve_raise", "glute_bridge", "cable_pullover",
]


def all_muscles(groups: Optional[dict[str, list[str]]] = None) -> list[str]:
    """Every muscle in the taxonomy, deduplicated, in first-seen order."""
    groups = MUSCLE_GROUPS if groups is None else groups
    return list(dict.fromkeys(m for members in groups.values() for m in members))


def parse_catalog(raw: dict[str, dict]) -> Catalog:
    """Build exercise definitions from the name -> {weight, muscles} layout."""
    catalog: Catalog = {}
    for name, data in raw.items():
        muscles = [
            MuscleInvolvement(
                muscle=m["muscle_name"],
                relative_share=m.get("decimal", 1.0),
                focus=m["focus"],
            )
            for m in data.get("muscles", [])
        ]
        catalog[name] = ExerciseDefinition(
            name=name,
            muscles=muscles,
            starting_weight=data.get("weight", 0),
        )
    return catalog


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load an exercise catalog from a JSON file."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read catalog {path}: {e}") from e

    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog {path} must be a JSON object keyed by exercise name")

    try:
        catalog = parse_catalog(raw)
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise CatalogError(f"Invalid catalog {path}: {e}") from e

    log.info("Loaded %d exercises from %s", len(catalog), path)
    return catalog


def default_catalog() -> Catalog:
    return parse_catalog(DEFAULT_EXERCISES)


def get_exercise(catalog: Catalog, name: str) -> ExerciseDefinition:
    """Look up an exercise by name."""
    try:
        return catalog[name]
    except KeyError:
        raise ExerciseNotFoundError(name) from None


def muscles_by_focus(exercise: ExerciseDefinition, focus: Union[FocusTier, str]) -> list[MuscleInvolvement]:
    """Involvements of an exercise with the given focus tier, in catalog order."""
    wanted = FocusTier.parse(focus)
    if wanted is None:
        return []
    return [m for m in exercise.muscles if m.tier is wanted]


# ============================================================
# Example Usage
# ============================================================
if __name__ == "__main__":
    catalog = default_catalog()
    print("All muscles:", all_muscles())
    print("tbar primary:", muscles_by_focus(get_exercise(catalog, "tbar"), FocusTier.PRIMARY))
