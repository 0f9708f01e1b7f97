"""
PocketCoach Data Models
Pydantic models for the exercise catalog, logged sets and usage reports.
"""
from typing import Optional, Union
from pydantic import BaseModel, Field
from enum import Enum, IntEnum


# ============================================================
# Enums
# ============================================================

class FocusTier(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"

    @classmethod
    def parse(cls, value) -> Optional["FocusTier"]:
        """Return the tier for a raw value, or None for anything unrecognised."""
        try:
            return cls(value)
        except ValueError:
            return None


class SetTier(IntEnum):
    """How well a performed set matched its programmed set. Higher is better."""
    FAILED = 0
    SATISFACTORY = 1
    GREAT = 2
    EXTRAORDINARY = 3


# Remaining capacity per muscle, threaded through the load accountant
MuscleCapacity = dict[str, float]


# ============================================================
# Catalog
# ============================================================

class MuscleInvolvement(BaseModel):
    """One muscle worked by an exercise."""
    muscle: str
    relative_share: float = Field(..., gt=0, le=1)
    # Unknown tiers are kept as plain strings and cost nothing
    focus: Union[FocusTier, str] = Field(..., union_mode="left_to_right")

    @property
    def tier(self) -> Optional[FocusTier]:
        return FocusTier.parse(self.focus)


class ExerciseDefinition(BaseModel):
    """Catalog entry: an exercise and the muscles it involves, in order."""
    name: str
    muscles: list[MuscleInvolvement] = Field(default_factory=list)
    starting_weight: float = Field(0, ge=0)

    class Config:
        frozen = True


# ============================================================
# Sets
# ============================================================

class ExerciseSet(BaseModel):
    """A performed or programmed set."""
    reps: int = Field(..., ge=0)
    weight: float = Field(..., ge=0)
    rpe: Optional[float] = Field(None, ge=0, le=10, description="Rate of perceived exertion")


class SetTally(BaseModel):
    """Per-tier counts of achieved sets compared with their programmed sets."""
    programmed: int = 0
    satisfactory: int = 0
    great: int = 0
    extraordinary: int = 0

    class Config:
        frozen = True


# ============================================================
# Reports
# ============================================================

class MuscleUsage(BaseModel):
    muscle: str
    capacity: float

    class Config:
        frozen = True


class UsageReport(BaseModel):
    """Muscle usage summary for one workout."""
    workout: str
    score: float
    total_demerits: float

    # Ascending by remaining capacity: most worked first
    ranking: tuple[MuscleUsage, ...]
    most_worked: tuple[str, ...]
    least_worked: tuple[str, ...]

    text: str = ""

    class Config:
        frozen = True
