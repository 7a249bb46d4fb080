"""Domain models for macro targets."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class MacroSplit:
    """Gram allocation of a calorie budget."""

    protein: int
    fat: int
    carbs: int


@dataclass(frozen=True)
class MacroOutput:
    """Calculated energy needs and macro targets."""

    bmr: int
    maintenance_calories: int
    target_calories: int
    protein_grams: int
    fat_grams: int
    carb_grams: int


@dataclass(frozen=True)
class MacroRecord:
    """Stored macro snapshot from user_macros."""

    id: UUID
    user_id: UUID
    created_at: datetime
    macros: MacroOutput
