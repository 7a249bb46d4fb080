"""Macro engine and macro target service.

The module-level functions are pure: BMR via Mifflin-St Jeor, maintenance
calories from a fixed activity multiplier, a flat goal offset, and a
ratio-based macro split where carbohydrates take the rounding residue.
"""

import logging
import math
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from health_tracker.domain.errors import ProfileNotFoundError
from health_tracker.domain.macros import MacroOutput, MacroRecord, MacroSplit
from health_tracker.domain.profile import ActivityLevel, Goal, ProfileInput, Sex
from health_tracker.services.profiles import ProfileRepository

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_FAT = 9
KCAL_PER_G_CARBS = 4

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.75,
}

GOAL_OFFSETS_KCAL: dict[Goal, int] = {
    Goal.FAT_LOSS: -400,
    Goal.RECOMP: 0,
    Goal.MUSCLE_GAIN: 250,
}

# (protein ratio, fat ratio) of target calories
MACRO_RATIOS: dict[Goal, tuple[float, float]] = {
    Goal.FAT_LOSS: (0.40, 0.30),
    Goal.RECOMP: (0.35, 0.27),
    Goal.MUSCLE_GAIN: (0.30, 0.25),
}

_logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def calculate_bmr(
    weight_kg: float, height_cm: float, age: int, sex: Sex | str
) -> float:
    """Return basal metabolic rate in kcal/day (Mifflin-St Jeor)."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if Sex(sex) is Sex.MALE:
        return base + 5
    return base - 161


def calculate_tdee(bmr: float, activity_level: ActivityLevel | str) -> int:
    """Return maintenance calories for an activity level."""
    return round_half_up(bmr * ACTIVITY_MULTIPLIERS[ActivityLevel(activity_level)])


def adjust_for_goal(maintenance_calories: int, goal: Goal | str) -> int:
    """Apply the goal's calorie offset to maintenance calories."""
    return maintenance_calories + GOAL_OFFSETS_KCAL[Goal(goal)]


def get_macro_split(calories: float, goal: Goal | str) -> MacroSplit:
    """Split a calorie budget into protein, fat and carbohydrate grams.

    Carbs take whatever remains after protein and fat and are not clamped,
    so a negative budget yields negative grams.
    """
    protein_ratio, fat_ratio = MACRO_RATIOS[Goal(goal)]
    protein = round_half_up(calories * protein_ratio / KCAL_PER_G_PROTEIN)
    fat = round_half_up(calories * fat_ratio / KCAL_PER_G_FAT)
    remaining = calories - protein * KCAL_PER_G_PROTEIN - fat * KCAL_PER_G_FAT
    carbs = round_half_up(remaining / KCAL_PER_G_CARBS)
    return MacroSplit(protein=protein, fat=fat, carbs=carbs)


def calculate_macros(profile: ProfileInput) -> MacroOutput:
    """Compute BMR, maintenance, target calories and macro grams."""
    bmr = calculate_bmr(profile.weight_kg, profile.height_cm, profile.age, profile.sex)
    maintenance = calculate_tdee(bmr, profile.activity_level)
    target = adjust_for_goal(maintenance, profile.goal)
    split = get_macro_split(target, profile.goal)
    return MacroOutput(
        bmr=round_half_up(bmr),
        maintenance_calories=maintenance,
        target_calories=target,
        protein_grams=split.protein,
        fat_grams=split.fat,
        carb_grams=split.carbs,
    )


class MacroRepository(Protocol):
    """Persistence interface for macro snapshots."""

    def create_snapshot(self, user_id: UUID, macros: MacroOutput) -> MacroRecord:
        """Persist a macro snapshot."""

    def list_snapshots(self, user_id: UUID) -> list[MacroRecord]:
        """Return snapshots, newest first."""


@dataclass
class MacroService:
    """Service that derives macro targets from stored profiles."""

    profile_repository: ProfileRepository
    repository: MacroRepository

    def get_macros(self, user_id: UUID) -> MacroOutput | None:
        """Return current targets, or None when the user has no profile."""
        profile = self.profile_repository.get_profile(user_id)
        if profile is None:
            return None
        return calculate_macros(profile.to_profile_input())

    def recalculate(self, user_id: UUID) -> MacroRecord:
        """Calculate targets and store them as a history snapshot."""
        macros = self.get_macros(user_id)
        if macros is None:
            raise ProfileNotFoundError(user_id)
        record = self.repository.create_snapshot(user_id, macros)
        _logger.info(
            "Macro snapshot saved: user_id=%s target_calories=%s",
            user_id,
            macros.target_calories,
        )
        return record

    def get_history(self, user_id: UUID) -> list[MacroRecord]:
        """Return stored snapshots, newest first."""
        return self.repository.list_snapshots(user_id)
