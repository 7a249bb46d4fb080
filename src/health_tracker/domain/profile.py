"""Domain models for user profiles."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class Sex(StrEnum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(StrEnum):
    """Daily activity level."""

    SEDENTARY = "sedentary"
    MODERATE = "moderate"
    ACTIVE = "active"


class Goal(StrEnum):
    """Body composition goal."""

    FAT_LOSS = "fat_loss"
    MUSCLE_GAIN = "muscle_gain"
    RECOMP = "recomp"


@dataclass(frozen=True)
class ProfileInput:
    """Inputs required by the macro engine."""

    age: int
    height_cm: float
    weight_kg: float
    sex: Sex
    activity_level: ActivityLevel
    goal: Goal


@dataclass(frozen=True)
class UserProfile:
    """Represents a row in user_profiles."""

    user_id: UUID
    name: str
    age: int
    height_cm: float
    weight_kg: float
    sex: Sex
    goal: Goal
    activity_level: ActivityLevel | None
    goal_weight_kg: float | None = None

    def to_profile_input(self) -> ProfileInput:
        """Build macro engine input, defaulting activity to moderate."""
        return ProfileInput(
            age=self.age,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            sex=self.sex,
            activity_level=self.activity_level or ActivityLevel.MODERATE,
            goal=self.goal,
        )


class ProfileForm(BaseModel):
    """Validated profile form submission."""

    name: str = Field(min_length=1)
    age: int = Field(ge=10, le=120)
    height_cm: int = Field(ge=50, le=300)
    weight_kg: int = Field(ge=30, le=300)
    sex: Sex
    goal: Goal
    activity_level: ActivityLevel
    goal_weight_kg: int | None = Field(default=None, ge=30, le=300)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required")
        return value.strip()
