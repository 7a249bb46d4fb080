"""Pydantic models for API request bodies."""

from pydantic import BaseModel, Field


class HabitCreate(BaseModel):
    """New habit payload."""

    title: str = Field(max_length=200)


class WeightEntry(BaseModel):
    """Weight value in kilograms."""

    weight_kg: float = Field(gt=0, le=500)
