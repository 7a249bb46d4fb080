"""FastAPI application factory."""

import logging
from datetime import date
from uuid import UUID

from fastapi import Depends, FastAPI, HTTPException, Request, status

from health_tracker.api.auth import require_user
from health_tracker.api.models import HabitCreate, WeightEntry
from health_tracker.app_logging import configure_logging
from health_tracker.config import today_in
from health_tracker.containers import AppContainer
from health_tracker.domain.errors import (
    HabitNotFoundError,
    ProfileNotFoundError,
    WeightAlreadyLoggedError,
)
from health_tracker.domain.habits import Habit, HabitWithStreak
from health_tracker.domain.macros import MacroOutput, MacroRecord
from health_tracker.domain.profile import ProfileForm, UserProfile
from health_tracker.domain.weight import WeightLog


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Health Tracker")
    app.state.container = container

    def _container(request: Request) -> AppContainer:
        return request.app.state.container

    def _today(request: Request) -> date:
        return today_in(_container(request).settings.timezone)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/profile")
    async def get_profile(
        request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Return the current user's profile."""
        profile = _container(request).profile_service.get_profile(user_id)
        if profile is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _serialize_profile(profile)

    @app.post("/profile", status_code=status.HTTP_201_CREATED)
    async def create_profile(
        form: ProfileForm, request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Create the profile during onboarding."""
        service = _container(request).profile_service
        try:
            profile = service.create_profile(user_id, form)
        except Exception:
            logger.exception("Failed to create profile", extra={"user_id": user_id})
            raise
        return _serialize_profile(profile)

    @app.put("/profile")
    async def update_profile(
        form: ProfileForm, request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Update the current user's profile."""
        try:
            profile = _container(request).profile_service.update_profile(user_id, form)
        except ProfileNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except Exception:
            logger.exception("Failed to update profile", extra={"user_id": user_id})
            raise
        return _serialize_profile(profile)

    @app.get("/macros")
    async def get_macros(
        request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Return the macro breakdown for the current profile."""
        macros = _container(request).macro_service.get_macros(user_id)
        if macros is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found"
            )
        return _serialize_macros(macros)

    @app.post("/macros", status_code=status.HTTP_201_CREATED)
    async def recalculate_macros(
        request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Recalculate macros and store a history snapshot."""
        try:
            record = _container(request).macro_service.recalculate(user_id)
        except ProfileNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except Exception:
            logger.exception("Failed to store macros", extra={"user_id": user_id})
            raise
        return _serialize_macro_record(record)

    @app.get("/macros/history")
    async def macro_history(
        request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Return stored macro snapshots, newest first."""
        history = _container(request).macro_service.get_history(user_id)
        return {"history": [_serialize_macro_record(record) for record in history]}

    @app.get("/habits")
    async def list_habits(
        request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Return habits with their streaks."""
        habits = _container(request).habit_service.list_habits(
            user_id, _today(request)
        )
        return {"habits": [_serialize_habit_streak(habit) for habit in habits]}

    @app.post("/habits", status_code=status.HTTP_201_CREATED)
    async def add_habit(
        body: HabitCreate, request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Create a habit."""
        try:
            habit = _container(request).habit_service.add_habit(user_id, body.title)
        except Exception:
            logger.exception("Failed to add habit", extra={"user_id": user_id})
            raise
        if habit is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Title is required",
            )
        return _serialize_habit(habit)

    @app.post("/habits/{habit_id}/complete")
    async def complete_habit(
        habit_id: UUID, request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Mark a habit complete for today."""
        try:
            created = _container(request).habit_service.complete_habit(
                user_id, habit_id, _today(request)
            )
        except HabitNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except Exception:
            logger.exception("Failed to complete habit", extra={"habit_id": habit_id})
            raise
        return {"status": "ok", "created": created}

    @app.delete("/habits/{habit_id}")
    async def delete_habit(
        habit_id: UUID, request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, str]:
        """Delete a habit."""
        try:
            _container(request).habit_service.delete_habit(user_id, habit_id)
        except Exception:
            logger.exception("Failed to delete habit", extra={"habit_id": habit_id})
            raise
        return {"status": "ok"}

    @app.get("/weight")
    async def list_weight(
        request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Return weight history and goal weight."""
        service = _container(request).weight_service
        return {
            "logs": [_serialize_weight(log) for log in service.list_logs(user_id)],
            "goal_weight_kg": service.get_goal_weight(user_id),
        }

    @app.post("/weight", status_code=status.HTTP_201_CREATED)
    async def add_weight(
        body: WeightEntry, request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Log today's weight."""
        service = _container(request).weight_service
        try:
            log = service.add_log(user_id, body.weight_kg, _today(request))
        except WeightAlreadyLoggedError as exc:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=str(exc)
            ) from exc
        except Exception:
            logger.exception("Failed to log weight", extra={"user_id": user_id})
            raise
        return _serialize_weight(log)

    @app.put("/weight/{log_id}")
    async def update_weight(
        log_id: UUID,
        body: WeightEntry,
        request: Request,
        user_id: UUID = Depends(require_user),
    ) -> dict[str, str]:
        """Change a logged weight."""
        service = _container(request).weight_service
        try:
            service.update_log(user_id, log_id, body.weight_kg)
        except Exception:
            logger.exception("Failed to update weight", extra={"log_id": log_id})
            raise
        return {"status": "ok"}

    @app.delete("/weight/{log_id}")
    async def delete_weight(
        log_id: UUID, request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, str]:
        """Delete a weight entry."""
        try:
            _container(request).weight_service.delete_log(user_id, log_id)
        except Exception:
            logger.exception("Failed to delete weight", extra={"log_id": log_id})
            raise
        return {"status": "ok"}

    return app


def _serialize_profile(profile: UserProfile) -> dict[str, object]:
    return {
        "user_id": str(profile.user_id),
        "name": profile.name,
        "age": profile.age,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "sex": profile.sex.value,
        "goal": profile.goal.value,
        "activity_level": profile.activity_level.value
        if profile.activity_level
        else None,
        "goal_weight_kg": profile.goal_weight_kg,
    }


def _serialize_macros(macros: MacroOutput) -> dict[str, object]:
    return {
        "bmr": macros.bmr,
        "maintenance_calories": macros.maintenance_calories,
        "target_calories": macros.target_calories,
        "protein_grams": macros.protein_grams,
        "fat_grams": macros.fat_grams,
        "carb_grams": macros.carb_grams,
    }


def _serialize_macro_record(record: MacroRecord) -> dict[str, object]:
    return {
        "id": str(record.id),
        "created_at": record.created_at.isoformat(),
        **_serialize_macros(record.macros),
    }


def _serialize_habit(habit: Habit) -> dict[str, object]:
    return {
        "id": str(habit.id),
        "title": habit.title,
        "created_at": habit.created_at.isoformat() if habit.created_at else None,
    }


def _serialize_habit_streak(habit: HabitWithStreak) -> dict[str, object]:
    return {
        "id": str(habit.id),
        "title": habit.title,
        "streak": habit.streak,
        "completed_today": habit.completed_today,
    }


def _serialize_weight(log: WeightLog) -> dict[str, object]:
    return {
        "id": str(log.id),
        "date": log.day.isoformat(),
        "weight_kg": log.weight_kg,
    }
