"""Tests for habit service."""

from datetime import date, timedelta
from uuid import uuid4

import pytest

from health_tracker.domain.errors import HabitNotFoundError
from health_tracker.domain.habits import HabitLog
from health_tracker.services.habits import HabitService
from tests.conftest import InMemoryHabitRepository

TODAY = date(2024, 6, 1)


def test_list_habits_computes_streaks_per_habit() -> None:
    user_id = uuid4()
    repository = InMemoryHabitRepository()
    service = HabitService(repository)
    water = service.add_habit(user_id, "Drink water")
    stretch = service.add_habit(user_id, "Stretch")
    assert water is not None
    assert stretch is not None
    repository.logs = [
        HabitLog(habit_id=water.id, day=TODAY),
        HabitLog(habit_id=water.id, day=TODAY - timedelta(days=1)),
        HabitLog(habit_id=stretch.id, day=TODAY - timedelta(days=1)),
    ]

    habits = service.list_habits(user_id, TODAY)

    assert [(habit.title, habit.streak) for habit in habits] == [
        ("Drink water", 2),
        ("Stretch", 0),
    ]
    assert habits[0].completed_today is True
    assert habits[1].completed_today is False


def test_list_habits_ignores_other_users() -> None:
    repository = InMemoryHabitRepository()
    service = HabitService(repository)
    service.add_habit(uuid4(), "Someone else's habit")

    assert service.list_habits(uuid4(), TODAY) == []


def test_add_habit_ignores_blank_title() -> None:
    repository = InMemoryHabitRepository()
    service = HabitService(repository)

    assert service.add_habit(uuid4(), "   ") is None
    assert repository.habits == []


def test_add_habit_strips_title() -> None:
    service = HabitService(InMemoryHabitRepository())

    habit = service.add_habit(uuid4(), "  Read  ")

    assert habit is not None
    assert habit.title == "Read"


def test_complete_habit_once_per_day() -> None:
    user_id = uuid4()
    repository = InMemoryHabitRepository()
    service = HabitService(repository)
    habit = service.add_habit(user_id, "Walk")
    assert habit is not None

    first = service.complete_habit(user_id, habit.id, TODAY)
    second = service.complete_habit(user_id, habit.id, TODAY)

    assert first is True
    assert second is False
    assert repository.logs == [HabitLog(habit_id=habit.id, day=TODAY)]
    assert service.list_habits(user_id, TODAY)[0].streak == 1


def test_delete_habit() -> None:
    user_id = uuid4()
    repository = InMemoryHabitRepository()
    service = HabitService(repository)
    habit = service.add_habit(user_id, "Meditate")
    assert habit is not None

    service.delete_habit(user_id, habit.id)

    assert service.list_habits(user_id, TODAY) == []


def test_complete_habit_rejects_another_users_habit() -> None:
    owner = uuid4()
    repository = InMemoryHabitRepository()
    service = HabitService(repository)
    habit = service.add_habit(owner, "Walk")
    assert habit is not None

    with pytest.raises(HabitNotFoundError):
        service.complete_habit(uuid4(), habit.id, TODAY)

    assert repository.logs == []
    assert service.list_habits(owner, TODAY)[0].streak == 0


def test_complete_habit_rejects_unknown_habit() -> None:
    repository = InMemoryHabitRepository()
    service = HabitService(repository)
    missing = uuid4()

    with pytest.raises(HabitNotFoundError) as excinfo:
        service.complete_habit(uuid4(), missing, TODAY)

    assert excinfo.value.habit_id == missing
    assert repository.logs == []
