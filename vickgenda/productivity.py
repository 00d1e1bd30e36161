"""Productivity records: tasks, agenda events and routine templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class TaskStatus(str, Enum):
    """Status of a task, with its user-facing label as value."""

    PENDING = "Pendente"
    IN_PROGRESS = "Em Andamento"
    COMPLETED = "Concluída"


@dataclass
class Task:
    """A task to be done, optionally with a due date."""

    id: str = ""
    description: str = ""
    due_date: datetime | None = None
    priority: int = 0
    status: str = ""
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Event:
    """An agenda entry with a start and an end time."""

    id: str = ""
    title: str = ""
    description: str = ""
    start_time: datetime | None = None
    end_time: datetime | None = None
    location: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Routine:
    """A template from which recurring or bulk tasks are created."""

    id: str = ""
    name: str = ""
    description: str = ""
    frequency: str = ""
    task_description: str = ""
    task_priority: int = 0
    task_tags: list[str] = field(default_factory=list)
    next_run_time: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None