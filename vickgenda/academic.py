"""Academic records: terms, students, lessons, grades, classes and subjects."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Term:
    """An evaluation period, such as a two-month term."""

    id: str = ""
    name: str = ""
    academic_year: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Student:
    """A student, identified for instance by an enrolment number."""

    id: str = ""
    name: str = ""
    class_id: str = ""
    email: str = ""
    date_of_birth: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Lesson:
    """A lesson given to a class on a given date."""

    id: str = ""
    subject: str = ""
    topic: str = ""
    date: datetime | None = None
    class_id: str = ""
    plan: str = ""
    observations: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Grade:
    """A mark given to a student in one assessment."""

    id: str = ""
    student_id: str = ""
    term_id: str = ""
    subject: str = ""
    description: str = ""
    value: float = 0.0
    weight: float = 0.0
    date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class SchoolClass:
    """A class (group of students) for an academic year."""

    id: str = ""
    name: str = ""
    level: str = ""
    academic_year: str = ""
    term_ids: list[str] = field(default_factory=list)
    subject_ids: list[str] = field(default_factory=list)
    student_ids: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Subject:
    """A school subject and the teachers who teach it."""

    id: str = ""
    name: str = ""
    description: str = ""
    teacher_ids: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None