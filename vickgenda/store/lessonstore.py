"""SQLite persistence for lessons, with filtering by subject, class and dates."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import replace
from datetime import datetime, timedelta

from vickgenda.academic import Lesson
from vickgenda.store.errors import NotFoundError, StoreError

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS lessons (
    id TEXT PRIMARY KEY,
    subject TEXT,
    topic TEXT,
    date DATETIME,
    class_id TEXT,
    plan TEXT,
    observations TEXT
)
"""

_COLUMNS = "id, subject, topic, date, class_id, plan, observations"
_PERIOD_DATE_FORMAT = "%d-%m-%Y"


def _to_db(value: datetime | None) -> str | None:
    return None if value is None else value.isoformat(sep=" ")


def _from_db(value: str | None) -> datetime | None:
    return None if value is None else datetime.fromisoformat(value)


def _row_to_lesson(row) -> Lesson:
    lid, subject, topic, date, class_id, plan, observations = row
    return Lesson(
        id=lid,
        subject=subject or "",
        topic=topic or "",
        date=_from_db(date),
        class_id=class_id or "",
        plan=plan or "",
        observations=observations or "",
    )


def _period_bounds(period: str) -> tuple[datetime, datetime]:
    """Parse 'dd-mm-yyyy:dd-mm-yyyy' into a start and an end covering the whole last day."""
    parts = period.split(":")
    if len(parts) != 2:
        raise ValueError(f"invalid period format, expected 'dd-mm-yyyy:dd-mm-yyyy': {period}")
    start_text, end_text = parts
    try:
        start = datetime.strptime(start_text, _PERIOD_DATE_FORMAT)
    except ValueError:
        raise ValueError(f"invalid start date format in period: {start_text}") from None
    try:
        end = datetime.strptime(end_text, _PERIOD_DATE_FORMAT)
    except ValueError:
        raise ValueError(f"invalid end date format in period: {end_text}") from None
    return start, end + timedelta(hours=23, minutes=59, seconds=59)


class LessonStore:
    """Stores lessons in the ``lessons`` table of an SQLite connection."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def init(self) -> None:
        """Create the lessons table if it does not exist."""
        try:
            with self.conn:
                self.conn.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            raise StoreError(f"failed to create lessons table: {exc}") from exc

    def save_lesson(self, lesson: Lesson) -> Lesson:
        """Insert or replace a lesson, generating a UUID when it has no id."""
        if not lesson.id:
            lesson = replace(lesson, id=str(uuid.uuid4()))
        try:
            with self.conn:
                self.conn.execute(
                    f"INSERT OR REPLACE INTO lessons ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (
                        lesson.id,
                        lesson.subject,
                        lesson.topic,
                        _to_db(lesson.date),
                        lesson.class_id,
                        lesson.plan,
                        lesson.observations,
                    ),
                )
        except sqlite3.Error as exc:
            raise StoreError(f"failed to save lesson ID {lesson.id}: {exc}") from exc
        return lesson

    def get_lesson(self, lesson_id: str) -> Lesson:
        """Return the lesson with the given id, or raise NotFoundError."""
        try:
            row = self.conn.execute(
                f"SELECT {_COLUMNS} FROM lessons WHERE id = ?", (lesson_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(f"failed to get lesson by ID '{lesson_id}': {exc}") from exc
        if row is None:
            raise NotFoundError(f"lesson with ID '{lesson_id}' not found")
        return _row_to_lesson(row)

    def list_lessons(
        self,
        subject: str = "",
        class_id: str = "",
        period: str = "",
        month: str = "",
        year: str = "",
    ) -> list[Lesson]:
        """Return lessons by date, filtered by any of the given criteria.

        Subject and class match case-insensitively; ``period`` is
        'dd-mm-yyyy:dd-mm-yyyy', ``month`` is 'mm-yyyy' and ``year`` is 'yyyy'.
        """
        filters: list[str] = []
        args: list[object] = []

        if subject:
            filters.append("LOWER(subject) = LOWER(?)")
            args.append(subject)
        if class_id:
            filters.append("LOWER(class_id) = LOWER(?)")
            args.append(class_id)
        if period:
            start, end = _period_bounds(period)
            filters.append("date BETWEEN ? AND ?")
            args.extend((_to_db(start), _to_db(end)))
        if month:
            parts = month.split("-")
            if len(parts) != 2:
                raise ValueError(f"invalid month format, expected 'mm-yyyy': {month}")
            filters.append("strftime('%Y-%m', date) = ?")
            args.append(f"{parts[1]}-{parts[0]}")
        if year:
            filters.append("strftime('%Y', date) = ?")
            args.append(year)

        query = f"SELECT {_COLUMNS} FROM lessons"
        if filters:
            query += " WHERE " + " AND ".join(filters)
        query += " ORDER BY date ASC"

        try:
            rows = self.conn.execute(query, args).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"failed to query lessons with filters: {exc}") from exc
        return [_row_to_lesson(row) for row in rows]

    def update_lesson_plan(self, lesson_id: str, plan: str, observations: str) -> Lesson:
        """Replace a lesson's plan and observations and return the updated lesson."""
        try:
            self.get_lesson(lesson_id)
        except NotFoundError as exc:
            raise NotFoundError(
                f"cannot update lesson plan, lesson with ID '{lesson_id}' not found"
            ) from exc
        try:
            with self.conn:
                self.conn.execute(
                    "UPDATE lessons SET plan = ?, observations = ? WHERE id = ?",
                    (plan, observations, lesson_id),
                )
        except sqlite3.Error as exc:
            raise StoreError(f"failed to update lesson plan for ID {lesson_id}: {exc}") from exc
        return self.get_lesson(lesson_id)

    def delete_lesson(self, lesson_id: str) -> None:
        """Delete a lesson, raising NotFoundError when none has the id."""
        if not lesson_id:
            raise ValueError("cannot delete lesson without an ID")
        try:
            with self.conn:
                cursor = self.conn.execute("DELETE FROM lessons WHERE id = ?", (lesson_id,))
        except sqlite3.Error as exc:
            raise StoreError(f"failed to delete lesson ID {lesson_id}: {exc}") from exc
        if cursor.rowcount == 0:
            raise NotFoundError(f"no lesson found with ID '{lesson_id}' to delete")