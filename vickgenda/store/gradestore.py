"""SQLite persistence for grades, linked to students and terms."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import replace
from datetime import datetime

from vickgenda.academic import Grade
from vickgenda.store.errors import NotFoundError, StoreError

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS grades (
    id TEXT PRIMARY KEY,
    student_id TEXT,
    term_id TEXT,
    subject TEXT,
    description TEXT,
    value REAL,
    weight REAL,
    date DATETIME,
    FOREIGN KEY (student_id) REFERENCES students(id) ON DELETE CASCADE,
    FOREIGN KEY (term_id) REFERENCES terms(id) ON DELETE CASCADE
)
"""

_COLUMNS = "id, student_id, term_id, subject, description, value, weight, date"


def _to_db(value: datetime | None) -> str | None:
    return None if value is None else value.isoformat(sep=" ")


def _from_db(value: str | None) -> datetime | None:
    return None if value is None else datetime.fromisoformat(value)


def _row_to_grade(row) -> Grade:
    gid, student_id, term_id, subject, description, value, weight, date = row
    return Grade(
        id=gid,
        student_id=student_id or "",
        term_id=term_id or "",
        subject=subject or "",
        description=description or "",
        value=value if value is not None else 0.0,
        weight=weight if weight is not None else 0.0,
        date=_from_db(date),
    )


class GradeStore:
    """Stores grades in the ``grades`` table of an SQLite connection."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def init(self) -> None:
        """Create the grades table if it does not exist."""
        try:
            with self.conn:
                self.conn.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            raise StoreError(f"failed to create grades table: {exc}") from exc

    def save_grade(self, grade: Grade) -> Grade:
        """Insert or replace a grade, generating a UUID when it has no id."""
        if not grade.id:
            grade = replace(grade, id=str(uuid.uuid4()))
        try:
            with self.conn:
                self.conn.execute(
                    f"INSERT OR REPLACE INTO grades ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                    (
                        grade.id,
                        grade.student_id,
                        grade.term_id,
                        grade.subject,
                        grade.description,
                        grade.value,
                        grade.weight,
                        _to_db(grade.date),
                    ),
                )
        except sqlite3.Error as exc:
            raise StoreError(f"failed to save grade ID {grade.id}: {exc}") from exc
        return grade

    def get_grade(self, grade_id: str) -> Grade:
        """Return the grade with the given id, or raise NotFoundError."""
        try:
            row = self.conn.execute(
                f"SELECT {_COLUMNS} FROM grades WHERE id = ?", (grade_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(f"failed to get grade by ID '{grade_id}': {exc}") from exc
        if row is None:
            raise NotFoundError(f"grade with ID '{grade_id}' not found")
        return _row_to_grade(row)

    def list_grades_by_student(self, student_id: str, term_id: str = "", subject: str = "") -> list[Grade]:
        """Return a student's grades by date, optionally limited to a term and a subject."""
        query = f"SELECT {_COLUMNS} FROM grades WHERE student_id = ?"
        args: list[object] = [student_id]
        if term_id:
            query += " AND term_id = ?"
            args.append(term_id)
        if subject:
            query += " AND subject = ?"
            args.append(subject)
        query += " ORDER BY date ASC"
        try:
            rows = self.conn.execute(query, args).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"failed to query grades for student ID '{student_id}': {exc}") from exc
        return [_row_to_grade(row) for row in rows]

    def update_grade(self, grade: Grade) -> Grade:
        """Replace an existing grade; the grade must carry an id."""
        if not grade.id:
            raise ValueError("cannot update grade without an ID")
        return self.save_grade(grade)

    def delete_grade(self, grade_id: str) -> None:
        """Delete a grade, raising NotFoundError when none has the id."""
        if not grade_id:
            raise ValueError("cannot delete grade without an ID")
        try:
            with self.conn:
                cursor = self.conn.execute("DELETE FROM grades WHERE id = ?", (grade_id,))
        except sqlite3.Error as exc:
            raise StoreError(f"failed to delete grade ID {grade_id}: {exc}") from exc
        if cursor.rowcount == 0:
            raise NotFoundError(f"no grade found with ID '{grade_id}' to delete")