"""SQLite persistence for students."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import replace

from vickgenda.academic import Student
from vickgenda.store.errors import NotFoundError, StoreError

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS students (
    id TEXT PRIMARY KEY,
    name TEXT
)
"""


class StudentStore:
    """Stores students in the ``students`` table of an SQLite connection."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def init(self) -> None:
        """Create the students table if it does not exist."""
        try:
            with self.conn:
                self.conn.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            raise StoreError(f"failed to create students table: {exc}") from exc

    def save_student(self, student: Student) -> Student:
        """Insert or replace a student, generating a UUID when it has no id."""
        if not student.id:
            student = replace(student, id=str(uuid.uuid4()))
        try:
            with self.conn:
                self.conn.execute(
                    "INSERT OR REPLACE INTO students (id, name) VALUES (?, ?)",
                    (student.id, student.name),
                )
        except sqlite3.Error as exc:
            raise StoreError(f"failed to save student ID {student.id}: {exc}") from exc
        return student

    def get_student(self, student_id: str) -> Student:
        """Return the student with the given id, or raise NotFoundError."""
        try:
            row = self.conn.execute(
                "SELECT id, name FROM students WHERE id = ?", (student_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(f"failed to get student by ID '{student_id}': {exc}") from exc
        if row is None:
            raise NotFoundError(f"student with ID '{student_id}' not found")
        return Student(id=row[0], name=row[1] or "")

    def list_students(self) -> list[Student]:
        """Return all students ordered by name."""
        try:
            rows = self.conn.execute("SELECT id, name FROM students ORDER BY name ASC").fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"failed to query students: {exc}") from exc
        return [Student(id=sid, name=name or "") for sid, name in rows]