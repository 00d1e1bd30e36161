"""SQLite persistence for terms, with overlap checking inside a year."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import replace
from datetime import datetime

from vickgenda.academic import Term
from vickgenda.store.errors import NotFoundError, StoreError

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS terms (
    id TEXT PRIMARY KEY,
    name TEXT,
    start_date DATETIME,
    end_date DATETIME,
    year INTEGER
)
"""


class TermOverlapError(StoreError):
    """A term's dates overlap with another term of the same year."""


def _to_db(value: datetime | None) -> str | None:
    return None if value is None else value.isoformat(sep=" ")


def _from_db(value: str | None) -> datetime | None:
    return None if value is None else datetime.fromisoformat(value)


def _row_to_term(row) -> Term:
    term_id, name, start, end = row
    return Term(id=term_id, name=name or "", start_date=_from_db(start), end_date=_from_db(end))


class TermStore:
    """Stores terms in the ``terms`` table of an SQLite connection."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def init(self) -> None:
        """Create the terms table if it does not exist."""
        try:
            with self.conn:
                self.conn.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            raise StoreError(f"failed to create terms table: {exc}") from exc

    def save_term(self, term: Term) -> Term:
        """Insert or replace a term, refusing dates that overlap another term of its year."""
        if term.start_date is None or term.end_date is None:
            raise ValueError("a term needs a start date and an end date")
        if not term.id:
            term = replace(term, id=str(uuid.uuid4()))
        year = term.start_date.year

        try:
            existing = self.conn.execute(
                "SELECT id, name, start_date, end_date FROM terms WHERE year = ? AND id != ?",
                (year, term.id),
            ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"failed to query existing terms for overlap check: {exc}") from exc

        for _existing_id, existing_name, start, end in existing:
            if term.start_date <= _from_db(end) and term.end_date >= _from_db(start):
                raise TermOverlapError(
                    f"term '{term.name}' overlaps with existing term '{existing_name}'"
                )

        try:
            with self.conn:
                self.conn.execute(
                    "INSERT OR REPLACE INTO terms (id, name, start_date, end_date, year) "
                    "VALUES (?, ?, ?, ?, ?)",
                    (term.id, term.name, _to_db(term.start_date), _to_db(term.end_date), year),
                )
        except sqlite3.Error as exc:
            raise StoreError(f"failed to save term '{term.id}': {exc}") from exc
        return term

    def get_term(self, term_id: str) -> Term:
        """Return the term with the given id, or raise NotFoundError."""
        try:
            row = self.conn.execute(
                "SELECT id, name, start_date, end_date FROM terms WHERE id = ?", (term_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(f"failed to get term by ID '{term_id}': {exc}") from exc
        if row is None:
            raise NotFoundError(f"term with ID '{term_id}' not found")
        return _row_to_term(row)

    def list_terms_by_year(self, year: int) -> list[Term]:
        """Return the terms of a year, earliest start first."""
        try:
            rows = self.conn.execute(
                "SELECT id, name, start_date, end_date FROM terms "
                "WHERE year = ? ORDER BY start_date ASC",
                (year,),
            ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"failed to query terms by year {year}: {exc}") from exc
        return [_row_to_term(row) for row in rows]