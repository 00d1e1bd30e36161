# vickgenda

Tools for a teacher's day-to-day bookkeeping:

- data models (dataclasses) for terms, students, lessons, grades, school
  classes, subjects, tasks, events, routines, questions and exams
  (`vickgenda.academic`, `vickgenda.productivity`, `vickgenda.questions`);
- SQLite-backed stores for terms, students, grades and lessons, built on the
  standard library's `sqlite3` (`vickgenda.store`);
- a plain-text table renderer and a one-line status bar for terminal output
  (`vickgenda.tui`);
- a focus timer for concentrated work sessions (`vickgenda.focus`).

There are no third-party runtime dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Focus sessions

Start a timed session with a duration in whole minutes and a task description:

```
vickgenda-foco iniciar 25 "Corrigir provas Turma A"
```

The remaining time is shown as `MM:SS` and updated every second. Press
CTRL+C (or send SIGTERM) to stop early. A duration that is not an integer, or
is not greater than zero, is refused with an error message and exit status 1.

From Python, `run_focus_session(minutes, task, stream=..., clock=..., sleep=...)`
runs the same countdown; it returns `True` when the session completes and
`False` when interrupted. `format_remaining(seconds)` gives the `MM:SS` text.

## Stores

Each store wraps an open `sqlite3.Connection`; call `init()` once to create
its table.

```python
import sqlite3
from datetime import datetime

from vickgenda.academic import Student, Term
from vickgenda.store.studentstore import StudentStore
from vickgenda.store.termstore import TermStore

conn = sqlite3.connect(":memory:")
students = StudentStore(conn)
students.init()
alice = students.save_student(Student(name="Alice Wonderland"))

terms = TermStore(conn)
terms.init()
term = terms.save_term(Term(name="1º Bimestre",
                            start_date=datetime(2024, 2, 1),
                            end_date=datetime(2024, 4, 15)))
print(terms.list_terms_by_year(2024))
```

- Records saved without an `id` get a fresh UUID; saving a record with an
  existing `id` replaces it.
- `TermStore.save_term` raises `TermOverlapError` when the dates overlap
  another term whose start falls in the same year.
- `get_term`, `get_student`, `get_grade` and `get_lesson` raise
  `NotFoundError` for a missing id, as do `GradeStore.delete_grade` and
  `LessonStore.delete_lesson`. Database failures raise `StoreError`.
- `GradeStore.list_grades_by_student(student_id, term_id, subject)` returns a
  student's grades ordered by date; the term and subject filters are optional.
  The `grades` table declares foreign keys to `students` and `terms`; SQLite
  enforces them only when the connection has run `PRAGMA foreign_keys = ON`.
- `LessonStore.list_lessons` filters by subject and class (case-insensitive),
  period (`"dd-mm-yyyy:dd-mm-yyyy"`, last day included), month (`"mm-yyyy"`)
  and year (`"yyyy"`), ordered by date. A malformed filter raises `ValueError`.
  `update_lesson_plan` replaces a lesson's plan and observations.

## Display helpers

```python
from vickgenda.tui.table import render_table
from vickgenda.tui.statusbar import StatusBar

print(render_table(["ID", "Nome"], [["1", "Alice"], ["2", "Bob"]]), end="")
print(StatusBar(current_context="Editando Tarefa", styled=False).render())
```

`render_table` skips rows whose length differs from the headers, with a
warning. `StatusBar.render` uses ANSI colours unless `styled` is false.

`vickgenda.questions` also offers `format_difficulty_pt_br`,
`format_question_type_pt_br` and `format_last_used_at` for pt-BR labels.

## What this package does not do

- There is no storage for tasks, events, routines, questions or exams: these
  exist only as data models.
- Apart from the focus timer, there are no commands: no dashboard, reminders
  or reports, and no interactive terminal screen around the status bar.