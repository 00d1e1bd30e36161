import sqlite3
import uuid
from datetime import datetime

import pytest

from vickgenda.academic import Grade, Student, Term
from vickgenda.store.errors import NotFoundError, StoreError
from vickgenda.store.gradestore import GradeStore
from vickgenda.store.studentstore import StudentStore
from vickgenda.store.termstore import TermStore


def d(text):
    return datetime.strptime(text, "%Y-%m-%d")


@pytest.fixture
def stores():
    conn = sqlite3.connect(":memory:")
    conn.execute("PRAGMA foreign_keys = ON")
    students = StudentStore(conn)
    students.init()
    terms = TermStore(conn)
    terms.init()
    grades = GradeStore(conn)
    grades.init()
    yield grades, students, terms
    conn.close()


def make_student(students, name):
    return students.save_student(Student(name=name))


def make_term(terms, name, start, end):
    return terms.save_term(Term(name=name, start_date=d(start), end_date=d(end)))


def test_save_and_get_grade(stores):
    grades, students, terms = stores
    student = make_student(students, "Test Student Grade")
    term = make_term(terms, "Test Term Grade", "2024-01-01", "2024-03-01")
    grade = Grade(
        student_id=student.id,
        term_id=term.id,
        subject="Math",
        description="Exam 1",
        value=8.5,
        weight=2.0,
        date=d("2024-02-15"),
    )
    saved = grades.save_grade(grade)
    assert saved.id != ""

    got = grades.get_grade(saved.id)
    assert got.student_id == student.id
    assert got.term_id == term.id
    assert got.subject == "Math"
    assert got.description == "Exam 1"
    assert got.value == 8.5
    assert got.weight == 2.0
    assert got.date == d("2024-02-15")


def test_get_missing_grade_raises(stores):
    grades, _, _ = stores
    with pytest.raises(NotFoundError, match="not found"):
        grades.get_grade("non-existent-grade-id")


def test_list_grades_by_student(stores):
    grades, students, terms = stores
    s1 = make_student(students, "Student A")
    s2 = make_student(students, "Student B")
    t1 = make_term(terms, "Term 1", "2024-01-01", "2024-03-01")
    t2 = make_term(terms, "Term 2", "2024-04-01", "2024-06-01")

    for g in [
        Grade(student_id=s1.id, term_id=t1.id, subject="Math", description="s1t1m1", value=7, weight=1, date=d("2024-02-01")),
        Grade(student_id=s1.id, term_id=t1.id, subject="Math", description="s1t1m2", value=8, weight=1, date=d("2024-02-15")),
        Grade(student_id=s1.id, term_id=t1.id, subject="Science", description="s1t1s1", value=9, weight=1, date=d("2024-02-05")),
        Grade(student_id=s1.id, term_id=t2.id, subject="Math", description="s1t2m1", value=6, weight=1, date=d("2024-05-01")),
        Grade(student_id=s2.id, term_id=t1.id, subject="Math", description="s2t1m1", value=5, weight=1, date=d("2024-02-10")),
    ]:
        grades.save_grade(g)

    s1_grades = grades.list_grades_by_student(s1.id, "", "")
    assert len(s1_grades) == 4
    dates = [g.date for g in s1_grades]
    assert all(a < b for a, b in zip(dates, dates[1:]))

    assert len(grades.list_grades_by_student(s1.id, t1.id, "")) == 3

    math = grades.list_grades_by_student(s1.id, t1.id, "Math")
    assert [g.description for g in math] == ["s1t1m1", "s1t1m2"]

    s3 = make_student(students, "Student C No Grades")
    assert grades.list_grades_by_student(s3.id, "", "") == []


def test_update_grade(stores):
    grades, students, terms = stores
    student = make_student(students, "UpdateStudent")
    term = make_term(terms, "UpdateTerm", "2024-01-01", "2024-03-01")
    saved = grades.save_grade(
        Grade(student_id=student.id, term_id=term.id, subject="History", description="Essay",
              value=7.0, weight=1.5, date=d("2024-01-20"))
    )
    saved.value = 9.0
    saved.description = "Essay (Resubmitted)"

    updated = grades.update_grade(saved)
    assert (updated.value, updated.description) == (9.0, "Essay (Resubmitted)")

    got = grades.get_grade(saved.id)
    assert (got.value, got.description) == (9.0, "Essay (Resubmitted)")


def test_update_grade_without_id_is_rejected(stores):
    grades, _, _ = stores
    with pytest.raises(ValueError, match="without an ID"):
        grades.update_grade(Grade(subject="Math"))


def test_delete_grade(stores):
    grades, students, terms = stores
    student = make_student(students, "DeleteStudent")
    term = make_term(terms, "DeleteTerm", "2024-01-01", "2024-03-01")
    saved = grades.save_grade(
        Grade(student_id=student.id, term_id=term.id, subject="Art", description="Project",
              value=10.0, weight=3.0, date=datetime.now())
    )
    grades.delete_grade(saved.id)

    with pytest.raises(NotFoundError, match="not found"):
        grades.get_grade(saved.id)

    with pytest.raises(NotFoundError, match="no grade found with ID"):
        grades.delete_grade("non-existent-grade-to-delete")


def test_delete_grade_without_id_is_rejected(stores):
    grades, _, _ = stores
    with pytest.raises(ValueError, match="without an ID"):
        grades.delete_grade("")


def test_foreign_key_constraints(stores):
    grades, students, terms = stores
    valid_term = make_term(terms, "FK Test Term", "2024-01-01", "2024-03-01")
    with pytest.raises(StoreError) as excinfo:
        grades.save_grade(
            Grade(student_id=str(uuid.uuid4()), term_id=valid_term.id, subject="FK Test",
                  value=5, weight=1, date=datetime.now())
        )
    assert "foreign key constraint failed" in str(excinfo.value).lower()

    valid_student = make_student(students, "FK Test Student")
    with pytest.raises(StoreError) as excinfo:
        grades.save_grade(
            Grade(student_id=valid_student.id, term_id=str(uuid.uuid4()), subject="FK Test",
                  value=5, weight=1, date=datetime.now())
        )
    assert "foreign key constraint failed" in str(excinfo.value).lower()