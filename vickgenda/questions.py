"""Question bank and exam records, with pt-BR display helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Difficulty(str, Enum):
    """Difficulty level of a question."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuestionType(str, Enum):
    """Kind of question."""

    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    ESSAY = "essay"
    SHORT_ANSWER = "short_answer"


_DIFFICULTY_PT_BR = {
    Difficulty.EASY: "Fácil",
    Difficulty.MEDIUM: "Média",
    Difficulty.HARD: "Difícil",
}

_QUESTION_TYPE_PT_BR = {
    QuestionType.MULTIPLE_CHOICE: "Múltipla Escolha",
    QuestionType.TRUE_FALSE: "Verdadeiro/Falso",
    QuestionType.ESSAY: "Dissertativa",
    QuestionType.SHORT_ANSWER: "Resposta Curta",
}


@dataclass
class Question:
    """A single question in the question bank."""

    id: str = ""
    subject: str = ""
    topic: str = ""
    difficulty: str = ""
    question_text: str = ""
    answer_options: list[str] = field(default_factory=list)
    correct_answers: list[str] = field(default_factory=list)
    question_type: str = ""
    source: str = ""
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    last_used_at: datetime | None = None
    author: str = ""


@dataclass
class Exam:
    """An exam made of an ordered list of questions."""

    id: str = ""
    title: str = ""
    subject: str = ""
    created_at: datetime | None = None
    instructions: str = ""
    question_ids: list[str] = field(default_factory=list)
    layout_options: dict[str, str] = field(default_factory=dict)
    randomization_seed: int = 0
    updated_at: datetime | None = None
    published_at: datetime | None = None
    term_id: str = ""
    author_id: str = ""


def format_difficulty_pt_br(difficulty):
    """Return the pt-BR label of a difficulty, or the value itself if unknown."""
    return _DIFFICULTY_PT_BR.get(difficulty, difficulty)


def format_question_type_pt_br(q_type):
    """Return the pt-BR label of a question type, or the value itself if unknown."""
    return _QUESTION_TYPE_PT_BR.get(q_type, q_type)


def format_last_used_at(t):
    """Format a last-use timestamp as dd/mm/yyyy HH:MM, or say it was never used."""
    if t is None:
        return "Nunca utilizada"
    return t.strftime("%d/%m/%Y %H:%M")