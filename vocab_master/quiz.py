"""Multiple-choice quiz: question building and the per-session state machine."""
from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from vocab_master.models import QuizQuestion, VocabularyEntry

_log = logging.getLogger("vocab_master.quiz")

DISTRACTOR_COUNT = 3
PASS_PERCENTAGE = 80


class QuizStateError(RuntimeError):
    """An operation was called in a state where it is not allowed."""


def build_questions(
    words: Sequence[VocabularyEntry],
    rng: random.Random | None = None,
) -> list[QuizQuestion]:
    """Build one question per word, in input order.

    Distractors are the definitions of up to three other words (by term),
    drawn uniformly at random.  The correct definition is then shuffled in
    with them.
    """
    rng = rng or random.Random()
    questions: list[QuizQuestion] = []
    for target in words:
        others = [w for w in words if w.term != target.term]
        picked = rng.sample(others, min(DISTRACTOR_COUNT, len(others)))
        options = [w.definition for w in picked] + [target.definition]
        rng.shuffle(options)
        questions.append(QuizQuestion(
            word=target,
            options=options,
            correct_answer=target.definition,
        ))
    return questions


class QuizSession:
    """One pass through a question list.

    The first answer to each question is locked in; later answers to the
    same question are ignored until ``advance()``.
    """

    def __init__(self, questions: Sequence[QuizQuestion]):
        self.questions = list(questions)
        self.current_index = 0
        self.score = 0
        self.selected_answer: str | None = None
        self.finished = not self.questions

    @classmethod
    def from_words(
        cls,
        words: Sequence[VocabularyEntry],
        rng: random.Random | None = None,
    ) -> QuizSession:
        return cls(build_questions(words, rng=rng))

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> QuizQuestion | None:
        if self.finished:
            return None
        return self.questions[self.current_index]

    @property
    def answered(self) -> bool:
        return self.selected_answer is not None

    @property
    def is_last(self) -> bool:
        return self.current_index >= self.total - 1

    @property
    def percentage(self) -> int:
        if not self.total:
            return 0
        # Half rounds up: 5/8 -> 63
        return (200 * self.score + self.total) // (2 * self.total)

    @property
    def passed(self) -> bool:
        return self.percentage >= PASS_PERCENTAGE

    def submit_answer(self, choice: str) -> bool:
        """Lock in *choice* for the current question and return whether it is correct."""
        question = self.current_question
        if question is None:
            raise QuizStateError("Quiz is already finished")
        if self.selected_answer is None:
            self.selected_answer = choice
            if choice == question.correct_answer:
                self.score += 1
        return self.selected_answer == question.correct_answer

    def advance(self) -> None:
        if self.finished:
            raise QuizStateError("Quiz is already finished")
        if self.selected_answer is None:
            raise QuizStateError("No answer selected for the current question")
        if self.is_last:
            self.finished = True
            _log.info("Quiz finished: %d/%d (%d%%)", self.score, self.total, self.percentage)
            return
        self.current_index += 1
        self.selected_answer = None

    def to_dict(self) -> dict:
        data = {
            "finished": self.finished,
            "score": self.score,
            "total": self.total,
        }
        if self.finished:
            data["percentage"] = self.percentage
            data["passed"] = self.passed
            return data

        question = self.current_question
        data["progress"] = {"current": self.current_index + 1, "total": self.total}
        data["question"] = {
            "term": question.word.term,
            "part_of_speech": question.word.part_of_speech,
            "options": list(question.options),
        }
        data["selected_answer"] = self.selected_answer
        data["is_last"] = self.is_last
        if self.answered:
            data["correct"] = self.selected_answer == question.correct_answer
            data["correct_answer"] = question.correct_answer
        return data
