from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Hashable, Mapping, Optional, Sequence

from utils.errors import ValidationError


logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
	"""Difficulty tier attached to a quiz."""

	EASY = "easy"
	MEDIUM = "medium"
	HARD = "hard"
	EXPERT = "expert"

	@classmethod
	def parse(cls, value: Any) -> "Difficulty":
		"""Parse a loosely typed tier name, falling back to EASY.

		Matching is case-insensitive and ignores surrounding whitespace.
		Anything unrecognised (None, empty string, typos, non-strings) is
		logged and treated as EASY rather than rejected.
		"""
		if isinstance(value, cls):
			return value
		if isinstance(value, str):
			try:
				return cls(value.strip().lower())
			except ValueError:
				pass
		logger.warning("Unrecognized difficulty %r, scoring as %s", value, cls.EASY.value)
		return cls.EASY

	@property
	def multiplier(self) -> Decimal:
		return DIFFICULTY_MULTIPLIERS[self]


DIFFICULTY_MULTIPLIERS: Mapping[Difficulty, Decimal] = MappingProxyType({
	Difficulty.EASY: Decimal("1.0"),
	Difficulty.MEDIUM: Decimal("1.5"),
	Difficulty.HARD: Decimal("2.0"),
	Difficulty.EXPERT: Decimal("2.2"),
})


@dataclass(frozen=True)
class QuestionKey:

	question_id: Hashable
	correct_option_id: Hashable


@dataclass(frozen=True)
class ScoreResult:

	correct_count: int
	total_questions: int
	points_earned: int
	unanswered_count: int = 0
	difficulty: Difficulty = Difficulty.EASY

	def to_dict(self) -> dict:
		return {
			"correctCount": self.correct_count,
			"totalQuestions": self.total_questions,
			"pointsEarned": self.points_earned,
			"unansweredCount": self.unanswered_count,
			"difficulty": self.difficulty.value,
		}


@dataclass(frozen=True)
class ScoringRules:

	completion_bonus: int = 10
	multipliers: Mapping[Difficulty, Decimal] = field(default_factory=lambda: DIFFICULTY_MULTIPLIERS)


def same_option(answer: Any, correct: Any) -> bool:
	"""Strict option match: booleans never equal numbers and strings never equal numbers."""
	if isinstance(answer, bool) or isinstance(correct, bool):
		return type(answer) is type(correct) and answer == correct
	if isinstance(answer, (int, float)) and isinstance(correct, (int, float)):
		return answer == correct
	return type(answer) is type(correct) and answer == correct


def round_half_up(value: Decimal) -> int:
	return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_answer_key(questions: Sequence[Mapping]) -> list[QuestionKey]:
	"""Build an answer key from question objects as stored by the quiz app.

	Each question needs an ``id`` and a ``correctAnswer`` (``correct_answer``
	is accepted as well).
	"""
	key: list[QuestionKey] = []
	for i, q in enumerate(questions):
		if not isinstance(q, Mapping):
			raise ValidationError(f"Question {i} must be an object")
		correct = q.get("correctAnswer", q.get("correct_answer"))
		if correct is None:
			raise ValidationError(f"Question {i} is missing correctAnswer")
		key.append(QuestionKey(question_id=q.get("id", i), correct_option_id=correct))
	return key


class ScoringService:

	def __init__(self, rules: ScoringRules | None = None):
		self.rules = rules or ScoringRules()

	def score(
		self,
		key: Sequence[QuestionKey],
		answers: Sequence[Optional[Hashable]],
		difficulty: Any = Difficulty.EASY,
	) -> ScoreResult:
		if len(answers) != len(key):
			raise ValidationError(
				f"Expected {len(key)} answers, got {len(answers)}"
			)
		tier = Difficulty.parse(difficulty)
		total = len(key)
		correct_count = 0
		unanswered = 0
		for question, answer in zip(key, answers):
			if answer is None:
				unanswered += 1
			elif same_option(answer, question.correct_option_id):
				correct_count += 1

		base = correct_count
		if total > 0 and correct_count == total:
			base += self.rules.completion_bonus
		points = round_half_up(Decimal(base) * self.rules.multipliers[tier])
		return ScoreResult(
			correct_count=correct_count,
			total_questions=total,
			points_earned=points,
			unanswered_count=unanswered,
			difficulty=tier,
		)


scoring_service = ScoringService()


def score(
	key: Sequence[QuestionKey],
	answers: Sequence[Optional[Hashable]],
	difficulty: Any = Difficulty.EASY,
) -> ScoreResult:
	return scoring_service.score(key, answers, difficulty)
