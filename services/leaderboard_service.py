from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from services.rank_service import RankTier, rank_service
from utils.errors import ValidationError


@dataclass
class LeaderboardEntry:

	user_id: str | int
	username: str = ""
	avatar: str = ""
	total_points: int = 0
	quizzes: set = field(default_factory=set)
	position: int = 0
	points_to_next_position: int = 0

	@property
	def quizzes_completed(self) -> int:
		return len(self.quizzes)

	@property
	def rank(self) -> RankTier:
		return rank_service.assign_rank(self.total_points)

	def to_dict(self) -> dict:
		return {
			"position": self.position,
			"userId": self.user_id,
			"username": self.username,
			"avatar": self.avatar,
			"totalPoints": self.total_points,
			"quizzesCompleted": self.quizzes_completed,
			"rank": self.rank.value,
			"pointsToNextPosition": self.points_to_next_position,
		}


def _attempt_points(attempt: Mapping, index: int) -> int:
	if not isinstance(attempt, Mapping):
		raise ValidationError(f"Attempt {index} must be an object")
	points = attempt.get("pointsEarned", attempt.get("points_earned"))
	if points is None:
		return 0
	if isinstance(points, bool) or not isinstance(points, int) or points < 0:
		raise ValidationError(f"Attempt {index} has invalid pointsEarned")
	return points


def _identifier(value, label: str, field_name: str) -> str | int:
	if value is None or value == "":
		raise ValidationError(f"{label} is missing {field_name}")
	if isinstance(value, bool) or not isinstance(value, (str, int)):
		raise ValidationError(f"{label} has invalid {field_name}")
	return value


def total_points(attempts: Iterable[Mapping]) -> int:
	return sum(_attempt_points(a, i) for i, a in enumerate(attempts))


def build_leaderboard(
	attempts: Iterable[Mapping],
	users: Iterable[Mapping] | None = None,
) -> list[LeaderboardEntry]:
	"""Aggregate attempt records into a leaderboard sorted by total points.

	``users`` optionally lists members (``userId``, ``username``, ``avatar``)
	so that people without attempts still appear with zero points.

	Attempts are keyed on ``(userId, quizId)`` and a later attempt for the
	same quiz replaces the earlier one, so each user counts one attempt per
	quiz. Attempts without a ``quizId`` are all counted.
	"""
	entries: dict[str | int, LeaderboardEntry] = {}
	for i, user in enumerate(users or []):
		if not isinstance(user, Mapping):
			raise ValidationError(f"User {i} must be an object")
		user_id = _identifier(user.get("userId"), f"User {i}", "userId")
		entries[user_id] = LeaderboardEntry(
			user_id=user_id,
			username=user.get("username", ""),
			avatar=user.get("avatar", ""),
		)

	latest: dict[str | int, dict] = {}
	for i, attempt in enumerate(attempts):
		_attempt_points(attempt, i)
		user_id = _identifier(attempt.get("userId", attempt.get("user_id")), f"Attempt {i}", "userId")
		quiz_id = attempt.get("quizId", attempt.get("quiz_id"))
		if quiz_id is not None:
			quiz_id = _identifier(quiz_id, f"Attempt {i}", "quizId")
		entries.setdefault(user_id, LeaderboardEntry(user_id=user_id))
		by_quiz = latest.setdefault(user_id, {})
		slot = ("quiz", quiz_id) if quiz_id is not None else ("attempt", i)
		by_quiz[slot] = attempt

	for user_id, by_quiz in latest.items():
		entry = entries[user_id]
		entry.total_points = total_points(by_quiz.values())
		entry.quizzes = {quiz_id for kind, quiz_id in by_quiz if kind == "quiz"}

	# sorted() is stable, ties keep first-seen order
	ordered = sorted(entries.values(), key=lambda e: e.total_points, reverse=True)
	for idx, entry in enumerate(ordered, start=1):
		entry.position = idx
		if idx > 1:
			entry.points_to_next_position = ordered[idx - 2].total_points - entry.total_points
	return ordered
