from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from utils.errors import ValidationError


class RankTier(str, Enum):
	"""Rank labels, declared from lowest to highest."""

	RISING_STAR = "Rising Star"
	SMART_COOKIE = "Smart Cookie"
	TRIVIA_TITAN = "Trivia Titan"
	KNOWLEDGE_NINJA = "Knowledge Ninja"
	BRAIN_BLASTER = "Brain Blaster"
	QUIZ_OVERLORD = "Quiz Overlord"

	@property
	def order(self) -> int:
		return _TIER_ORDER.index(self)


_TIER_ORDER = list(RankTier)

# Inclusive upper bounds, lowest first. Anything above the last bound is QUIZ_OVERLORD.
RANK_THRESHOLDS: tuple[tuple[int, RankTier], ...] = (
	(10, RankTier.RISING_STAR),
	(100, RankTier.SMART_COOKIE),
	(1_000, RankTier.TRIVIA_TITAN),
	(10_000, RankTier.KNOWLEDGE_NINJA),
	(99_999, RankTier.BRAIN_BLASTER),
)
TOP_TIER = RankTier.QUIZ_OVERLORD


@dataclass(frozen=True)
class RankProgress:

	points: int
	rank: RankTier
	next_rank: Optional[RankTier]
	points_to_next_rank: int

	def to_dict(self) -> dict:
		return {
			"points": self.points,
			"rank": self.rank.value,
			"nextRank": self.next_rank.value if self.next_rank else None,
			"pointsToNextRank": self.points_to_next_rank,
		}


def _check_points(points) -> int:
	if isinstance(points, bool) or not isinstance(points, int):
		raise ValidationError("points must be an integer")
	if points < 0:
		raise ValidationError("points must be >= 0")
	return points


def tier_bounds(tier: RankTier) -> tuple[int, Optional[int]]:
	"""Return the (lower, upper) point bounds of ``tier``; upper is None for the top tier."""
	lower = 0
	for upper, candidate in RANK_THRESHOLDS:
		if candidate is tier:
			return lower, upper
		lower = upper + 1
	return lower, None


class RankService:

	def assign_rank(self, points: int) -> RankTier:
		points = _check_points(points)
		for upper, tier in RANK_THRESHOLDS:
			if points <= upper:
				return tier
		return TOP_TIER

	def next_rank(self, points: int) -> Optional[RankTier]:
		current = self.assign_rank(points)
		if current is TOP_TIER:
			return None
		return _TIER_ORDER[current.order + 1]

	def points_to_next_rank(self, points: int) -> int:
		upcoming = self.next_rank(points)
		if upcoming is None:
			return 0
		lower, _ = tier_bounds(upcoming)
		return lower - points

	def progress(self, points: int) -> RankProgress:
		return RankProgress(
			points=points,
			rank=self.assign_rank(points),
			next_rank=self.next_rank(points),
			points_to_next_rank=self.points_to_next_rank(points),
		)


rank_service = RankService()


def assign_rank(points: int) -> RankTier:
	return rank_service.assign_rank(points)
