from __future__ import annotations

from flask import request
from utils.errors import ValidationError


def get_json(required: list[str] | None = None) -> dict:
	data = request.get_json(silent=True)
	if data is None:
		data = {}
	if not isinstance(data, dict):
		raise ValidationError("Request body must be a JSON object")
	if required:
		missing = [k for k in required if k not in data]
		if missing:
			raise ValidationError(f"Missing fields: {', '.join(missing)}")
	return data


def parse_points(value, field: str = "points") -> int:
	"""Parse a non-negative point total from a path, query or body value."""
	if isinstance(value, bool):
		raise ValidationError(f"{field} must be an integer")
	if isinstance(value, int):
		points = value
	elif isinstance(value, str):
		try:
			points = int(value.strip())
		except ValueError:
			raise ValidationError(f"{field} must be an integer") from None
	else:
		raise ValidationError(f"{field} must be an integer")
	if points < 0:
		raise ValidationError(f"{field} must be >= 0")
	return points


def require_list(data: dict, field: str) -> list:
	value = data.get(field)
	if not isinstance(value, list):
		raise ValidationError(f"{field} must be a list")
	return value
