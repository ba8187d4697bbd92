from flask import Blueprint, jsonify, request
from utils.errors import ValidationError
from utils.helpers import parse_points
from services.rank_service import RankTier, rank_service, tier_bounds


bp = Blueprint("rank", __name__, url_prefix="/api/rank")


@bp.get("")
def rank_from_query():
	if "points" not in request.args:
		raise ValidationError("Missing query parameter: points")
	points = parse_points(request.args["points"])
	return jsonify(rank_service.progress(points).to_dict()), 200


@bp.get("/<points>")
def rank_from_path(points: str):
	return jsonify(rank_service.progress(parse_points(points)).to_dict()), 200


@bp.get("/tiers")
def tiers():
	items = []
	for tier in RankTier:
		lower, upper = tier_bounds(tier)
		items.append({"rank": tier.value, "minPoints": lower, "maxPoints": upper})
	return jsonify(items), 200
