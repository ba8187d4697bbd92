from flask import Blueprint, jsonify
from utils.helpers import get_json, require_list
from services.leaderboard_service import build_leaderboard


bp = Blueprint("leaderboard", __name__, url_prefix="/api/leaderboard")


@bp.post("")
def leaderboard():
	body = get_json(["attempts"])
	users = require_list(body, "users") if body.get("users") is not None else None
	entries = build_leaderboard(require_list(body, "attempts"), users)
	return jsonify([e.to_dict() for e in entries]), 200
