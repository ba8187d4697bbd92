from flask import Blueprint, jsonify
from utils.helpers import get_json, parse_points, require_list
from services.rank_service import rank_service
from services.scoring_service import build_answer_key, scoring_service


bp = Blueprint("quiz", __name__, url_prefix="/api/quiz")


@bp.post("/score")
def score_quiz():
	body = get_json(["questions", "answers"])
	key = build_answer_key(require_list(body, "questions"))
	result = scoring_service.score(key, require_list(body, "answers"), body.get("difficulty"))
	payload = result.to_dict()
	if body.get("currentPoints") is not None:
		current = parse_points(body["currentPoints"], "currentPoints")
		new_total = current + result.points_earned
		payload["newTotalPoints"] = new_total
		payload["rank"] = rank_service.assign_rank(new_total).value
	return jsonify(payload), 200
