class TestHealth:

	def test_health(self, client):
		resp = client.get("/health")
		assert resp.status_code == 200
		assert resp.get_json() == {"status": "ok"}


class TestScoreEndpoint:

	def test_perfect_hard(self, client, five_question_payload):
		resp = client.post("/api/quiz/score", json={
			"questions": five_question_payload,
			"answers": list("abcda"),
			"difficulty": "Hard",
		})
		assert resp.status_code == 200
		data = resp.get_json()
		assert data["pointsEarned"] == 30
		assert data["correctCount"] == 5
		assert data["totalQuestions"] == 5
		assert data["difficulty"] == "hard"
		assert "rank" not in data

	def test_missing_difficulty_scores_as_easy(self, client, five_question_payload):
		resp = client.post("/api/quiz/score", json={
			"questions": five_question_payload,
			"answers": ["a", "b", None, None, None],
		})
		data = resp.get_json()
		assert data["pointsEarned"] == 2
		assert data["unansweredCount"] == 3
		assert data["difficulty"] == "easy"

	def test_with_current_points(self, client, five_question_payload):
		resp = client.post("/api/quiz/score", json={
			"questions": five_question_payload,
			"answers": list("abcda"),
			"difficulty": "hard",
			"currentPoints": 90,
		})
		data = resp.get_json()
		assert data["newTotalPoints"] == 120
		assert data["rank"] == "Trivia Titan"

	def test_negative_current_points(self, client, five_question_payload):
		resp = client.post("/api/quiz/score", json={
			"questions": five_question_payload,
			"answers": list("abcda"),
			"currentPoints": -3,
		})
		assert resp.status_code == 400
		assert resp.get_json() == {"error": "currentPoints must be >= 0"}

	def test_length_mismatch(self, client, five_question_payload):
		resp = client.post("/api/quiz/score", json={
			"questions": five_question_payload,
			"answers": ["a"],
			"difficulty": "Easy",
		})
		assert resp.status_code == 400
		assert resp.get_json() == {"error": "Expected 5 answers, got 1"}

	def test_missing_fields(self, client):
		resp = client.post("/api/quiz/score", json={"questions": []})
		assert resp.status_code == 400
		assert resp.get_json() == {"error": "Missing fields: answers"}

	def test_answers_must_be_list(self, client):
		resp = client.post("/api/quiz/score", json={"questions": [], "answers": "abc"})
		assert resp.status_code == 400
		assert resp.get_json() == {"error": "answers must be a list"}

	def test_body_must_be_object(self, client):
		resp = client.post("/api/quiz/score", json=[1, 2])
		assert resp.status_code == 400

	def test_boolean_answer_does_not_match_number(self, client):
		resp = client.post("/api/quiz/score", json={
			"questions": [{"id": "q", "correctAnswer": 1}],
			"answers": [True],
		})
		data = resp.get_json()
		assert data["correctCount"] == 0
		assert data["pointsEarned"] == 0

	def test_empty_quiz(self, client):
		resp = client.post("/api/quiz/score", json={"questions": [], "answers": [], "difficulty": "Expert"})
		assert resp.status_code == 200
		assert resp.get_json()["pointsEarned"] == 0

	def test_get_not_allowed(self, client):
		resp = client.get("/api/quiz/score")
		assert resp.status_code == 405
		assert resp.get_json() == {"error": "Method not allowed"}


class TestRankEndpoint:

	def test_rank_from_path(self, client):
		resp = client.get("/api/rank/100")
		assert resp.status_code == 200
		assert resp.get_json() == {
			"points": 100,
			"rank": "Smart Cookie",
			"nextRank": "Trivia Titan",
			"pointsToNextRank": 1,
		}

	def test_rank_from_query(self, client):
		resp = client.get("/api/rank?points=100000")
		data = resp.get_json()
		assert data["rank"] == "Quiz Overlord"
		assert data["nextRank"] is None
		assert data["pointsToNextRank"] == 0

	def test_missing_query(self, client):
		resp = client.get("/api/rank")
		assert resp.status_code == 400

	def test_negative(self, client):
		resp = client.get("/api/rank/-5")
		assert resp.status_code == 400
		assert resp.get_json() == {"error": "points must be >= 0"}

	def test_not_a_number(self, client):
		resp = client.get("/api/rank?points=lots")
		assert resp.status_code == 400
		assert resp.get_json() == {"error": "points must be an integer"}

	def test_tiers(self, client):
		data = client.get("/api/rank/tiers").get_json()
		assert [t["rank"] for t in data] == [
			"Rising Star",
			"Smart Cookie",
			"Trivia Titan",
			"Knowledge Ninja",
			"Brain Blaster",
			"Quiz Overlord",
		]
		assert data[0] == {"rank": "Rising Star", "minPoints": 0, "maxPoints": 10}
		assert data[-1] == {"rank": "Quiz Overlord", "minPoints": 100000, "maxPoints": None}


class TestLeaderboardEndpoint:

	def test_leaderboard(self, client):
		resp = client.post("/api/leaderboard", json={
			"attempts": [
				{"userId": "u1", "quizId": "q1", "pointsEarned": 30},
				{"userId": "u2", "quizId": "q1", "pointsEarned": 45},
			],
			"users": [{"userId": "u3", "username": "Carol"}],
		})
		assert resp.status_code == 200
		data = resp.get_json()
		assert [e["userId"] for e in data] == ["u2", "u1", "u3"]
		assert data[0]["position"] == 1
		assert data[1]["pointsToNextPosition"] == 15
		assert data[2]["rank"] == "Rising Star"

	def test_missing_attempts(self, client):
		resp = client.post("/api/leaderboard", json={})
		assert resp.status_code == 400
		assert resp.get_json() == {"error": "Missing fields: attempts"}

	def test_bad_attempt(self, client):
		resp = client.post("/api/leaderboard", json={"attempts": [{"pointsEarned": 3}]})
		assert resp.status_code == 400

	def test_non_object_user(self, client):
		resp = client.post("/api/leaderboard", json={"attempts": [], "users": ["u1"]})
		assert resp.status_code == 400
		assert resp.get_json() == {"error": "User 0 must be an object"}

	def test_list_quiz_id(self, client):
		resp = client.post("/api/leaderboard", json={
			"attempts": [{"userId": "u1", "quizId": ["q"], "pointsEarned": 3}],
		})
		assert resp.status_code == 400
		assert resp.get_json() == {"error": "Attempt 0 has invalid quizId"}

	def test_object_user_id(self, client):
		resp = client.post("/api/leaderboard", json={
			"attempts": [{"userId": {"a": 1}, "quizId": "q1", "pointsEarned": 3}],
		})
		assert resp.status_code == 400
		assert resp.get_json() == {"error": "Attempt 0 has invalid userId"}

	def test_retake_counts_once(self, client):
		resp = client.post("/api/leaderboard", json={
			"attempts": [
				{"userId": "u1", "quizId": "q1", "pointsEarned": 30},
				{"userId": "u1", "quizId": "q1", "pointsEarned": 8},
			],
		})
		assert resp.get_json()[0]["totalPoints"] == 8


def test_unknown_route(client):
	resp = client.get("/api/nothing")
	assert resp.status_code == 404
	assert resp.get_json() == {"error": "Not found"}
