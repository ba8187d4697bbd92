from flask import Flask
from flask_cors import CORS
from config import Config

from routes.quiz import bp as quiz_bp
from routes.rank import bp as rank_bp
from routes.leaderboard import bp as leaderboard_bp
from utils.errors import register_error_handlers
from utils.logging_config import setup_logging


def create_app(config: type = Config) -> Flask:
	app = Flask(__name__)
	app.config.from_object(config)
	setup_logging(app.config["LOG_LEVEL"])
	app.json.sort_keys = app.config["JSON_SORT_KEYS"]

	CORS(
		app,
		resources=app.config["CORS_RESOURCES"],
		supports_credentials=app.config["CORS_SUPPORTS_CREDENTIALS"],
		allow_headers=app.config["CORS_ALLOW_HEADERS"],
	)

	# Register blueprints
	app.register_blueprint(quiz_bp)
	app.register_blueprint(rank_bp)
	app.register_blueprint(leaderboard_bp)

	# Error handlers
	register_error_handlers(app)

	@app.get("/health")
	def health() -> tuple[dict, int]:
		return {"status": "ok"}, 200

	return app


app = create_app()


if __name__ == "__main__":
	app.run(host="0.0.0.0", port=Config.PORT, debug=Config.DEBUG)
