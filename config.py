import os


class Config:

	ENV = os.getenv("FLASK_ENV", "production")
	DEBUG = os.getenv("FLASK_DEBUG", "False").lower() == "true"
	TESTING = False
	FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")
	PORT = int(os.getenv("PORT", "5000"))
	LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

	JSON_SORT_KEYS = False

	CORS_RESOURCES = {r"/api/*": {"origins": [FRONTEND_URL]}}
	CORS_SUPPORTS_CREDENTIALS = True
	CORS_ALLOW_HEADERS = [
		"Content-Type",
		"Authorization",
		"X-Requested-With",
	]
