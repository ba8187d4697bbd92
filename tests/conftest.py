import pytest

from app import create_app
from config import Config
from services.scoring_service import QuestionKey


class TestingConfig(Config):

	TESTING = True
	LOG_LEVEL = "ERROR"


@pytest.fixture
def app():
	return create_app(TestingConfig)


@pytest.fixture
def client(app):
	return app.test_client()


@pytest.fixture
def five_question_key():
	"""Answer key for a five question quiz, options are letters."""
	return [QuestionKey(question_id=f"q{i}", correct_option_id=opt) for i, opt in enumerate("abcda")]


@pytest.fixture
def five_question_payload():
	return [{"id": f"q{i}", "correctAnswer": opt} for i, opt in enumerate("abcda")]
