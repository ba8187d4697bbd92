from __future__ import annotations

import logging


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
	logger = logging.getLogger()
	logger.setLevel(level)
	if not logger.handlers:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(logging.Formatter(LOG_FORMAT))
		logger.addHandler(ch)
	return logger
