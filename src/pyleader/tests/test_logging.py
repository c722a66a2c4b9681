# ---------------------------------------------------------------------------
# File: test_logging.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pyleader.core.logging.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/05/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from pyleader.core import logging as core_logging
from pyleader.core.logging import get_app_logger, init_logging


@pytest.fixture(autouse=True)
def _reset():
	core_logging._reset_logging_for_tests()
	yield
	core_logging._reset_logging_for_tests()
	logging.getLogger("pyleader").setLevel(logging.NOTSET)


def _handlers() -> list[logging.Handler]:
	return list(logging.getLogger("pyleader").handlers)


def test_app_logger_names():
	assert get_app_logger().name == "pyleader.app"
	assert get_app_logger("dispatch").name == "pyleader.app.dispatch"


def test_init_logging_is_idempotent():
	init_logging({"logging.level": "debug"})
	first = _handlers()

	init_logging({"logging.level": "debug"})

	assert _handlers() == first
	assert len(first) == 1
	assert logging.getLogger("pyleader").level == logging.DEBUG


def test_init_logging_reconfigures_on_change():
	init_logging({"logging.level": "INFO"})
	first = _handlers()

	init_logging({"logging.level": "WARNING"})

	assert _handlers() != first
	assert len(_handlers()) == 1
	assert logging.getLogger("pyleader").level == logging.WARNING


def test_init_logging_file_handler(tmp_path):
	log_file = tmp_path / "logs" / "pyleader.log"

	init_logging({"logging.console": False, "logging.file": str(log_file)})
	get_app_logger("session").info("hello from the session")

	for h in _handlers():
		h.flush()

	assert log_file.exists()
	assert "hello from the session" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize(
	"raw, expected",
	[
		(10, logging.DEBUG),
		("30", logging.WARNING),
		("error", logging.ERROR),
		("nonsense", logging.INFO),
		(None, logging.INFO),
	],
)
def test_coerce_level(raw, expected):
	assert core_logging._coerce_level(raw) == expected
