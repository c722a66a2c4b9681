# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pyleader (stdlib logging).
#
# Notes:
#	- Uses Python stdlib logging only.
#	- No dependency on the dispatch core; safe to call first thing.
#	- Idempotent initialization (won't duplicate handlers).
#
#	Supported cfg keys:
#	- "logging.level"		(default: "INFO")
#	- "logging.console"		(default: True)
#	- "logging.file"		(default: None)
#	- "logging.format"		(default: standard format)
#	- "logging.datefmt"		(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/05/2026	Paul G. LeDuc				Initial coding / release
# 01/06/2026	Paul G. LeDuc				Session-scoped loggers (pyleader.app.*)
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_NAME = "pyleader.app"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_CONFIG_SIGNATURE: tuple[Any, ...] | None = None
_HANDLERS: list[logging.Handler] = []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return a logger under the pyleader.app namespace.

	Examples:
		get_app_logger()			-> pyleader.app
		get_app_logger("dispatch")	-> pyleader.app.dispatch
		get_app_logger("executor")	-> pyleader.app.executor
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_NAME}.{component}")
	return logging.getLogger(APP_LOGGER_NAME)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Attach handlers to the "pyleader" logger.

	Repeated calls with the same settings are no-ops; changed settings
	replace the handlers installed by the previous call.

	Args:
		cfg:
			Anything with cfg.get(key, default) (AppConfig, dict).
	"""
	global _CONFIG_SIGNATURE

	level = _coerce_level(_cfg_get(cfg, "logging.level", "INFO"))
	console_enabled = bool(_cfg_get(cfg, "logging.console", True))
	log_file = _cfg_get(cfg, "logging.file", None)
	fmt = str(_cfg_get(cfg, "logging.format", DEFAULT_FORMAT))
	datefmt = str(_cfg_get(cfg, "logging.datefmt", DEFAULT_DATEFMT))

	log_file = str(log_file) if log_file else None

	signature: tuple[Any, ...] = (level, console_enabled, log_file, fmt, datefmt)
	if _CONFIG_SIGNATURE == signature:
		return

	_install_handlers(
		level=level,
		console_enabled=console_enabled,
		log_file=log_file,
		formatter=logging.Formatter(fmt=fmt, datefmt=datefmt),
	)

	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		return getter(key, default)

	return default


def _coerce_level(level: Any) -> int:
	"""
	Accept ints, digit strings and level names ("debug", "WARNING").
	"""
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _install_handlers(
	*,
	level: int,
	console_enabled: bool,
	log_file: str | None,
	formatter: logging.Formatter,
) -> None:
	logger = logging.getLogger("pyleader")
	logger.setLevel(level)

	for h in _HANDLERS:
		logger.removeHandler(h)
		h.close()
	_HANDLERS.clear()

	if console_enabled:
		_HANDLERS.append(logging.StreamHandler())

	if log_file:
		parent = os.path.dirname(os.path.abspath(log_file))
		os.makedirs(parent, exist_ok=True)
		_HANDLERS.append(logging.FileHandler(log_file, encoding="utf-8"))

	for h in _HANDLERS:
		h.setLevel(level)
		h.setFormatter(formatter)
		logger.addHandler(h)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Drop installed handlers and the cached signature (unit tests only).
	"""
	global _CONFIG_SIGNATURE
	logger = logging.getLogger("pyleader")
	for h in _HANDLERS:
		logger.removeHandler(h)
		h.close()
	_HANDLERS.clear()
	_CONFIG_SIGNATURE = None
