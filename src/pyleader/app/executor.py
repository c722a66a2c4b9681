# ---------------------------------------------------------------------------
# File: executor.py
# ---------------------------------------------------------------------------
# Description:
#	Action executors for pyleader (leaf action -> OS side effect).
#
# Notes:
#	- Fire-and-forget: child processes are spawned and never waited on.
#	- Never raises for a bad action. Unknown kinds and spawn failures are
#	  logged and reported to telemetry.
#	- Platform-aware: "open" on macOS, "xdg-open" on Linux/BSD,
#	  "cmd /c start" on Windows.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/06/2026	Paul G. LeDuc				Initial coding / release
# 01/07/2026	Paul G. LeDuc				Injectable spawn + platform for tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import subprocess
import sys
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from pyleader.app.tree import Action, ActionType
from pyleader.core.logging import get_app_logger
from pyleader.core.telemetry import Telemetry, get_telemetry


log = get_app_logger("executor")

SpawnFn = Callable[..., Any]


@runtime_checkable
class ActionExecutor(Protocol):
	def run(self, action: Action) -> None: ...


class SystemActionExecutor:
	"""
	SystemActionExecutor

	Runs tree actions with the host OS tools:
	- application:	launch the app at a file path
	- url:			open a URI without bringing the handler forward (macOS)
	- command:		run the text through the shell
	- folder:		reveal the path in the file browser
	"""

	def __init__(
		self,
		*,
		spawn: Optional[SpawnFn] = None,
		platform: Optional[str] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self._spawn: SpawnFn = spawn or subprocess.Popen
		self._platform = platform or sys.platform
		self._telemetry = telemetry

	def run(self, action: Action) -> None:
		t = self._telemetry if self._telemetry is not None else get_telemetry()

		kind = action.kind
		if kind is None:
			log.warning("%s unknown (key %r, value %r)", action.type, action.key, action.value)
			t.event("action.unknown_kind", {"type": action.type, "key": action.key})
			return

		if kind is ActionType.COMMAND:
			argv: Any = action.value
			shell = True
		else:
			argv = self.argv_for(kind, action.value)
			shell = False

		try:
			self._spawn(argv, shell=shell, start_new_session=True)
		except (OSError, ValueError) as ex:
			log.warning("Failed to run %s %r: %s", kind.value, action.value, ex)
			t.event("action.spawn_failed", {"type": kind.value, "error": str(ex)})
			return

		log.info("Ran %s %r", kind.value, action.value)

	def argv_for(self, kind: ActionType, value: str) -> list[str]:
		"""
		Command line that opens value for the given non-shell kind.
		"""
		if self._platform == "darwin":
			if kind is ActionType.URL:
				return ["open", "-g", value]
			if kind is ActionType.FOLDER:
				return ["open", "-R", value]
			return ["open", value]

		if self._platform.startswith("win"):
			if kind is ActionType.FOLDER:
				return ["explorer", f"/select,{value}"]
			return ["cmd", "/c", "start", "", value]

		if kind is ActionType.APPLICATION and not value.endswith(".desktop"):
			return [value]
		return ["xdg-open", value]
