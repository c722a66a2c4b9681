# ---------------------------------------------------------------------------
# File: session.py
# ---------------------------------------------------------------------------
# Description:
#	LeaderSession: one overlay session for pyleader.
#
# Notes:
#	- Owns the wiring: key resolver, dispatch engine, executor, presenter
#	  and command registry.
#	- Does what the engine leaves to its caller: runs actions, hides after
#	  them, asks the presenter to shake on a miss.
#	- Single-threaded. Feed key_down() from the event thread only.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/06/2026	Paul G. LeDuc				Initial coding / release
# 01/06/2026	Paul G. LeDuc				Add command chords + on_request
# 01/07/2026	Paul G. LeDuc				Add use_english_keymap option
# 01/08/2026	Paul G. LeDuc				Warn about sibling key collisions
# 01/08/2026	Paul G. LeDuc				Add start_session bootstrap
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from pyleader.app.commands import CommandContext, CommandRegistry
from pyleader.app.default_commands import register_default_commands
from pyleader.app.default_keys import (
	HELP_KEY,
	SLASH_KEY_CODE,
	build_command_keymap,
	build_english_resolver,
	special_char,
)
from pyleader.app.executor import ActionExecutor, SystemActionExecutor
from pyleader.app.keyrouter import DispatchEngine
from pyleader.app.keys import KeyCodeResolver
from pyleader.app.navigation import NavigationState
from pyleader.app.results import (
	Cleared,
	CommandRequested,
	Descended,
	DispatchResult,
	Dismissed,
	Executed,
	NoMatch,
	ShowHelp,
)
from pyleader.app.tree import ActionTree
from pyleader.core.logging import get_app_logger, init_logging
from pyleader.core.telemetry import Telemetry, get_telemetry, init_telemetry


log = get_app_logger("session")

RequestHandler = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.

	Known keys: "use_english_keymap", "logging.*", "telemetry.*".
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)


@dataclass(frozen=True, slots=True)
class KeyEvent:
	"""
	One key press as delivered by the OS.

	- key_code:		Raw hardware code (layout independent).
	- shift:		Shift modifier held.
	- command:		Command/meta modifier held.
	- characters:	Text the active layout produced, if known.
	"""
	key_code: int
	shift: bool = False
	command: bool = False
	characters: Optional[str] = None


@runtime_checkable
class Presenter(Protocol):
	"""
	Minimal interface implemented by the overlay UI.
	"""
	def show(self) -> None: ...
	def hide(self) -> None: ...
	def set_display(self, text: str) -> None: ...
	def shake(self) -> None: ...
	def show_cheatsheet(self) -> None: ...
	def hide_cheatsheet(self) -> None: ...


class NullPresenter:
	def show(self) -> None:
		return

	def hide(self) -> None:
		return

	def set_display(self, text: str) -> None:
		return

	def shake(self) -> None:
		return

	def show_cheatsheet(self) -> None:
		return

	def hide_cheatsheet(self) -> None:
		return


class LeaderSession:
	"""
	LeaderSession

	Turns raw key events into dispatch decisions and carries them out.
	"""

	def __init__(
		self,
		tree: ActionTree,
		*,
		executor: Optional[ActionExecutor] = None,
		presenter: Optional[Presenter] = None,
		cfg: dict[str, Any] | None = None,
		resolver: Optional[KeyCodeResolver] = None,
		on_request: Optional[RequestHandler] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self.cfg = AppConfig(cfg)
		self.telemetry = telemetry if telemetry is not None else get_telemetry()

		self.tree = tree
		self.state = NavigationState()
		self.engine = DispatchEngine(
			tree=tree,
			state=self.state,
			command_keymap=build_command_keymap(),
			telemetry=self.telemetry,
		)

		self.resolver = resolver or build_english_resolver()
		self.use_english_keymap = bool(self.cfg.get("use_english_keymap", True))

		self.executor: ActionExecutor = executor or SystemActionExecutor(telemetry=self.telemetry)
		self.presenter: Presenter = presenter or NullPresenter()
		self.on_request = on_request

		self.commands = CommandRegistry()
		register_default_commands(self.commands)

		self.visible = False

		for c in tree.collisions():
			log.warning(
				"Key %r is bound %d times under %r; the first entry wins",
				c.key,
				c.count,
				c.path or "<root>",
			)

	# -----------------------------------------------------------------------
	# Visibility
	# -----------------------------------------------------------------------

	def show(self) -> None:
		self.visible = True
		self.presenter.show()

	def hide(self) -> None:
		"""
		Hide the overlay and cheatsheet; navigation goes back to Idle.
		"""
		self.engine.reset()
		self.visible = False
		self.presenter.hide()
		self.presenter.hide_cheatsheet()

	def request(self, name: str) -> None:
		"""
		Forward a request (e.g. "settings", "quit") to the host application.
		"""
		log.debug("request %s", name)
		if self.on_request is not None:
			self.on_request(name)

	# -----------------------------------------------------------------------
	# Key handling
	# -----------------------------------------------------------------------

	def key_down(self, event: KeyEvent) -> DispatchResult:
		with self.telemetry.timer("dispatch.duration_ms", {"key_code": event.key_code}):
			if event.command:
				requested = self.engine.handle_command(event.characters)
				if requested is not None:
					self._apply(requested)
					return requested

			result = self.engine.handle(self.char_for(event))
			self._apply(result)
			return result

	def char_for(self, event: KeyEvent) -> str:
		"""
		Logical character for event ("" when it has none).
		"""
		special = special_char(event.key_code)
		if special is not None:
			return special

		if not self.use_english_keymap:
			return event.characters or ""

		if event.shift and event.key_code == SLASH_KEY_CODE:
			return HELP_KEY

		return self.resolver.resolve(event.key_code, event.shift)

	def _apply(self, result: DispatchResult) -> None:
		if isinstance(result, Descended):
			self.presenter.set_display(self.state.display)
		elif isinstance(result, Executed):
			self._run(result)
			self.hide()
		elif isinstance(result, NoMatch):
			self.presenter.shake()
		elif isinstance(result, Cleared):
			self.presenter.set_display("")
		elif isinstance(result, Dismissed):
			self.hide()
		elif isinstance(result, ShowHelp):
			self.presenter.show_cheatsheet()
		elif isinstance(result, CommandRequested):
			self.commands.invoke(result.command_id, CommandContext(session=self))

	def _run(self, result: Executed) -> None:
		# Fire-and-forget: executor errors are logged, never propagated.
		try:
			self.executor.run(result.action)
		except Exception:
			log.exception("Executor failed for %s %r", result.action.type, result.action.value)

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} display={self.state.display!r} visible={self.visible}>"


def start_session(tree: ActionTree, cfg: dict[str, Any] | None = None, **kwargs: Any) -> LeaderSession:
	"""
	Initialize logging and telemetry from cfg, then build a session.

	kwargs are passed through to LeaderSession.
	"""
	app_cfg = AppConfig(cfg)
	init_logging(app_cfg)
	telemetry = init_telemetry(app_cfg, get_app_logger("telemetry"))
	return LeaderSession(tree, cfg=cfg, telemetry=telemetry, **kwargs)
