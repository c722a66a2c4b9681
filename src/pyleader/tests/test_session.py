# ---------------------------------------------------------------------------
# File: test_session.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for LeaderSession (raw key events -> dispatch -> effects).
#
# Notes:
#	- Recording presenter/executor; no OS or UI dependency.
#	- Raw codes are the macOS virtual key codes from default_keys.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/06/2026	Paul G. LeDuc				Initial tests
# 01/07/2026	Paul G. LeDuc				Add use_english_keymap coverage
# 01/08/2026	Paul G. LeDuc				Add collision warning test
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from pyleader.app.default_keys import SpecialKey
from pyleader.app.executor import SystemActionExecutor
from pyleader.app.results import (
	Cleared,
	CommandRequested,
	Descended,
	Dismissed,
	Executed,
	NoMatch,
	ShowHelp,
)
from pyleader.app.session import KeyEvent, LeaderSession, NullPresenter, Presenter
from pyleader.app.tree import Action, ActionTree, Group
from pyleader.core.telemetry import MemorySink, Telemetry


KEY_A = 0x00
KEY_G = 0x05
KEY_X = 0x07
KEY_Z = 0x06
KEY_Q = 0x0C
KEY_SLASH = 0x2C
KEY_F1 = 0x7A


class _Presenter:
	def __init__(self) -> None:
		self.calls: list[str] = []

	def show(self) -> None:
		self.calls.append("show")

	def hide(self) -> None:
		self.calls.append("hide")

	def set_display(self, text: str) -> None:
		self.calls.append(f"display:{text}")

	def shake(self) -> None:
		self.calls.append("shake")

	def show_cheatsheet(self) -> None:
		self.calls.append("cheatsheet")

	def hide_cheatsheet(self) -> None:
		self.calls.append("hide_cheatsheet")


class _Executor:
	def __init__(self, error: Exception | None = None) -> None:
		self.ran: list[Action] = []
		self.error = error

	def run(self, action: Action) -> None:
		self.ran.append(action)
		if self.error is not None:
			raise self.error


FOO = Action("a", "application", "/Applications/Foo.app")
EXAMPLE = Action("x", "url", "https://example.com")
G = Group("g", "Go", (EXAMPLE,))


def _session(tree: ActionTree | None = None, **kwargs):
	presenter = _Presenter()
	executor = kwargs.pop("executor", None) or _Executor()
	requests: list[str] = []
	s = LeaderSession(
		tree or ActionTree.of(FOO, G),
		executor=executor,
		presenter=presenter,
		on_request=requests.append,
		telemetry=Telemetry(enabled=True, sink=MemorySink()),
		**kwargs,
	)
	return s, presenter, executor, requests


def test_presenters_satisfy_protocol():
	assert isinstance(NullPresenter(), Presenter)
	assert isinstance(_Presenter(), Presenter)


def test_leaf_executes_once_and_hides():
	s, presenter, executor, _ = _session()
	s.show()

	result = s.key_down(KeyEvent(KEY_A))

	assert result == Executed(FOO)
	assert executor.ran == [FOO]
	assert s.state.is_idle
	assert s.visible is False
	assert presenter.calls == ["show", "hide", "hide_cheatsheet"]


def test_descend_miss_then_execute():
	s, presenter, executor, _ = _session()
	s.show()

	assert s.key_down(KeyEvent(KEY_G)) == Descended(G)
	assert s.key_down(KeyEvent(KEY_Z)) == NoMatch("z")
	assert s.state.current_group is G
	assert s.visible is True

	assert s.key_down(KeyEvent(KEY_X)) == Executed(EXAMPLE)
	assert executor.ran == [EXAMPLE]
	assert presenter.calls == ["show", "display:g", "shake", "hide", "hide_cheatsheet"]


def test_unmapped_code_shakes_and_keeps_state():
	s, presenter, executor, _ = _session()
	s.key_down(KeyEvent(KEY_G))

	assert s.key_down(KeyEvent(KEY_F1)) == NoMatch("")
	assert s.state.current_group is G
	assert executor.ran == []
	assert presenter.calls[-1] == "shake"


def test_backspace_clears_display():
	s, presenter, _, _ = _session()
	s.key_down(KeyEvent(KEY_G))

	assert s.key_down(KeyEvent(SpecialKey.BACKSPACE)) == Cleared()
	assert s.state.is_idle
	assert presenter.calls[-1] == "display:"


def test_escape_hides():
	s, presenter, _, _ = _session()
	s.show()
	s.key_down(KeyEvent(KEY_G))

	assert s.key_down(KeyEvent(SpecialKey.ESCAPE)) == Dismissed()
	assert s.state.is_idle
	assert s.visible is False
	assert presenter.calls[-2:] == ["hide", "hide_cheatsheet"]


def test_shift_slash_shows_help_without_moving():
	s, presenter, _, _ = _session()
	s.key_down(KeyEvent(KEY_G))

	assert s.key_down(KeyEvent(KEY_SLASH, shift=True)) == ShowHelp()
	assert s.state.current_group is G
	assert presenter.calls[-1] == "cheatsheet"


def test_plain_slash_is_an_ordinary_key():
	s, _, _, _ = _session()

	assert s.key_down(KeyEvent(KEY_SLASH)) == NoMatch("/")


def test_shift_uppercases_before_lookup():
	upper = Action("A", "url", "https://upper")
	s, _, executor, _ = _session(ActionTree.of(FOO, upper))

	assert s.key_down(KeyEvent(KEY_A, shift=True)) == Executed(upper)
	assert executor.ran == [upper]


def test_layout_characters_used_when_english_keymap_disabled():
	s, _, executor, _ = _session(cfg={"use_english_keymap": False})

	# Raw code for "q" on US-QWERTY, but the active layout typed "a"
	assert s.key_down(KeyEvent(KEY_Q, characters="a")) == Executed(FOO)
	assert executor.ran == [FOO]

	assert s.key_down(KeyEvent(KEY_A, characters=None)) == NoMatch("")
	assert s.key_down(KeyEvent(KEY_SLASH, shift=True, characters="?")) == ShowHelp()


def test_english_keymap_ignores_layout_characters():
	s, _, executor, _ = _session()

	assert s.key_down(KeyEvent(KEY_A, characters="ф")) == Executed(FOO)


@pytest.mark.parametrize(
	"chord, command_id, requests",
	[
		(",", "app.settings", ["settings"]),
		("w", "app.hide", []),
		("q", "app.quit", ["quit"]),
	],
)
def test_command_chords_hide_and_request(chord, command_id, requests):
	s, presenter, executor, seen = _session()
	s.show()
	s.key_down(KeyEvent(KEY_G))

	result = s.key_down(KeyEvent(0, command=True, characters=chord))

	assert result == CommandRequested(command_id=command_id, chord=chord)
	assert s.state.is_idle
	assert s.visible is False
	assert executor.ran == []
	assert seen == requests
	assert "hide" in presenter.calls


def test_unbound_command_chord_falls_through_to_tree():
	s, _, executor, _ = _session()

	result = s.key_down(KeyEvent(KEY_A, command=True, characters="a"))

	assert result == Executed(FOO)
	assert executor.ran == [FOO]


def test_executor_error_does_not_escape(caplog):
	s, presenter, executor, _ = _session(executor=_Executor(RuntimeError("boom")))

	with caplog.at_level(logging.ERROR, logger="pyleader.app.session"):
		result = s.key_down(KeyEvent(KEY_A))

	assert result == Executed(FOO)
	assert s.state.is_idle
	assert "Executor failed" in caplog.text


def test_unknown_action_kind_still_resets():
	odd = Action("a", "shortcut", "Focus Mode")
	spawned: list[object] = []
	executor = SystemActionExecutor(spawn=lambda *a, **k: spawned.append(a), platform="darwin")
	s, _, _, _ = _session(ActionTree.of(odd, G), executor=executor)
	s.key_down(KeyEvent(KEY_G))
	s.key_down(KeyEvent(SpecialKey.BACKSPACE))

	assert s.key_down(KeyEvent(KEY_A)) == Executed(odd)
	assert s.state.is_idle
	assert s.visible is False
	assert spawned == []


def test_collisions_logged_at_start(caplog):
	tree = ActionTree.of(FOO, Action("a", "url", "https://second"))

	with caplog.at_level(logging.WARNING, logger="pyleader.app.session"):
		s, _, executor, _ = _session(tree)

	assert "bound 2 times" in caplog.text

	s.key_down(KeyEvent(KEY_A))
	assert executor.ran == [FOO]


def test_defaults_without_collaborators():
	s = LeaderSession(ActionTree.of(G))

	assert isinstance(s.presenter, NullPresenter)
	assert s.use_english_keymap is True
	assert s.key_down(KeyEvent(KEY_G)) == Descended(G)
	assert repr(s) == "<LeaderSession display='g' visible=False>"


def test_key_down_is_timed():
	sink = MemorySink()
	s = LeaderSession(ActionTree.of(G), telemetry=Telemetry(enabled=True, sink=sink))

	s.key_down(KeyEvent(KEY_G))

	timings = [m for m in sink.metrics if m.name == "dispatch.duration_ms"]
	assert len(timings) == 1
	assert timings[0].attrs == {"key_code": KEY_G}


def test_app_package_lazy_exports():
	import pyleader.app as app_pkg

	assert app_pkg.LeaderSession is LeaderSession
	assert app_pkg.ActionTree is ActionTree
	assert "DispatchEngine" in dir(app_pkg)

	with pytest.raises(AttributeError):
		app_pkg.Missing  # noqa: B018


def test_start_session_wires_config(monkeypatch):
	from pyleader.app import session as session_mod

	seen: list[object] = []
	monkeypatch.setattr(session_mod, "init_logging", lambda cfg: seen.append(cfg.get("logging.level")))

	s = session_mod.start_session(
		ActionTree.of(G),
		{"logging.level": "DEBUG", "telemetry.enabled": True, "use_english_keymap": False},
		presenter=_Presenter(),
	)

	assert seen == ["DEBUG"]
	assert s.telemetry.enabled is True
	assert s.use_english_keymap is False
