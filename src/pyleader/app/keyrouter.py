# ---------------------------------------------------------------------------
# File: keyrouter.py
# ---------------------------------------------------------------------------
# Description:
#	DispatchEngine for pyleader (logical character -> tree navigation).
#
# Notes:
#	- Resolution order for handle():
#		1) Control characters (backspace, escape) and the help key
#		2) Children of the current group, or of the root while idle
#	- Command-key chords go through handle_command() and never touch the
#	  tree.
#	- The engine only decides. Running actions and all visual feedback
#	  belong to the caller (see session.py).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/05/2026	Paul G. LeDuc				Initial coding / release
# 01/06/2026	Paul G. LeDuc				Command chords via KeyMapLike
# 01/07/2026	Paul G. LeDuc				Add telemetry (keys.pressed, dispatch.*)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from pyleader.app.default_keys import BACKSPACE, ESCAPE, HELP_KEY
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
from pyleader.app.tree import ActionTree, Group
from pyleader.core.logging import get_app_logger
from pyleader.core.telemetry import Telemetry, get_telemetry


log = get_app_logger("dispatch")


@runtime_checkable
class KeyMapLike(Protocol):
	"""
	What the engine needs from a chord keymap.
	"""
	def resolve(self, keyseq: Optional[str]) -> Optional[str]:
		...


@dataclass(slots=True)
class DispatchEngine:
	"""
	DispatchEngine

	State machine over the action tree:
	- Idle:			state.current_group is None, lookups use the root
	- InGroup(g):	lookups use g.children

	Every completed action, clear or dismiss returns it to Idle. A miss
	leaves it where it was so the user can retry.
	"""
	tree: ActionTree
	state: NavigationState = field(default_factory=NavigationState)
	command_keymap: Optional[KeyMapLike] = None
	telemetry: Optional[Telemetry] = None

	def _telemetry(self) -> Telemetry:
		return self.telemetry if self.telemetry is not None else get_telemetry()

	def active_group(self) -> Group:
		"""
		Group whose children the next keystroke is matched against.
		"""
		if self.state.current_group is not None:
			return self.state.current_group
		return self.tree.root

	def reset(self) -> None:
		self.state.clear()

	def handle(self, char: str) -> DispatchResult:
		"""
		Dispatch one logical character.

		Never raises for user input: unmapped keys arrive as "" and come
		back as NoMatch("").
		"""
		t = self._telemetry()
		t.counter("keys.pressed", 1, {"char": char})

		if char == BACKSPACE:
			self.state.clear()
			t.event("dispatch.cleared")
			log.debug("cleared")
			return Cleared()

		if char == ESCAPE:
			self.state.clear()
			t.event("dispatch.dismissed")
			log.debug("dismissed")
			return Dismissed()

		if char == HELP_KEY:
			t.event("dispatch.help", {"display": self.state.display})
			return ShowHelp()

		hit = self.active_group().find(char)

		if hit is None:
			t.event("key.unhandled", {"char": char, "display": self.state.display})
			log.debug("no match for %r at %r", char, self.state.display)
			return NoMatch(char)

		if isinstance(hit, Group):
			self.state.descend(hit)
			t.event("dispatch.descended", {"key": hit.key, "label": hit.label})
			log.debug("entered group %r", hit.key)
			return Descended(hit)

		self.state.clear()
		t.event("dispatch.executed", {"key": hit.key, "type": hit.type})
		log.debug("execute %s %r", hit.type, hit.value)
		return Executed(hit)

	def handle_command(self, chord: Optional[str]) -> Optional[CommandRequested]:
		"""
		Resolve a command-key chord.

		Returns None when the chord is not bound, so the caller can treat
		the event as an ordinary keystroke. A bound chord resets navigation.
		"""
		if self.command_keymap is None:
			return None

		command_id = self.command_keymap.resolve(chord)
		if not command_id:
			return None

		self.state.clear()
		self._telemetry().event("command.requested", {"command_id": command_id, "chord": chord})
		log.debug("command chord %r -> %s", chord, command_id)
		return CommandRequested(command_id=command_id, chord=chord or "")
