# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#	Command definitions + registry for pyleader.
#
# Notes:
#	Commands cover everything a command-key chord can ask for (settings,
#	hide, quit). Tree actions are not commands; they go to the executor.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/06/2026	Paul G. LeDuc				Initial coding / release
# 01/06/2026	Paul G. LeDuc				Handlers receive CommandContext
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
	from pyleader.app.session import LeaderSession


@dataclass(slots=True)
class CommandContext:
	"""
	Passed to every command handler.
	"""
	session: LeaderSession
	extra: dict[str, Any] = field(default_factory=dict)


CommandHandler = Callable[[CommandContext], Any]
EnabledCheck = Callable[[], bool]


@dataclass(frozen=True, slots=True)
class Command:
	"""
	Command

	- id:			Unique identifier (required).
	- handler:		Callable executed on invoke.
	- label:		Optional friendly label.
	- description:	Optional help text.
	- enabled:		Static enable/disable.
	- enabled_fn:	Optional callable for dynamic enablement.
	"""
	id: str
	handler: CommandHandler

	label: Optional[str] = None
	description: Optional[str] = None

	enabled: bool = True
	enabled_fn: Optional[EnabledCheck] = None

	def is_enabled(self) -> bool:
		if not self.enabled:
			return False
		if self.enabled_fn is None:
			return True
		return bool(self.enabled_fn())


class CommandRegistry:
	def __init__(self) -> None:
		self._commands: dict[str, Command] = {}

	def register(self, command: Command) -> None:
		if not command.id:
			raise ValueError("Command id must be a non-empty string")

		if command.id in self._commands:
			raise ValueError(f"Duplicate command id: {command.id!r}")

		self._commands[command.id] = command

	def unregister(self, command_id: str) -> None:
		self._commands.pop(command_id, None)

	def has(self, command_id: str) -> bool:
		return command_id in self._commands

	def get(self, command_id: str) -> Optional[Command]:
		return self._commands.get(command_id)

	def ids(self) -> list[str]:
		return list(self._commands.keys())

	def invoke(self, command_id: str, ctx: CommandContext) -> Any:
		"""
		Run a command by id.

		Raises KeyError for unknown ids; disabled commands return None
		without running.
		"""
		command = self._commands.get(command_id)
		if command is None:
			raise KeyError(f"Unknown command id: {command_id!r}")

		if not command.is_enabled():
			return None

		return command.handler(ctx)
