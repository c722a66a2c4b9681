# ---------------------------------------------------------------------------
# File: default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Default command definitions for pyleader.
#
# Notes:
#	- Ids match the chords in default_keys.build_command_keymap().
#	- Settings and quit are requests to the host application; the session
#	  forwards them through its on_request callback.
#	- Every command hides the overlay, which resets navigation.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/06/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyleader.app.commands import Command, CommandContext, CommandRegistry


REQUEST_SETTINGS = "settings"
REQUEST_QUIT = "quit"


def register_default_commands(registry: CommandRegistry) -> None:
	def _app_settings(ctx: CommandContext) -> None:
		ctx.session.request(REQUEST_SETTINGS)
		ctx.session.hide()

	def _app_hide(ctx: CommandContext) -> None:
		ctx.session.hide()

	def _app_quit(ctx: CommandContext) -> None:
		ctx.session.hide()
		ctx.session.request(REQUEST_QUIT)

	registry.register(Command(
		id="app.settings",
		label="Settings…",
		description="Open the settings window.",
		handler=_app_settings,
	))

	registry.register(Command(
		id="app.hide",
		label="Close",
		description="Hide the leader overlay.",
		handler=_app_hide,
	))

	registry.register(Command(
		id="app.quit",
		label="Quit pyleader",
		description="Exit the launcher.",
		handler=_app_quit,
	))
