# ---------------------------------------------------------------------------
# File: results.py
# ---------------------------------------------------------------------------
# Description:
#	Dispatch results for pyleader.
#
# Notes:
#	- One small frozen dataclass per outcome; DispatchResult is their union.
#	- Consumers branch with isinstance() and must handle every variant.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/05/2026	Paul G. LeDuc				Initial coding / release
# 01/06/2026	Paul G. LeDuc				Add CommandRequested
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pyleader.app.tree import Action, Group


@dataclass(frozen=True, slots=True)
class Descended:
	group: Group


@dataclass(frozen=True, slots=True)
class Executed:
	"""
	The caller runs the action through its ActionExecutor, then hides.
	"""
	action: Action


@dataclass(frozen=True, slots=True)
class NoMatch:
	"""
	Nothing at the current level is bound to char ("" for unmapped keys).
	Navigation is left as it was.
	"""
	char: str


@dataclass(frozen=True, slots=True)
class Cleared:
	pass


@dataclass(frozen=True, slots=True)
class Dismissed:
	pass


@dataclass(frozen=True, slots=True)
class ShowHelp:
	pass


@dataclass(frozen=True, slots=True)
class CommandRequested:
	"""
	A command-key chord (settings, hide, quit) outside the action tree.
	"""
	command_id: str
	chord: str = ""


DispatchResult = Union[Descended, Executed, NoMatch, Cleared, Dismissed, ShowHelp, CommandRequested]
