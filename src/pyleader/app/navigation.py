# ---------------------------------------------------------------------------
# File: navigation.py
# ---------------------------------------------------------------------------
# Description:
#	Navigation state for pyleader (cursor into the action tree).
#
# Notes:
#	- Only DispatchEngine writes to it. Presentation reads snapshots.
#	- current_group points into the shared tree; it never owns nodes.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/05/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pyleader.app.tree import Group


@dataclass(frozen=True, slots=True)
class NavigationSnapshot:
	current_group: Optional[Group]
	display: str


@dataclass(slots=True)
class NavigationState:
	"""
	NavigationState

	- current_group:	Group entered last, None while idle (root level).
	- display:			Text shown in the overlay.
	"""
	current_group: Optional[Group] = None
	display: str = ""

	@property
	def is_idle(self) -> bool:
		return self.current_group is None and self.display == ""

	def descend(self, group: Group) -> None:
		self.current_group = group
		self.display = group.key

	def clear(self) -> None:
		self.current_group = None
		self.display = ""

	def snapshot(self) -> NavigationSnapshot:
		return NavigationSnapshot(current_group=self.current_group, display=self.display)
