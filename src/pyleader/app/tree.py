# ---------------------------------------------------------------------------
# File: tree.py
# ---------------------------------------------------------------------------
# Description:
#	Action tree for pyleader (groups + leaf actions keyed by one character).
#
# Notes:
#	- Immutable once built: frozen dataclasses, children stored as tuples.
#	- Structure is validated on construction (TreeConfigError). Sibling key
#	  collisions are NOT rejected: lookups return the first match, and
#	  collisions() reports them so the session can warn about them.
#	- Action.type is a plain string so configs carrying kinds this build
#	  does not know about still load; the executor reports them.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/05/2026	Paul G. LeDuc				Initial coding / release
# 01/06/2026	Paul G. LeDuc				Add walk() + collisions()
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union


class ActionType(str, Enum):
	APPLICATION = "application"
	URL = "url"
	COMMAND = "command"
	FOLDER = "folder"


class TreeConfigError(ValueError):
	"""
	Raised when an action tree is structurally malformed.
	"""


@dataclass(frozen=True, slots=True)
class Action:
	"""
	Action

	Leaf of the tree.

	- key:		Single logical character that fires it.
	- type:		One of ActionType's values (unknown kinds are allowed).
	- value:	Path, URL or shell command text.
	- label:	Optional display text (cheatsheets).
	"""
	key: str
	type: str
	value: str
	label: str = ""

	def __post_init__(self) -> None:
		_check_key(self.key, "Action")
		if isinstance(self.type, ActionType):
			object.__setattr__(self, "type", self.type.value)
		if not isinstance(self.type, str) or not self.type:
			raise TreeConfigError(f"Action {self.key!r} needs a non-empty type")
		if not isinstance(self.value, str):
			raise TreeConfigError(f"Action {self.key!r} value must be a string")

	@property
	def kind(self) -> Optional[ActionType]:
		"""
		The ActionType for this leaf, or None for an unknown kind.
		"""
		try:
			return ActionType(self.type)
		except ValueError:
			return None


@dataclass(frozen=True, slots=True)
class Group:
	"""
	Group

	Inner node. Entering it replaces the overlay text with its key.
	"""
	key: str
	label: str = ""
	children: tuple[Node, ...] = field(default_factory=tuple)

	def __post_init__(self) -> None:
		# "" is only legal on the root; ActionTree checks that.
		if not isinstance(self.key, str) or len(self.key) > 1:
			raise TreeConfigError(f"Group key must be a single character, got {self.key!r}")
		children = tuple(self.children)
		for child in children:
			if not isinstance(child, (Group, Action)):
				raise TreeConfigError(
					f"Group {self.key!r} has a child of type {type(child).__name__}"
				)
		object.__setattr__(self, "children", children)

	def find(self, char: str) -> Optional[Node]:
		"""
		First child whose key equals char (case-sensitive), else None.
		"""
		for child in self.children:
			if child.key == char:
				return child
		return None


Node = Union[Group, Action]


@dataclass(frozen=True, slots=True)
class KeyCollision:
	path: str
	key: str
	count: int


@dataclass(frozen=True, slots=True)
class ActionTree:
	"""
	ActionTree

	Wraps the root group. Owned by the configuration side and shared
	read-only with the dispatch engine for the whole session.
	"""
	root: Group

	def __post_init__(self) -> None:
		if not isinstance(self.root, Group):
			raise TreeConfigError("ActionTree root must be a Group")
		for path, node in self.walk():
			if node.key == "":
				raise TreeConfigError(f"Nested group under {path!r} has an empty key")

	@classmethod
	def of(cls, *children: Node, label: str = "") -> ActionTree:
		"""
		Build a tree from top-level nodes.
		"""
		return cls(root=Group(key="", label=label, children=tuple(children)))

	def walk(self) -> Iterator[tuple[str, Node]]:
		"""
		(path, node) for every node below the root; path is the key sequence
		that reaches node.
		"""
		stack: list[tuple[str, Group]] = [("", self.root)]
		while stack:
			prefix, group = stack.pop()
			pending: list[tuple[str, Group]] = []
			for child in group.children:
				path = prefix + child.key
				yield path, child
				if isinstance(child, Group):
					pending.append((path, child))
			stack.extend(reversed(pending))

	def collisions(self) -> list[KeyCollision]:
		"""
		Sibling lists where more than one entry shares a key.
		"""
		found: list[KeyCollision] = []
		groups: list[tuple[str, Group]] = [("", self.root)]
		groups.extend((path, node) for path, node in self.walk() if isinstance(node, Group))

		for path, group in groups:
			counts: dict[str, int] = {}
			for child in group.children:
				counts[child.key] = counts.get(child.key, 0) + 1
			for key, count in counts.items():
				if count > 1:
					found.append(KeyCollision(path=path, key=key, count=count))
		return found


def _check_key(key: object, what: str) -> None:
	if not isinstance(key, str) or len(key) != 1:
		raise TreeConfigError(f"{what} key must be a single character, got {key!r}")
