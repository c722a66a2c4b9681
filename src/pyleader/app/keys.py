# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#	Key resolution for pyleader.
#
#	- KeyCodeResolver: raw key code + shift -> logical character.
#	- KeyMap: chord text -> command id (used for command-key chords).
#
# Notes:
#	Pure mapping; no OS or UI toolkit dependency. Tables live in
#	default_keys.py.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/05/2026	Paul G. LeDuc				Initial coding / release
# 01/05/2026	Paul G. LeDuc				Add KeyCodeResolver + ResolvedKey
# 01/06/2026	Paul G. LeDuc				KeyMap keyed by chord text
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True, slots=True)
class ResolvedKey:
	"""
	Logical character produced for one key event.

	char is "" when the raw code is not in the table.
	"""
	char: str
	shift: bool = False

	@property
	def is_mapped(self) -> bool:
		return self.char != ""


class KeyCodeResolver:
	"""
	KeyCodeResolver

	Maps raw hardware key codes to lowercase logical characters through a
	fixed table, ignoring the active input layout. Shift uppercases the
	result; unknown codes resolve to "".
	"""

	def __init__(self, table: Mapping[int, str]) -> None:
		for code, char in table.items():
			if not char:
				raise ValueError(f"Key code {code!r} maps to an empty character")
		self._table: Mapping[int, str] = MappingProxyType(dict(table))

	def resolve(self, key_code: int, shift_pressed: bool = False) -> str:
		char = self._table.get(key_code, "")
		if shift_pressed:
			return char.upper()
		return char

	def resolve_key(self, key_code: int, shift_pressed: bool = False) -> ResolvedKey:
		return ResolvedKey(char=self.resolve(key_code, shift_pressed), shift=shift_pressed)

	def codes(self) -> list[int]:
		return list(self._table.keys())

	def __contains__(self, key_code: object) -> bool:
		return key_code in self._table

	def __len__(self) -> int:
		return len(self._table)


@dataclass
class KeyMap:
	"""
	KeyMap

	Stores bindings of chord text (e.g., "q" while command is held) to
	command ids (e.g., "app.quit"). Chord text is case-insensitive, so
	"Q" with shift still hits the "q" binding.
	"""
	_bindings: dict[str, str] = field(default_factory=dict)

	def bind(self, keyseq: str, command_id: str, *, overwrite: bool = True) -> None:
		if not keyseq:
			raise ValueError("keyseq must be a non-empty string")
		if not command_id:
			raise ValueError("command_id must be a non-empty string")

		chord = keyseq.lower()
		if not overwrite and chord in self._bindings:
			raise ValueError(f"Key binding already exists for {keyseq!r}")

		self._bindings[chord] = command_id

	def unbind(self, keyseq: str) -> None:
		self._bindings.pop(keyseq.lower(), None)

	def resolve(self, keyseq: Optional[str]) -> Optional[str]:
		if not keyseq:
			return None
		return self._bindings.get(keyseq.lower())

	def keys(self) -> list[str]:
		return list(self._bindings.keys())

	def clear(self) -> None:
		self._bindings.clear()
