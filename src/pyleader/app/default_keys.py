# ---------------------------------------------------------------------------
# File: default_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Default key tables for pyleader.
#
# Notes:
#	- This module only declares tables (policy); keys.py does the lookups.
#	- Raw codes are macOS virtual key codes, i.e. physical positions on a
#	  US-QWERTY board. The active input layout never changes them.
#	- Command chords are matched on the text the event carries, not on
#	  raw codes.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/05/2026	Paul G. LeDuc				Initial coding / release
# 01/05/2026	Paul G. LeDuc				Add punctuation codes
# 01/06/2026	Paul G. LeDuc				Add command chord keymap
# ---------------------------------------------------------------------------

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from pyleader.app.keys import KeyCodeResolver, KeyMap


class SpecialKey(IntEnum):
	RETURN = 36
	TAB = 48
	SPACE = 49
	BACKSPACE = 51
	ESCAPE = 53


# Control characters handed to the dispatch engine for special keys.
BACKSPACE = "\x08"
ESCAPE = "\x1b"

HELP_KEY = "?"


ENGLISH_KEYMAP: Mapping[int, str] = MappingProxyType({
	# Letters a-z
	0x00: "a", 0x0B: "b", 0x08: "c", 0x02: "d", 0x0E: "e", 0x03: "f",
	0x05: "g", 0x04: "h", 0x22: "i", 0x26: "j", 0x28: "k", 0x25: "l",
	0x2E: "m", 0x2D: "n", 0x1F: "o", 0x23: "p", 0x0C: "q", 0x0F: "r",
	0x01: "s", 0x11: "t", 0x20: "u", 0x09: "v", 0x0D: "w", 0x07: "x",
	0x10: "y", 0x06: "z",

	# Punctuation
	0x27: "'",
	0x2F: ".",
	0x29: ";",
	0x2A: "\\",
	0x2C: "/",
	0x21: "[",
	0x1E: "]",
	0x32: "`",
	0x2B: ",",
	0x1B: "-",
})

SLASH_KEY_CODE = 0x2C

_SPECIAL_CHARS: Mapping[int, str] = MappingProxyType({
	SpecialKey.BACKSPACE: BACKSPACE,
	SpecialKey.ESCAPE: ESCAPE,
})


def special_char(key_code: int) -> str | None:
	"""
	Control character for backspace/escape, None for everything else.
	"""
	return _SPECIAL_CHARS.get(key_code)


def build_command_keymap() -> KeyMap:
	"""
	Chords recognized while the command (meta) modifier is held.
	"""
	km = KeyMap()
	km.bind(",", "app.settings")
	km.bind("w", "app.hide")
	km.bind("q", "app.quit")
	return km


def build_english_resolver() -> KeyCodeResolver:
	return KeyCodeResolver(ENGLISH_KEYMAP)
