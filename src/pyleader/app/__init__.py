# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for pyleader.
#
# Notes:
#   - Uses lazy exports so importing a leaf module (e.g. app.tree) does not
#     pull in the session and executor.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Action",
	"ActionTree",
	"ActionType",
	"DispatchEngine",
	"Group",
	"KeyCodeResolver",
	"KeyEvent",
	"LeaderSession",
	"NavigationState",
	"SystemActionExecutor",
	"TreeConfigError",
	"start_session",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Action": ("pyleader.app.tree", "Action"),
	"ActionTree": ("pyleader.app.tree", "ActionTree"),
	"ActionType": ("pyleader.app.tree", "ActionType"),
	"DispatchEngine": ("pyleader.app.keyrouter", "DispatchEngine"),
	"Group": ("pyleader.app.tree", "Group"),
	"KeyCodeResolver": ("pyleader.app.keys", "KeyCodeResolver"),
	"KeyEvent": ("pyleader.app.session", "KeyEvent"),
	"LeaderSession": ("pyleader.app.session", "LeaderSession"),
	"NavigationState": ("pyleader.app.navigation", "NavigationState"),
	"SystemActionExecutor": ("pyleader.app.executor", "SystemActionExecutor"),
	"TreeConfigError": ("pyleader.app.tree", "TreeConfigError"),
	"start_session": ("pyleader.app.session", "start_session"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyleader.app.executor import SystemActionExecutor
	from pyleader.app.keyrouter import DispatchEngine
	from pyleader.app.keys import KeyCodeResolver
	from pyleader.app.navigation import NavigationState
	from pyleader.app.session import KeyEvent, LeaderSession, start_session
	from pyleader.app.tree import Action, ActionTree, ActionType, Group, TreeConfigError
