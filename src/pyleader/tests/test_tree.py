# ---------------------------------------------------------------------------
# File: test_tree.py
# ---------------------------------------------------------------------------
# Description:
#   Unit tests for the action tree (construction, lookup, collisions).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/05/2026	Paul G. LeDuc				Initial tests
# 01/06/2026	Paul G. LeDuc				Add walk() + collisions() coverage
# ---------------------------------------------------------------------------

import dataclasses

import pytest

from pyleader.app.tree import (
	Action,
	ActionTree,
	ActionType,
	Group,
	KeyCollision,
	TreeConfigError,
)


def _tree() -> ActionTree:
	return ActionTree.of(
		Action("t", "application", "/Applications/Terminal.app"),
		Group("o", "Open", (
			Action("g", ActionType.URL, "https://github.com"),
			Group("d", "Docs", (
				Action("p", "url", "https://docs.python.org"),
			)),
		)),
		Action("f", "folder", "~/Downloads"),
	)


def test_find_returns_first_match():
	tree = _tree()

	hit = tree.root.find("o")

	assert isinstance(hit, Group)
	assert hit.label == "Open"
	assert tree.root.find("x") is None


def test_find_is_case_sensitive():
	tree = ActionTree.of(Action("a", "url", "https://a"))

	assert tree.root.find("a") is not None
	assert tree.root.find("A") is None


def test_action_type_enum_is_normalized_to_string():
	a = Action("g", ActionType.URL, "https://github.com")

	assert a.type == "url"
	assert a.kind is ActionType.URL


def test_unknown_action_kind_is_allowed():
	a = Action("x", "shortcut", "something")

	assert a.type == "shortcut"
	assert a.kind is None


def test_tree_is_immutable():
	tree = _tree()

	with pytest.raises(dataclasses.FrozenInstanceError):
		tree.root = Group("")  # type: ignore[misc]

	assert isinstance(tree.root.children, tuple)


def test_children_list_is_stored_as_tuple():
	g = Group("g", "G", [Action("x", "url", "https://example.com")])  # type: ignore[arg-type]

	assert isinstance(g.children, tuple)


@pytest.mark.parametrize("key", ["", "ab", None, 1])
def test_action_key_must_be_single_character(key):
	with pytest.raises(TreeConfigError):
		Action(key, "url", "https://example.com")  # type: ignore[arg-type]


def test_group_key_longer_than_one_character_rejected():
	with pytest.raises(TreeConfigError):
		Group("ab", "AB")


def test_nested_group_with_empty_key_rejected():
	with pytest.raises(TreeConfigError):
		ActionTree.of(Group("", "bad"))


def test_action_needs_type_and_string_value():
	with pytest.raises(TreeConfigError):
		Action("a", "", "x")

	with pytest.raises(TreeConfigError):
		Action("a", "url", None)  # type: ignore[arg-type]


def test_group_rejects_foreign_children():
	with pytest.raises(TreeConfigError):
		Group("g", "G", ("not a node",))  # type: ignore[arg-type]


def test_tree_root_must_be_group():
	with pytest.raises(TreeConfigError):
		ActionTree(root=Action("a", "url", "x"))  # type: ignore[arg-type]


def test_tree_config_error_is_value_error():
	assert issubclass(TreeConfigError, ValueError)


def test_walk_yields_paths():
	paths = [path for path, _ in _tree().walk()]

	assert paths == ["t", "o", "f", "og", "od", "odp"]


def test_collisions_reports_but_keeps_first_match():
	first = Action("a", "url", "https://first")
	second = Group("a", "second")
	tree = ActionTree.of(
		first,
		second,
		Group("g", "G", (
			Action("x", "url", "https://x1"),
			Action("x", "url", "https://x2"),
			Action("x", "url", "https://x3"),
		)),
	)

	assert tree.root.find("a") is first
	assert tree.collisions() == [
		KeyCollision(path="", key="a", count=2),
		KeyCollision(path="g", key="x", count=3),
	]


def test_no_collisions_in_clean_tree():
	assert _tree().collisions() == []
