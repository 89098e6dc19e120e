"""Tests for building, loading and rendering hierarchies."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from rich.console import Console

from structspine.core.exceptions import ValidationError
from structspine.hierarchy.build import build_tree, load_tree, render_tree
from structspine.hierarchy.node import Container, Leaf
from structspine.models.node_spec import NodeSpec

BOX = {
    "name": "box",
    "children": [
        {"name": "Item 1", "cost": 10},
        {"name": "Item 2", "cost": 20},
        {"children": [{"name": "Item 3", "cost": 30}, {"name": "Item 4", "cost": 40}]},
    ],
}


class TestBuildTree:
    """Tests for build_tree."""

    def test_builds_from_mapping(self) -> None:
        """Nested mappings become live nodes."""
        tree = build_tree(BOX)

        assert isinstance(tree, Container)
        assert tree.name == "box"
        assert tree.cost() == 100

    def test_builds_from_spec(self) -> None:
        """A validated NodeSpec is accepted directly."""
        tree = build_tree(NodeSpec(name="pen", cost=3))

        assert tree == Leaf("pen", 3)

    def test_empty_children(self) -> None:
        """An empty children list is an empty container."""
        assert build_tree({"children": []}).cost() == 0

    @pytest.mark.parametrize(
        "document",
        [
            {"name": "both", "cost": 1, "children": []},
            {"name": "neither"},
            {"name": "bad", "cost": "lots"},
            {"name": "extra", "cost": 1, "colour": "red"},
            {"children": [{"name": "nested-bad"}]},
        ],
    )
    def test_rejects_malformed(self, document: dict) -> None:
        """Malformed documents raise ValidationError."""
        with pytest.raises(ValidationError):
            build_tree(document)

    def test_error_names_node_path(self) -> None:
        """The message points at the offending node."""
        document = {"children": [{"name": "ok", "cost": 1}, {"children": [{"name": "bad"}]}]}

        with pytest.raises(ValidationError, match=r"\$\.children\[1\]\.children\[0\]"):
            build_tree(document)

    def test_rejects_non_mapping_child(self) -> None:
        """Children must be node documents."""
        with pytest.raises(ValidationError, match=r"children\[0\]"):
            build_tree({"children": [5]})

    def test_nested_nodespecs(self) -> None:
        """Children may already be NodeSpec instances."""
        spec = NodeSpec(children=[NodeSpec(name="pen", cost=3), {"name": "ink", "cost": 2}])

        assert build_tree(spec).cost() == 5

    @pytest.mark.parametrize("depth", [300, 1000])
    def test_deep_documents(self, depth: int) -> None:
        """Deeply nested, acyclic documents build and sum correctly."""
        document: dict = {"name": "core", "cost": 7}
        for _ in range(depth):
            document = {"children": [document, {"name": "extra", "cost": 1}]}

        tree = build_tree(document)

        assert tree.cost() == 7 + depth

    def test_child_order_kept(self) -> None:
        """Built containers keep document order."""
        tree = build_tree(BOX)

        assert isinstance(tree, Container)
        assert [getattr(child, "name") for child in tree.children] == ["Item 1", "Item 2", ""]


class TestLoadTree:
    """Tests for load_tree."""

    def test_loads_json_file(self, tmp_path: Path) -> None:
        """A JSON file on disk is loaded and evaluated."""
        path = tmp_path / "box.json"
        path.write_text(json.dumps(BOX), encoding="utf-8")

        assert load_tree(path).cost() == 100

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Non-JSON content is a ValidationError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValidationError, match="not valid JSON"):
            load_tree(path)

    def test_not_utf8(self, tmp_path: Path) -> None:
        """Undecodable bytes are a ValidationError, not a UnicodeDecodeError."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"name": "caf\xe9", "cost": 1}')

        with pytest.raises(ValidationError, match="not UTF-8"):
            load_tree(path)

    def test_deep_json_file(self, tmp_path: Path) -> None:
        """A file nested 300 containers deep loads."""
        document: dict = {"name": "core", "cost": 7}
        for _ in range(300):
            document = {"children": [document]}
        path = tmp_path / "deep.json"
        path.write_text(json.dumps(document), encoding="utf-8")

        assert load_tree(path).cost() == 7

    def test_top_level_must_be_object(self, tmp_path: Path) -> None:
        """A JSON array at the top level is rejected."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValidationError, match="top level"):
            load_tree(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file surfaces as OSError."""
        with pytest.raises(OSError):
            load_tree(tmp_path / "absent.json")


class TestRenderTree:
    """Tests for render_tree."""

    def test_shows_names_and_subtree_costs(self) -> None:
        """Rendered output lists every node with its cost."""
        console = Console(width=80, color_system=None)

        with console.capture() as capture:
            console.print(render_tree(build_tree(BOX)))

        output = capture.get()
        assert "box (100)" in output
        assert "Item 3 (30)" in output
        assert "(70)" in output
