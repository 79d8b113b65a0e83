"""Tests for header forest validation."""

from __future__ import annotations

import pytest

from headermatrix.builder import build_header_forest
from headermatrix.exceptions import HeaderMatrixError, MalformedHeaderTreeError
from headermatrix.schemas import HeaderNodeData
from headermatrix.validation import validate_forest


class WalkOnlyRoot:
    """Root that replays a pre-order node sequence without exposing children."""

    def __init__(self, nodes: list[HeaderNodeData]) -> None:
        self.data = nodes[0]
        self._nodes = nodes

    def walk_down(self, callback) -> None:
        for data in self._nodes:
            if callback(_DataOnly(data)) is False:
                return


class _DataOnly:
    def __init__(self, data: HeaderNodeData) -> None:
        self.data = data


class TestValidateForest:
    """Tests for validate_forest."""

    def test_accepts_well_formed_forest(self, two_level_forest) -> None:
        validate_forest(two_level_forest)

    def test_accepts_consecutive_roots(self, make_node) -> None:
        validate_forest([make_node(0, 2, label="A"), make_node(2, 1, label="B")])

    def test_accepts_empty_forest(self) -> None:
        validate_forest([])

    def test_accepts_built_forest(self) -> None:
        roots = build_header_forest(
            [["A", {"label": "B", "colspan": 3}], ["C", {"label": "D", "colspan": 2}, "E"]],
            hidden_columns=[1, 2],
        )
        validate_forest(roots)

    def test_rejects_root_below_level_zero(self, make_node) -> None:
        with pytest.raises(MalformedHeaderTreeError, match="is on level 1, expected 0"):
            validate_forest([make_node(0, 1, 1, label="A")])

    def test_rejects_gap_between_roots(self, make_node) -> None:
        with pytest.raises(MalformedHeaderTreeError, match="'B' starts at column 3, expected 2"):
            validate_forest([make_node(0, 2, label="A"), make_node(3, 1, label="B")])

    def test_rejects_overlapping_roots(self, make_node) -> None:
        with pytest.raises(MalformedHeaderTreeError, match="expected 2"):
            validate_forest([make_node(0, 2, label="A"), make_node(1, 2, label="B")])

    def test_rejects_child_on_wrong_level(self, make_node) -> None:
        root = make_node(0, 1, label="A", children=[make_node(0, 1, 2, label="B")])
        with pytest.raises(MalformedHeaderTreeError, match="'B' is on level 2, expected 1"):
            validate_forest([root])

    def test_rejects_children_not_covering_parent(self, make_node) -> None:
        root = make_node(0, 3, label="A", children=[make_node(0, 2, 1, label="B")])
        with pytest.raises(MalformedHeaderTreeError, match="cover columns up to 2, expected 3"):
            validate_forest([root])

    def test_rejects_children_out_of_order(self, make_node) -> None:
        root = make_node(
            0,
            2,
            label="A",
            children=[make_node(1, 1, 1, label="C"), make_node(0, 1, 1, label="B")],
        )
        with pytest.raises(MalformedHeaderTreeError, match="'C' starts at column 1, expected 0"):
            validate_forest([root])

    def test_rejects_hidden_column_outside_span(self, make_node) -> None:
        with pytest.raises(MalformedHeaderTreeError, match=r"hidden columns \[5\]"):
            validate_forest([make_node(0, 2, label="A", hidden=[5])])

    def test_errors_share_package_base(self, make_node) -> None:
        with pytest.raises(HeaderMatrixError):
            validate_forest([make_node(1, 1, label="A")])


class TestValidateWalkableForest:
    """Forests that only offer node data and a pre-order walk."""

    @staticmethod
    def _forest(*records: dict) -> list:
        nodes = [HeaderNodeData.model_validate(record) for record in records]
        return [WalkOnlyRoot(nodes)]

    def test_accepts_forest_without_child_lists(self) -> None:
        validate_forest(
            self._forest(
                {"columnIndex": 0, "origColspan": 3, "label": "A"},
                {"columnIndex": 0, "origColspan": 2, "headerLevel": 1, "label": "B"},
                {"columnIndex": 2, "headerLevel": 1, "label": "C"},
            )
        )

    def test_rejects_children_not_covering_parent(self) -> None:
        forest = self._forest(
            {"columnIndex": 0, "origColspan": 3, "label": "A"},
            {"columnIndex": 0, "origColspan": 2, "headerLevel": 1, "label": "B"},
        )
        with pytest.raises(MalformedHeaderTreeError, match="cover columns up to 2, expected 3"):
            validate_forest(forest)

    def test_rejects_gap_between_siblings(self) -> None:
        forest = self._forest(
            {"columnIndex": 0, "origColspan": 3, "label": "A"},
            {"columnIndex": 0, "headerLevel": 1, "label": "B"},
            {"columnIndex": 2, "headerLevel": 1, "label": "C"},
        )
        with pytest.raises(MalformedHeaderTreeError, match="'C' starts at column 2, expected 1"):
            validate_forest(forest)

    def test_checks_partition_when_walk_returns_to_shallower_level(self) -> None:
        forest = self._forest(
            {"columnIndex": 0, "origColspan": 4, "label": "A"},
            {"columnIndex": 0, "origColspan": 2, "headerLevel": 1, "label": "B"},
            {"columnIndex": 0, "headerLevel": 2, "label": "b1"},
            {"columnIndex": 2, "origColspan": 2, "headerLevel": 1, "label": "C"},
        )
        with pytest.raises(MalformedHeaderTreeError, match="Children of header 'B' cover columns up to 1"):
            validate_forest(forest)
