"""Test setup for headermatrix."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from headermatrix.schemas import HeaderNodeData  # noqa: E402
from headermatrix.tree import TreeNode  # noqa: E402


NodeFactory = Callable[..., TreeNode]


@pytest.fixture
def make_node() -> NodeFactory:
    """Factory for header nodes; colspan and is_hidden follow the hidden columns."""

    def _make(
        column_index: int,
        orig_colspan: int = 1,
        header_level: int = 0,
        *,
        label: str = "",
        hidden: Iterable[int] = (),
        children: Iterable[TreeNode] = (),
        **extra: object,
    ) -> TreeNode:
        data = HeaderNodeData(
            column_index=column_index,
            orig_colspan=orig_colspan,
            header_level=header_level,
            cross_hidden_columns=frozenset(hidden),
            label=label,
            **extra,
        )
        return TreeNode(data=data, children=list(children))

    return _make


@pytest.fixture
def two_level_forest(make_node: NodeFactory) -> list[TreeNode]:
    """One root spanning columns 0-2 with children over [0, 2) and [2, 3)."""
    return [
        make_node(
            0,
            3,
            0,
            label="A",
            children=[
                make_node(0, 2, 1, label="B"),
                make_node(2, 1, 1, label="C"),
            ],
        )
    ]
