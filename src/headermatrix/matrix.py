"""Project a header forest onto a matrix of per-cell settings."""

from __future__ import annotations

import logging
from typing import Any, Sequence, TypeAlias

from headermatrix.config import HEADERMATRIX_VALIDATE_FOREST
from headermatrix.schemas import HeaderCellSettings, HeaderNodeData
from headermatrix.settings import (
    create_default_header_settings,
    create_placeholder_header_settings,
)
from headermatrix.tree import HeaderTree
from headermatrix.validation import validate_forest

logger = logging.getLogger(__name__)

Matrix: TypeAlias = list[list[HeaderCellSettings]]


def generate_matrix(
    header_roots: Sequence[HeaderTree], *, validate: bool | None = None
) -> Matrix:
    """Dump a header forest into a matrix of header cell settings.

    The matrix holds one row per header level and one cell per visual column
    spanned by the nodes of that level. In every span the leftmost visible
    column gets the root cell (label and effective colspan); the remaining
    columns get placeholders. A span with all columns hidden has no root.

    Output example (``[1]`` hidden)::

        [
            [
                {label: "A1", colspan: 2, origColspan: 3, isRoot: True, ...},
                {label: "", colspan: 1, isHidden: True, isRoot: False, ...},
                {label: "", colspan: 1, isHidden: False, isRoot: False, ...},
            ],
        ]

    Args:
        header_roots: Root nodes of the forest, in column order.
        validate: Check the forest structure first. Defaults to
            ``HEADERMATRIX_VALIDATE_FOREST``.

    Returns:
        Rows indexed by header level.

    Raises:
        MalformedHeaderTreeError: If validation is enabled and the forest
            is not well formed.
    """
    if validate is None:
        validate = HEADERMATRIX_VALIDATE_FOREST
    if validate:
        validate_forest(header_roots)

    matrix: Matrix = []

    def _visit(node: HeaderTree) -> None:
        node_data = node.data
        header_layer = _ensure_row(matrix, node_data.header_level)
        is_root_found = False

        for column in node_data.column_span:
            is_column_hidden = column in node_data.cross_hidden_columns

            if is_column_hidden or is_root_found:
                header_layer.append(
                    create_placeholder_header_settings(node_data, is_hidden=is_column_hidden)
                )
            else:
                header_layer.append(_create_root_settings(node_data))
                is_root_found = True

    for root in header_roots:
        root.walk_down(_visit)

    logger.debug(
        "Generated header matrix",
        extra={"levels": len(matrix), "cells": [len(row) for row in matrix]},
    )
    return matrix


def matrix_to_records(matrix: Matrix) -> list[list[dict[str, Any]]]:
    """Dump matrix cells to plain camelCase dicts for JSON consumers."""
    return [
        [cell.model_dump(mode="json", by_alias=True) for cell in row]
        for row in matrix
    ]


def _create_root_settings(node_data: HeaderNodeData) -> HeaderCellSettings:
    # Hidden columns are resolved into colspan already; the renderer never needs them.
    settings = create_default_header_settings(node_data).model_dump(
        exclude={"cross_hidden_columns"}
    )
    settings["is_root"] = True
    return HeaderCellSettings(**settings)


def _ensure_row(matrix: Matrix, level: int) -> list[HeaderCellSettings]:
    while len(matrix) <= level:
        matrix.append([])
    return matrix[level]
