"""Build header forests from nested headers configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence, Union

from headermatrix.exceptions import InvalidHeaderConfigError
from headermatrix.schemas import HeaderNodeData
from headermatrix.tree import TreeNode

logger = logging.getLogger(__name__)

HeaderCellConfig = Union[str, Mapping[str, Any]]


@dataclass
class _PlacedHeader:
    """Normalized header cell placed on a layer."""

    column_index: int
    colspan: int
    label: str = ""
    collapsible: bool = False
    header_class_names: tuple[str, ...] = field(default_factory=tuple)

    @property
    def end(self) -> int:
        return self.column_index + self.colspan


def build_header_forest(
    nested_headers: Sequence[Sequence[HeaderCellConfig]],
    *,
    hidden_columns: Iterable[int] = (),
    columns_count: int | None = None,
) -> list[TreeNode]:
    """Turn nested headers configuration into a forest of header nodes.

    Each layer is a list of cells, either a plain label or a mapping with
    ``label``, ``colspan``, ``headerClassName`` and ``collapsible`` keys. Every
    layer is stretched to the same number of columns with empty headers, and a
    header crossing its parent's boundary is trimmed to the parent's span.

    Args:
        nested_headers: Header layers, shallowest first.
        hidden_columns: Visual column indexes that are currently hidden.
        columns_count: Number of leaf columns. Defaults to the widest layer.

    Returns:
        Root nodes (level 0) in column order.

    Raises:
        InvalidHeaderConfigError: If a cell cannot be interpreted.
    """
    parsed_layers = [
        _parse_layer(layer, level) for level, layer in enumerate(nested_headers)
    ]
    if columns_count is None:
        columns_count = max(
            (sum(header.colspan for header in layer) for layer in parsed_layers),
            default=0,
        )
    if columns_count < 0:
        raise InvalidHeaderConfigError(
            f"Columns count must not be negative, got {columns_count}"
        )
    if not parsed_layers or columns_count == 0:
        return []

    hidden = set(hidden_columns)
    roots: list[TreeNode] = []
    parents_by_column: list[TreeNode] = []

    for level, layer in enumerate(parsed_layers):
        headers = _fit_layer(layer, columns_count)
        if level > 0:
            headers = _trim_to_parents(headers, parents_by_column)
        logger.debug(
            "Normalized header layer",
            extra={"level": level, "headers": len(headers), "columns": columns_count},
        )

        nodes_by_column: list[TreeNode] = []
        for header in headers:
            node = TreeNode(data=_create_node_data(header, level, hidden))
            if level == 0:
                roots.append(node)
            else:
                parents_by_column[header.column_index].add_child(node)
            nodes_by_column.extend([node] * header.colspan)
        parents_by_column = nodes_by_column

    return roots


def _parse_layer(layer: Sequence[HeaderCellConfig], level: int) -> list[_PlacedHeader]:
    if isinstance(layer, (str, bytes)) or not isinstance(layer, Sequence):
        raise InvalidHeaderConfigError(f"Header layer {level} must be a list of headers")
    headers: list[_PlacedHeader] = []
    column_index = 0
    for cell in layer:
        header = _parse_cell(cell, level=level, column_index=column_index)
        headers.append(header)
        column_index = header.end
    return headers


def _parse_cell(cell: HeaderCellConfig, *, level: int, column_index: int) -> _PlacedHeader:
    if isinstance(cell, str):
        return _PlacedHeader(column_index=column_index, colspan=1, label=cell)
    if not isinstance(cell, Mapping):
        raise InvalidHeaderConfigError(
            f"Header on level {level} at column {column_index} must be a string "
            f"or a mapping, got {type(cell).__name__}"
        )

    colspan = cell.get("colspan", 1)
    if isinstance(colspan, bool) or not isinstance(colspan, int) or colspan < 1:
        raise InvalidHeaderConfigError(
            f"Header on level {level} at column {column_index} has invalid "
            f"colspan {colspan!r}"
        )

    label = cell.get("label")
    class_name = cell.get("headerClassName") or ""
    return _PlacedHeader(
        column_index=column_index,
        colspan=colspan,
        label="" if label is None else str(label),
        collapsible=bool(cell.get("collapsible", False)),
        header_class_names=tuple(str(class_name).split()),
    )


def _fit_layer(headers: list[_PlacedHeader], columns_count: int) -> list[_PlacedHeader]:
    fitted: list[_PlacedHeader] = []
    for header in headers:
        if header.column_index >= columns_count:
            break
        if header.end > columns_count:
            header.colspan = columns_count - header.column_index
        fitted.append(header)

    next_column = fitted[-1].end if fitted else 0
    fitted.extend(_PlacedHeader(column_index=i, colspan=1) for i in range(next_column, columns_count))
    return fitted


def _trim_to_parents(
    headers: list[_PlacedHeader], parents_by_column: list[TreeNode]
) -> list[_PlacedHeader]:
    trimmed: list[_PlacedHeader] = []
    for header in headers:
        parent_data = parents_by_column[header.column_index].data
        parent_end = parent_data.column_index + parent_data.orig_colspan
        if header.end > parent_end:
            given_up = range(parent_end, header.end)
            header.colspan = parent_end - header.column_index
            trimmed.append(header)
            trimmed.extend(_PlacedHeader(column_index=i, colspan=1) for i in given_up)
        else:
            trimmed.append(header)
    return trimmed


def _create_node_data(header: _PlacedHeader, level: int, hidden: set[int]) -> HeaderNodeData:
    cross_hidden_columns = frozenset(
        column for column in range(header.column_index, header.end) if column in hidden
    )
    colspan = header.colspan - len(cross_hidden_columns)
    return HeaderNodeData(
        column_index=header.column_index,
        orig_colspan=header.colspan,
        header_level=level,
        cross_hidden_columns=cross_hidden_columns,
        label=header.label,
        colspan=colspan,
        is_hidden=colspan == 0,
        collapsible=header.collapsible,
        header_class_names=header.header_class_names,
    )
