"""Structural checks for header forests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from headermatrix.exceptions import MalformedHeaderTreeError
from headermatrix.schemas import HeaderNodeData
from headermatrix.tree import HeaderTree


@dataclass
class _OpenHeader:
    """Ancestor whose children are still being visited."""

    data: HeaderNodeData
    next_column: int
    has_children: bool = False

    @property
    def end(self) -> int:
        return self.data.column_index + self.data.orig_colspan


def validate_forest(header_roots: Sequence[HeaderTree]) -> None:
    """Check that a header forest satisfies the matrix generator's contract.

    Roots must sit on level 0 and cover consecutive columns starting at 0,
    children must partition their parent's span in order, one level deeper,
    and hidden columns must fall within the node's own span. Only the
    pre-order walk of each root is used, so the nodes need no child list.

    Raises:
        MalformedHeaderTreeError: On the first violation found.
    """
    next_root_column = 0
    for root in header_roots:
        open_headers: list[_OpenHeader] = []

        def _visit(node: HeaderTree) -> None:
            nonlocal next_root_column
            data = node.data
            _check_span(data)

            while open_headers and open_headers[-1].data.header_level >= data.header_level:
                _close(open_headers.pop())

            if not open_headers:
                if data.header_level != 0:
                    raise MalformedHeaderTreeError(
                        f"Root header {data.label!r} is on level {data.header_level}, expected 0"
                    )
                if data.column_index != next_root_column:
                    raise MalformedHeaderTreeError(
                        f"Root header {data.label!r} starts at column {data.column_index}, "
                        f"expected {next_root_column}"
                    )
                next_root_column = data.column_index + data.orig_colspan
            else:
                parent = open_headers[-1]
                if data.header_level != parent.data.header_level + 1:
                    raise MalformedHeaderTreeError(
                        f"Header {data.label!r} is on level {data.header_level}, "
                        f"expected {parent.data.header_level + 1}"
                    )
                if data.column_index != parent.next_column:
                    raise MalformedHeaderTreeError(
                        f"Header {data.label!r} starts at column {data.column_index}, "
                        f"expected {parent.next_column}"
                    )
                parent.next_column = data.column_index + data.orig_colspan
                parent.has_children = True

            open_headers.append(_OpenHeader(data=data, next_column=data.column_index))

        root.walk_down(_visit)
        while open_headers:
            _close(open_headers.pop())


def _check_span(data: HeaderNodeData) -> None:
    if data.column_index < 0 or data.orig_colspan < 1:
        raise MalformedHeaderTreeError(
            f"Header {data.label!r} has an invalid span "
            f"(column {data.column_index}, colspan {data.orig_colspan})"
        )

    span_end = data.column_index + data.orig_colspan
    stray = sorted(
        column
        for column in data.cross_hidden_columns
        if not data.column_index <= column < span_end
    )
    if stray:
        raise MalformedHeaderTreeError(
            f"Header {data.label!r} lists hidden columns {stray} outside of "
            f"its span [{data.column_index}, {span_end})"
        )


def _close(header: _OpenHeader) -> None:
    if header.has_children and header.next_column != header.end:
        raise MalformedHeaderTreeError(
            f"Children of header {header.data.label!r} cover columns up to "
            f"{header.next_column}, expected {header.end}"
        )
