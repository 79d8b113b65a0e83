"""Header tree node data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class HeaderNodeData(BaseModel):
    """Data record carried by a single header tree node.

    Fields are snake_case in Python and camelCase on the wire. Unknown renderer
    fields are kept as extras and travel through the settings factory untouched.

    Attributes:
        column_index: First visual leaf column covered by the node (0-based).
        orig_colspan: Nominal number of leaf columns covered by the node.
        header_level: Depth of the node in the forest (roots are level 0).
        cross_hidden_columns: Hidden column indexes that fall within the span.
        label: Header caption.
        colspan: Effective colspan once hidden columns are taken out. Derived
            from the span and hidden columns when not given.
        is_hidden: True when every column of the span is hidden. Derived from
            colspan when not given.
        collapsible: Whether the header can be collapsed by the user.
        is_collapsed: Whether the header is currently collapsed.
        header_class_names: CSS class names applied to the header cell.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    column_index: int = Field(..., ge=0)
    orig_colspan: int = Field(1, ge=1)
    header_level: int = Field(0, ge=0)
    cross_hidden_columns: frozenset[int] = Field(default_factory=frozenset)
    label: str = ""
    colspan: int = Field(1, ge=0)
    is_hidden: bool = False
    collapsible: bool = False
    is_collapsed: bool = False
    header_class_names: tuple[str, ...] = ()

    @property
    def column_span(self) -> range:
        """Visual columns nominally covered by the node."""
        return range(self.column_index, self.column_index + self.orig_colspan)

    @model_validator(mode="before")
    @classmethod
    def _derive_effective_span(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)

        if _lookup(data, "colspan") is None:
            column_index = _lookup(data, "column_index", "columnIndex")
            orig_colspan = _lookup(data, "orig_colspan", "origColspan", default=1)
            hidden = _lookup(data, "cross_hidden_columns", "crossHiddenColumns", default=())
            if (
                _is_int(column_index)
                and _is_int(orig_colspan)
                and isinstance(hidden, (list, tuple, set, frozenset))
            ):
                span = range(column_index, column_index + orig_colspan)
                hidden_in_span = {column for column in hidden if column in span}
                data["colspan"] = len(span) - len(hidden_in_span)

        colspan = _lookup(data, "colspan")
        if _lookup(data, "is_hidden", "isHidden") is None and _is_int(colspan):
            data["is_hidden"] = colspan == 0
        return data


def _lookup(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
