"""Header settings models produced for the renderer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _HeaderCellFields(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    label: str = ""
    colspan: int = Field(1, ge=0)
    orig_colspan: int = Field(1, ge=1)
    is_hidden: bool = False
    is_placeholder: bool = False
    is_root: bool = False
    collapsible: bool = False
    is_collapsed: bool = False
    header_class_names: list[str] = Field(default_factory=list)


class HeaderSettings(_HeaderCellFields):
    """Fully populated default settings of a header node."""

    cross_hidden_columns: list[int] = Field(default_factory=list)


class HeaderCellSettings(_HeaderCellFields):
    """Settings of one matrix cell (one header level, one visual column).

    Root cells carry the label and effective colspan of their node, placeholder
    cells only keep the matrix rectangular. The model has no
    ``cross_hidden_columns`` field; it never reaches the renderer.
    """
