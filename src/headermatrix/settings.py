"""Settings factory for header cells."""

from __future__ import annotations

from headermatrix.schemas import HeaderCellSettings, HeaderNodeData, HeaderSettings

# Position of the node is encoded by the matrix itself.
_POSITIONAL_FIELDS = {"column_index", "header_level"}
# Cell kind flags are owned by the factory and the matrix generator.
_CELL_KIND_KEYS = {"is_placeholder", "isPlaceholder", "is_root", "isRoot"}


def create_default_header_settings(node_data: HeaderNodeData) -> HeaderSettings:
    """Build the fully populated settings of a header node.

    Renderer fields unknown to the models are passed through as they are,
    except for extras that would override the cell kind flags.
    """
    settings = {
        key: value
        for key, value in node_data.model_dump(exclude=_POSITIONAL_FIELDS).items()
        if key not in _CELL_KIND_KEYS
    }
    settings["cross_hidden_columns"] = sorted(node_data.cross_hidden_columns)
    return HeaderSettings(**settings)


def create_placeholder_header_settings(
    node_data: HeaderNodeData, *, is_hidden: bool = False
) -> HeaderCellSettings:
    """Build a non-rendering cell that fills one column of a node's span.

    Args:
        node_data: Data of the node whose span the placeholder belongs to.
        is_hidden: Whether the column filled by the placeholder is hidden.

    Returns:
        A single-column placeholder sharing the node's class names.
    """
    return HeaderCellSettings(
        label="",
        colspan=1,
        orig_colspan=1,
        is_hidden=is_hidden,
        is_placeholder=True,
        is_root=False,
        header_class_names=list(node_data.header_class_names),
    )
