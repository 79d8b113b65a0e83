"""headermatrix: project nested header trees onto per-cell settings matrices."""

from headermatrix.builder import build_header_forest
from headermatrix.exceptions import (
    HeaderMatrixError,
    InvalidHeaderConfigError,
    MalformedHeaderTreeError,
)
from headermatrix.matrix import Matrix, generate_matrix, matrix_to_records
from headermatrix.schemas import HeaderCellSettings, HeaderNodeData, HeaderSettings
from headermatrix.settings import (
    create_default_header_settings,
    create_placeholder_header_settings,
)
from headermatrix.tree import HeaderTree, TreeNode
from headermatrix.validation import validate_forest

__all__ = [
    "HeaderCellSettings",
    "HeaderMatrixError",
    "HeaderNodeData",
    "HeaderSettings",
    "HeaderTree",
    "InvalidHeaderConfigError",
    "MalformedHeaderTreeError",
    "Matrix",
    "TreeNode",
    "build_header_forest",
    "create_default_header_settings",
    "create_placeholder_header_settings",
    "generate_matrix",
    "matrix_to_records",
    "validate_forest",
]
