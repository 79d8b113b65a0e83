"""Shared schemas for headermatrix."""

from headermatrix.schemas.nodes import HeaderNodeData
from headermatrix.schemas.settings import HeaderCellSettings, HeaderSettings

__all__ = ["HeaderCellSettings", "HeaderNodeData", "HeaderSettings"]
