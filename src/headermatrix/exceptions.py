"""Custom exceptions for headermatrix."""


class HeaderMatrixError(Exception):
    """Base exception for headermatrix operations."""


class MalformedHeaderTreeError(HeaderMatrixError):
    """Header forest violates its structural contract."""


class InvalidHeaderConfigError(HeaderMatrixError):
    """Nested headers configuration cannot be turned into a forest."""
