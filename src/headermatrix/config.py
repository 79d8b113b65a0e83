"""Local configuration for headermatrix."""

from __future__ import annotations

import os


DEFAULT_VALIDATE_FOREST = "true"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_JSON_INDENT = 2

# Structural checks run once per generate_matrix call unless turned off.
HEADERMATRIX_VALIDATE_FOREST = os.getenv("HEADERMATRIX_VALIDATE_FOREST", DEFAULT_VALIDATE_FOREST).lower() in {"1", "true", "yes"}
HEADERMATRIX_LOG_LEVEL = os.getenv("HEADERMATRIX_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
HEADERMATRIX_JSON_INDENT = int(os.getenv("HEADERMATRIX_JSON_INDENT", str(DEFAULT_JSON_INDENT)))
