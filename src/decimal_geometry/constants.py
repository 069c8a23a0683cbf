"""Global constants for decimal geometry."""

# Decimal Arithmetic
DECIMAL_PRECISION = 28
"""Significant digits used for edge, extent and center arithmetic."""

# Logging
LOG_LEVEL_ENV_VAR = "DECIMAL_GEOMETRY_LOG_LEVEL"
"""Environment variable consulted by ``setup_logging`` when no level is given."""

DEFAULT_LOG_LEVEL = "INFO"
"""Log level used when neither an argument nor the environment sets one."""

# Text Rendering
FIELD_SEPARATOR = ","
"""Separator between fields in the text form of coordinates and boxes."""
