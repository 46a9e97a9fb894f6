"""Semantic event constants for structured logging.

Log events should use these constants rather than magic strings so the
output can be queried reliably.
"""

# Loader lifecycle
YAML_SOURCE_LOADING = "yaml_source_loading"
YAML_SOURCE_LOADED = "yaml_source_loaded"
YAML_SOURCE_EMPTY = "yaml_source_empty"

# Failures reported through the default logger callback
YAML_SOURCE_FAILED = "yaml_source_failed"
