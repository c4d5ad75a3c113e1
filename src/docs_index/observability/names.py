# src/docs_index/observability/names.py

"""Standard metric names for docs-index observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Loader Metrics
# ============================================================================

# Duration
LOAD_DURATION = "load_duration"

# Counters
DOCUMENTS_LOADED_TOTAL = "documents_loaded_total"
DOCUMENTS_SKIPPED_TOTAL = "documents_skipped_total"


# ============================================================================
# Parser Metrics
# ============================================================================

# Counters
PARSER_SECTIONS_CREATED = "parser_sections_created"


# ============================================================================
# Index Metrics
# ============================================================================

# Duration
INDEX_BUILD_DURATION = "index_build_duration"

# Counters
INDEX_BUILDS_TOTAL = "index_builds_total"

# Gauges (size of the most recent build)
INDEX_SECTIONS = "index_sections"
INDEX_TERMS = "index_terms"


# ============================================================================
# Query Metrics
# ============================================================================

# Duration
QUERY_DURATION = "query_duration"

# Counters
QUERIES_TOTAL = "queries_total"
QUERIES_EMPTY_INDEX_TOTAL = "queries_empty_index_total"
