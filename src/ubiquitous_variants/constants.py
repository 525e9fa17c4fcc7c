"""Centralized constants for the ANN annotation schema and run defaults.

The annotation INFO field carries one entry per overlapping transcript. Each entry
is a fixed, pipe-delimited list of sub-fields (VEP/snpEff ANN convention); the
positions below are the only ones read.
"""

# =============================================================================
# ANN SCHEMA
# =============================================================================

ANN_FIELD_SEPARATOR = b"|"
HGVSP_SEPARATOR = b":"

# Sub-field positions, by role
ANN_FIELD_POSITIONS: dict[str, int] = {
    "gene": 3,
    "hgvsp": 11,
    "canonical": 24,
    "alt_canonical": 26,
}

# An entry must reach the highest referenced position to be decodable
MIN_ANN_SUBFIELDS = max(ANN_FIELD_POSITIONS.values()) + 1

CANONICAL_FLAG = b"YES"


# =============================================================================
# RUN DEFAULTS
# =============================================================================

DEFAULT_ANNOTATION_FIELD = "ANN"
DEFAULT_THRESHOLD = 0.7
MIN_SAMPLE_FILES = 2
