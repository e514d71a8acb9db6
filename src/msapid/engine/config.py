"""
Configuration values for alignment loading, scoring and reporting.

Modify these values to adjust the defaults of the command line tool.
"""

# =============================================================================
# Alignment
# =============================================================================

# Character marking a gap column in an aligned sequence
GAP_CHARACTER = "-"


# =============================================================================
# Similarity scoring
# =============================================================================

# Substitution matrix used by the similarity command when none is given
DEFAULT_SUBSTITUTION_MATRIX = "blosum62"

# Minimum substitution score for a column to count as similar (0 or 1)
DEFAULT_MIN_SCORE = 1


# =============================================================================
# Execution and reporting
# =============================================================================

# Number of worker processes; 1 keeps scoring in the calling process
DEFAULT_JOBS = 1

# Number of completed outer rows between two progress reports
PROGRESS_DRAW_DELTA = 10

# Format of diagnostic lines written to standard error
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
