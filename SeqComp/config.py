"""
SeqComp Configuration
=====================

Default placeholders, separators and consensus fold orders shared by the
pairwise aligner and the feature matrix.
"""

# Text rendering
EMPTY_VALUE = "-"          # stands in for an absent (None) cell
SEPARATOR = "|"            # delimited-text column separator
FEATURE_SEPARATOR = " "    # pretty_print column separator
CEX_SEPARATOR = "#"        # Pairing.cex left/right separator

# Consensus supersequence fold orders
CONSENSUS_ORDERS = {
    "longest": "fold longest sequences first, ties in input order",
    "given": "fold strictly left to right in input order",
}
DEFAULT_CONSENSUS_ORDER = "longest"
