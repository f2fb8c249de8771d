"""
Sequence Comparison Module
Provides LCS, SCS and alignment of pairs of sequences
"""

from .pairwise import (
    Pairing,
    SequenceComp,
    align,
    consensus_supersequence,
    lcs,
    scs
)

__all__ = [
    "Pairing",
    "SequenceComp",
    "align",
    "consensus_supersequence",
    "lcs",
    "scs"
]
