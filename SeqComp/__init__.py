"""
SeqComp
Comparison of ordered sequences and their tabulation as feature matrices
"""

from .feature_matrix import FeatureMatrix, IndexedValue, feature_matrix
from .seq_alignment import Pairing, SequenceComp, align, consensus_supersequence, lcs, scs

__version__ = "0.1.0"
