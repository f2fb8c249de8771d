"""
Feature Matrix Module
Tabulates multiple sequences against their consensus supersequence
"""

from .errors import LabelCountError, UnbalancedMatrixError
from .matrix import FeatureMatrix, IndexedValue, feature_matrix

__all__ = [
    "FeatureMatrix",
    "IndexedValue",
    "LabelCountError",
    "UnbalancedMatrixError",
    "feature_matrix"
]
