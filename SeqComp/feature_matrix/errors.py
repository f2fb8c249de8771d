"""Errors raised when a feature matrix or its labels are malformed"""


class UnbalancedMatrixError(ValueError):
    """Rows of a feature matrix do not all have the same number of columns"""


class LabelCountError(ValueError):
    """Number of labels does not match the number of rows or columns"""
