"""
Feature Matrix
- Tabulates N sequences against their consensus supersequence
- One row per sequence, one column per consensus position
- None marks a gap: the sequence lacks the consensus element there
"""

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..config import DEFAULT_CONSENSUS_ORDER, EMPTY_VALUE, FEATURE_SEPARATOR, SEPARATOR
from ..seq_alignment import SequenceComp, consensus_supersequence
from . import export
from .errors import LabelCountError, UnbalancedMatrixError

logger = logging.getLogger(__name__)

Row = Tuple[Optional[Any], ...]


@dataclass(frozen=True)
class IndexedValue:
    value: Optional[Any]
    row: int
    col: int


@dataclass(frozen=True)
class FeatureMatrix:
    """
    Two-dimensional matrix of optional features, organized by row

    Every row must have the same number of columns; the table is
    copied into tuples, so derived matrices never share state with
    their source.
    """
    features: Tuple[Row, ...]

    def __post_init__(self):
        table = tuple(tuple(row) for row in self.features)
        if not table:
            raise UnbalancedMatrixError("Unbalanced matrix: a feature matrix needs at least one row.")
        widths = {len(row) for row in table}
        if len(widths) != 1:
            raise UnbalancedMatrixError(
                f"Unbalanced matrix: rows have different numbers of columns {sorted(widths)}."
            )
        object.__setattr__(self, "features", table)

    # -------------------------
    # Construction
    # -------------------------
    @classmethod
    def from_sequences(
        cls,
        features: Iterable[Iterable[Any]],
        vectors_by_row: bool = True,
        include_scs: bool = False,
        order: str = DEFAULT_CONSENSUS_ORDER
    ) -> "FeatureMatrix":
        """
        Tabulate a matrix of features from several sequences

        Parameters:
        -----------
        features : iterable of iterables
            Ordered data values; sequences may have different lengths
        vectors_by_row : bool
            True (default) for one row per sequence, False for one
            column per sequence
        include_scs : bool
            Prepend the consensus supersequence as an extra first row
        order : str
            Fold order for the consensus ("longest" or "given")

        Returns:
        --------
        FeatureMatrix
        """
        sequences = [tuple(s) for s in features]
        supersequence = consensus_supersequence(sequences, order=order)
        logger.debug(
            f"Tabulating {len(sequences)} sequences against a consensus of {len(supersequence)}"
        )

        compiled: List[Row] = []
        if include_scs:
            compiled.append(tuple(supersequence))
        for seq in sequences:
            compiled.append(_consensus_row(supersequence, seq))

        matrix = cls(tuple(compiled))
        return matrix if vectors_by_row else matrix.transpose()

    @classmethod
    def from_data_table(cls, table: Iterable[Iterable[Any]]) -> "FeatureMatrix":
        """Build a matrix from a table of plain values, all present"""
        return cls(tuple(tuple(row) for row in table))

    # -------------------------
    # Shape and queries
    # -------------------------
    @property
    def rows(self) -> int:
        return len(self.features)

    @property
    def columns(self) -> int:
        return len(self.features[0])

    def cell(self, r: int, c: int) -> Optional[Any]:
        """Value at row `r`, column `c` (both 0-based)"""
        if not (0 <= r < self.rows and 0 <= c < self.columns):
            raise IndexError(
                f"Cell ({r}, {c}) is outside a matrix of {self.rows} x {self.columns}"
            )
        return self.features[r][c]

    def transpose(self) -> "FeatureMatrix":
        """New matrix with rows and columns swapped"""
        return FeatureMatrix(tuple(zip(*self.features)))

    @cached_property
    def indexed_cells(self) -> Tuple[IndexedValue, ...]:
        return tuple(
            IndexedValue(value, i, j)
            for i, row in enumerate(self.features)
            for j, value in enumerate(row)
        )

    def cell_index(self, value: Optional[Any]) -> List[IndexedValue]:
        """Every location holding `value`; pass None to find all gaps"""
        return [ic for ic in self.indexed_cells if ic.value == value]

    # -------------------------
    # Text views
    # -------------------------
    def string_table(self, empty_value: str = EMPTY_VALUE) -> List[List[str]]:
        return export.string_table(self.features, empty_value)

    def label_rows(self, labels: Sequence[str], empty_value: str = EMPTY_VALUE) -> List[List[str]]:
        """String table with each row prefixed by its label"""
        self._check_labels(labels, self.rows, "rows")
        return export.label_rows(self.string_table(empty_value), labels)

    def label_columns(self, labels: Sequence[str], empty_value: str = EMPTY_VALUE) -> List[List[str]]:
        """String table with a header row of column labels"""
        self._check_labels(labels, self.columns, "columns")
        return export.label_columns(self.string_table(empty_value), labels)

    def delimited(self, empty_value: str = EMPTY_VALUE, separator: str = SEPARATOR) -> str:
        return export.delimited(self.features, empty_value, separator)

    def markdown(self, row_labels: Optional[Sequence[str]] = None, empty_value: str = EMPTY_VALUE) -> str:
        if row_labels:
            self._check_labels(row_labels, self.rows, "rows")
        return export.markdown(self.features, row_labels, empty_value)

    def pretty_print(
        self,
        empty_value: str = EMPTY_VALUE,
        feature_separator: str = FEATURE_SEPARATOR,
        row_labels: Optional[Sequence[str]] = None,
        column_labels: Optional[Sequence[str]] = None
    ) -> str:
        if row_labels:
            self._check_labels(row_labels, self.rows, "rows")
        if column_labels:
            self._check_labels(column_labels, self.columns, "columns")
        return export.pretty_print(
            self.features, empty_value, feature_separator, row_labels, column_labels
        )

    @staticmethod
    def _check_labels(labels: Sequence[str], expected: int, axis: str) -> None:
        if len(labels) != expected:
            raise LabelCountError(
                f"Number of labels ({len(labels)}) must equal number of {axis} ({expected})."
            )

    def __str__(self) -> str:
        return self.pretty_print()


def _consensus_row(supersequence: Sequence[Any], seq: Sequence[Any]) -> Row:
    """
    Where the elements of `seq` land against the consensus

    Keeps the right side of every pairing with a consensus element on
    its left, so gaps stay at their own positions and the row is as
    long as the consensus.
    """
    pairings = SequenceComp(supersequence, seq).align()
    return tuple(p.right for p in pairings if p.left is not None)


def feature_matrix(
    features: Iterable[Iterable[Any]],
    vectors_by_row: bool = True,
    include_scs: bool = False,
    order: str = DEFAULT_CONSENSUS_ORDER
) -> FeatureMatrix:
    """
    Align several sequences into one FeatureMatrix

    Examples:
    ---------
    >>> m = feature_matrix(["abcdfg", "bcde", "acefg"])
    >>> m.rows, m.columns
    (3, 7)
    >>> print(m.delimited())
    a|b|c|d|-|f|g
    -|b|c|d|e|-|-
    a|-|c|-|e|f|g
    """
    return FeatureMatrix.from_sequences(features, vectors_by_row, include_scs, order)
