"""
Pairwise Sequence Comparison Module
Longest common subsequence, shortest common supersequence and
element-by-element alignment of two sequences
"""

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..config import CEX_SEPARATOR, CONSENSUS_ORDERS, DEFAULT_CONSENSUS_ORDER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pairing:
    """One aligned position between two sequences; None marks a gap"""
    left: Optional[Any] = None
    right: Optional[Any] = None

    def __post_init__(self):
        if self.left is None and self.right is None:
            raise ValueError("Pairing needs at least one of left, right")

    @property
    def is_match(self) -> bool:
        return self.left is not None and self.right is not None

    def cex(self, separator: str = CEX_SEPARATOR) -> str:
        """Render as `left#right`, absent sides left empty"""
        left = "" if self.left is None else str(self.left)
        right = "" if self.right is None else str(self.right)
        return f"{left}{separator}{right}"


class SequenceComp:
    """Compare a pair of sequences by their longest common subsequence"""

    def __init__(self, v1: Iterable[Any], v2: Iterable[Any]):
        """
        Materialize both sequences and fill the memoizing table

        Parameters:
        -----------
        v1 : iterable
            First sequence to compare
        v2 : iterable
            Second sequence to compare
        """
        self.v1: Tuple[Any, ...] = tuple(v1)
        self.v2: Tuple[Any, ...] = tuple(v2)
        self.memo = self._fill_memo(self.v1, self.v2)

    @staticmethod
    def _fill_memo(v1: Sequence[Any], v2: Sequence[Any]) -> np.ndarray:
        """memo[i, j] = length of the LCS of v1[i:] and v2[j:]"""
        len1, len2 = len(v1), len(v2)
        logger.debug(f"Filling LCS table of {len1 + 1} x {len2 + 1}")

        memo = np.zeros((len1 + 1, len2 + 1), dtype=np.int64)
        for i in range(len1 - 1, -1, -1):
            for j in range(len2 - 1, -1, -1):
                if v1[i] == v2[j]:
                    memo[i, j] = memo[i + 1, j + 1] + 1
                else:
                    memo[i, j] = max(memo[i + 1, j], memo[i, j + 1])
        return memo

    def lcs(self) -> List[Any]:
        """
        Longest common subsequence of v1 and v2

        Walks forward through the memoizing table from (0, 0). When the
        fronts differ, the index whose successor cell keeps the longer
        LCS is advanced; ties advance v1.
        """
        v1, v2, memo = self.v1, self.v2, self.memo
        common = []
        i1 = i2 = 0
        while i1 < len(v1) and i2 < len(v2):
            if v1[i1] == v2[i2]:
                common.append(v1[i1])
                i1 += 1
                i2 += 1
            elif memo[i1 + 1, i2] >= memo[i1, i2 + 1]:
                i1 += 1
            else:
                i2 += 1
        return common

    def _walk(self) -> List[Pairing]:
        """
        Merge v1 and v2 around their LCS, one Pairing per step

        Both fronts equal to the next common element are emitted together.
        If only v1 has reached it, v2's front is emitted alone; otherwise
        v1's front is. Once the common elements are used up the rest of
        v1 precedes the rest of v2, so swapping v1 and v2 can give a
        different (equally short) merge.
        """
        src1, src2 = self.v1, self.v2
        overlap = self.lcs()
        pairings = []
        i1 = i2 = k = 0
        while k < len(overlap):
            head = overlap[k]
            if src1[i1] == head and src2[i2] == head:
                pairings.append(Pairing(src1[i1], src2[i2]))
                i1 += 1
                i2 += 1
                k += 1
            elif src1[i1] == head:
                pairings.append(Pairing(None, src2[i2]))
                i2 += 1
            else:
                pairings.append(Pairing(src1[i1], None))
                i1 += 1

        pairings.extend(Pairing(x, None) for x in src1[i1:])
        pairings.extend(Pairing(None, y) for y in src2[i2:])
        return pairings

    def scs(self) -> List[Any]:
        """
        Shortest common supersequence of v1 and v2, built by inserting
        the elements found in only one sequence into their LCS
        """
        return [p.left if p.left is not None else p.right for p in self._walk()]

    def align(self) -> List[Pairing]:
        """
        Alignment of v1 and v2 as a list of Pairings

        Concatenating the present `left` values gives back v1 and the
        present `right` values give back v2.
        """
        return self._walk()

    def memo_table(self) -> str:
        """Text view of the memoizing table, one line per element of v1"""
        lines = []
        for i, x in enumerate(self.v1):
            cells = "".join(f"{y}:{self.memo[i, j]}, " for j, y in enumerate(self.v2))
            lines.append(f"{x}=>{cells}{self.memo[i, len(self.v2)]}")
        cells = "".join(f" :{self.memo[len(self.v1), j]}, " for j in range(len(self.v2)))
        lines.append(f" =>{cells}{self.memo[len(self.v1), len(self.v2)]}")
        return "\n".join(lines)

    def print_memo(self) -> None:
        """Display the memoizing table; handy for explaining the LCS walk"""
        print(self.memo_table())

    def __repr__(self) -> str:
        return f"SequenceComp(v1={list(self.v1)!r}, v2={list(self.v2)!r})"


def lcs(v1: Iterable[Any], v2: Iterable[Any]) -> List[Any]:
    """Longest common subsequence of two sequences"""
    return SequenceComp(v1, v2).lcs()


def scs(v1: Iterable[Any], v2: Iterable[Any]) -> List[Any]:
    """Shortest common supersequence of two sequences"""
    return SequenceComp(v1, v2).scs()


def align(v1: Iterable[Any], v2: Iterable[Any]) -> List[Pairing]:
    """Pairing-by-pairing alignment of two sequences"""
    return SequenceComp(v1, v2).align()


def _fold_order(sequences: List[Tuple[Any, ...]], order: str) -> List[Tuple[Any, ...]]:
    if order not in CONSENSUS_ORDERS:
        raise ValueError(
            f"Unknown consensus order: {order!r} (expected one of {sorted(CONSENSUS_ORDERS)})"
        )
    if order == "longest":
        # sorted() is stable, so equal lengths keep their input order
        return sorted(sequences, key=len, reverse=True)
    return list(sequences)


def consensus_supersequence(
    sequences: Iterable[Iterable[Any]],
    order: str = DEFAULT_CONSENSUS_ORDER
) -> List[Any]:
    """
    Common supersequence of any number of sequences

    Pairwise SCS is neither associative nor commutative, so the result
    depends on the fold order. Every input is a subsequence of the result
    whichever order is used.

    Parameters:
    -----------
    sequences : iterable of iterables
        Sequences to cover, possibly of different lengths
    order : str
        "longest" (default) folds the longest sequences first, keeping
        input order among equal lengths; "given" folds left to right

    Returns:
    --------
    list
        The consensus supersequence (empty when there are no sequences)

    Examples:
    ---------
    >>> consensus_supersequence(["abcdfg", "bcde", "acefg"])
    ['a', 'b', 'c', 'd', 'e', 'f', 'g']
    """
    folded = _fold_order([tuple(s) for s in sequences], order)
    if not folded:
        return []

    def step(acc: List[Any], seq: Tuple[Any, ...]) -> List[Any]:
        merged = SequenceComp(acc, seq).scs()
        logger.debug(f"Consensus fold: {len(acc)} + {len(seq)} -> {len(merged)}")
        return merged

    return reduce(step, folded[1:], list(folded[0]))
