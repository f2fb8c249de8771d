"""
Text export of feature tables: string tables, labelled tables,
delimited text and Markdown
"""
import logging
from typing import Any, List, Optional, Sequence

from ..config import EMPTY_VALUE, FEATURE_SEPARATOR, SEPARATOR
from .errors import LabelCountError

logger = logging.getLogger(__name__)


def _cell_text(cell: Any, empty_value: str) -> str:
    if isinstance(cell, str):
        return cell
    if cell is None:
        return empty_value
    return str(cell)


def string_table(table: Sequence[Sequence[Any]], empty_value: str = EMPTY_VALUE) -> List[List[str]]:
    """
    Convert a table of optional values to strings

    Args:
        table: Rows of values; None marks an absent value
        empty_value: Text used for every None

    Returns:
        List of rows of strings
    """
    return [[_cell_text(cell, empty_value) for cell in row] for row in table]


def label_rows(table: Sequence[Sequence[str]], labels: Sequence[str]) -> List[List[str]]:
    """Prefix each row of a string table with its label"""
    if len(labels) != len(table):
        raise LabelCountError(
            f"Number of labels ({len(labels)}) must equal number of rows ({len(table)})."
        )
    labelled = []
    for label, row in zip(labels, table):
        label_row = [label] + list(row)
        logger.debug(f"Label row: {label_row}")
        labelled.append(label_row)
    return labelled


def label_columns(table: Sequence[Sequence[str]], labels: Sequence[str]) -> List[List[str]]:
    """Put a header row of column labels on top of a string table"""
    if table and len(labels) != len(table[0]):
        raise LabelCountError(
            f"Number of labels ({len(labels)}) must equal number of columns ({len(table[0])})."
        )
    return [list(labels)] + [list(row) for row in table]


def delimited(
    table: Sequence[Sequence[Any]],
    empty_value: str = EMPTY_VALUE,
    separator: str = SEPARATOR
) -> str:
    """
    Delimited-text view of a table of optional values

    Example:
        >>> delimited([["a", None, "c"]])
        'a|-|c'
    """
    rows = string_table(table, empty_value)
    return "\n".join(separator.join(row) for row in rows)


def markdown(
    table: Sequence[Sequence[Any]],
    row_labels: Optional[Sequence[str]] = None,
    empty_value: str = EMPTY_VALUE
) -> str:
    """
    Markdown table with 0-based column indices as header and bold
    row labels (0-based row indices unless given)
    """
    n_rows = len(table)
    n_columns = len(table[0]) if table else 0
    labels = list(row_labels) if row_labels else [str(i) for i in range(n_rows)]

    rows = label_rows(string_table(table, empty_value), [f"**{lbl}**" for lbl in labels])
    header = [""] + [str(j) for j in range(n_columns)]
    rule = ["---"] * (n_columns + 1)

    lines = [header, rule] + rows
    return "\n".join("| " + " | ".join(line) + " |" for line in lines)


def pretty_print(
    table: Sequence[Sequence[Any]],
    empty_value: str = EMPTY_VALUE,
    feature_separator: str = FEATURE_SEPARATOR,
    row_labels: Optional[Sequence[str]] = None,
    column_labels: Optional[Sequence[str]] = None
) -> str:
    """Plain-text view with optional row and column labels"""
    rows = string_table(table, empty_value)
    if row_labels:
        rows = label_rows(rows, row_labels)
    if column_labels:
        header = list(column_labels)
        if row_labels:
            header = [""] + header
        rows = label_columns(rows, header)
    return "\n".join(feature_separator.join(row) for row in rows)
