import pytest
from SeqComp.feature_matrix import FeatureMatrix, LabelCountError
from SeqComp.feature_matrix import export


GAPPED = FeatureMatrix((("a", "b", None), ("d", "e", "f")))


def test_delimited():
    assert GAPPED.delimited() == "a|b|-\nd|e|f"
    assert GAPPED.delimited(empty_value="*", separator=",") == "a,b,*\nd,e,f"
    assert export.delimited([["a", None, "c"]]) == "a|-|c"


def test_string_table():
    assert export.string_table([[1, None, "x"]]) == [["1", "-", "x"]]
    assert export.string_table([[1.5, None]], empty_value="") == [["1.5", ""]]
    assert GAPPED.string_table() == [["a", "b", "-"], ["d", "e", "f"]]


def test_label_rows():
    table = [["a", "b"], ["c", "d"]]
    assert export.label_rows(table, ["x", "y"]) == [["x", "a", "b"], ["y", "c", "d"]]
    with pytest.raises(LabelCountError):
        export.label_rows(table, ["x"])


def test_label_columns():
    table = [["a", "b"], ["c", "d"]]
    assert export.label_columns(table, ["0", "1"]) == [["0", "1"], ["a", "b"], ["c", "d"]]
    with pytest.raises(LabelCountError):
        export.label_columns(table, ["0", "1", "2"])
    # source table is not modified
    assert table == [["a", "b"], ["c", "d"]]


def test_markdown():
    m = FeatureMatrix((("a", None), ("b", "c")))
    assert m.markdown() == "\n".join([
        "|  | 0 | 1 |",
        "| --- | --- | --- |",
        "| **0** | a | - |",
        "| **1** | b | c |",
    ])
    assert m.markdown(row_labels=["x", "y"], empty_value="?").splitlines()[2] == "| **x** | a | ? |"


def test_pretty_print():
    m = FeatureMatrix((("a", None), ("b", "c")))
    assert m.pretty_print() == "a -\nb c"
    assert str(m) == "a -\nb c"
    assert m.pretty_print(row_labels=["x", "y"]) == "x a -\ny b c"
    assert m.pretty_print(column_labels=["c0", "c1"]) == "c0 c1\na -\nb c"
    assert m.pretty_print(
        row_labels=["x", "y"], column_labels=["c0", "c1"], feature_separator="\t"
    ) == "\tc0\tc1\nx\ta\t-\ny\tb\tc"


def test_rendering_leaves_matrix_untouched():
    before = GAPPED.features
    GAPPED.markdown()
    GAPPED.label_rows(["r0", "r1"])
    assert GAPPED.features == before
