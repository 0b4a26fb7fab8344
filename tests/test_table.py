import pytest

from footleague.table import ResultTable


def test_update_sets_columns_from_first_row():
    table = ResultTable()
    table.update([["a", "b", "c"], ["d"], ["e", "f", "g", "h"]])
    assert table.column_count == 3
    assert table.rows == [["a", "b", "c"], ["d", "", ""], ["e", "f", "g"]]
    assert len(table) == 3


def test_update_converts_cells_to_text():
    table = ResultTable([[7, "Ivanov"]])
    assert list(table) == [("7", "Ivanov")]


def test_clear_empties_table():
    table = ResultTable([["a", "b"]])
    table.clear()
    assert len(table) == 0
    assert table.column_count == 0


def test_delete_row_removes_it():
    table = ResultTable([["a"], ["b"], ["c"]])
    assert table.delete_row(1) == ["b"]
    assert table.rows == [["a"], ["c"]]


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_delete_row_rejects_bad_index(index):
    table = ResultTable([["a"], ["b"], ["c"]])
    with pytest.raises(IndexError):
        table.delete_row(index)
    assert len(table) == 3


def test_save_writes_tab_terminated_cells(tmp_path):
    target = tmp_path / "out.txt"
    ResultTable([["a", "b"], ["c", "d"]]).save(target)
    assert target.read_text(encoding="utf-8") == "a\tb\t\nc\td\t\n"


def test_save_empty_table(tmp_path):
    target = tmp_path / "empty.txt"
    ResultTable().save(target)
    assert target.read_text(encoding="utf-8") == ""


def test_save_to_missing_directory_fails(tmp_path):
    with pytest.raises(OSError):
        ResultTable([["a"]]).save(tmp_path / "missing" / "out.txt")