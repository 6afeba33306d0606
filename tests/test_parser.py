from __future__ import annotations

import pytest

from linebalance.tabular import EmptyInputError, parse_csv_to_tasks, parse_table


def test_parse_table_trims_headers_and_values() -> None:
    table = parse_table(" name , qty \n bolt , 4 \nnut,7\n")

    assert table.headers == ["name", "qty"]
    assert table.rows == [{"name": "bolt", "qty": "4"}, {"name": "nut", "qty": "7"}]
    assert table.row_count == 2


def test_short_rows_leave_trailing_fields_absent() -> None:
    table = parse_table("a,b,c\n1,2\n3,4,5")

    assert table.rows[0] == {"a": "1", "b": "2"}
    assert table.column("c") == [None, "5"]


def test_blank_lines_are_skipped() -> None:
    table = parse_table("a,b\n1,2\n\n   \n3,4")

    assert table.row_count == 2


def test_windows_line_endings() -> None:
    table = parse_table("a,b\r\n1,2\r\n3,4\r\n")

    assert table.headers == ["a", "b"]
    assert table.rows[-1] == {"a": "3", "b": "4"}


def test_quoted_commas_are_split_naively() -> None:
    table = parse_table('city,pop\n"Paris, FR",2100000')

    assert table.rows[0] == {"city": '"Paris', "pop": 'FR"'}


@pytest.mark.parametrize("text", ["", "   \n  ", "a,b,c", "a,b\n\n\n", None])
def test_no_data_rows_raises_empty_input(text) -> None:
    with pytest.raises(EmptyInputError):
        parse_table(text)


def test_parse_csv_to_tasks_reads_id_time_preds() -> None:
    tasks = parse_csv_to_tasks("id,time,preds\nA,30,\nB,20,A\nC,40,A\nD,15,B; C")

    assert [t.id for t in tasks] == ["A", "B", "C", "D"]
    assert [t.time for t in tasks] == [30, 20, 40, 15]
    assert tasks[0].preds == []
    assert tasks[3].preds == ["B", "C"]


def test_parse_csv_to_tasks_drops_bad_rows() -> None:
    text = "\n".join([
        "id,time,preds",
        "A,10",
        "lonely",
        "B,abc,A",
        "C,-5,A",
        ",3",
        "D,2.5,A;;ghost",
    ])

    tasks = parse_csv_to_tasks(text)

    assert [t.id for t in tasks] == ["A", "D"]
    assert tasks[1].time == 2.5
    assert tasks[1].preds == ["A", "ghost"]


@pytest.mark.parametrize("text", ["", "id,time,preds", None, 12])
def test_parse_csv_to_tasks_never_raises(text) -> None:
    assert parse_csv_to_tasks(text) == []
