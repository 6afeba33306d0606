from __future__ import annotations

import pytest

from linebalance.schemas import ChartRequest
from linebalance.tabular import CHART_POINT_LIMIT, build_chart_data, get_raw_data_for_chart


def test_extracts_numeric_pairs() -> None:
    points = get_raw_data_for_chart("a,b\n1,2\n3,4", "a", "b")

    assert points == [{"a": 1, "b": 2}, {"a": 3, "b": 4}]
    assert all(isinstance(v, float) for p in points for v in p.values())


def test_values_are_coerced_independently() -> None:
    points = get_raw_data_for_chart("month,revenue\nJan,10.5\nFeb,n/a\n3, 7 ", "month", "revenue")

    assert points == [
        {"month": "Jan", "revenue": 10.5},
        {"month": "Feb", "revenue": "n/a"},
        {"month": 3.0, "revenue": 7.0},
    ]


def test_columns_can_be_selected_in_any_order() -> None:
    points = get_raw_data_for_chart("a,b,c\n1,2,3", "c", "a")

    assert points == [{"c": 3.0, "a": 1.0}]


@pytest.mark.parametrize("x_key,y_key", [("a", "missing"), ("missing", "b"), ("A", "b")])
def test_unknown_column_gives_empty_result(x_key, y_key) -> None:
    assert get_raw_data_for_chart("a,b\n1,2", x_key, y_key) == []


@pytest.mark.parametrize("text", ["", "a,b", None])
def test_no_data_rows_gives_empty_result(text) -> None:
    assert get_raw_data_for_chart(text, "a", "b") == []


def test_rows_missing_a_field_are_skipped() -> None:
    points = get_raw_data_for_chart("a,b\n1\n\n2,3\n4,", "a", "b")

    assert points == [{"a": 2.0, "b": 3.0}, {"a": 4.0, "b": ""}]


def test_point_count_is_capped() -> None:
    text = "x,y\n" + "\n".join(f"{i},{i * 2}" for i in range(CHART_POINT_LIMIT + 500))

    points = get_raw_data_for_chart(text, "x", "y")

    assert len(points) == CHART_POINT_LIMIT
    assert points[-1] == {"x": CHART_POINT_LIMIT - 1, "y": (CHART_POINT_LIMIT - 1) * 2}


def test_build_chart_data_extracts_from_text() -> None:
    request = ChartRequest(title="Revenue", type="line", xKey="a", yKey="b")

    chart = build_chart_data("a,b\n1,2\n3,4", request)

    assert chart.to_dict() == {
        "title": "Revenue",
        "type": "line",
        "data": [{"a": 1.0, "b": 2.0}, {"a": 3.0, "b": 4.0}],
        "xKey": "a",
        "yKey": "b",
    }


def test_build_chart_data_prefers_supplied_points() -> None:
    request = ChartRequest(title="Share", type="pie", x_key="k", y_key="v", data=[{"k": "x", "v": 1}])

    chart = build_chart_data("a,b\n1,2", request)

    assert chart.data == [{"k": "x", "v": 1}]


def test_underscore_grouped_digits_stay_strings() -> None:
    points = get_raw_data_for_chart("a,b\n1_0,2\n1_000,3", "a", "b")

    assert points == [{"a": "1_0", "b": 2.0}, {"a": "1_000", "b": 3.0}]


def test_non_ascii_digits_stay_strings() -> None:
    points = get_raw_data_for_chart("a,b\n1,٣\n2,١٢", "a", "b")

    assert points == [{"a": 1.0, "b": "٣"}, {"a": 2.0, "b": "١٢"}]
