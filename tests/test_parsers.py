import pytest

from fastmcp_page_tools.utils.errors import (
    EmptyResult,
    InvalidInput,
    InvalidPageNumber,
    InvalidRange,
    PageRangeError,
)
from fastmcp_page_tools.utils.parsers import (
    clamp_pages,
    format_page_range,
    is_valid_range_syntax,
    parse_page_range,
    require_pages,
)


def test_parse_page_range():
    assert parse_page_range("1-3,5,7-9", 10) == [0, 1, 2, 4, 6, 7, 8]


def test_parse_drops_out_of_bounds_tail():
    assert parse_page_range("1-1000", 5) == [0, 1, 2, 3, 4]


def test_parse_dedups_overlapping_terms():
    assert parse_page_range("2,2,1-3", 5) == [0, 1, 2]


def test_parse_sorts_terms():
    assert parse_page_range("9,1,4-5", 10) == [0, 3, 4, 8]


def test_parse_ignores_whitespace():
    assert parse_page_range(" 1 - 3 , 5 ", 10) == [0, 1, 2, 4]


def test_parse_skips_empty_segments():
    assert parse_page_range(",1,,3,", 5) == [0, 2]


def test_parse_drops_out_of_bounds_single_pages():
    assert parse_page_range("0,2,11", 10) == [1]


def test_parse_huge_span_is_bounded_by_document():
    assert parse_page_range("3-999999999999", 4) == [2, 3]


def test_parse_range_partly_below_one():
    assert parse_page_range("0-2", 5) == [0, 1]


def test_parse_out_of_bounds_only_returns_empty():
    assert parse_page_range("50-60", 10) == []


def test_parse_zero_total_pages_returns_empty():
    assert parse_page_range("1-3", 0) == []


@pytest.mark.parametrize("expr", ["3--5", "-5", "5-", "a-3", "1-2-3", "1.5-3"])
def test_parse_invalid_range(expr):
    with pytest.raises(InvalidRange) as exc:
        parse_page_range(expr, 10)
    assert exc.value.segment == expr


def test_parse_start_greater_than_end():
    with pytest.raises(InvalidRange, match="start > end"):
        parse_page_range("5-3", 10)


@pytest.mark.parametrize("expr", ["abc", "1.5", "+3", "٣"])
def test_parse_invalid_page_number(expr):
    with pytest.raises(InvalidPageNumber):
        parse_page_range(expr, 10)


def test_parse_fails_fast_on_first_bad_segment():
    with pytest.raises(InvalidPageNumber, match="x"):
        parse_page_range("1-3,x,9-2", 10)


@pytest.mark.parametrize("expr", ["", "   ", None, 12])
def test_parse_invalid_input(expr):
    with pytest.raises(InvalidInput):
        parse_page_range(expr, 10)


@pytest.mark.parametrize("total", ["10", 2.5, True, None])
def test_parse_invalid_total(total):
    with pytest.raises(InvalidInput):
        parse_page_range("1", total)


def test_errors_are_value_errors():
    assert issubclass(PageRangeError, ValueError)
    for cls in (InvalidInput, InvalidRange, InvalidPageNumber, EmptyResult):
        assert issubclass(cls, PageRangeError)


def test_require_pages_raises_on_empty():
    with pytest.raises(EmptyResult, match="No valid pages in range"):
        require_pages("50-60", 10)


def test_require_pages_passes_through():
    assert require_pages("2", 3) == [1]


def test_format_compacts_runs():
    assert format_page_range([0, 1, 2, 4, 6, 7, 8]) == "1-3,5,7-9"


def test_format_empty():
    assert format_page_range([]) == ""


def test_format_single_page_is_bare_number():
    assert format_page_range([4]) == "5"


def test_format_sorts_and_dedups():
    assert format_page_range([8, 0, 2, 1, 1, 2]) == "1-3,9"


def test_format_accepts_generators():
    assert format_page_range(i for i in range(3)) == "1-3"


@pytest.mark.parametrize("bad", [[-1], [1.0], ["2"], [True]])
def test_format_rejects_bad_indices(bad):
    with pytest.raises(InvalidInput):
        format_page_range(bad)


@pytest.mark.parametrize(
    "indices,total",
    [([0], 1), ([0, 1, 2, 4, 6, 7, 8], 10), ([1, 3, 5, 7], 8), (list(range(20)), 20)],
)
def test_round_trip(indices, total):
    assert parse_page_range(format_page_range(indices), total) == indices


def test_format_is_idempotent_through_parse():
    first = format_page_range([5, 0, 1, 2, 9])
    again = format_page_range(parse_page_range(first, 10))
    assert again == first == "1-3,6,10"


@pytest.mark.parametrize("expr", ["1-3,5", " 1 - 3 , 5 ", "7", "1-", "5-3"])
def test_syntax_accepts(expr):
    assert is_valid_range_syntax(expr) is True


@pytest.mark.parametrize("expr", ["3--5", "1,,2", "1;2", "a", "1.5", "", None, 5])
def test_syntax_rejects(expr):
    assert is_valid_range_syntax(expr) is False


def test_clamp_pages_filters_and_dedups():
    assert clamp_pages([3, 0, 1, 6, 3, 5], 5) == [3, 1, 5]
