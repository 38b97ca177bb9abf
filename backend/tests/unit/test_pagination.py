"""Unit tests for the pagination window calculator."""

import pytest

from blog_console.domain.exceptions import InvalidArgumentError
from blog_console.domain.pagination import (
    PaginationRequest,
    page_count,
    page_offset,
    paginate,
)


def test_page_count_rounds_up():
    assert page_count(95, 10) == 10
    assert page_count(100, 10) == 10
    assert page_count(101, 10) == 11
    assert page_count(1, 10) == 1


def test_no_items_means_no_pages():
    window = paginate(1, 10, 5, 0)
    assert window.page_count == 0
    assert window.page_nums == []


def test_window_centres_on_current_page():
    assert paginate(5, 10, 3, 100).page_nums == [4, 5, 6]


def test_window_clamps_at_the_end():
    assert paginate(10, 10, 5, 100).page_nums == [6, 7, 8, 9, 10]


def test_window_clamps_at_the_start():
    assert paginate(1, 10, 5, 100).page_nums == [1, 2, 3, 4, 5]
    assert paginate(2, 10, 5, 100).page_nums == [1, 2, 3, 4, 5]


def test_all_pages_shown_when_fewer_than_window():
    window = paginate(2, 10, 20, 35)
    assert window.page_count == 4
    assert window.page_nums == [1, 2, 3, 4]


def test_even_window_sizes():
    assert paginate(5, 1, 4, 10).page_nums == [3, 4, 5, 6]


def test_current_page_beyond_last_page_is_accepted():
    window = paginate(50, 10, 5, 100)
    assert window.page_count == 10
    assert window.page_nums == [6, 7, 8, 9, 10]


@pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 57, 200])
@pytest.mark.parametrize("window_size", [1, 2, 5, 7])
@pytest.mark.parametrize("current", [1, 3, 6, 20])
def test_window_is_consecutive_and_bounded(total, window_size, current):
    window = paginate(current, 10, window_size, total)
    assert window.page_count == -(-total // 10)
    assert len(window.page_nums) == min(window_size, window.page_count)
    if window.page_nums:
        assert window.page_nums[0] >= 1
        assert window.page_nums[-1] <= window.page_count
        assert window.page_nums == list(
            range(window.page_nums[0], window.page_nums[0] + len(window.page_nums))
        )


@pytest.mark.parametrize(
    "args",
    [
        (0, 10, 5, 10),
        (1, 0, 5, 10),
        (1, 10, 0, 10),
        (1, 10, 5, -1),
        (True, 10, 5, 10),
        ("1", 10, 5, 10),
    ],
)
def test_invalid_arguments_are_rejected(args):
    with pytest.raises(InvalidArgumentError) as exc_info:
        paginate(*args)
    assert exc_info.value.message_key == "invalid_pagination"


def test_offset():
    assert page_offset(1, 20) == 0
    assert page_offset(3, 20) == 40


def test_pagination_request_validates_eagerly():
    with pytest.raises(InvalidArgumentError):
        PaginationRequest(current_page=1, page_size=10, window_size=0)


def test_pagination_request_window():
    request = PaginationRequest(current_page=3, page_size=10, window_size=3)
    assert request.offset == 20
    window = request.window(95)
    assert window.page_count == 10
    assert window.page_nums == [2, 3, 4]


def test_pagination_request_parses_path_segments():
    request = PaginationRequest.parse("2", " 10 ", 3)
    assert request == PaginationRequest(current_page=2, page_size=10, window_size=3)


@pytest.mark.parametrize("segment", ["abc", "", "-1", "1.5", "0"])
def test_pagination_request_rejects_bad_segments(segment):
    with pytest.raises(InvalidArgumentError) as exc_info:
        PaginationRequest.parse(segment, "10", "5")
    assert exc_info.value.message_key == "invalid_pagination"
