"""Pagination window calculator.

Turns a (page, page size, window size, total count) request into the
number of pages and the run of page numbers a list view should link to.
"""

from dataclasses import dataclass, field

from blog_console.domain.exceptions import InvalidArgumentError

INVALID_PAGINATION = "invalid_pagination"


@dataclass(frozen=True)
class PaginationWindow:
    page_count: int
    page_nums: list[int] = field(default_factory=list)


def _require(name: str, value: object, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise InvalidArgumentError(
            INVALID_PAGINATION, f"{name} must be an integer >= {minimum}, got {value!r}"
        )
    return value


def _to_int(name: str, raw: int | str) -> int:
    """Read a page number from a URL segment; ints pass through untouched."""
    if isinstance(raw, str):
        text = raw.strip()
        if not text.isdecimal():
            raise InvalidArgumentError(
                INVALID_PAGINATION, f"{name} must be a positive integer, got {raw!r}"
            )
        return int(text)
    return raw


@dataclass(frozen=True)
class PaginationRequest:
    """A validated (page, page size, window size) triple from a list request."""

    current_page: int
    page_size: int
    window_size: int

    @classmethod
    def parse(
        cls, current_page: int | str, page_size: int | str, window_size: int | str
    ) -> "PaginationRequest":
        """Build a request from raw path segments."""
        return cls(
            _to_int("current_page", current_page),
            _to_int("page_size", page_size),
            _to_int("window_size", window_size),
        )

    def __post_init__(self) -> None:
        _require("current_page", self.current_page, 1)
        _require("page_size", self.page_size, 1)
        _require("window_size", self.window_size, 1)

    @property
    def offset(self) -> int:
        return page_offset(self.current_page, self.page_size)

    def window(self, total_count: int) -> PaginationWindow:
        return paginate(self.current_page, self.page_size, self.window_size, total_count)


def page_count(total_count: int, page_size: int) -> int:
    _require("total_count", total_count, 0)
    _require("page_size", page_size, 1)
    return -(-total_count // page_size)


def page_offset(current_page: int, page_size: int) -> int:
    """Row offset of the first item on ``current_page``."""
    _require("current_page", current_page, 1)
    _require("page_size", page_size, 1)
    return (current_page - 1) * page_size


def paginate(
    current_page: int,
    page_size: int,
    window_size: int,
    total_count: int,
) -> PaginationWindow:
    """Compute the page count and a window of page numbers centred on the current page.

    A ``current_page`` past the last page is accepted; the window then
    clamps to the tail of the page range.
    """
    _require("current_page", current_page, 1)
    _require("window_size", window_size, 1)
    pages = page_count(total_count, page_size)
    if pages == 0:
        return PaginationWindow(page_count=0)

    start = max(1, current_page - window_size // 2)
    end = start + window_size - 1
    if end > pages:
        end = pages
        start = max(1, end - window_size + 1)

    return PaginationWindow(page_count=pages, page_nums=list(range(start, end + 1)))
