import pytest

from kiwis import Series
from kiwis.io.formats.format import SeriesFormatter, save_to_buffer, to_fixed


@pytest.mark.parametrize(
    "number, digits, expected",
    [
        (2.5, 0, "3"),
        (-2.5, 0, "-3"),
        (1.005, 2, "1.00"),
        (1.45, 1, "1.4"),
        (0.125, 2, "0.13"),
        (7, 2, "7.00"),
        (-0.0, 1, "0.0"),
        (-0.04, 1, "-0.0"),
        (123456789, 0, "123456789"),
        (1e21, 0, "1000000000000000000000"),
        (0.1, 20, "0.10000000000000000555"),
    ],
)
def test_to_fixed(number, digits, expected):
    assert to_fixed(number, digits) == expected


def test_to_fixed_many_digits():
    result = to_fixed(1 / 3, 100)
    assert len(result) == 102
    assert result.startswith("0.3333333333333333")


class TestSeriesFormatter:
    def test_truncation_flag(self):
        fmt = SeriesFormatter(Series(range(5)), max_rows=3)
        assert fmt.is_truncated_vertically
        assert fmt.tr_values == [0, 1, 2]

        fmt = SeriesFormatter(Series(range(3)), max_rows=3)
        assert not fmt.is_truncated_vertically

    def test_footer(self):
        assert SeriesFormatter(Series([1, 2])).to_string().endswith("\n\nLength: 2")

    def test_max_colwidth(self):
        s = Series(["abcdefgh", "ab"])
        result = SeriesFormatter(s, max_colwidth=6).to_string()
        assert result.split("\n")[:2] == ["0 | abc...", "1 |     ab"]


def test_save_to_buffer_returns_string():
    assert save_to_buffer("abc") == "abc"
