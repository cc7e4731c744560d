"""Unit tests for adaptive histogram binning."""

from __future__ import annotations

import math

import pytest

from tableprofile.models import ProfilerSettings
from tableprofile.profiling import (
    AdaptiveHistogramBinner,
    Histogram,
    NoData,
    bin_values,
    parse_number,
    suggest_bin_count,
)

ONE_TO_TEN = [str(i) for i in range(1, 11)]


class TestParseNumber:
    """Test parse_number."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("1", 1.0), (" 2.5 ", 2.5), ("-3e2", -300.0), (4, 4.0), (1.25, 1.25)],
    )
    def test_parses_numbers(self, value, expected):
        """Test numeric text and numbers parse to floats."""
        assert parse_number(value) == expected

    @pytest.mark.parametrize(
        "value", [None, "", "x", "12abc", "nan", "inf", float("nan"), True]
    )
    def test_rejects_invalid(self, value):
        """Test nulls, text, NaN, infinities and booleans are rejected."""
        assert parse_number(value) is None


class TestSuggestBinCount:
    """Test the cube-root bin count rule."""

    def test_small_samples_clamp_to_minimum(self):
        """Test few values still give five bins."""
        assert suggest_bin_count(1) == 5
        assert suggest_bin_count(10) == 5

    def test_grows_with_sample_size(self):
        """Test the rule value is used inside the range."""
        # ceil(2 * 100 ** (1/3)) = ceil(9.28) = 10
        assert suggest_bin_count(100) == 10

    def test_large_samples_clamp_to_maximum(self):
        """Test many values cap at fifteen bins."""
        assert suggest_bin_count(10_000) == 15
        assert suggest_bin_count(10**9) == 15

    @pytest.mark.parametrize("n", [1, 2, 7, 30, 64, 125, 343, 421, 1000, 5000])
    def test_always_within_bounds(self, n):
        """Test the automatic bin count stays within [5, 15]."""
        assert 5 <= suggest_bin_count(n) <= 15


class TestBinValues:
    """Test AdaptiveHistogramBinner.bin via bin_values."""

    def test_one_to_ten(self):
        """Test ten values give five bins of width 1.8 over [1, 10]."""
        result = bin_values(ONE_TO_TEN)

        assert isinstance(result, Histogram)
        assert result.bin_count == 5
        assert result.bin_width == pytest.approx(1.8)
        assert result.min_value == 1.0
        assert result.max_value == 10.0
        assert result.counts == [2, 2, 2, 2, 2]
        assert result.total == 10
        assert result.bar_width == 5
        assert result.edges == pytest.approx([1.0, 2.8, 4.6, 6.4, 8.2, 10.0])

    def test_bins_are_contiguous_and_cover_range(self):
        """Test each bin starts where the previous ended, ending at max."""
        result = bin_values([str(x) for x in (0.5, 3, 7.25, 11, 19.9, 4, 4)])

        assert result.bins[0].range_start == result.min_value
        assert result.bins[-1].range_end == result.max_value
        for previous, current in zip(result.bins, result.bins[1:]):
            assert current.range_start == pytest.approx(previous.range_end)

    def test_maximum_lands_in_last_bin(self):
        """Test the maximum value is counted in the last bin."""
        result = bin_values(["0", "100"], bin_count=4)
        assert result.counts == [1, 0, 0, 1]

    def test_invalid_values_are_excluded(self):
        """Test unparseable entries are skipped, not raised."""
        result = bin_values(["1", "x", None, "3", "", "5"])
        assert result.total == 3

    def test_all_text_is_no_data(self):
        """Test a column of text returns NoData."""
        result = bin_values(["x", "y"])
        assert isinstance(result, NoData)
        assert result.reason == "no valid numeric values"

    def test_empty_is_no_data(self):
        """Test an empty column returns NoData."""
        result = bin_values([])
        assert isinstance(result, NoData)
        assert result.reason == "empty column"

    def test_degenerate_range(self):
        """Test identical values land in one bin without dividing by zero."""
        result = bin_values(["5", "5", "5"])

        assert isinstance(result, Histogram)
        assert result.degenerate
        assert result.bin_width > 0
        assert result.counts == [3]
        assert result.total == 3
        assert result.max_frequency == 3
        assert result.edges == [5.0, 6.0]

    def test_range_wider_than_largest_float(self):
        """Test a span that overflows a float is still binned end to end."""
        result = bin_values(["-1.7e308", "1.7e308"])

        assert isinstance(result, Histogram)
        assert not result.degenerate
        assert result.counts == [1, 0, 0, 0, 1]
        assert math.isfinite(result.bin_width)
        assert all(math.isfinite(edge) for edge in result.edges)
        assert result.edges[0] == -1.7e308
        assert result.edges[-1] == 1.7e308
        assert result.edges == sorted(result.edges)

    def test_overflowing_single_bin_collapses(self):
        """Test one bin over an overflowing span falls back to the single bin."""
        result = bin_values(["-1.7e308", "1.7e308"], bin_count=1)

        assert result.degenerate
        assert result.counts == [2]

    def test_range_narrower_than_bin_count(self):
        """Test a range whose bin width underflows to zero gives one bin."""
        result = bin_values(["0", "5e-324"])

        assert isinstance(result, Histogram)
        assert result.degenerate
        assert result.counts == [2]
        assert result.bin_width == 1.0

    def test_explicit_bin_count_overrides_bounds(self):
        """Test an explicit bin count is used even outside [5, 15]."""
        assert bin_values(ONE_TO_TEN, bin_count=3).bin_count == 3
        assert bin_values(ONE_TO_TEN, bin_count=20).bin_count == 20

    def test_invalid_bin_count(self):
        """Test a bin count below one raises ValueError."""
        with pytest.raises(ValueError, match="bin_count"):
            bin_values(ONE_TO_TEN, bin_count=0)

    def test_numbers_accepted_directly(self):
        """Test native numbers are binned like their text form."""
        assert bin_values([1, 2.5, 4]).counts == bin_values(["1", "2.5", "4"]).counts

    def test_large_integer_strings(self):
        """Test decimal strings from BIGINT columns are binned."""
        result = bin_values(["9223372036854775807", "0"])
        assert result.total == 2
        assert result.counts[-1] == 1

    @pytest.mark.parametrize(
        "values",
        [ONE_TO_TEN, ["5", "5"], [str(i * i) for i in range(200)], ["-1", "x", "2"]],
    )
    def test_total_equals_valid_count(self, values):
        """Test bin counts sum to the number of parseable values."""
        valid = [v for v in values if parse_number(v) is not None]
        assert bin_values(values).total == len(valid)

    def test_idempotent(self):
        """Test binning identical input twice gives identical output."""
        values = [str(math.sin(i) * 100) for i in range(250)]
        assert bin_values(values, display_width=320) == bin_values(
            values, display_width=320
        )

    def test_does_not_mutate_input(self):
        """Test the input sequence is left untouched."""
        values = ["3", "1", "2"]
        bin_values(values)
        assert values == ["3", "1", "2"]


class TestBarWidth:
    """Test display-width-aware bar widths."""

    def test_default_without_display_width(self):
        """Test bar width is 5 when no display width is given."""
        assert AdaptiveHistogramBinner().bar_width(5) == 5

    def test_few_bins_get_wider_bars(self):
        """Test five or fewer bins divide by 1.5."""
        # 300 / 5 / 1.5 = 40
        assert AdaptiveHistogramBinner().bar_width(5, 300) == pytest.approx(40)

    def test_many_bins_divide_by_two(self):
        """Test more than five bins divide by 2."""
        # 300 / 10 / 2 = 15
        assert AdaptiveHistogramBinner().bar_width(10, 300) == pytest.approx(15)

    def test_floor_of_five(self):
        """Test narrow displays never drop below 5."""
        assert AdaptiveHistogramBinner().bar_width(15, 40) == 5
        assert AdaptiveHistogramBinner().bar_width(5, 0) == 5

    def test_histogram_uses_display_width(self):
        """Test bin_values passes display width to the bar width."""
        result = bin_values(ONE_TO_TEN, display_width=300)
        assert result.bar_width == pytest.approx(40)


class TestBinnerSettings:
    """Test settings-driven binning."""

    def test_custom_bounds(self):
        """Test configured bin bounds replace the defaults."""
        binner = AdaptiveHistogramBinner(ProfilerSettings(min_bins=2, max_bins=3))
        assert binner.bin(ONE_TO_TEN).bin_count == 3

    def test_custom_bar_width_floor(self):
        """Test the configured minimum bar width is applied."""
        binner = AdaptiveHistogramBinner(ProfilerSettings(min_bar_width=8))
        assert binner.bin(ONE_TO_TEN).bar_width == 8
