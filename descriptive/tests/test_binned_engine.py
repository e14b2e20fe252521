"""
Tests for automatic class intervals and the binned engine.
"""
from __future__ import annotations

import pytest

from freqstat.errors import DegenerateClassWidthError, DegenerateInputError, EmptyDatasetError
from freqstat.descriptive.engines.binned import (
    AutoBinningEngine,
    build_frequency_table,
    class_width_for,
    process_data,
    sturges_class_count,
)
from freqstat.descriptive.model import AnalysisContext


class TestSturgesClassCount:
    """Tests for Sturges' Rule."""

    @pytest.mark.parametrize("n, expected", [
        (1, 1),
        (2, 3),
        (3, 3),
        (5, 4),
        (12, 5),
        (100, 8),
    ])
    def test_class_count(self, n, expected):
        assert sturges_class_count(n) == expected

    def test_no_observations(self):
        with pytest.raises(DegenerateInputError):
            sturges_class_count(0)


class TestClassWidth:
    """Tests for class width selection."""

    def test_rounds_up(self):
        assert class_width_for(36, 5) == 8

    def test_zero_range_substitutes_one(self):
        assert class_width_for(0, 3) == 1

    def test_zero_range_raise_policy(self):
        with pytest.raises(DegenerateClassWidthError):
            class_width_for(0, 3, zero_width_policy="raise")

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            class_width_for(10, 3, zero_width_policy="ignore")


class TestBuildFrequencyTable:
    """Tests for counting observations into classes."""

    def test_half_open_classes(self):
        """A value on a boundary belongs to the upper class."""
        rows = build_frequency_table([0, 4, 8, 11], 0, 3, 4)

        assert [row.frequency for row in rows] == [1, 1, 2]

    def test_last_class_closed(self):
        """The maximum on the last upper bound is still counted."""
        rows = build_frequency_table([0, 1, 2, 3, 6], 0, 3, 2)

        assert [row.frequency for row in rows] == [2, 2, 1]
        assert rows[-1].upper_bound == 6

    def test_empty_interior_class_kept(self):
        rows = build_frequency_table([0, 0, 10], 0, 3, 4)

        assert [row.frequency for row in rows] == [2, 0, 1]
        assert [row.cumulative_frequency for row in rows] == [2, 2, 3]

    def test_empty_last_class_dropped(self):
        rows = build_frequency_table([0, 1], 0, 3, 1)

        assert [row.label for row in rows] == ["0.0 - 1.0", "1.0 - 2.0"]
        assert rows[-1].cumulative_frequency == 2

    def test_labels_one_decimal(self):
        rows = build_frequency_table([1.5, 2.5, 3.7], 1.5, 3, 1)

        assert [row.label for row in rows] == ["1.5 - 2.5", "2.5 - 3.5", "3.5 - 4.5"]
        assert [row.midpoint for row in rows] == [2.0, 3.0, 4.0]


class TestProcessData:
    """Tests for the full binning flow."""

    def test_sample(self, sample_values):
        processed = process_data(sample_values)

        assert processed.range == 36
        assert processed.class_count == 5
        assert processed.class_width == 8
        assert [row.label for row in processed.frequency_table] == [
            "12.0 - 20.0", "20.0 - 28.0", "28.0 - 36.0", "36.0 - 44.0", "44.0 - 52.0",
        ]
        assert [row.frequency for row in processed.frequency_table] == [3, 2, 3, 2, 2]

    def test_frequencies_sum_to_input_length(self, sample_values):
        processed = process_data(sample_values)

        assert sum(row.frequency for row in processed.frequency_table) == 12
        assert processed.frequency_table[-1].cumulative_frequency == 12
        assert processed.total_frequency == 12

    def test_totals(self, sample_values):
        processed = process_data(sample_values)

        assert processed.total_fx == 368
        assert processed.total_fx2 == 12800

    def test_statistics(self, sample_values):
        statistics = process_data(sample_values).statistics

        assert statistics.mean == pytest.approx(368 / 12)
        assert statistics.median == pytest.approx(28 + (1 / 3) * 8)
        assert statistics.mode == pytest.approx((18.0,))
        assert statistics.variance == pytest.approx(1136 / 9)

    def test_shortcut_variance_agrees(self, sample_values):
        shortcut = process_data(sample_values, variance_method="shortcut").statistics
        two_pass = process_data(sample_values).statistics

        assert shortcut.variance == pytest.approx(two_pass.variance)

    def test_sorted_copy(self):
        values = [5, 1, 3]
        processed = process_data(values)

        assert processed.sorted_data == (1, 3, 5)
        assert values == [5, 1, 3]

    def test_single_observation(self):
        """One class of width 1 holding the value; no spread."""
        processed = process_data([5])

        assert processed.class_count == 1
        assert processed.class_width == 1
        assert processed.statistics.median == processed.statistics.mean
        assert processed.statistics.standard_deviation == 0

    def test_identical_values(self):
        processed = process_data([7, 7, 7])

        assert [row.frequency for row in processed.frequency_table] == [3, 0]
        assert processed.statistics.mean == pytest.approx(7.5)
        assert processed.statistics.median == pytest.approx(7.5)
        assert processed.statistics.mode == pytest.approx((7.5,))
        assert processed.statistics.variance == 0

    def test_identical_values_raise_policy(self):
        with pytest.raises(DegenerateClassWidthError):
            process_data([7, 7, 7], zero_width_policy="raise")

    def test_empty(self):
        with pytest.raises(EmptyDatasetError):
            process_data([])

    def test_idempotent(self, sample_values):
        assert process_data(sample_values) == process_data(sample_values)


class TestAutoBinningEngine:
    """Tests for AutoBinningEngine."""

    def test_analyze(self, sample_values):
        context = AnalysisContext(data_type="grouped", data=sample_values)

        analysis = AutoBinningEngine().analyze(context)

        assert analysis.engine_id == "binned"
        assert analysis.processed is not None
        assert analysis.rows == analysis.processed.frequency_table
        assert analysis.statistics == analysis.processed.statistics
        assert analysis.totals.total_frequency == 12
        assert analysis.totals.total_fx == 368

    def test_invalid_policy(self):
        with pytest.raises(ValueError):
            AutoBinningEngine(zero_width_policy="ignore")
