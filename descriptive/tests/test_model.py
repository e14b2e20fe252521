"""
Tests for descriptive.model module.
"""
from __future__ import annotations

import dataclasses
import pytest

from freqstat.descriptive.model import (
    Analysis,
    AnalysisContext,
    FrequencyTotals,
    GroupedDataItem,
    GroupedRow,
    StatisticalResults,
    UngroupedRow,
    format_bound,
)


class TestGroupedDataItem:
    """Tests for GroupedDataItem class."""

    def test_derived_values(self):
        item = GroupedDataItem(10, 20, 4)

        assert item.midpoint == 15
        assert item.width == 10

    @pytest.mark.parametrize("lower, upper, expected", [
        (0, 10, "0 - 10"),
        (0.5, 10.0, "0.5 - 10"),
        (-2.25, 1, "-2.25 - 1"),
    ])
    def test_label(self, lower, upper, expected):
        assert GroupedDataItem(lower, upper, 1).label == expected

    def test_format_bound(self):
        assert format_bound(3.0) == "3"
        assert format_bound(3.5) == "3.5"


class TestRows:
    """Tests for the tagged table row variants."""

    def test_kind_discriminant(self):
        assert UngroupedRow(value=2, x2=4).kind == "ungrouped"
        row = GroupedRow("0 - 10", 0, 10, 2, 2, 5, 10, 25, 50)
        assert row.kind == "grouped"
        assert row.width == 10

    def test_kind_not_settable(self):
        with pytest.raises(TypeError):
            UngroupedRow(value=2, x2=4, kind="grouped")

    def test_frozen(self):
        row = UngroupedRow(value=2, x2=4)

        with pytest.raises(dataclasses.FrozenInstanceError):
            row.value = 3

    def test_to_dict_rounding(self):
        row = GroupedRow("0 - 1", 0, 1, 3, 3, 0.5, 1.5, 0.25, 0.75)

        assert row.to_dict(decimals=0)['fx'] == 2
        assert row.to_dict()['fx'] == 1.5
        assert UngroupedRow(value=1.5, x2=2.25).to_dict(decimals=1) == {'kind': 'ungrouped', 'value': 1.5, 'x2': 2.2}


class TestStatisticalResults:
    """Tests for StatisticalResults class."""

    def test_rounded(self):
        results = StatisticalResults(
            mean=1 / 3, median=2 / 3, mode=(1 / 7, 2 / 7), variance=0.123456789, standard_deviation=0.351364,
        )

        rounded = results.rounded()

        assert rounded.mean == 0.3333
        assert rounded.median == 0.6667
        assert rounded.mode == (0.1429, 0.2857)
        assert rounded.variance == 0.1235
        assert rounded.standard_deviation == 0.3514
        assert results.mean == 1 / 3

    def test_rounded_no_mode(self):
        results = StatisticalResults(mean=1, median=1, mode=None, variance=0, standard_deviation=0)

        assert results.rounded().mode is None
        assert results.to_dict()['mode'] is None

    def test_to_dict(self):
        results = StatisticalResults(mean=1, median=2, mode=(1, 2), variance=4, standard_deviation=2)

        assert results.to_dict() == {
            'mean': 1, 'median': 2, 'mode': [1, 2], 'variance': 4, 'standard_deviation': 2,
        }


class TestAnalysisContext:
    """Tests for AnalysisContext engine selection."""

    def test_ungrouped(self):
        assert AnalysisContext(data=[1, 2]).engine_id() == "ungrouped"

    def test_grouped_intervals(self):
        context = AnalysisContext(data_type="grouped", grouped_data=[GroupedDataItem(0, 10, 1)])

        assert context.engine_id() == "grouped"

    def test_grouped_raw_data_is_binned(self):
        assert AnalysisContext(data_type="grouped", data=[1, 2, 3]).engine_id() == "binned"

    def test_unknown_data_type(self):
        with pytest.raises(ValueError):
            AnalysisContext(data_type="weighted").engine_id()

    def test_reset_keeps_mode(self):
        context = AnalysisContext(data_type="grouped", data=[1], grouped_data=[GroupedDataItem(0, 1, 1)])

        context.reset()

        assert context.data == []
        assert context.grouped_data == []
        assert context.data_type == "grouped"


class TestAnalysis:
    """Tests for Analysis export."""

    def test_to_dict(self):
        analysis = Analysis(
            engine_id="grouped",
            statistics=StatisticalResults(mean=1 / 3, median=0.5, mode=(0.5,), variance=0.1, standard_deviation=0.31622776),
            rows=(GroupedRow("0 - 1", 0, 1, 3, 3, 0.5, 1.5, 0.25, 0.75),),
            totals=FrequencyTotals(total_frequency=3, total_fx=1.5, total_fx2=0.75),
        )

        data = analysis.to_dict()

        assert data['engine_id'] == "grouped"
        assert data['statistics']['mean'] == 0.3333
        assert data['statistics']['standard_deviation'] == 0.3162
        assert data['rows'][0]['label'] == "0 - 1"
        assert data['totals'] == {'total_frequency': 3, 'total_fx': 1.5, 'total_fx2': 0.75}
        assert 'processed' not in data

    def test_to_dict_full_precision(self):
        analysis = Analysis(
            engine_id="ungrouped",
            statistics=StatisticalResults(mean=1 / 3, median=0, mode=None, variance=0, standard_deviation=0),
            rows=(),
        )

        assert analysis.to_dict(decimals=None)['statistics']['mean'] == 1 / 3
        assert 'totals' not in analysis.to_dict()
