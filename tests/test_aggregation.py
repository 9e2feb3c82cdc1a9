import os
import sys
# ensure repo root is on path so tests can import the engine modules
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from itertools import permutations

import pytest

from aggregation import (
    aggregate_annual_achievement,
    aggregate_month_achievement,
    aggregate_quarter_achievement,
    aggregate_values,
)
from models import Entry, Indicator, Targets


def _indicator(measurement_type="cumulative"):
    return Indicator(id="1", name="Ha of land", targets=Targets(q4=18713, annual=18713), measurement_type=measurement_type)


def _q4_entries():
    return [
        Entry("1", "q4", "April", 5000),
        Entry("1", "q4", "May", 8000),
        Entry("1", "q4", "June", 10713),
    ]


def test_cumulative_uses_max_in_any_order():
    ind = _indicator()
    for order in permutations(_q4_entries()):
        assert aggregate_quarter_achievement(ind, list(order), "q4") == 10713


def test_percentage_uses_mean():
    ind = _indicator("percentage")
    entries = [Entry("1", "q1", "July", 50), Entry("1", "q1", "August", 62), Entry("1", "q1", "September", 71)]
    assert aggregate_quarter_achievement(ind, entries, "q1") == pytest.approx(61.0)


def test_other_types_sum():
    ind = _indicator("decreasing")
    entries = [Entry("1", "q1", "July", 3), Entry("1", "q1", "August", 4)]
    assert aggregate_quarter_achievement(ind, entries, "q1") == 7


def test_window_excludes_other_quarters_and_indicators():
    ind = _indicator()
    entries = _q4_entries() + [Entry("1", "q3", "March", 99999), Entry("2", "q4", "June", 99999)]
    assert aggregate_quarter_achievement(ind, entries, "q4") == 10713


def test_months_narrow_the_window():
    ind = _indicator()
    assert aggregate_quarter_achievement(ind, _q4_entries(), "q4", months=["Apr", "May"]) == 8000


def test_empty_month_list_counts_whole_quarter():
    ind = _indicator()
    assert aggregate_quarter_achievement(ind, _q4_entries(), "q4", months=[]) == 10713


def test_unknown_month_in_filter_matches_nothing():
    ind = _indicator()
    entries = _q4_entries() + [Entry("1", "q4", "Smarch", 99999)]
    assert aggregate_quarter_achievement(ind, entries, "q4", months=["Smarch"]) == 0
    assert aggregate_quarter_achievement(ind, entries, "q4", months=["May", "Smarch"]) == 8000


def test_empty_window_is_zero():
    assert aggregate_quarter_achievement(_indicator(), [], "q1") == 0
    assert aggregate_values([], "percentage") == 0


def test_annual_cumulative_is_max_across_year():
    ind = _indicator()
    entries = [Entry("1", "q1", "September", 4000)] + _q4_entries()
    assert aggregate_annual_achievement(ind, entries) == 10713


def test_month_achievement():
    ind = _indicator()
    entries = _q4_entries() + [Entry("1", "q4", "May", 7500)]
    assert aggregate_month_achievement(ind, entries, "May") == 8000
    assert aggregate_month_achievement(_indicator("percentage"), entries, "May") == pytest.approx(7750)
    assert aggregate_month_achievement(ind, entries, "July") == 0
