import os
import sys
# ensure repo root is on path so tests can import the engine modules
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from composite import (
    annual_sub_details,
    composite_performance,
    month_sub_details,
    quarter_sub_details,
    resolve_sub_indicators,
    sum_sub_values,
)
from models import Catalog, Entry, Indicator, Targets


def _catalog():
    return Catalog([
        Indicator("p", "Number of cows vaccinated", sub_indicator_ids={"small": "s1", "large": "s2", "ghost": "missing"}),
        Indicator("s1", "Small sub", targets=Targets(q1=100, annual=100)),
        Indicator("s2", "Large sub", targets=Targets(q1=10000, annual=100)),
    ])


def test_unresolved_sub_ids_are_skipped():
    catalog = _catalog()
    pairs = resolve_sub_indicators(catalog.get("p"), catalog)
    assert [key for key, _ in pairs] == ["small", "large"]
    assert resolve_sub_indicators(catalog.get("p"), None) == []


def test_sub_values_are_summed_not_maxed():
    entries = [
        Entry("p", "q1", "July", sub_values={"small": 30}),
        Entry("p", "q1", "August", sub_values={"small": 50}),
    ]
    assert sum_sub_values(entries, "small") == 80


def test_simple_mean_ignores_target_size():
    catalog = _catalog()
    entries = [
        Entry("p", "q1", "July", sub_values={"small": 80, "large": 1000}),
        Entry("p", "q1", "August", sub_values={"large": 3000}),
    ]
    details = quarter_sub_details(catalog.get("p"), entries, "q1", catalog)
    assert [d.performance for d in details] == pytest.approx([80.0, 40.0])
    assert composite_performance(details) == pytest.approx(60.0)


def test_zero_sub_target_with_achievement_counts_as_met():
    catalog = _catalog()
    entries = [Entry("p", "q2", "October", sub_values={"small": 5})]
    details = quarter_sub_details(catalog.get("p"), entries, "q2", catalog)
    # cumulative q2 target of "small" is 100 + 0, of "large" is 10000 + 0
    assert details[0].target == 100
    assert details[0].performance == pytest.approx(5.0)

    catalog = Catalog([
        Indicator("p", "Parent", sub_indicator_ids={"a": "a1"}),
        Indicator("a1", "Sub without target"),
    ])
    details = quarter_sub_details(catalog.get("p"), [Entry("p", "q1", "July", sub_values={"a": 3})], "q1", catalog)
    assert details[0].performance == 100.0


def test_annual_caps_each_sub_before_averaging():
    catalog = _catalog()
    entries = [Entry("p", "q1", "July", sub_values={"small": 500, "large": 20})]
    details = annual_sub_details(catalog.get("p"), entries, catalog)
    assert [d.performance for d in details] == pytest.approx([100.0, 20.0])
    assert composite_performance(details) == pytest.approx(60.0)


def test_legacy_keys_feed_the_canonical_sub_indicator():
    catalog = Catalog([
        Indicator("24", "Cows vaccinated", sub_indicator_ids={"lsd": "25"}),
        Indicator("25", "Cows vaccinated against LSD", targets=Targets(q3=34000, annual=34000)),
    ])
    entries = [Entry("24", "q3", "January", sub_values={"bq": 17000})]
    details = quarter_sub_details(catalog.get("24"), entries, "q3", catalog)
    assert details[0].actual == 17000
    assert details[0].performance == pytest.approx(50.0)


def test_month_details_only_use_that_month():
    catalog = _catalog()
    entries = [
        Entry("p", "q1", "July", sub_values={"small": 40}),
        Entry("p", "q1", "August", sub_values={"small": 60}),
    ]
    details = month_sub_details(catalog.get("p"), entries, "Aug", catalog)
    assert details[0].actual == 60


def test_no_details_means_no_composite_performance():
    assert composite_performance([]) is None
