import os
import sys
# ensure repo root is on path so tests can import the engine modules
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from catalog_loader import build_catalog, load_entries
from indicator_definitions import DEFAULT_CATALOG
from models import Entry
from reports import (
    QUARTER_COLUMNS,
    ROW_COLUMNS,
    build_pillar_report,
    build_quarter_summary,
    rows_to_frame,
    summarize_pillar,
)


def _catalog():
    return build_catalog({
        "indicators": [
            {"id": "a", "name": "Number of pigs insured", "targets": {"q1": 100, "q2": 100, "q3": 100, "q4": 100, "annual": 400}},
            {"id": "c", "name": "Number of livestock insured", "subIndicatorIds": {"x": "cx", "y": "cy"}},
            {"id": "cx", "name": "Sub x", "targets": {"q1": 50, "annual": 200}},
            {"id": "cy", "name": "Sub y", "targets": {"annual": 100}},
        ],
        "pillars": [
            {"id": "p1", "name": "Economic", "outputs": [{"id": "o1", "name": "Out", "indicatorIds": ["a", "c"]}]},
        ],
    })


def _entries():
    return [
        Entry("a", "q1", "July", 40),
        Entry("a", "q1", "August", 60),
        Entry("c", "q1", "July", sub_values={"x": 25, "y": 10}),
    ]


def test_atomic_row():
    rows = build_pillar_report(_catalog(), _entries(), "p1", "August")
    row = rows[0]
    assert row.number == 1
    assert row.monthly_actual == 60
    assert row.monthly_target == 100
    assert row.monthly_progress == pytest.approx(60.0)
    assert row.annual_actual == 60
    assert row.annual_target == 400
    assert row.annual_progress == pytest.approx(15.0)
    assert row.status == "behind"
    assert row.health == "critical"
    assert not row.has_sub_indicators


def test_composite_row():
    rows = build_pillar_report(_catalog(), _entries(), "p1", "July")
    row = rows[1]
    assert row.number == 2
    assert [s.key for s in row.sub_indicators] == ["x", "y"]
    assert row.sub_indicators[1].monthly_progress == 100.0
    assert row.monthly_progress == pytest.approx(75.0)
    assert row.annual_progress == pytest.approx(11.25)
    assert row.monthly_actual == 35
    assert row.monthly_target == 50


def test_parallel_report_matches_sequential():
    sequential = build_pillar_report(_catalog(), _entries(), "p1", "July")
    parallel = build_pillar_report(_catalog(), _entries(), "p1", "July", max_workers=4)
    assert parallel == sequential


def test_unknown_pillar_is_empty():
    assert build_pillar_report(_catalog(), _entries(), "nowhere", "July") == []


def test_rows_to_frame():
    frame = rows_to_frame(build_pillar_report(_catalog(), _entries(), "p1", "July"))
    assert list(frame.columns) == ROW_COLUMNS
    assert list(frame["No."]) == [1, 2]
    assert list(rows_to_frame([]).columns) == ROW_COLUMNS


def test_quarter_summary():
    frame = build_quarter_summary(_catalog(), _entries(), "q1")
    assert list(frame.columns) == QUARTER_COLUMNS
    first, second = frame.to_dict("records")
    assert first["Actual"] == 60 and first["Target"] == 100
    assert first["Performance (%)"] == pytest.approx(60.0)
    assert first["Trend"] == "improving"
    assert first["Next Target"] == 100
    assert second["Performance (%)"] == pytest.approx(75.0)


def test_summarize_pillar():
    summary = summarize_pillar(build_pillar_report(_catalog(), _entries(), "p1", "July"))
    assert summary["indicators"] == 2
    assert summary["behind"] == 2
    assert summary["completed"] == 0
    assert summary["average_annual_progress"] == pytest.approx((15.0 + 11.25) / 2)


def test_default_catalog_with_sample_entries():
    entries = load_entries(os.path.join(ROOT, "sample_entries.json"))
    rows = build_pillar_report(DEFAULT_CATALOG, entries, "economic", "June")
    by_id = {r.indicator_id: r for r in rows}
    assert by_id["1"].monthly_actual == 10713
    assert by_id["1"].annual_progress == pytest.approx(10713 / 18713 * 100)
    # 12000 + 6000 of 25122 maize, 1000 + 500 of 2350 soya in q1
    q1 = build_quarter_summary(DEFAULT_CATALOG, entries, "q1", pillar_id="economic")
    seed = q1[q1["Indicator"] == "Quantity of improved seed"].iloc[0]
    expected = (18000 / 25122 * 100 + 1500 / 2350 * 100) / 2
    assert seed["Performance (%)"] == pytest.approx(round(expected, 2))
