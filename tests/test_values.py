import os
import sys
# ensure repo root is on path so tests can import the engine modules
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import math

from values import get_sub_value, parse_value


def test_parse_value_strips_percent_and_separators():
    assert parse_value("80%") == 80.0
    assert parse_value("1,000") == 1000.0
    assert parse_value("4.9%") == 4.9
    assert parse_value("FRW 2,500,000") == 2500000.0


def test_parse_value_missing_and_dash_are_zero():
    assert parse_value(None) == 0.0
    assert parse_value("-") == 0.0
    assert parse_value("") == 0.0
    assert parse_value("n/a") == 0.0


def test_parse_value_numbers_pass_through():
    assert parse_value(18713) == 18713.0
    assert parse_value(0.5) == 0.5


def test_parse_value_uses_leading_number():
    assert parse_value("1.2.3") == 1.2
    assert parse_value(".5") == 0.5


def test_parse_value_never_returns_non_finite():
    result = parse_value("9" * 400)
    assert math.isfinite(result)


def test_sub_value_prefers_canonical_key():
    assert get_sub_value({"lsd": 10, "bq": 99}, "lsd") == 10


def test_sub_value_falls_back_to_legacy_key():
    assert get_sub_value({"bq": 42}, "lsd") == 42
    assert get_sub_value({"poultry": 7}, "chicken") == 7
    assert get_sub_value({"maize_kg": 12000}, "maize") == 12000
    assert get_sub_value({"soya_kg": 3}, "soya") == 3


def test_sub_value_missing_is_zero():
    assert get_sub_value(None, "maize") == 0.0
    assert get_sub_value({}, "maize") == 0.0
    assert get_sub_value({"rice": 5}, "maize") == 0.0
