"""
Progress calculation entry points.

These are the functions the report views call. They are pure: the catalog
and entry list are read, never modified, and every degenerate input (no
target, no entries, unknown quarter) resolves to 0% instead of raising.

Example:
    result = calculate_quarter_progress(indicator, entries, "q4", catalog=catalog)
    print(result.performance, result.trend)
"""

import logging
import re
from typing import Iterable, Optional, Sequence

from aggregation import aggregate_annual_achievement, aggregate_quarter_achievement
from composite import annual_sub_details, composite_performance, month_sub_details, quarter_sub_details
from models import Entry, Indicator, QuarterProgress
from periods import next_quarter
from scoring import classify_trend, compute_progress
from targets import resolve_annual_target, resolve_month_target, resolve_quarter_target
from values import RawValue, parse_value

logger = logging.getLogger(__name__)

__all__ = [
	"parse_value",
	"resolve_quarter_target",
	"aggregate_quarter_achievement",
	"calculate_quarter_progress",
	"calculate_annual_progress",
	"calculate_monthly_progress",
	"get_indicator_unit",
	"get_indicator_name_with_unit",
]


def calculate_quarter_progress(
	indicator: Indicator,
	entries: Iterable[Entry],
	quarter_id: str,
	months_in_quarter: Optional[Sequence[str]] = None,
	catalog=None,
) -> QuarterProgress:
	"""Quarter view of one indicator.

	``months_in_quarter`` narrows the window to the listed months (progress to
	date); when it is omitted or empty every entry of the quarter counts. ``catalog`` is needed
	to score composite indicators.
	"""
	entries = list(entries)
	total_actual = aggregate_quarter_achievement(indicator, entries, quarter_id, months=months_in_quarter)
	target = resolve_quarter_target(indicator, quarter_id)

	details = []
	performance = None
	if indicator.is_composite:
		details = quarter_sub_details(indicator, entries, quarter_id, catalog, months=months_in_quarter)
		performance = composite_performance(details)
		if performance is None:
			logger.debug(f"Indicator {indicator.id}: no sub-indicators resolved, using own targets")
	if performance is None:
		performance = compute_progress(total_actual, target, indicator.measurement_type)
	performance = min(performance, 100.0)

	return QuarterProgress(
		total_actual=total_actual,
		target=target,
		performance=performance,
		trend=classify_trend(performance),
		next_target=indicator.targets.for_quarter(next_quarter(quarter_id)),
		sub_indicator_details=details,
	)


def calculate_annual_progress(indicator: Indicator, entries: Iterable[Entry], catalog=None) -> float:
	entries = list(entries)
	if indicator.is_composite:
		# sub-progress is capped before the mean so one large over-achiever cannot hide the rest
		performance = composite_performance(annual_sub_details(indicator, entries, catalog))
		if performance is not None:
			return min(performance, 100.0)
	actual = aggregate_annual_achievement(indicator, entries)
	return compute_progress(actual, resolve_annual_target(indicator), indicator.measurement_type)


def calculate_monthly_progress(
	indicator: Indicator,
	value: RawValue,
	month: str,
	entries: Optional[Iterable[Entry]] = None,
	catalog=None,
) -> float:
	"""Progress of a single month's reported ``value`` against that month's target.

	For composite indicators the month's sub-values in ``entries`` are scored
	instead, when supplied.
	"""
	if indicator.is_composite and entries is not None:
		performance = composite_performance(month_sub_details(indicator, list(entries), month, catalog))
		if performance is not None:
			return min(performance, 100.0)
	target = resolve_month_target(indicator, month)
	return compute_progress(parse_value(value), target, indicator.measurement_type)


_CURRENCY = re.compile(r"\b(frw|rwf|usd|money|amount of funds|budget|revenue)\b")
_PERCENT = re.compile(r"\b(rate|percentage)\b|%")
_KG = re.compile(r"\bkg\b|kilogram")
_TONS = re.compile(r"\b(tons?|tonnes?|mt)\b")
_HECTARES = re.compile(r"hectare|\bha\b")


def get_indicator_unit(indicator: Indicator) -> str:
	name = indicator.name.lower()
	if indicator.is_percentage:
		return "(%)"
	if _PERCENT.search(name):
		return "(%)"
	if _CURRENCY.search(name):
		return "(FRW)"
	if _KG.search(name):
		return "(Kg)"
	if _TONS.search(name):
		return "(Tons)"
	if _HECTARES.search(name):
		return "(Ha)"
	return "(N)"


def get_indicator_name_with_unit(indicator: Indicator) -> str:
	# names like "Area under consolidation for Maize(Ha)" already carry a unit
	if "(" in indicator.name and ")" in indicator.name:
		return indicator.name
	return f"{indicator.name} {get_indicator_unit(indicator)}"
