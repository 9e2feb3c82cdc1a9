from models import Indicator, MeasurementType
from periods import quarter_for_month, quarters_through
from values import parse_value

# Types whose quarterly target stands alone instead of accumulating.
_PER_QUARTER_TYPES = (MeasurementType.PERCENTAGE, MeasurementType.DECREASING)


def resolve_quarter_target(indicator: Indicator, quarter_id: str) -> float:
	"""Denominator for a quarter.

	Percentage and decreasing indicators compare against that quarter's own
	target. Everything else reports running totals, so the target is the sum
	of the fixed quarterly targets from Q1 through ``quarter_id``.
	"""
	targets = indicator.targets
	if indicator.measurement_type in _PER_QUARTER_TYPES:
		return targets.for_quarter(quarter_id)
	return sum(targets.for_quarter(q) for q in quarters_through(quarter_id))


def resolve_month_target(indicator: Indicator, month: str) -> float:
	quarter_id = quarter_for_month(month)
	if not quarter_id:
		return 0.0
	return resolve_quarter_target(indicator, quarter_id)


def resolve_annual_target(indicator: Indicator) -> float:
	return parse_value(indicator.targets.annual)
