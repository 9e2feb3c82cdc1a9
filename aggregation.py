from typing import Iterable, List, Optional, Sequence

from models import Entry, Indicator, MeasurementType
from periods import normalize_month


def entries_for(
	indicator: Indicator,
	entries: Iterable[Entry],
	quarter_id: Optional[str] = None,
	months: Optional[Sequence[str]] = None,
) -> List[Entry]:
	"""Entries belonging to ``indicator``, optionally narrowed to a quarter and/or months.

	An empty ``months`` list counts as no month filter.
	"""
	wanted = None
	if months:
		wanted = {normalize_month(m) for m in months}
		wanted.discard(None)
	selected = []
	for e in entries:
		if e.indicator_id != indicator.id:
			continue
		if quarter_id is not None and e.quarter_id != quarter_id:
			continue
		if wanted is not None and normalize_month(e.month) not in wanted:
			continue
		selected.append(e)
	return selected


def aggregate_values(values: Sequence[float], measurement_type: str) -> float:
	if not values:
		return 0.0
	if measurement_type == MeasurementType.PERCENTAGE:
		# each monthly figure is a percent on its own
		return sum(values) / len(values)
	if measurement_type == MeasurementType.CUMULATIVE:
		# later submissions already include earlier ones
		return max(values)
	return float(sum(values))


def aggregate_quarter_achievement(
	indicator: Indicator,
	entries: Iterable[Entry],
	quarter_id: str,
	months: Optional[Sequence[str]] = None,
) -> float:
	window = entries_for(indicator, entries, quarter_id=quarter_id, months=months)
	return aggregate_values([e.value for e in window], indicator.measurement_type)


def aggregate_annual_achievement(indicator: Indicator, entries: Iterable[Entry]) -> float:
	window = entries_for(indicator, entries)
	return aggregate_values([e.value for e in window], indicator.measurement_type)


def aggregate_month_achievement(indicator: Indicator, entries: Iterable[Entry], month: str) -> float:
	"""Single month figure: the mean for percentage indicators, otherwise the largest submission."""
	window = entries_for(indicator, entries, months=[month])
	if not window:
		return 0.0
	values = [e.value for e in window]
	if indicator.is_percentage:
		return sum(values) / len(values)
	return max(values)
