"""
Composite indicators: progress derived from named sub-indicators.

Each sub-indicator is scored on its own targets and measurement type, its
achievement being the sum of the matching ``sub_values`` across the parent's
entries. The parent's progress is the plain mean of the capped
sub-progresses, whatever the size of the individual targets.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from aggregation import entries_for
from models import Entry, Indicator, SubIndicatorDetail
from scoring import average, compute_sub_progress
from targets import resolve_annual_target, resolve_month_target, resolve_quarter_target
from values import get_sub_value

logger = logging.getLogger(__name__)


def resolve_sub_indicators(indicator: Indicator, catalog) -> List[Tuple[str, Indicator]]:
	"""(short key, sub-indicator) pairs; ids missing from ``catalog`` are skipped."""
	if not indicator.sub_indicator_ids or catalog is None:
		return []
	resolved = []
	for key, sub_id in indicator.sub_indicator_ids.items():
		sub = catalog.get(sub_id)
		if sub is None:
			logger.debug(f"Indicator {indicator.id}: sub-indicator {sub_id} ({key}) not in catalog, skipped")
			continue
		resolved.append((key, sub))
	return resolved


def sum_sub_values(entries: Iterable[Entry], key: str) -> float:
	return sum(get_sub_value(e.sub_values, key) for e in entries)


def _details(pairs, window: List[Entry], target_for) -> List[SubIndicatorDetail]:
	details = []
	for key, sub in pairs:
		actual = sum_sub_values(window, key)
		target = target_for(sub)
		details.append(SubIndicatorDetail(
			key=key,
			id=sub.id,
			name=sub.name,
			actual=actual,
			target=target,
			performance=min(compute_sub_progress(actual, target, sub.measurement_type), 100.0),
		))
	return details


def quarter_sub_details(
	indicator: Indicator,
	entries: Iterable[Entry],
	quarter_id: str,
	catalog,
	months: Optional[Sequence[str]] = None,
) -> List[SubIndicatorDetail]:
	window = entries_for(indicator, entries, quarter_id=quarter_id, months=months)
	return _details(
		resolve_sub_indicators(indicator, catalog),
		window,
		lambda sub: resolve_quarter_target(sub, quarter_id),
	)


def annual_sub_details(indicator: Indicator, entries: Iterable[Entry], catalog) -> List[SubIndicatorDetail]:
	window = entries_for(indicator, entries)
	return _details(resolve_sub_indicators(indicator, catalog), window, resolve_annual_target)


def month_sub_details(indicator: Indicator, entries: Iterable[Entry], month: str, catalog) -> List[SubIndicatorDetail]:
	window = entries_for(indicator, entries, months=[month])
	return _details(
		resolve_sub_indicators(indicator, catalog),
		window,
		lambda sub: resolve_month_target(sub, month),
	)


def composite_performance(details: Sequence[SubIndicatorDetail]) -> Optional[float]:
	"""Mean sub-progress, or None when no sub-indicator resolved."""
	if not details:
		return None
	return average([d.performance for d in details])
