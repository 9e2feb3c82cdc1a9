import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pandas as pd

from aggregation import aggregate_annual_achievement, aggregate_month_achievement
from catalog_loader import number_indicators
from composite import annual_sub_details, month_sub_details
from models import Catalog, Entry, Indicator
from progress import (
	calculate_annual_progress,
	calculate_monthly_progress,
	calculate_quarter_progress,
	get_indicator_unit,
)
from scoring import average, classify_health, classify_status
from targets import resolve_annual_target, resolve_month_target

logger = logging.getLogger(__name__)

ROW_COLUMNS = [
	"No.", "Indicator", "Unit",
	"Monthly Actual", "Monthly Target", "Monthly Progress (%)",
	"Annual Actual", "Annual Target", "Annual Progress (%)",
	"Status", "Health",
]
QUARTER_COLUMNS = ["No.", "Indicator", "Type", "Actual", "Target", "Performance (%)", "Trend", "Next Target"]
STATUSES = ["completed", "on-track", "behind", "not-started"]


@dataclass(frozen=True)
class SubIndicatorRow:
	key: str
	id: str
	name: str
	monthly_actual: float
	monthly_target: float
	monthly_progress: float
	annual_actual: float
	annual_target: float
	annual_progress: float


@dataclass(frozen=True)
class IndicatorProgressRow:
	indicator_id: str
	number: int
	name: str
	unit: str
	monthly_actual: float
	monthly_target: float
	monthly_progress: float
	annual_actual: float
	annual_target: float
	annual_progress: float
	status: str  # completed/on-track/behind/not-started
	health: str  # good/warning/critical
	sub_indicators: List[SubIndicatorRow] = field(default_factory=list)

	@property
	def has_sub_indicators(self) -> bool:
		return bool(self.sub_indicators)


def build_indicator_row(
	indicator: Indicator,
	entries: Sequence[Entry],
	month: str,
	catalog: Catalog,
	number: int = 0,
) -> IndicatorProgressRow:
	"""Month-and-year view of one indicator, as shown in the pillar progress table."""
	subs: List[SubIndicatorRow] = []
	if indicator.is_composite:
		annual_by_key = {d.key: d for d in annual_sub_details(indicator, entries, catalog)}
		for monthly in month_sub_details(indicator, entries, month, catalog):
			annual = annual_by_key[monthly.key]
			subs.append(SubIndicatorRow(
				key=monthly.key,
				id=monthly.id,
				name=monthly.name,
				monthly_actual=monthly.actual,
				monthly_target=monthly.target,
				monthly_progress=monthly.performance,
				annual_actual=annual.actual,
				annual_target=annual.target,
				annual_progress=annual.performance,
			))

	if subs:
		monthly_actual = sum(s.monthly_actual for s in subs)
		monthly_target = sum(s.monthly_target for s in subs)
		annual_actual = sum(s.annual_actual for s in subs)
		annual_target = sum(s.annual_target for s in subs)
	else:
		monthly_actual = aggregate_month_achievement(indicator, entries, month)
		monthly_target = resolve_month_target(indicator, month)
		annual_actual = aggregate_annual_achievement(indicator, entries)
		annual_target = resolve_annual_target(indicator)

	monthly_progress = calculate_monthly_progress(indicator, monthly_actual, month, entries=entries, catalog=catalog)
	annual_progress = calculate_annual_progress(indicator, entries, catalog=catalog)

	return IndicatorProgressRow(
		indicator_id=indicator.id,
		number=number,
		name=indicator.name,
		unit=get_indicator_unit(indicator),
		monthly_actual=monthly_actual,
		monthly_target=monthly_target,
		monthly_progress=monthly_progress,
		annual_actual=annual_actual,
		annual_target=annual_target,
		annual_progress=annual_progress,
		status=classify_status(annual_progress),
		health=classify_health(annual_progress),
		sub_indicators=subs,
	)


def build_pillar_report(
	catalog: Catalog,
	entries: Sequence[Entry],
	pillar_id: str,
	month: str,
	max_workers: Optional[int] = None,
) -> List[IndicatorProgressRow]:
	"""One row per indicator of the pillar, in catalog order.

	Indicators are independent of each other, so with ``max_workers`` > 1 the
	rows are computed on a thread pool.
	"""
	indicators = catalog.pillar_indicators(pillar_id)
	if not indicators:
		logger.info(f"Pillar {pillar_id} has no indicators")
		return []
	numbering = number_indicators(catalog)
	entries = list(entries)

	def _row(indicator: Indicator) -> IndicatorProgressRow:
		return build_indicator_row(indicator, entries, month, catalog, numbering.get(indicator.id, 0))

	if max_workers and max_workers > 1:
		with ThreadPoolExecutor(max_workers=max_workers) as pool:
			return list(pool.map(_row, indicators))
	return [_row(i) for i in indicators]


def build_quarter_summary(
	catalog: Catalog,
	entries: Sequence[Entry],
	quarter_id: str,
	pillar_id: Optional[str] = None,
) -> pd.DataFrame:
	indicators = catalog.pillar_indicators(pillar_id) if pillar_id else [
		catalog.get(i) for p in catalog.pillars for o in p.outputs for i in o.indicator_ids if i in catalog
	]
	numbering = number_indicators(catalog)
	entries = list(entries)
	records = []
	for indicator in indicators:
		result = calculate_quarter_progress(indicator, entries, quarter_id, catalog=catalog)
		records.append({
			"No.": numbering.get(indicator.id, 0),
			"Indicator": indicator.name,
			"Type": indicator.measurement_type,
			"Actual": result.total_actual,
			"Target": result.target,
			"Performance (%)": round(result.performance, 2),
			"Trend": result.trend,
			"Next Target": result.next_target,
		})
	return pd.DataFrame(records, columns=QUARTER_COLUMNS)


def rows_to_frame(rows: Sequence[IndicatorProgressRow]) -> pd.DataFrame:
	records = [{
		"No.": r.number,
		"Indicator": r.name,
		"Unit": r.unit,
		"Monthly Actual": r.monthly_actual,
		"Monthly Target": r.monthly_target,
		"Monthly Progress (%)": round(r.monthly_progress, 2),
		"Annual Actual": r.annual_actual,
		"Annual Target": r.annual_target,
		"Annual Progress (%)": round(r.annual_progress, 2),
		"Status": r.status,
		"Health": r.health,
	} for r in rows]
	return pd.DataFrame(records, columns=ROW_COLUMNS)


def summarize_pillar(rows: Sequence[IndicatorProgressRow]) -> Dict[str, float]:
	summary: Dict[str, float] = {s: 0 for s in STATUSES}
	for r in rows:
		summary[r.status] = summary.get(r.status, 0) + 1
	summary["indicators"] = len(rows)
	summary["average_annual_progress"] = average([r.annual_progress for r in rows])
	return summary
