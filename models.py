from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional

from values import RawValue, parse_value


class MeasurementType:
	CUMULATIVE = "cumulative"  # running totals, the default
	PERCENTAGE = "percentage"  # already a percent, per-quarter target
	DECREASING = "decreasing"  # lower is better

	ALL = (CUMULATIVE, PERCENTAGE, DECREASING)


@dataclass(frozen=True)
class Targets:
	q1: float = 0.0
	q2: float = 0.0
	q3: float = 0.0
	q4: float = 0.0
	annual: float = 0.0

	@classmethod
	def from_raw(cls, raw: Optional[Mapping[str, RawValue]]) -> "Targets":
		raw = raw or {}
		return cls(
			q1=parse_value(raw.get("q1")),
			q2=parse_value(raw.get("q2")),
			q3=parse_value(raw.get("q3")),
			q4=parse_value(raw.get("q4")),
			annual=parse_value(raw.get("annual")),
		)

	def for_quarter(self, quarter_id: str) -> float:
		if quarter_id not in ("q1", "q2", "q3", "q4"):
			return 0.0
		return parse_value(getattr(self, quarter_id))


@dataclass(frozen=True)
class Indicator:
	id: str
	name: str
	targets: Targets = field(default_factory=Targets)
	measurement_type: str = MeasurementType.CUMULATIVE
	sub_indicator_ids: Dict[str, str] = field(default_factory=dict)  # short key -> indicator id

	@property
	def is_composite(self) -> bool:
		return bool(self.sub_indicator_ids)

	@property
	def is_percentage(self) -> bool:
		return self.measurement_type == MeasurementType.PERCENTAGE

	@property
	def is_decreasing(self) -> bool:
		return self.measurement_type == MeasurementType.DECREASING


@dataclass(frozen=True)
class Entry:
	indicator_id: str
	quarter_id: str  # q1..q4
	month: str  # full month name
	value: float = 0.0
	sub_values: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class Output:
	id: str
	name: str
	indicator_ids: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Pillar:
	id: str
	name: str
	outputs: List[Output] = field(default_factory=list)


class Catalog:
	"""Read-only indicator catalog plus the pillar/output hierarchy."""

	def __init__(self, indicators: List[Indicator], pillars: Optional[List[Pillar]] = None):
		self._indicators: Dict[str, Indicator] = {i.id: i for i in indicators}
		self.pillars: List[Pillar] = list(pillars or [])

	def get(self, indicator_id: str) -> Optional[Indicator]:
		return self._indicators.get(indicator_id)

	def __contains__(self, indicator_id: object) -> bool:
		return indicator_id in self._indicators

	def __iter__(self) -> Iterator[Indicator]:
		return iter(self._indicators.values())

	def __len__(self) -> int:
		return len(self._indicators)

	def pillar(self, pillar_id: str) -> Optional[Pillar]:
		return next((p for p in self.pillars if p.id == pillar_id), None)

	def pillar_indicators(self, pillar_id: str) -> List[Indicator]:
		pillar = self.pillar(pillar_id)
		if not pillar:
			return []
		return [
			self._indicators[iid]
			for output in pillar.outputs
			for iid in output.indicator_ids
			if iid in self._indicators
		]


@dataclass(frozen=True)
class SubIndicatorDetail:
	key: str
	id: str
	name: str
	actual: float
	target: float
	performance: float


@dataclass(frozen=True)
class QuarterProgress:
	total_actual: float
	target: float
	performance: float
	trend: str
	next_target: float
	sub_indicator_details: List[SubIndicatorDetail] = field(default_factory=list)
