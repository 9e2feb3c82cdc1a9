# Fiscal reporting calendar: the year runs July to June, three months per quarter.

from typing import Dict, List, Optional, TypedDict


class QuarterDef(TypedDict):
	id: str
	name: str
	months: List[str]


QUARTERS: List[QuarterDef] = [
	{"id": "q1", "name": "Quarter 1", "months": ["July", "August", "September"]},
	{"id": "q2", "name": "Quarter 2", "months": ["October", "November", "December"]},
	{"id": "q3", "name": "Quarter 3", "months": ["January", "February", "March"]},
	{"id": "q4", "name": "Quarter 4", "months": ["April", "May", "June"]},
]

QUARTER_IDS: List[str] = [q["id"] for q in QUARTERS]
FISCAL_MONTHS: List[str] = [m for q in QUARTERS for m in q["months"]]

MONTH_TO_QUARTER: Dict[str, str] = {m: q["id"] for q in QUARTERS for m in q["months"]}
_LOOKUP: Dict[str, str] = {}
for _month in FISCAL_MONTHS:
	_LOOKUP[_month.lower()] = _month
	_LOOKUP[_month[:3].lower()] = _month
# "Sept" shows up in hand-typed submissions
_LOOKUP["sept"] = "September"


def normalize_month(month: Optional[str]) -> Optional[str]:
	if not month:
		return None
	return _LOOKUP.get(str(month).strip().lower().rstrip("."))


def month_abbreviation(month: str) -> str:
	full = normalize_month(month)
	return full[:3] if full else month


def quarter_for_month(month: str) -> Optional[str]:
	full = normalize_month(month)
	return MONTH_TO_QUARTER.get(full) if full else None


def months_in_quarter(quarter_id: str) -> List[str]:
	for q in QUARTERS:
		if q["id"] == quarter_id:
			return list(q["months"])
	return []


def quarters_through(quarter_id: str) -> List[str]:
	"""Quarter ids from q1 up to and including ``quarter_id``."""
	if quarter_id not in QUARTER_IDS:
		return []
	return QUARTER_IDS[: QUARTER_IDS.index(quarter_id) + 1]


def next_quarter(quarter_id: str) -> str:
	if quarter_id not in QUARTER_IDS:
		return quarter_id
	idx = QUARTER_IDS.index(quarter_id)
	return QUARTER_IDS[min(idx + 1, len(QUARTER_IDS) - 1)]
