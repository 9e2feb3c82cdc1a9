import math
import re
from typing import Dict, List, Mapping, Optional, Union

RawValue = Union[int, float, str, None]

# Old submissions stored some sub-values under keys that were later renamed.
LEGACY_KEY_ALIASES: Dict[str, List[str]] = {
	"chicken": ["poultry"],
	"maize": ["maize_kg"],
	"soya": ["soya_kg"],
	"lsd": ["bq"],
}

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"^(\d+\.?\d*|\.\d+)")


def parse_value(raw: RawValue) -> float:
	"""Turn a target or achievement field into a number ("80%" -> 80, "1,000" -> 1000, "-" -> 0)."""
	if raw is None:
		return 0.0
	if isinstance(raw, bool):
		return float(raw)
	if isinstance(raw, (int, float)):
		return float(raw)
	text = str(raw)
	if text.strip() == "-":
		return 0.0
	match = _LEADING_NUMBER.match(_NON_NUMERIC.sub("", text))
	if not match:
		return 0.0
	value = float(match.group(1))
	return value if math.isfinite(value) else 0.0


def get_sub_value(sub_values: Optional[Mapping[str, float]], key: str) -> float:
	if not sub_values:
		return 0.0
	if sub_values.get(key) is not None:
		return float(sub_values[key])
	for alias in LEGACY_KEY_ALIASES.get(key, []):
		if sub_values.get(alias) is not None:
			return float(sub_values[alias])
	return 0.0
