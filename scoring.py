import math
from typing import Sequence

from models import MeasurementType


def _clamp(score: float) -> float:
	if not math.isfinite(score) or score < 0:
		return 0.0
	if score > 100:
		return 100.0
	return float(score)


def compute_progress(actual: float, target: float, measurement_type: str = MeasurementType.CUMULATIVE) -> float:
	if target is None or target <= 0:
		return 0.0
	if measurement_type == MeasurementType.DECREASING:
		# nothing reported against a lower-is-better target is full success
		score = (target / actual * 100.0) if actual > 0 else 100.0
	else:
		score = actual / target * 100.0
	return _clamp(score)


def compute_sub_progress(actual: float, target: float, measurement_type: str = MeasurementType.CUMULATIVE) -> float:
	"""Sub-indicator variant: achievement against an unset target counts as fully met."""
	if (target is None or target <= 0) and actual > 0:
		return 100.0
	return compute_progress(actual, target, measurement_type)


def average(values: Sequence[float]) -> float:
	return (sum(values) / len(values)) if values else 0.0


def classify_trend(progress: float) -> str:
	if progress >= 90:
		return "on-track"
	if progress >= 50:
		return "improving"
	return "needs-attention"


def classify_health(progress: float) -> str:
	# report colour bands: green / yellow / red
	if progress >= 90:
		return "good"
	if progress >= 70:
		return "warning"
	return "critical"


def classify_status(progress: float) -> str:
	if progress >= 100:
		return "completed"
	if progress >= 75:
		return "on-track"
	if progress > 0:
		return "behind"
	return "not-started"
