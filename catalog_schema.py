"""Pydantic models for catalog and entry JSON files.

Field names follow the camelCase keys of the JSON documents through aliases.
The loader validates raw documents against these models and then builds the
frozen engine records from them.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models import MeasurementType
from periods import QUARTER_IDS, normalize_month, quarter_for_month
from values import parse_value


def _to_id(v: Any) -> Any:
	# ids are sometimes written as bare numbers
	if isinstance(v, (int, float)) and not isinstance(v, bool):
		return str(v)
	return v


class _Record(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TargetsRecord(_Record):
	q1: float = 0.0
	q2: float = 0.0
	q3: float = 0.0
	q4: float = 0.0
	annual: float = 0.0

	@field_validator("q1", "q2", "q3", "q4", "annual", mode="before")
	@classmethod
	def _parse_target(cls, v: Any) -> Any:
		# "80%", "1,000" and "-" are all valid target cells
		if v is None or isinstance(v, (str, int, float)):
			return parse_value(v)
		return v


class IndicatorRecord(_Record):
	id: str = Field(..., min_length=1)
	name: Optional[str] = None
	targets: TargetsRecord = Field(default_factory=TargetsRecord)
	measurement_type: str = Field(default=MeasurementType.CUMULATIVE, alias="measurementType")
	sub_indicator_ids: Dict[str, str] = Field(default_factory=dict, alias="subIndicatorIds")

	@field_validator("id", mode="before")
	@classmethod
	def _id(cls, v: Any) -> Any:
		v = _to_id(v)
		return v.strip() if isinstance(v, str) else v

	@field_validator("targets", mode="before")
	@classmethod
	def _targets(cls, v: Any) -> Any:
		return {} if v is None else v

	@field_validator("measurement_type", mode="before")
	@classmethod
	def _measurement_type(cls, v: Any) -> Any:
		if v is None or (isinstance(v, str) and not v.strip()):
			return MeasurementType.CUMULATIVE
		return v.strip().lower() if isinstance(v, str) else v

	@field_validator("sub_indicator_ids", mode="before")
	@classmethod
	def _subs(cls, v: Any) -> Any:
		if v is None:
			return {}
		if isinstance(v, dict):
			return {k: _to_id(sub_id) for k, sub_id in v.items()}
		return v


class EntryRecord(_Record):
	indicator_id: str = Field(..., min_length=1, alias="indicatorId")
	quarter_id: str = Field(..., alias="quarterId")
	month: str
	value: float = 0.0
	sub_values: Dict[str, float] = Field(default_factory=dict, alias="subValues")

	@field_validator("indicator_id", mode="before")
	@classmethod
	def _indicator_id(cls, v: Any) -> Any:
		v = _to_id(v)
		return v.strip() if isinstance(v, str) else v

	@field_validator("quarter_id", mode="before")
	@classmethod
	def _quarter(cls, v: Any) -> Any:
		if not isinstance(v, str):
			return v
		quarter_id = v.strip().lower()
		if quarter_id not in QUARTER_IDS:
			raise ValueError(f"unknown quarter '{v}'")
		return quarter_id

	@field_validator("month", mode="before")
	@classmethod
	def _month(cls, v: Any) -> Any:
		if not isinstance(v, str):
			return v
		month = normalize_month(v)
		if month is None:
			raise ValueError(f"unknown month '{v}'")
		return month

	@field_validator("value", mode="before")
	@classmethod
	def _value(cls, v: Any) -> Any:
		if v is None or v == "":
			return 0.0
		if isinstance(v, bool):
			raise ValueError("value must be numeric")
		return v

	@field_validator("sub_values", mode="before")
	@classmethod
	def _sub_values(cls, v: Any) -> Any:
		if v is None:
			return {}
		if isinstance(v, dict):
			for key, sub in v.items():
				if isinstance(sub, bool):
					raise ValueError(f"sub-value '{key}' must be numeric")
			return {k: sub for k, sub in v.items() if sub is not None}
		return v

	@model_validator(mode="after")
	def _month_in_quarter(self) -> "EntryRecord":
		if quarter_for_month(self.month) != self.quarter_id:
			raise ValueError(f"{self.month} is not part of {self.quarter_id}")
		return self


class OutputRecord(_Record):
	id: str = Field(..., min_length=1)
	name: Optional[str] = None
	indicator_ids: List[str] = Field(default_factory=list, alias="indicatorIds")

	@field_validator("id", mode="before")
	@classmethod
	def _id(cls, v: Any) -> Any:
		return _to_id(v)

	@field_validator("indicator_ids", mode="before")
	@classmethod
	def _indicator_ids(cls, v: Any) -> Any:
		if v is None:
			return []
		return [_to_id(i) for i in v] if isinstance(v, list) else v


class PillarRecord(_Record):
	id: str = Field(..., min_length=1)
	name: Optional[str] = None
	outputs: List[OutputRecord] = Field(default_factory=list)

	@field_validator("id", mode="before")
	@classmethod
	def _id(cls, v: Any) -> Any:
		return _to_id(v)

	@field_validator("outputs", mode="before")
	@classmethod
	def _outputs(cls, v: Any) -> Any:
		return [] if v is None else v


class CatalogRecord(_Record):
	"""Root document of a catalog file."""

	indicators: List[IndicatorRecord] = Field(default_factory=list)
	pillars: List[PillarRecord] = Field(default_factory=list)

	@field_validator("indicators", "pillars", mode="before")
	@classmethod
	def _lists(cls, v: Any) -> Any:
		return [] if v is None else v
