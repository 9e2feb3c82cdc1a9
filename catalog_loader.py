import json
import logging
from typing import Any, Dict, List, Mapping

from pydantic import TypeAdapter, ValidationError

from catalog_schema import CatalogRecord, EntryRecord, IndicatorRecord, PillarRecord
from models import Catalog, Entry, Indicator, MeasurementType, Output, Pillar, Targets

logger = logging.getLogger(__name__)

_ENTRY_LIST = TypeAdapter(List[EntryRecord])


class CatalogError(ValueError):
	"""A catalog or entry record that cannot be turned into engine input."""


def _invalid(what: str, error: ValidationError) -> CatalogError:
	problems = "; ".join(
		f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in error.errors()
	)
	return CatalogError(f"Invalid {what}: {problems}")


def _to_indicator(record: IndicatorRecord) -> Indicator:
	if record.measurement_type not in MeasurementType.ALL:
		logger.warning(f"Indicator {record.id}: unknown measurement type '{record.measurement_type}', kept as-is")
	t = record.targets
	return Indicator(
		id=record.id,
		name=record.name or record.id,
		targets=Targets(q1=t.q1, q2=t.q2, q3=t.q3, q4=t.q4, annual=t.annual),
		measurement_type=record.measurement_type,
		sub_indicator_ids=dict(record.sub_indicator_ids),
	)


def _to_entry(record: EntryRecord) -> Entry:
	return Entry(
		indicator_id=record.indicator_id,
		quarter_id=record.quarter_id,
		month=record.month,
		value=record.value,
		sub_values=dict(record.sub_values),
	)


def _to_pillar(record: PillarRecord) -> Pillar:
	outputs = [
		Output(id=o.id, name=o.name or o.id, indicator_ids=list(o.indicator_ids))
		for o in record.outputs
	]
	return Pillar(id=record.id, name=record.name or record.id, outputs=outputs)


def parse_indicator(raw: Any) -> Indicator:
	try:
		record = IndicatorRecord.model_validate(raw)
	except ValidationError as e:
		raise _invalid("indicator", e) from e
	return _to_indicator(record)


def parse_entry(raw: Any) -> Entry:
	try:
		record = EntryRecord.model_validate(raw)
	except ValidationError as e:
		raise _invalid("entry", e) from e
	return _to_entry(record)


def build_catalog(raw: Any) -> Catalog:
	try:
		document = CatalogRecord.model_validate(raw)
	except ValidationError as e:
		raise _invalid("catalog", e) from e
	indicators = [_to_indicator(r) for r in document.indicators]
	ids = [i.id for i in indicators]
	if len(set(ids)) != len(ids):
		dupes = sorted({i for i in ids if ids.count(i) > 1})
		raise CatalogError(f"Duplicate indicator ids: {', '.join(dupes)}")
	catalog = Catalog(indicators, [_to_pillar(p) for p in document.pillars])
	for ind in indicators:
		for key, sub_id in ind.sub_indicator_ids.items():
			if sub_id not in catalog:
				logger.warning(f"Indicator {ind.id}: sub-indicator '{key}' -> {sub_id} is not in the catalog")
	return catalog


def load_catalog(path: str) -> Catalog:
	try:
		with open(path, "r") as f:
			raw = json.load(f)
	except (OSError, json.JSONDecodeError) as e:
		logger.error(f"Could not read catalog {path}: {str(e)}")
		raise CatalogError(f"Could not read catalog {path}: {e}") from e
	catalog = build_catalog(raw)
	logger.info(f"Loaded {len(catalog)} indicators and {len(catalog.pillars)} pillars from {path}")
	return catalog


def load_entries(path: str) -> List[Entry]:
	try:
		with open(path, "r") as f:
			raw = json.load(f)
	except (OSError, json.JSONDecodeError) as e:
		logger.error(f"Could not read entries {path}: {str(e)}")
		raise CatalogError(f"Could not read entries {path}: {e}") from e
	if isinstance(raw, Mapping):
		raw = raw.get("entries") or []
	try:
		records = _ENTRY_LIST.validate_python(raw)
	except ValidationError as e:
		raise _invalid(f"entries in {path}", e) from e
	entries = [_to_entry(r) for r in records]
	logger.info(f"Loaded {len(entries)} entries from {path}")
	return entries


def number_indicators(catalog: Catalog) -> Dict[str, int]:
	"""Display ordinal (1-based) of every indicator, walking pillars -> outputs -> indicators."""
	numbering: Dict[str, int] = {}
	counter = 1
	for pillar in catalog.pillars:
		for output in pillar.outputs:
			for indicator_id in output.indicator_ids:
				if indicator_id in numbering:
					continue
				numbering[indicator_id] = counter
				counter += 1
	return numbering


def get_pillars(catalog: Catalog) -> List[str]:
	return [p.id for p in catalog.pillars]


def get_outputs(catalog: Catalog, pillar_id: str) -> List[str]:
	pillar = catalog.pillar(pillar_id)
	return [o.id for o in pillar.outputs] if pillar else []


def get_output_indicators(catalog: Catalog, pillar_id: str, output_id: str) -> List[Indicator]:
	pillar = catalog.pillar(pillar_id)
	if not pillar:
		return []
	for output in pillar.outputs:
		if output.id == output_id:
			return [catalog.get(i) for i in output.indicator_ids if i in catalog]
	return []


def describe_load_error(error: Exception, operation: str = "loading data") -> str:
	"""User-facing message for a failed load."""
	if isinstance(error, CatalogError):
		cause = error.__cause__
		if isinstance(cause, FileNotFoundError):
			return f"Data file not found while {operation}. Check the configured paths."
		if isinstance(cause, json.JSONDecodeError):
			return f"Data file is not valid JSON ({operation})."
		return f"Invalid record while {operation}: {error}"
	return f"Unexpected error while {operation}. Please try again."
