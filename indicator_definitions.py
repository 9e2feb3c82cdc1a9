# Hardcoded district performance contract catalog
# Pillars: Economic, Social, Governance; one output per pillar
# Each indicator has quarterly targets q1..q4 plus annual, an optional measurementType
# (cumulative|percentage|decreasing) and, for composite indicators, a subIndicatorIds map

from typing import Dict, List, Optional, TypedDict, Union

from catalog_loader import build_catalog

TargetValue = Union[int, float, str]


class TargetsDef(TypedDict):
	q1: TargetValue
	q2: TargetValue
	q3: TargetValue
	q4: TargetValue
	annual: TargetValue


class IndicatorDef(TypedDict, total=False):
	id: str
	name: str
	targets: TargetsDef
	measurementType: str  # cumulative|percentage|decreasing
	subIndicatorIds: Dict[str, str]


class OutputDef(TypedDict):
	id: str
	name: str
	indicatorIds: List[str]


class PillarDef(TypedDict):
	id: str
	name: str
	outputs: List[OutputDef]


def _ind(
	indicator_id: str,
	name: str,
	q1: TargetValue = 0,
	q2: TargetValue = 0,
	q3: TargetValue = 0,
	q4: TargetValue = 0,
	annual: TargetValue = 0,
	measurement_type: Optional[str] = None,
	subs: Optional[Dict[str, str]] = None,
) -> IndicatorDef:
	d: IndicatorDef = {
		"id": indicator_id,
		"name": name,
		"targets": {"q1": q1, "q2": q2, "q3": q3, "q4": q4, "annual": annual},
	}
	if measurement_type:
		d["measurementType"] = measurement_type
	if subs:
		d["subIndicatorIds"] = subs
	return d


INDICATORS: List[IndicatorDef] = [
	_ind("1", "Ha of land meeting FOBASI operationalization criteria with agronomic KPIs", q4=18713, annual=18713),
	_ind("2", "Ha of Land meeting FOBASI Operationalization criteria with Agronomic and Managerial KPIs", q4=1740, annual=1740),
	_ind("3", "Ha of land use consolidation for priority crops", subs={
		"maize": "3a", "cassava": "4", "rice": "5", "beans": "6", "soya": "7",
	}),
	_ind("3a", "Area under land use consolidation for Maize(Ha)", 3340, 17568, 335, 0, 21243),
	_ind("4", "Area under land use consolidation for Cassava(Ha)", 250, 1250, 0, 0, 1500),
	_ind("5", "Area under land use consolidation for Rice(Ha)", 1049, 141, 1190, 0, 2380),
	_ind("6", "Area under land use consolidation for Beans(Ha)", 3048, 17999, 20026, 1430, 42503),
	_ind("7", "Area under land use consolidation for Soya bean(Ha)", 50, 91, 109, 0, 250),
	_ind("8", "Quantity of improved seed", subs={"maize": "8a", "soya": "9"}),
	_ind("8a", "Quantity of improved Maize seeds used (Kg)", 25122, 167762, 6040, 0, 198924),
	_ind("9", "Quantity of improved Soybeans seeds used (Kg)", 2350, 5900, 6578, 0, 14828),
	_ind("24", "Number of cows vaccinated against disease", subs={
		"bq": "24a", "lsd": "25", "rvf": "26", "brucellosis": "27", "rabies": "28",
	}),
	_ind("24a", "Number of cows vaccinated against Black quarter (BQ)", 0, 34000, 0, 0, 34000),
	_ind("25", "Number of cows vaccinated against LSD", 0, 0, 34000, 0, 34000),
	_ind("26", "Number of cows vaccinated against RVF", 34000, 0, 0, 0, 34000),
	_ind("27", "Number of cows vaccinated against Brucellosis", 0, 0, 2300, 0, 2300),
	_ind("28", "Number of cows vaccinated against Rabies", 0, 0, 300, 0, 300),
	_ind("31", "Number of livestock insured", subs={"pig": "32", "chicken": "33"}),
	_ind("32", "Number of pigs insured", 50, 200, 100, 150, 500),
	_ind("33", "Number of poultry insured", 0, 1000, 7000, 3000, 11000),
	_ind("34", "Quantity of Fish produced (MT)", 70, 100, 100, 30, 300),
	_ind("35", "Quantity of Full washed Coffee produced(MT)", q4=500, annual=500),
	_ind("43", "Percentage of works for 9 km of Nyuruvumu Gahushyi-Gituku feeder road rehabilitated",
		"62%", "65%", "70%", "100%", "100%", measurement_type="percentage"),
	_ind("45", "Level of compliance of developed land use plan", "50%", "-", "-", "-", "50%", measurement_type="percentage"),
	_ind("46", "Percentage of expropriated land parcels successfully registered in land information system(LAIS)",
		0, "30%", "40%", "50%", "50%", measurement_type="percentage"),
	_ind("52", "Number of eligible HH beneficiaries for VUP/PW (HBECD)", 1666, 1666, 1666, 1666, 1666),
	_ind("53", "Percentage of timely payments made to VUP / ePW-HBECD beneficiaries (within 15 days after the end of working period)",
		"100%", "100%", "100%", "100%", "100%", measurement_type="percentage"),
	_ind("54", "Number of targeted graduation participants receiving a graduation package",
		"0%", "0%", 4000, 4670, 8670),
	_ind("86", "Percentage of children 3-6 years per Village attending ECD facilities/settings (home, community, center based)",
		"65%", "70%", "80%", "95%", "95%", measurement_type="percentage"),
	_ind("90", "Repetition rate in Primary school decreased", "27%", 0, 0, 0, "27%", measurement_type="decreasing"),
	_ind("91", "Percentage of Dropout rate decrease in primary", "4.9%", 0, 0, 0, "4.9%", measurement_type="decreasing"),
	_ind("125", "Percentage of Citizens' demands/complaints received and timely resolved by Local Government",
		"97%", "97%", "97%", "97%", "97%", measurement_type="percentage"),
	_ind("126", "Percentage of Irembo services delivered by Local Government within the set timeframe",
		"99%", "99%", "99%", "99%", "99%", measurement_type="percentage"),
	_ind("127", "Percentage of self application of services delivered by LG via Irembo",
		"9%", "9%", "9%", "9%", "9%", measurement_type="percentage"),
]

# Sub-indicators (3a, 8a, 24a, ...) are scored through their parent and are not listed under an output.
PILLARS: List[PillarDef] = [
	{"id": "economic", "name": "Economic Transformation Pillar", "outputs": [
		{"id": "economic-output-1", "name": "Economic Development Indicators", "indicatorIds": [
			"1", "2", "3", "8", "24", "31", "34", "35", "43", "45", "46",
		]},
	]},
	{"id": "social", "name": "Social Transformation Pillar", "outputs": [
		{"id": "social-output-1", "name": "Social Development Indicators", "indicatorIds": [
			"52", "53", "54", "86", "90", "91",
		]},
	]},
	{"id": "governance", "name": "Transformational Governance Pillar", "outputs": [
		{"id": "governance-output-1", "name": "Governance Indicators", "indicatorIds": [
			"125", "126", "127",
		]},
	]},
]

CATALOG_DEFINITION = {"indicators": INDICATORS, "pillars": PILLARS}

DEFAULT_CATALOG = build_catalog(CATALOG_DEFINITION)
