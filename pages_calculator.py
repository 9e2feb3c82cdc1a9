import streamlit as st
import pandas as pd

from catalog_loader import get_pillars
from models import Catalog
from periods import QUARTERS
from progress import calculate_annual_progress, calculate_quarter_progress, get_indicator_name_with_unit
from scoring import classify_trend


def render_calculator(catalog: Catalog, entries: list) -> None:
	st.title("🧮 Progress Calculator")

	pillar_ids = get_pillars(catalog)
	if not pillar_ids:
		st.info("The catalog defines no pillars.")
		return
	pillar_id = st.selectbox("Pillar", options=pillar_ids, format_func=lambda pid: catalog.pillar(pid).name)
	indicators = catalog.pillar_indicators(pillar_id)
	if not indicators:
		st.info("No indicators under this pillar.")
		return
	indicator_id = st.selectbox(
		"Indicator",
		options=[i.id for i in indicators],
		format_func=lambda iid: get_indicator_name_with_unit(catalog.get(iid)),
	)
	indicator = catalog.get(indicator_id)
	timeline = st.selectbox(
		"Timeline",
		options=[q["id"] for q in QUARTERS] + ["annual"],
		format_func=lambda t: "Annual" if t == "annual" else next(q["name"] for q in QUARTERS if q["id"] == t),
	)

	if timeline == "annual":
		performance = calculate_annual_progress(indicator, entries, catalog=catalog)
		col1, col2 = st.columns(2)
		with col1:
			st.metric("Annual Progress", f"{performance:.1f}%")
		with col2:
			st.metric("Trend", classify_trend(performance))
		return

	result = calculate_quarter_progress(indicator, entries, timeline, catalog=catalog)
	col1, col2, col3, col4 = st.columns(4)
	with col1:
		st.metric("Achieved", f"{result.total_actual:,.2f}")
	with col2:
		st.metric("Target", f"{result.target:,.2f}")
	with col3:
		st.metric("Performance", f"{result.performance:.1f}%")
	with col4:
		st.metric("Next Quarter Target", f"{result.next_target:,.2f}")
	st.info(f"Trend: **{result.trend}** ({indicator.measurement_type})")

	if result.sub_indicator_details:
		st.subheader("Sub-indicators")
		st.dataframe(pd.DataFrame([{
			"Key": d.key,
			"Sub-indicator": d.name,
			"Actual": d.actual,
			"Target": d.target,
			"Performance (%)": round(d.performance, 2),
		} for d in result.sub_indicator_details]), use_container_width=True, hide_index=True)
