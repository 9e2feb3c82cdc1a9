import streamlit as st
import pandas as pd
import plotly.express as px

from catalog_loader import get_pillars
from models import Catalog
from periods import QUARTERS, months_in_quarter
from reports import build_pillar_report, rows_to_frame, summarize_pillar

HEALTH_COLORS = {"good": "#16a34a", "warning": "#ca8a04", "critical": "#dc2626"}


def build_progress_chart(frame: pd.DataFrame, column: str = "Annual Progress (%)"):
	"""Horizontal bar per indicator, coloured by health band."""
	labels = frame["No."].astype(str) + ". " + frame["Indicator"].str.slice(0, 60)
	chart_df = pd.DataFrame({"Indicator": labels, column: frame[column], "Health": frame["Health"]})
	fig = px.bar(
		chart_df,
		x=column,
		y="Indicator",
		color="Health",
		orientation="h",
		color_discrete_map=HEALTH_COLORS,
		range_x=[0, 100],
	)
	fig.update_layout(yaxis={"autorange": "reversed"}, height=max(300, 28 * len(chart_df)))
	return fig


def render_pillar_progress(catalog: Catalog, entries: list, max_workers: int = 1) -> None:
	st.title("📊 Pillar Progress")

	pillar_ids = get_pillars(catalog)
	if not pillar_ids:
		st.info("The catalog defines no pillars.")
		return

	col1, col2, col3 = st.columns(3)
	with col1:
		pillar_id = st.selectbox(
			"Pillar",
			options=pillar_ids,
			format_func=lambda pid: catalog.pillar(pid).name,
		)
	with col2:
		quarter_id = st.selectbox(
			"Quarter",
			options=[q["id"] for q in QUARTERS],
			format_func=lambda qid: next(q["name"] for q in QUARTERS if q["id"] == qid),
		)
	with col3:
		month = st.selectbox("Month", options=months_in_quarter(quarter_id))

	rows = build_pillar_report(catalog, entries, pillar_id, month, max_workers=max_workers)
	if not rows:
		st.info("No indicators under this pillar.")
		return

	summary = summarize_pillar(rows)
	m1, m2, m3, m4, m5 = st.columns(5)
	with m1:
		st.metric("Average Annual Progress", f"{summary['average_annual_progress']:.1f}%")
	with m2:
		st.metric("Completed", int(summary["completed"]))
	with m3:
		st.metric("On Track", int(summary["on-track"]))
	with m4:
		st.metric("Behind", int(summary["behind"]))
	with m5:
		st.metric("Not Started", int(summary["not-started"]))

	frame = rows_to_frame(rows)
	st.subheader(f"📈 Indicators - {month}")
	st.dataframe(frame, use_container_width=True, hide_index=True)
	st.plotly_chart(build_progress_chart(frame), use_container_width=True)

	# Sub-indicator breakdown (collapsible)
	for row in rows:
		if not row.has_sub_indicators:
			continue
		with st.expander(f"{row.number}. {row.name}", expanded=False):
			st.dataframe(pd.DataFrame([{
				"Sub-indicator": s.name,
				"Monthly Actual": s.monthly_actual,
				"Monthly Target": s.monthly_target,
				"Monthly Progress (%)": round(s.monthly_progress, 2),
				"Annual Actual": s.annual_actual,
				"Annual Target": s.annual_target,
				"Annual Progress (%)": round(s.annual_progress, 2),
			} for s in row.sub_indicators]), use_container_width=True, hide_index=True)
