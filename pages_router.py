import streamlit as st

from models import Catalog
from pages_calculator import render_calculator
from pages_progress import render_pillar_progress

PAGES = ["Pillar Progress", "Calculator"]


def route_to_page(page: str, catalog: Catalog, entries: list, max_workers: int = 1) -> None:
	if page == "Pillar Progress":
		render_pillar_progress(catalog, entries, max_workers=max_workers)
	elif page == "Calculator":
		render_calculator(catalog, entries)
	else:
		st.error("Unknown page")
