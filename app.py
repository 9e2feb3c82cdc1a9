import logging
from typing import List, Tuple

import streamlit as st

from catalog_loader import CatalogError, describe_load_error, load_catalog, load_entries
from config import configure_logging, get_settings
from indicator_definitions import DEFAULT_CATALOG
from models import Catalog, Entry
from pages_router import PAGES, route_to_page

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Indicator Progress Tracker", layout="wide")


def load_data() -> Tuple[Catalog, List[Entry]]:
	catalog = load_catalog(settings.catalog_path) if settings.catalog_path else DEFAULT_CATALOG
	entries = load_entries(settings.entries_path) if settings.entries_path else []
	return catalog, entries


def main() -> None:
	try:
		catalog, entries = load_data()
	except CatalogError as e:
		st.error(describe_load_error(e, "loading the catalog and entries"))
		return

	st.sidebar.title("Indicator Progress")
	page = st.sidebar.radio("Page", options=PAGES)
	st.sidebar.caption(f"{len(catalog)} indicators · {len(entries)} entries")
	if not entries:
		st.sidebar.info("No entries loaded. Set PROGRESS_ENTRIES_PATH to a JSON file of submissions.")

	route_to_page(page, catalog, entries, max_workers=settings.max_workers)


main()
