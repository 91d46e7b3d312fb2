"""Streamlit import preview for the brand catalog importer."""

import logging

import polars as pl
import streamlit as st

st.set_page_config(
    page_title="Catalog Import",
    page_icon="🗂️",
    layout="wide",
)

from catalog_import.config import ImportConfig
from catalog_import.exceptions import CatalogImportError
from catalog_import.export import generate_csv
from catalog_import.ingest.aliases import DEFAULT_CATALOG
from catalog_import.ingest.column_mapper import generate_field_mapping, unused_headers
from catalog_import.ingest.pipeline import normalize_rows, parse_import_file, records_to_frame
from catalog_import.ingest.price_mapper import get_price_label

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

_NOT_MAPPED = "(not mapped)"


def get_config() -> ImportConfig:
    """Get or create the ImportConfig for this session."""
    if "config" not in st.session_state:
        st.session_state.config = ImportConfig()
    return st.session_state.config


st.title("Import Brands")
st.markdown("Upload a CSV, TSV or JSON export and review how its columns map onto the catalog.")

config = get_config()

with st.sidebar:
    st.header("Limits")
    st.write(f"**Max rows:** {config.limits.max_rows:,}")
    st.write(f"**Max file size:** {config.limits.max_bytes / (1024 * 1024):.0f} MB")
    st.write(f"**Alias catalog:** v{DEFAULT_CATALOG.version}")

uploaded = st.file_uploader("Choose a file", type=["csv", "tsv", "txt", "json"])
if uploaded is None:
    st.stop()

try:
    text = uploaded.getvalue().decode("utf-8", errors="replace")
    import_file = parse_import_file(text, uploaded.name, config)
except CatalogImportError as e:
    st.error(str(e))
    st.stop()

c1, c2, c3 = st.columns(3)
with c1:
    st.metric("Rows", f"{len(import_file.rows):,}")
with c2:
    st.metric("Columns", len(import_file.raw_headers))
with c3:
    st.metric("Delimiter", repr(import_file.delimiter) if import_file.delimiter else "JSON")

st.divider()
st.subheader("Column Mapping")

auto_mapping = generate_field_mapping(import_file.raw_headers, DEFAULT_CATALOG)
options = [_NOT_MAPPED] + import_file.raw_headers
mapping: dict[str, str] = {}
for field_name in DEFAULT_CATALOG.field_names:
    label = field_name.replace("_", " ").capitalize()
    if field_name in config.required_fields:
        label += " *"
    current = auto_mapping.get(field_name, _NOT_MAPPED)
    choice = st.selectbox(label, options, index=options.index(current), key=f"map_{field_name}")
    if choice != _NOT_MAPPED:
        mapping[field_name] = choice

if not any(name in mapping for name in config.required_fields):
    st.warning("Map a store name or website column to import records.")
    st.stop()

leftover = unused_headers(import_file.raw_headers, mapping)
if leftover:
    st.caption(f"Unused columns: {', '.join(leftover)}")

records, skipped = normalize_rows(import_file, mapping, config)
st.divider()
st.subheader(f"Preview ({len(records):,} records, {skipped:,} skipped)")

df = records_to_frame(records)
if len(df) > 0:
    preview = df.with_columns(
        pl.col("price_range").map_elements(get_price_label, return_dtype=pl.Utf8)
    )
    st.dataframe(preview, width="stretch")
    st.download_button(
        "Download clean CSV",
        generate_csv(records),
        file_name="catalog_import.csv",
        mime="text/csv",
    )
