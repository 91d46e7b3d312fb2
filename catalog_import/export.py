"""Export imported records as a clean, canonical CSV."""

import polars as pl

from catalog_import.ingest.pipeline import StoreRecord, records_to_frame

EXPORT_COLUMNS = {
    "store_name": "store_name",
    "website": "website_url",
    "instagram_name": "instagram_url",
    "description": "description",
    "country": "country",
    "city": "city",
    "tags": "tags",
}


def generate_csv(records: list[StoreRecord]) -> str:
    """Render records as CSV text with a fixed header; tags are comma-joined."""
    df = records_to_frame(records).with_columns(
        pl.col("tags").list.join(",")
    )
    return df.select(list(EXPORT_COLUMNS)).rename(EXPORT_COLUMNS).write_csv()
