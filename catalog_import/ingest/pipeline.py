"""Orchestrates a full import: file text -> ImportFile -> field mapping -> StoreRecords."""

import json
import logging
from dataclasses import dataclass, field

import polars as pl

from catalog_import.config import ImportConfig
from catalog_import.exceptions import (
    EmptyInputError,
    InputTooLargeError,
    InvalidJSONError,
    MissingHeaderError,
    TooManyRowsError,
)
from catalog_import.ingest.aliases import DEFAULT_CATALOG, FieldAliasCatalog
from catalog_import.ingest.column_mapper import generate_field_mapping, missing_required_fields
from catalog_import.ingest.csv_parser import cell_at, parse_table
from catalog_import.ingest.delimiter import detect_delimiter
from catalog_import.ingest.normalizer import (
    extract_name_from_url,
    normalize_header,
    split_tags,
    to_sentence_case,
    to_title_case,
)
from catalog_import.ingest.price_mapper import get_price_bucket
from catalog_import.validation import validate_store_record

logger = logging.getLogger(__name__)

_MAX_RATING = 5.0


@dataclass
class ImportFile:
    """Parsed upload: header keys plus one dict per data row."""
    file_name: str
    headers: list[str]          # normalized, in column order
    raw_headers: list[str]      # as written in the file
    rows: list[dict[str, str]]  # keyed by normalized header
    delimiter: str | None = None


@dataclass
class StoreRecord:
    store_name: str
    website: str = ""
    instagram_name: str = ""
    country: str = ""
    city: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)
    price_range: str = "unknown"
    rating: float = 0.0


@dataclass
class ImportResult:
    file: ImportFile
    mapping: dict[str, str]
    records: list[StoreRecord] = field(default_factory=list)
    skipped: int = 0
    errors: list[str] = field(default_factory=list)
    missing_fields: list[str] = field(default_factory=list)


def _check_text(text: str, config: ImportConfig) -> None:
    if not text or not text.lstrip("\ufeff").strip():
        raise EmptyInputError("The file is empty.")
    size = len(text.encode("utf-8"))
    if size > config.limits.max_bytes:
        raise InputTooLargeError(size, config.limits.max_bytes)


def _check_row_count(count: int, config: ImportConfig) -> None:
    if count > config.limits.max_rows:
        raise TooManyRowsError(count, config.limits.max_rows)


def _cell_text(value) -> str:
    """Flatten a JSON value into cell text."""
    if value is None:
        return ""
    if isinstance(value, list):
        return ",".join(_cell_text(v) for v in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).strip()


def _build_rows(headers: list[str], cell_rows: list[list[str]]) -> list[dict[str, str]]:
    """Key each row by header; short rows read as empty, the first duplicate column wins."""
    rows = []
    for cells in cell_rows:
        row: dict[str, str] = {}
        for i, key in enumerate(headers):
            row.setdefault(key, cell_at(cells, i))
        rows.append(row)
    return rows


def _parse_json(text: str, file_name: str, config: ImportConfig) -> ImportFile:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidJSONError(f"Invalid JSON format: {e.msg}") from e
    if not isinstance(data, list):
        raise InvalidJSONError("JSON must be an array of objects.")
    if not data:
        raise MissingHeaderError("The JSON array is empty.")
    if not all(isinstance(item, dict) for item in data):
        raise InvalidJSONError("JSON must be an array of objects.")
    _check_row_count(len(data), config)

    # Keys of the first object act as the header row
    raw_headers = [str(k) for k in data[0].keys()]
    if not raw_headers:
        raise MissingHeaderError("The first JSON object has no keys.")
    headers = [normalize_header(h) for h in raw_headers]
    cell_rows = [[_cell_text(item.get(h)) for h in raw_headers] for item in data]

    return ImportFile(
        file_name=file_name,
        headers=headers,
        raw_headers=raw_headers,
        rows=_build_rows(headers, cell_rows),
    )


def _parse_delimited(text: str, file_name: str, config: ImportConfig) -> ImportFile:
    delimiter = detect_delimiter(text)
    table = parse_table(text, delimiter)
    if not table or not any(table[0]):
        raise MissingHeaderError("The file has no header row.")

    raw_headers = table[0]
    data_rows = [cells for cells in table[1:] if any(cells)]
    _check_row_count(len(data_rows), config)
    headers = [normalize_header(h) for h in raw_headers]

    return ImportFile(
        file_name=file_name,
        headers=headers,
        raw_headers=raw_headers,
        rows=_build_rows(headers, data_rows),
        delimiter=delimiter,
    )


def parse_import_file(text: str, file_name: str, config: ImportConfig | None = None) -> ImportFile:
    """Parse an uploaded file's text into an ImportFile.

    Files named *.json must hold an array of objects; anything else is read
    as delimited text with the separator detected from the first line.
    Raises an ImportPreconditionError when the file cannot be processed.
    """
    if config is None:
        config = ImportConfig()
    _check_text(text, config)

    if config.is_json_source(file_name):
        parsed = _parse_json(text, file_name, config)
    else:
        parsed = _parse_delimited(text, file_name, config)

    logger.debug("Parsed %s: %d columns, %d rows", file_name, len(parsed.headers), len(parsed.rows))
    return parsed


def _parse_rating(value: str) -> float:
    try:
        rating = float(value)
    except ValueError:
        return 0.0
    if rating != rating:  # NaN
        return 0.0
    return min(max(rating, 0.0), _MAX_RATING)


def _mapped_value(row: dict[str, str], keys: dict[str, str], field_name: str) -> str:
    key = keys.get(field_name)
    if key is None:
        return ""
    return row.get(key, "")


def _iter_records(import_file: ImportFile, mapping: dict[str, str], config: ImportConfig):
    """Yield (row_number, record) per data row; record is None for a skipped row.

    Row numbers count the header as row 1.
    """
    limits = config.limits
    keys = {name: normalize_header(header) for name, header in mapping.items()}

    for idx, row in enumerate(import_file.rows):
        store_name = _mapped_value(row, keys, "store_name")
        website = _mapped_value(row, keys, "website")
        if not store_name and website:
            store_name = extract_name_from_url(website, config.fallback_url_name)
        if not store_name and not website:
            yield idx + 2, None
            continue

        store_name = to_title_case(store_name)[:limits.max_name_length]
        yield idx + 2, StoreRecord(
            store_name=store_name or config.default_store_name,
            website=website,
            instagram_name=_mapped_value(row, keys, "instagram_name"),
            country=_mapped_value(row, keys, "country"),
            city=_mapped_value(row, keys, "city"),
            description=to_sentence_case(_mapped_value(row, keys, "description")),
            tags=split_tags(_mapped_value(row, keys, "tags"), limits.max_tags_per_store),
            price_range=get_price_bucket(_mapped_value(row, keys, "price_range")),
            rating=_parse_rating(_mapped_value(row, keys, "rating")),
        )


def normalize_rows(
    import_file: ImportFile,
    mapping: dict[str, str],
    config: ImportConfig | None = None,
) -> tuple[list[StoreRecord], int]:
    """Build StoreRecords from parsed rows. Returns (records, skipped_count).

    A row with neither a name nor a website is skipped. A missing name is
    taken from the website's host name.
    """
    if config is None:
        config = ImportConfig()

    records = []
    skipped = 0
    for _, record in _iter_records(import_file, mapping, config):
        if record is None:
            skipped += 1
        else:
            records.append(record)

    if skipped:
        logger.warning("Skipped %d rows in %s with no store name or website", skipped, import_file.file_name)
    return records, skipped


def run_import(
    text: str,
    file_name: str,
    catalog: FieldAliasCatalog = DEFAULT_CATALOG,
    config: ImportConfig | None = None,
) -> ImportResult:
    """Run the full import for one uploaded file.

    Records that fail format validation are dropped and reported in
    ``errors`` as "Row N: ...", N counted from the header line.
    """
    if config is None:
        config = ImportConfig()

    import_file = parse_import_file(text, file_name, config)
    mapping = generate_field_mapping(import_file.raw_headers, catalog)
    missing = missing_required_fields(mapping, config.required_fields)
    if len(missing) == len(config.required_fields):
        logger.warning("None of %s could be mapped in %s", ", ".join(missing), file_name)

    result = ImportResult(file=import_file, mapping=mapping, missing_fields=missing)
    for row_number, record in _iter_records(import_file, mapping, config):
        if record is None:
            result.skipped += 1
            continue
        check = validate_store_record(record, config.limits)
        if check.is_valid:
            result.records.append(record)
        else:
            result.errors.append(f"Row {row_number}: {check.error}")

    if result.skipped:
        logger.warning("Skipped %d rows in %s with no store name or website", result.skipped, file_name)
    logger.info(
        "Import of %s complete: %d records, %d skipped, %d invalid",
        file_name, len(result.records), result.skipped, len(result.errors),
    )
    return result


RECORD_SCHEMA = {
    "store_name": pl.Utf8,
    "website": pl.Utf8,
    "instagram_name": pl.Utf8,
    "country": pl.Utf8,
    "city": pl.Utf8,
    "description": pl.Utf8,
    "tags": pl.List(pl.Utf8),
    "price_range": pl.Utf8,
    "rating": pl.Float64,
}


def records_to_frame(records: list[StoreRecord]) -> pl.DataFrame:
    """Collect StoreRecords into a Polars DataFrame with a fixed schema."""
    columns = {name: [getattr(r, name) for r in records] for name in RECORD_SCHEMA}
    return pl.DataFrame(columns, schema=RECORD_SCHEMA)
