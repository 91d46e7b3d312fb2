"""Alias-based mapping of source headers onto canonical catalog fields."""

import logging
from typing import Iterable, Sequence

from catalog_import.ingest.aliases import FieldAliasCatalog
from catalog_import.ingest.normalizer import normalize_header

logger = logging.getLogger(__name__)


def generate_field_mapping(headers: Sequence[str], catalog: FieldAliasCatalog) -> dict[str, str]:
    """Assign each canonical field at most one source header.

    Fields are processed in catalog order. Each takes the leftmost header
    whose normalized form is one of its aliases and that no earlier field
    has claimed. Claims are made on the normalized form, so columns that
    normalize alike ("Location", "location ") are one header: rows are keyed
    the same way. Values are the original header strings. Fields without a
    match are left out of the result.
    """
    keys = [normalize_header(h) for h in headers]
    claimed: set[str] = set()
    mapping: dict[str, str] = {}

    for field_name, aliases in catalog:
        for idx, key in enumerate(keys):
            if key in claimed or key not in aliases:
                continue
            mapping[field_name] = headers[idx]
            claimed.add(key)
            logger.debug("Mapped %s -> %r", field_name, headers[idx])
            break

    return mapping


def unmapped_fields(mapping: dict[str, str], catalog: FieldAliasCatalog) -> list[str]:
    """Canonical fields with no header assigned, in catalog order."""
    return [name for name in catalog.field_names if name not in mapping]


def unused_headers(headers: Sequence[str], mapping: dict[str, str]) -> list[str]:
    """Source headers that no field claimed, in column order."""
    used = list(mapping.values())
    unused = []
    for h in headers:
        if h in used:
            used.remove(h)
        else:
            unused.append(h)
    return unused


def missing_required_fields(mapping: dict[str, str], required: Iterable[str]) -> list[str]:
    """Required fields absent from ``mapping``."""
    return [name for name in required if name not in mapping]
