"""Format-level checks on imported store records.

These checks only look at the shape of the values. Whether a website
actually resolves is not checked here.
"""

from dataclasses import dataclass
from urllib.parse import urlsplit

from catalog_import.config import ImportLimits


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: str | None = None


def is_valid_url(url: str) -> bool:
    """True if ``url`` parses with a dotted host; the scheme is optional."""
    candidate = url if url.lower().startswith("http") else f"https://{url}"
    try:
        parts = urlsplit(candidate)
        host = parts.hostname
    except ValueError:
        return False
    return bool(host) and "." in host and " " not in candidate


def validate_store_record(record, limits: ImportLimits) -> ValidationResult:
    """Check a StoreRecord against the import limits."""
    name = record.store_name
    if not name or not name.strip():
        return ValidationResult(False, "Store name is required.")
    if len(name) > limits.max_name_length:
        return ValidationResult(False, f"Store name exceeds {limits.max_name_length} characters.")
    if record.website and not is_valid_url(record.website):
        return ValidationResult(False, "Invalid website URL format.")
    if len(record.tags) > limits.max_tags_per_store:
        return ValidationResult(False, f"Too many tags (max {limits.max_tags_per_store}).")
    return ValidationResult(True)
