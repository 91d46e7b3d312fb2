"""Header normalization and cell value clean-up."""

import re
from urllib.parse import urlsplit

_BOM = "\ufeff"
_QUOTES = "\"'"
_SPACER_RE = re.compile(r"[\s\-.]+")
_NON_WORD_RE = re.compile(r"[^\w]", re.ASCII)
_TAG_SPLIT_RE = re.compile(r"[|;,]")
_WORD_RE = re.compile(r"\w\S*")


def normalize_header(header: str) -> str:
    """Turn a raw header cell into the key used for alias lookups.

    Lowercase, strip whitespace, drop a leading byte-order mark, drop one
    leading and one trailing quote, then fold spacers (whitespace, '-', '.')
    into underscores and remove anything else that is not a word character.
    "Brand Name" and "brand-name" both become "brand_name".
    """
    key = header.lower().strip()
    if key.startswith(_BOM):
        key = key[1:].strip()
    if key and key[0] in _QUOTES:
        key = key[1:]
    if key and key[-1] in _QUOTES:
        key = key[:-1]
    key = key.strip()
    key = _SPACER_RE.sub("_", key)
    return _NON_WORD_RE.sub("", key)


def to_title_case(value: str) -> str:
    """Capitalize every word: "the ROW" -> "The Row"."""
    return _WORD_RE.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), value)


def to_sentence_case(value: str) -> str:
    """Strip and capitalize the first character only."""
    value = value.strip()
    if not value:
        return ""
    return value[0].upper() + value[1:]


def extract_name_from_url(url: str, fallback: str = "Untitled Store") -> str:
    """Derive a readable brand name from a website URL.

    'https://www.everlane.com/shop' -> 'Everlane'
    """
    clean = url.strip().lower()
    if not clean.startswith("http"):
        clean = f"https://{clean}"
    try:
        host = urlsplit(clean).hostname
    except ValueError:
        return fallback
    if not host:
        return fallback
    if host.startswith("www."):
        host = host[4:]
    base = host.split(".")[0]
    if not base:
        return fallback
    return base[0].upper() + base[1:]


def split_tags(value: str, limit: int | None = None) -> list[str]:
    """Split a tag cell on '|', ';' or ',' and drop empty entries."""
    tags = [t.strip() for t in _TAG_SPLIT_RE.split(value)]
    tags = [t for t in tags if t]
    if limit is not None:
        tags = tags[:limit]
    return tags
