"""Map free-form price descriptions like '$$' or 'luxury' onto fixed bucket ids."""

from dataclasses import dataclass

UNKNOWN_BUCKET = "unknown"


@dataclass(frozen=True)
class PriceBucket:
    id: str
    label: str
    values: tuple[str, ...]


PRICE_BUCKETS = (
    PriceBucket("low", "$", ("$", "low", "cheap", "budget", "<$100")),
    PriceBucket("mid", "$$", ("$$", "mid", "average", "moderate", "$100-500")),
    PriceBucket("high", "$$$", ("$$$", "high", "premium", "luxury", "$500-1000")),
    PriceBucket("ultra", "$$$$", ("$$$$", "ultra", "exclusive", ">$1000")),
)


def get_price_bucket(value: str | None) -> str:
    """Return the bucket id for a price cell, or 'unknown'."""
    if not value:
        return UNKNOWN_BUCKET
    normalized = value.strip().lower()
    for bucket in PRICE_BUCKETS:
        if normalized == bucket.id or normalized == bucket.label or normalized in bucket.values:
            return bucket.id
    return UNKNOWN_BUCKET


def get_price_label(bucket_id: str) -> str:
    """Display label for a bucket id; unknown ids are returned unchanged."""
    for bucket in PRICE_BUCKETS:
        if bucket.id == bucket_id:
            return bucket.label
    return bucket_id
