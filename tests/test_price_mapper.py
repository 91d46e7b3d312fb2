"""Tests for price_mapper module."""

from catalog_import.ingest.price_mapper import get_price_bucket, get_price_label


def test_labels():
    assert get_price_bucket("$") == "low"
    assert get_price_bucket("$$") == "mid"
    assert get_price_bucket("$$$$") == "ultra"


def test_synonyms_case_insensitive():
    assert get_price_bucket("Luxury") == "high"
    assert get_price_bucket(" BUDGET ") == "low"
    assert get_price_bucket("<$100") == "low"
    assert get_price_bucket("$100-500") == "mid"


def test_bucket_id():
    assert get_price_bucket("ULTRA") == "ultra"


def test_unknown():
    assert get_price_bucket("") == "unknown"
    assert get_price_bucket(None) == "unknown"
    assert get_price_bucket("whatever") == "unknown"


def test_price_label():
    assert get_price_label("high") == "$$$"
    assert get_price_label("nope") == "nope"
