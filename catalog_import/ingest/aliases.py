"""Canonical catalog fields and the header aliases that identify them."""

from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence

from catalog_import.ingest.normalizer import normalize_header


@dataclass(frozen=True)
class FieldAliasCatalog:
    """Ordered, immutable mapping of canonical field -> accepted header aliases.

    Field order decides which field wins a header that matches more than one
    field. Alias order records preference among synonyms of one field.
    """
    entries: tuple[tuple[str, tuple[str, ...]], ...]
    version: str = "1"

    @classmethod
    def from_mapping(cls, aliases: Mapping[str, Sequence[str]], version: str = "1") -> "FieldAliasCatalog":
        """Build a catalog from a plain dict; aliases are normalized on the way in."""
        entries = []
        for field_name, names in aliases.items():
            normalized = tuple(dict.fromkeys(normalize_header(a) for a in names))
            entries.append((field_name, normalized))
        return cls(entries=tuple(entries), version=version)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.entries)

    def aliases_for(self, field_name: str) -> tuple[str, ...]:
        for name, aliases in self.entries:
            if name == field_name:
                return aliases
        raise KeyError(field_name)

    def __iter__(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_CATALOG = FieldAliasCatalog.from_mapping({
    "store_name": [
        "store_name", "name", "brand", "shop_name", "store", "title",
        "brand_name", "business_name",
    ],
    "website": [
        "website", "url", "link", "site", "web", "shop_url", "store_url",
        "homepage", "web_site", "website_url", "official_website",
        "web_addr", "web_address",
    ],
    "instagram_name": [
        "instagram_name", "instagram", "ig", "handle", "insta",
        "instagram_handle", "social", "ig_handle", "instagram_url",
        "instagram_link", "profile_url",
    ],
    "country": ["country", "location_country", "origin", "nation", "location"],
    "city": ["city", "location_city", "town"],
    "tags": ["tags", "categories", "type", "tags_list", "labels", "keywords"],
    "description": ["description", "notes", "about", "bio", "summary", "details"],
    "price_range": ["price_range", "pricerange", "price", "pricing", "cost", "price_point"],
}, version="2")
