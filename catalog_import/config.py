"""Configuration dataclasses for the brand catalog importer."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ImportLimits:
    """Hard limits applied to a single import."""
    max_bytes: int = 5 * 1024 * 1024  # whole file is held in memory
    max_rows: int = 500               # data rows per upload
    max_tags_per_store: int = 20
    max_name_length: int = 100


@dataclass(frozen=True)
class ImportConfig:
    """Top-level import configuration, passed explicitly to the pipeline."""
    limits: ImportLimits = field(default_factory=ImportLimits)
    # Reported in ImportResult.missing_fields when no header maps to them
    required_fields: tuple[str, ...] = ("store_name", "website")
    default_store_name: str = "New Brand"
    fallback_url_name: str = "Untitled Store"
    json_suffix: str = ".json"

    def is_json_source(self, file_name: str) -> bool:
        return file_name.lower().endswith(self.json_suffix)
