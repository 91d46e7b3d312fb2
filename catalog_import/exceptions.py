"""Catalog import exception hierarchy.

Only conditions that stop a file from being processed at all are raised.
A canonical field without a matching column is a normal outcome and is
represented by its absence from the field mapping.
"""


class CatalogImportError(Exception):
    """Base exception for all catalog import errors."""


class ImportPreconditionError(CatalogImportError):
    """The input cannot be processed at all."""


class EmptyInputError(ImportPreconditionError):
    """The file text is empty or whitespace only."""


class MissingHeaderError(ImportPreconditionError):
    """The file has no header row, or the header row has no named columns."""


class InputTooLargeError(ImportPreconditionError):
    """The file exceeds the in-memory size guard."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"File is {size} bytes, the import limit is {limit} bytes")


class TooManyRowsError(ImportPreconditionError):
    """The file has more data rows than a single upload accepts."""

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"File has {count} data rows, the import limit is {limit}")


class InvalidJSONError(CatalogImportError):
    """A .json source is not an array of objects."""
