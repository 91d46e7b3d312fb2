"""Quote-aware tokenizer for delimited text exports.

Spreadsheet and CRM exports are not uniform enough for a schema-driven
reader: quoted cells may hold the delimiter, embedded line breaks and
doubled quotes, and rows may be short when trailing cells were empty.
The text is scanned character by character with one character of lookahead.

Rules:
1. A doubled quote inside a quoted cell is one literal quote; any other
   quote toggles the quoted state and is dropped
2. The delimiter and line breaks (\\n, \\r, \\r\\n) end a cell only outside quotes
3. Every finished cell is stripped of surrounding whitespace, quoted or not
4. A final row without a trailing line break is still emitted

Malformed input never raises: an unterminated quote simply swallows the
rest of the text into the current cell.
"""

from typing import Iterator

from catalog_import.ingest.delimiter import DEFAULT_DELIMITER


def iter_rows(text: str, delimiter: str = DEFAULT_DELIMITER) -> Iterator[list[str]]:
    """Yield each row of ``text`` as a list of cell strings."""
    row: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch == '"':
            if in_quotes and i + 1 < n and text[i + 1] == '"':
                # Escaped quote (doubled)
                current.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
            i += 1
            continue

        if in_quotes:
            current.append(ch)
            i += 1
            continue

        if ch == delimiter:
            row.append(''.join(current).strip())
            current = []
            i += 1
            continue

        if ch == '\n' or ch == '\r':
            if ch == '\r' and i + 1 < n and text[i + 1] == '\n':
                i += 1
            row.append(''.join(current).strip())
            # A blank physical line still produces a single empty cell
            yield row
            row = []
            current = []
            i += 1
            continue

        current.append(ch)
        i += 1

    # Flush a final row that lacks a line terminator
    if current or row:
        row.append(''.join(current).strip())
        yield row


def parse_table(text: str, delimiter: str = DEFAULT_DELIMITER) -> list[list[str]]:
    """Parse ``text`` into a list of rows; the first row is the header."""
    return list(iter_rows(text, delimiter))


def cell_at(row: list[str], index: int) -> str:
    """Cell value at ``index``, or an empty string for a short row."""
    if index < len(row):
        return row[index]
    return ""
