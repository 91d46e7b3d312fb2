"""Tests for csv_parser module."""

from catalog_import.ingest.csv_parser import cell_at, iter_rows, parse_table


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def test_simple_table():
    assert parse_table("a,b\n1,2") == [["a", "b"], ["1", "2"]]


def test_quoted_delimiter():
    assert parse_table('"a,b",c') == [["a,b", "c"]]


def test_quoted_newline_stays_in_cell():
    rows = parse_table('name,desc\n"Multiline Store","line1\nline2"\n')
    assert rows == [["name", "desc"], ["Multiline Store", "line1\nline2"]]


def test_escaped_quote():
    assert parse_table('"He said ""hi""."') == [['He said "hi".']]


def test_lone_escaped_quote():
    assert parse_table('""""') == [['"']]


def test_quote_mid_cell_toggles_state():
    assert parse_table('ab"c,d"e,f') == [["abc,de", "f"]]


def test_round_trip_fully_quoted():
    table = [
        ["store_name", "website", "description"],
        ["Acme, Inc.", "acme.com", 'The "best"\nshop'],
        ["Beta", "", "semi;colon|pipe"],
        ["", "gamma.io", '""'],
    ]
    text = "\n".join(",".join(_quote(c) for c in row) for row in table)
    assert parse_table(text) == table


def test_row_count_without_trailing_newline():
    text = "name,website\nA,a.com\nB,b.com\nC,c.com"
    assert len(parse_table(text)) == 4


def test_trailing_newline_adds_no_row():
    assert parse_table("a,b\n1,2\n") == [["a", "b"], ["1", "2"]]


def test_crlf_and_lone_cr():
    assert parse_table("a,b\r\n1,2\r\n") == [["a", "b"], ["1", "2"]]
    assert parse_table("a\rb") == [["a"], ["b"]]


def test_blank_line_yields_single_empty_cell():
    assert parse_table("a\n\nb") == [["a"], [""], ["b"]]


def test_short_and_trailing_delimiter_rows():
    rows = parse_table("a,b,c\n1\n2,3,")
    assert rows == [["a", "b", "c"], ["1"], ["2", "3", ""]]


def test_cells_trimmed_even_when_quoted():
    assert parse_table(' a , b ,"  padded  "') == [["a", "b", "padded"]]


def test_unterminated_quote_keeps_remainder():
    assert parse_table('a,"b\nc') == [["a", "b\nc"]]


def test_other_delimiter():
    assert parse_table("a,b\tc\n1\t2", "\t") == [["a,b", "c"], ["1", "2"]]


def test_empty_text():
    assert parse_table("") == []


def test_iter_rows_is_lazy_and_repeatable():
    text = "a;b\n1;2"
    gen = iter_rows(text, ";")
    assert next(gen) == ["a", "b"]
    assert list(iter_rows(text, ";")) == parse_table(text, ";")


def test_cell_at_short_row():
    assert cell_at(["x"], 0) == "x"
    assert cell_at(["x"], 3) == ""
