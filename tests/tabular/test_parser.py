"""
Tests for the Tabular Parser.
"""

import pytest

from quickfit.tabular.parser import Table, parse_csv, split_lines


class TestLines:

    @pytest.mark.parametrize("text", [
        "a,b\n1,2\n3,4",
        "a,b\r\n1,2\r\n3,4",
        "a,b\r1,2\r3,4",
        "a,b\n1,2\r\n3,4\r",
    ])
    def test_any_line_ending(self, text):
        table = parse_csv(text)
        assert table.headers == ("a", "b")
        assert [dict(r) for r in table.rows] == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]

    def test_blank_lines_dropped_everywhere(self):
        text = "\n  \na,b\n\n1,2\n   \n\t\n3,4\n\n"
        table = parse_csv(text)
        assert table.headers == ("a", "b")
        assert table.n_rows == 2

    def test_split_lines(self):
        assert split_lines("x\n \ny\r\n") == ["x", "y"]


class TestFields:

    def test_header_and_cells_trimmed(self):
        table = parse_csv(" a , b \n 1 ,  2 ")
        assert table.headers == ("a", "b")
        assert dict(table.rows[0]) == {"a": "1", "b": "2"}

    def test_missing_trailing_fields_are_empty(self):
        table = parse_csv("a,b,c\n1\n1,2")
        assert dict(table.rows[0]) == {"a": "1", "b": "", "c": ""}
        assert dict(table.rows[1]) == {"a": "1", "b": "2", "c": ""}

    def test_surplus_fields_ignored(self):
        table = parse_csv("a,b\n1,2,3,4")
        assert dict(table.rows[0]) == {"a": "1", "b": "2"}

    def test_quoted_delimiter_is_not_understood(self):
        # Quoting is unsupported: the comma inside quotes splits the field.
        table = parse_csv('name,score\n"Smith, J",10')
        assert dict(table.rows[0]) == {"name": '"Smith', "score": 'J"'}

    def test_duplicate_header_rightmost_wins(self):
        table = parse_csv("a,a\n1,2")
        assert table.rows[0]["a"] == "2"

    def test_rows_are_read_only(self):
        table = parse_csv("a\n1")
        with pytest.raises(TypeError):
            table.rows[0]["a"] = "9"


class TestEdgeCases:

    @pytest.mark.parametrize("text", ["", "\n\n", "   \r\n  "])
    def test_empty_text(self, text):
        table = parse_csv(text)
        assert table.headers == ()
        assert table.rows == ()

    def test_header_only(self):
        table = parse_csv("a,b\n")
        assert table.headers == ("a", "b")
        assert table.n_rows == 0

    def test_parsing_is_idempotent(self, mixed_csv):
        first = parse_csv(mixed_csv)
        second = parse_csv(mixed_csv)
        assert first.headers == second.headers
        assert [dict(r) for r in first.rows] == [dict(r) for r in second.rows]


class TestColumns:

    def test_column_values_in_row_order(self):
        table = parse_csv("a,b\n1,x\n2,y")
        col = table.column("b")
        assert col.name == "b"
        assert col.values == ("x", "y")
        assert len(col) == 2

    def test_unknown_column(self):
        with pytest.raises(KeyError, match="Available"):
            parse_csv("a\n1").column("z")

    def test_columns_in_header_order(self):
        table = parse_csv("b,a\n1,2")
        assert [c.name for c in table.columns()] == ["b", "a"]

    def test_table_type(self):
        assert isinstance(parse_csv("a\n1"), Table)
