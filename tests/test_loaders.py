"""Unit tests for the host-side file loaders."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from plotdata.loaders import format_for_path, parse_file
from plotdata.parsing import DeclaredFormat, NoDataAfterFilteringError, ParseOptions, UnsupportedFormatError


class TestFormatForPath:

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("data.csv", DeclaredFormat.CSV),
            ("data.JSON", DeclaredFormat.JSON),
            ("dir/run.out", DeclaredFormat.OUT),
            ("table.tsv", DeclaredFormat.TSV),
            ("archive.2024.data", DeclaredFormat.DATA),
        ],
    )
    def test_known_extensions(self, name, expected):
        assert format_for_path(name) is expected

    def test_unknown_extension(self):
        with pytest.raises(UnsupportedFormatError):
            format_for_path("book.xlsx")

    def test_missing_extension(self):
        with pytest.raises(UnsupportedFormatError):
            format_for_path("README")


class TestParseFile:

    def test_csv_with_comments(self, write_file):
        path = write_file("csv-with-comments.csv", "# exported\nName,Age,Score\nAlice,25,95\n# gap\nBob,30,87\nCharlie,35,92\n")
        table = parse_file(path)
        assert table.source_name == "csv-with-comments.csv"
        assert table.headers == ("Name", "Age", "Score")
        assert [row[0].value for row in table.rows] == ["Alice", "Bob", "Charlie"]

    def test_tsv_uses_tab(self, write_file):
        table = parse_file(write_file("t.tsv", "a\tb\n1\t2\n"))
        assert table.detected_delimiter == "\t"

    def test_options_passed_through(self, write_file):
        table = parse_file(write_file("p.dat", "a,b|c\n1,2|3\n"), ParseOptions(delimiter="|"))
        assert table.headers == ("a,b", "c")

    def test_declared_format_overrides_extension(self, write_file):
        table = parse_file(write_file("records.log", '[{"x": 1}]'), declared_format="json")
        assert table.headers == ("x",)

    def test_bom_file(self, write_file):
        table = parse_file(write_file("bom.csv", b"\xef\xbb\xbfname,value\ntest,123"))
        assert table.headers == ("name", "value")
        assert table.row_count == 1

    def test_comment_only_file(self, write_file):
        with pytest.raises(NoDataAfterFilteringError):
            parse_file(write_file("only.csv", "# a\n% b\n"))
