"""Unit tests for header-versus-data inference."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from plotdata.parsing.headers import infer_headers, synthesize_headers


class TestSynthesizeHeaders:

    def test_names(self):
        assert synthesize_headers(3) == ("Column 1", "Column 2", "Column 3")

    def test_single(self):
        assert synthesize_headers(1) == ("Column 1",)


class TestInferHeadersMultiColumn:

    def test_text_row_is_header(self):
        assert infer_headers(("Name", "Age"), 2) == (("Name", "Age"), 1)

    def test_numeric_row_is_data(self):
        assert infer_headers(("1", "2", "3"), 2) == (("Column 1", "Column 2", "Column 3"), 0)

    def test_one_label_is_enough(self):
        assert infer_headers(("x", "1", "2.5"), 1) == (("x", "1", "2.5"), 1)

    def test_empty_fields_are_not_labels(self):
        assert infer_headers(("1", "", "3"), 1) == (("Column 1", "Column 2", "Column 3"), 0)

    def test_empty_and_label(self):
        assert infer_headers(("", "name"), 0) == (("", "name"), 1)

    def test_header_only_file(self):
        assert infer_headers(("col1", "col2"), 0) == (("col1", "col2"), 1)

    def test_scientific_notation_is_numeric(self):
        assert infer_headers(("1e3", "-2.5E-2"), 3)[1] == 0


class TestInferHeadersSingleColumn:

    def test_header_word_with_data_below(self):
        assert infer_headers(("Value",), 2) == (("Value",), 1)

    def test_header_word_is_case_insensitive(self):
        assert infer_headers(("ID",), 1) == (("ID",), 1)

    def test_every_header_word(self):
        for word in ("value", "values", "name", "id", "item", "label", "key"):
            assert infer_headers((word,), 1)[1] == 1

    def test_arbitrary_label_is_data(self):
        assert infer_headers(("alpha",), 2) == (("Column 1",), 0)

    def test_number_is_data(self):
        assert infer_headers(("1",), 2) == (("Column 1",), 0)

    def test_header_word_without_data_is_data(self):
        assert infer_headers(("Value",), 0) == (("Column 1",), 0)

    def test_empty_field_is_data(self):
        assert infer_headers(("",), 3) == (("Column 1",), 0)
