from __future__ import annotations

import pytest
from conftest import value_column

from boxtable import InvalidConfiguration, MalformedInput, Table, TableError


def _box(fill: int, char: str = "-") -> str:
    return "+" + char * fill + "+\n"


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def test_default_padding_is_one():
    assert Table().padding == 1


def test_custom_padding():
    assert Table(3).padding == 3


@pytest.mark.parametrize("padding", [0, -1])
def test_padding_below_one_is_rejected(padding):
    with pytest.raises(InvalidConfiguration, match="less than 1"):
        Table(padding)


@pytest.mark.parametrize("padding", [1.5, "2", True])
def test_non_integer_padding_is_rejected(padding):
    with pytest.raises(InvalidConfiguration):
        Table(padding)


def test_errors_share_a_base_and_are_value_errors():
    assert issubclass(InvalidConfiguration, TableError)
    assert issubclass(MalformedInput, TableError)
    assert issubclass(MalformedInput, ValueError)
    assert issubclass(InvalidConfiguration, ValueError)


# ---------------------------------------------------------------------------
# Column widths
# ---------------------------------------------------------------------------


def test_column_width_is_longest_cell_plus_padding():
    table = Table(2)
    table.add_column(["a", "abcd", "ab"])
    assert table.column_widths == (4 + 4,)


def test_empty_column_width_is_padding_only():
    table = Table()
    table.add_column([])
    assert table.column_widths == (2,)


def test_longer_header_widens_column():
    table = Table()
    table.add_column(["ab"], "Longer header")
    assert table.column_widths == (len("Longer header") + 2,)


def test_shorter_header_keeps_cell_width():
    table = Table()
    table.add_column(["a long cell value"], "H")
    assert table.column_widths == (len("a long cell value") + 2,)


def test_widths_of_earlier_columns_do_not_change():
    table = Table()
    table.add_column(["x"])
    table.add_column(["a much longer value"])
    assert table.column_widths[0] == 3


def test_cells_are_copied_and_stringified():
    cells = [1, 22]
    table = Table()
    table.add_column(cells)
    cells.append(333)
    assert table.columns == (("1", "22"),)
    assert table.row_count == 2


def test_column_with_different_row_count_is_rejected():
    table = Table()
    table.add_column(["a", "b"])
    with pytest.raises(MalformedInput, match="3 rows, expected 2"):
        table.add_column(["a", "b", "c"])
    assert len(table) == 1


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def test_headerless_two_columns():
    table = Table()
    table.add_column(value_column())
    table.add_column(value_column())

    expected = ""
    for i in range(1, 6):
        expected += _box(19)
        expected += f"| Value {i} | Value {i} |\n"
    expected += _box(19)

    assert table.render() == expected
    assert table.column_widths == (9, 9)
    assert not table.has_header


def test_headered_two_columns():
    table = Table()
    table.add_column(value_column(), "Header 1")
    table.add_column(value_column(), "Header 2")

    lines = table.render().splitlines()
    assert lines[0] == "+" + "=" * 21 + "+"
    assert lines[1] == "| Header 1 | Header 2 |"
    assert lines[2] == "+" + "=" * 21 + "+"
    assert lines[3] == "| Value 1  | Value 1  |"
    assert lines[4] == "+" + "-" * 21 + "+"
    assert lines[5] == "| Value 2  | Value 2  |"
    assert lines[-2] == "| Value 5  | Value 5  |"
    assert lines[-1] == "+" + "-" * 21 + "+"
    assert len(lines) == 3 + 5 * 2
    assert "=" not in "".join(lines[4:])


def test_partial_headers_render_headerless():
    table = Table()
    table.add_column(value_column(2), "Header 1")
    table.add_column(value_column(2))

    text = table.render()
    assert table.headers == ("Header 1",)
    assert not table.has_header
    assert "=" not in text
    assert "Header 1" not in text
    assert text.startswith("+---")


def test_render_is_idempotent():
    table = Table()
    table.add_column(value_column(), "Header 1")
    table.add_column(value_column(), "Header 2")
    first = table.render()
    assert table.render() == first
    assert table.render() == first


def test_single_empty_column_renders_empty_string():
    table = Table()
    table.add_column([])
    assert table.render() == ""


def test_table_without_columns_renders_empty_string():
    assert Table().render() == ""


def test_separator_fill_is_sum_of_widths_plus_one():
    table = Table()
    table.add_column(["a", "bb"], "one")
    table.add_column(["ccc", "d"], "two")
    table.add_column(["e", "ffff"], "three")
    lines = table.render().splitlines()
    assert table.column_widths == (5, 5, 7)
    assert lines[0] == "+" + "=" * (5 + 5 + 7 + 1) + "+"
    assert lines[1] == "| one | two | three |"
    assert lines[-1] == "+" + "-" * 18 + "+"


def test_three_single_cell_columns():
    table = Table()
    for cell in ("a", "b", "c"):
        table.add_column([cell])
    assert table.render() == "+" + "-" * 10 + "+\n| a | b | c |\n+" + "-" * 10 + "+\n"


def test_single_column_box():
    table = Table()
    table.add_column(["a", "bb"])
    assert table.render() == "+-----+\n| a  |\n+-----+\n| bb |\n+-----+\n"


def test_larger_padding():
    table = Table(padding=2)
    table.add_column(["x"], "H")
    assert table.render() == "+======+\n|  H  |\n+======+\n|  x  |\n+------+\n"


def test_empty_cell_and_empty_header():
    table = Table()
    table.add_column(["", "a"], "")
    assert table.has_header
    assert table.render().splitlines()[1] == "|   |"


def test_format_and_str_match_render():
    table = Table()
    table.add_column(["a"])
    assert table.format() == table.render()
    assert str(table) == table.render()


def test_width_is_sum_of_widths_plus_one():
    table = Table()
    table.add_column(value_column())
    table.add_column(value_column())
    assert table.width == 9 + 9 + 1
    table.add_column(value_column())
    assert table.width == 9 * 3 + 1


# ---------------------------------------------------------------------------
# Bulk content
# ---------------------------------------------------------------------------


def test_bulk_content_matches_manual_columns():
    bulk = Table()
    bulk.add_bulk_content("Value 1\tValue a\nValue 2\tValue b\nValue 3\tValue c\n")

    manual = Table()
    manual.add_column(["Value 1", "Value 2", "Value 3"])
    manual.add_column(["Value a", "Value b", "Value c"])

    assert bulk.columns == manual.columns
    assert bulk.render() == manual.render()
    assert bulk.row_count == 3


def test_bulk_content_with_header_matches_manual_columns():
    bulk = Table()
    bulk.add_bulk_content(
        "Value 1\tValue 1\nValue 2\tValue 2\nValue 3\tValue 3\n",
        "Header 1\tHeader 2\n",
    )

    manual = Table()
    manual.add_column(value_column(3), "Header 1")
    manual.add_column(value_column(3), "Header 2")

    assert bulk.headers == ("Header 1", "Header 2")
    assert bulk.render() == manual.render()


def test_bulk_content_without_trailing_newline():
    table = Table()
    table.add_bulk_content("a\tb\nc\td")
    assert table.columns == (("a", "c"), ("b", "d"))


def test_ragged_rows_are_rejected_without_changes():
    table = Table()
    with pytest.raises(MalformedInput, match="row 2 has 1 cells, expected 2"):
        table.add_bulk_content("a\tb\nc\n")
    assert len(table) == 0


def test_header_cell_count_must_match():
    table = Table()
    with pytest.raises(MalformedInput, match="Header has 3 cells"):
        table.add_bulk_content("a\tb\n", "x\ty\tz")
    assert len(table) == 0


def test_header_must_be_a_single_row():
    with pytest.raises(MalformedInput, match="single row"):
        Table().add_bulk_content("a\tb\n", "x\ty\nz\tw\n")


def test_bulk_rows_must_match_existing_columns():
    table = Table()
    table.add_column(["only one row"])
    with pytest.raises(MalformedInput, match="2 rows, expected 1"):
        table.add_bulk_content("a\nb\n")
    assert len(table) == 1


def test_empty_body_adds_nothing():
    table = Table()
    table.add_bulk_content("")
    table.add_bulk_content("\n\n")
    assert len(table) == 0
    assert table.render() == ""


def test_empty_body_with_header_adds_empty_columns():
    table = Table()
    table.add_bulk_content("", "a\tb")
    assert table.headers == ("a", "b")
    assert table.columns == ((), ())
    assert table.render() == ""


def test_bulk_content_appends_after_existing_columns():
    table = Table()
    table.add_column(["x", "y"])
    table.add_bulk_content("1\t2\n3\t4\n")
    assert table.columns == (("x", "y"), ("1", "3"), ("2", "4"))
