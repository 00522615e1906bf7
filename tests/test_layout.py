"""Tests for _layout.py — tabular normalization and column widths."""

import random
from unittest.mock import MagicMock

from bytetable.formatters import (
    add_row_numbers,
    apply_byte_alignment,
    compute_widths,
    normalize_tabular,
    total_width,
)
from bytetable.formatters._layout import column_cap, initial_width, measure_widths

# ---------------------------------------------------------------------------
# normalize_tabular
# ---------------------------------------------------------------------------


class TestNormalizeTabular:
    def test_list_of_dicts(self):
        rows, cols = normalize_tabular([{"a": 1, "b": 2}, {"a": 3}])
        assert rows == [{"a": 1, "b": 2}, {"a": 3}]
        assert cols == ["a", "b"]

    def test_union_of_keys_in_first_seen_order(self):
        _, cols = normalize_tabular([{"b": 1}, {"a": 2, "b": 3}, {"c": 4}])
        assert cols == ["b", "a", "c"]

    def test_explicit_properties_win(self):
        _, cols = normalize_tabular([{"a": 1, "b": 2}], ["b", "z"])
        assert cols == ["b", "z"]

    def test_object_of_arrays(self):
        rows, cols = normalize_tabular({"a": [1, 2], "b": [3]})
        assert rows == [{"a": 1, "b": 3}, {"a": 2}]
        assert cols == ["a", "b"]

    def test_object_of_arrays_scalar_column(self):
        rows, _ = normalize_tabular({"a": "x", "b": [1, 2]})
        assert rows == [{"a": "x", "b": 1}, {"b": 2}]

    def test_scalars_become_values_column(self):
        rows, cols = normalize_tabular([1, "two"])
        assert rows == [{"Values": 1}, {"Values": "two"}]
        assert cols == ["Values"]

    def test_none_is_empty(self):
        assert normalize_tabular(None) == ([], [])

    def test_none_with_properties(self):
        assert normalize_tabular(None, ["a"]) == ([], ["a"])

    def test_non_string_keys_stringified(self):
        rows, cols = normalize_tabular([{1: "x"}])
        assert rows == [{"1": "x"}]
        assert cols == ["1"]


class TestAddRowNumbers:
    def test_prepends_zero_based_index(self):
        rows, cols = add_row_numbers([{"a": "x"}, {"a": "y"}], ["a"])
        assert cols == ["#", "a"]
        assert rows == [{"#": 0, "a": "x"}, {"#": 1, "a": "y"}]


# ---------------------------------------------------------------------------
# Widths
# ---------------------------------------------------------------------------


class TestMeasureWidths:
    def test_initial_width_from_header(self):
        assert initial_width("name") == 6
        assert initial_width("#") == 3
        assert initial_width("日本") == 6

    def test_initial_width_measures_single_line_header(self):
        assert initial_width("a\nbbbbbbbb") == 3
        assert initial_width("x\ty") == 5

    def test_grows_to_fit_cells(self):
        assert measure_widths(["a"], [{"a": "hello"}], 80) == [7]

    def test_capped_by_max_width(self):
        widths = measure_widths(["x"], [{"x": "a" * 100}], 23)
        assert widths == [20]

    def test_cap_never_shrinks_header(self):
        widths = measure_widths(["abcdefghij"], [{"abcdefghij": "a" * 50}], 10)
        assert widths == [12]

    def test_zero_max_width_is_uncapped(self):
        assert measure_widths(["x"], [{"x": "a" * 100}], 0) == [102]

    def test_column_with_no_values_keeps_header_width(self):
        assert measure_widths(["a", "empty"], [{"a": 1}], 80) == [3, 7]

    def test_column_cap(self):
        assert column_cap(80, 2) == 38
        assert column_cap(0, 2) is None


class TestByteAlignment:
    def test_total_width(self):
        assert total_width([3, 3]) == 9
        assert total_width([]) == 1

    def test_last_column_padded_by_default(self):
        assert apply_byte_alignment([3, 3]) == [3, 7]

    def test_already_aligned_untouched(self):
        assert apply_byte_alignment([3, 7]) == [3, 7]

    def test_rng_picks_column(self):
        rng = MagicMock()
        rng.randrange.return_value = 0
        assert apply_byte_alignment([3, 3], rng=rng) == [7, 3]
        rng.randrange.assert_called_once_with(2)

    def test_zero_unit_disables(self):
        assert apply_byte_alignment([3, 3], unit=0) == [3, 3]

    def test_empty(self):
        assert apply_byte_alignment([]) == []

    def test_compute_widths_always_aligned(self):
        rows = [{"name": "Alice", "city": "Zürich"}, {"name": "日本語テキスト", "city": "x"}]
        widths = compute_widths(["name", "city"], rows, 80)
        assert total_width(widths) % 13 == 0

    def test_seeded_rng_is_repeatable(self):
        rows = [{"a": "x" * i, "b": "y", "c": "z"} for i in range(5)]
        first = compute_widths(["a", "b", "c"], rows, 80, rng=random.Random(7))
        second = compute_widths(["a", "b", "c"], rows, 80, rng=random.Random(7))
        assert first == second
        assert total_width(first) % 13 == 0
