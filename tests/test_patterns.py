"""
Tests for utils/patterns.py and utils/tables.py
"""
from kansuji.utils.patterns import (
    find_numeral_runs,
    replace_numeral_runs,
    split_positional_prefix,
)
from kansuji.config import MAX_LARGE_NUMBER_DIGITS
from kansuji.utils.tables import GROUP_UNITS, LARGE_UNITS, as_plain_dict


class TestFindNumeralRuns:

    def test_runs_split_by_other_characters(self):
        assert find_numeral_runs("令和三年五百") == ["三", "五百"]

    def test_large_units_are_part_of_run(self):
        assert find_numeral_runs("一京二兆円") == ["一京二兆"]

    def test_no_runs(self):
        assert find_numeral_runs("abc") == []


class TestReplaceNumeralRuns:

    def test_only_runs_replaced(self):
        assert replace_numeral_runs("第三条の二", lambda run: f"<{run}>") == "第<三>条の<二>"


class TestSplitPositionalPrefix:

    def test_prefix_and_suffix(self):
        assert split_positional_prefix("二〇二三年") == ("二〇二三", "年")

    def test_units_end_prefix(self):
        assert split_positional_prefix("二十三") == ("二", "十三")

    def test_no_prefix(self):
        assert split_positional_prefix("令和五年") == ("", "令和五年")


class TestTables:

    def test_large_units_descending(self):
        values = [value for _, value in LARGE_UNITS]
        assert values == sorted(values, reverse=True)

    def test_group_units_follow_large_units(self):
        assert GROUP_UNITS == ("", "万", "億", "兆", "京")
        assert MAX_LARGE_NUMBER_DIGITS == 20

    def test_plain_dict_keys(self):
        tables = as_plain_dict()
        assert list(tables["large_units"]) == ["京", "兆", "億", "万"]
        assert tables["daiji_to_normal"]["萬"] == "万"
