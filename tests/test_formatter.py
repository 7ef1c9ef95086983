"""
Tests for core/formatter.py - 位取り表記 ⇔ 大数表記
"""
import pytest
from kansuji.core.formatter import (
    render_large_number,
    render_positional,
    to_large_number,
    to_positional,
)
from kansuji.core.parser import parse_run
from kansuji.utils.errors import KansujiArgumentError


class TestToPositional:
    """漢数字部分を位取り表記に変換"""

    @pytest.mark.parametrize("text,expected", [
        ("", ""),
        ("一千九百五十七", "一九五七"),
        ("二千二十三年", "二〇二三年"),
        ("三百六十五日", "三六五日"),
        ("零年", "〇年"),
        ("一万", "一〇〇〇〇"),
    ])
    def test_converts_runs(self, text, expected):
        assert to_positional(text) == expected

    def test_every_run_is_converted(self):
        assert to_positional("第十二条から第二十条まで") == "第一二条から第二〇条まで"

    def test_many_repeated_large_units(self):
        assert to_positional("万" * 1200) == "一二〇〇〇〇〇〇"

    def test_non_numeral_text_unchanged(self):
        assert to_positional("foo bar") == "foo bar"

    def test_none_is_rejected(self):
        with pytest.raises(KansujiArgumentError):
            to_positional(None)


class TestToLargeNumber:
    """先頭の位取り表記を大数表記に変換"""

    @pytest.mark.parametrize("text,expected", [
        ("", ""),
        ("一九五七", "一千九百五十七"),
        ("二〇二三年", "二千二十三年"),
        ("三六五日", "三百六十五日"),
        ("一二三四", "一千二百三十四"),
        ("一三", "十三"),
        ("一〇三", "百三"),
        ("一〇", "十"),
    ])
    def test_converts_leading_digits(self, text, expected):
        assert to_large_number(text) == expected

    def test_single_zero_is_kept(self):
        assert to_large_number("〇") == "〇"
        assert to_large_number("零円") == "〇円"

    def test_only_leading_run_is_converted(self):
        """途中の数字部分は変換しない"""
        assert to_large_number("令和五年") == "令和五年"
        assert to_large_number("五年二〇") == "五年二〇"

    @pytest.mark.parametrize("text,expected", [
        ("三五〇〇〇", "三万五千"),
        ("一〇〇〇〇", "一万"),
        ("一二三四五六七八", "一千二百三十四万五千六百七十八"),
        ("一〇〇〇〇〇〇〇〇", "一億"),
    ])
    def test_groups_beyond_four_digits(self, text, expected):
        assert to_large_number(text) == expected

    def test_beyond_kei_is_unchanged(self):
        text = "一" * 21 + "個"
        assert to_large_number(text) == text

    def test_none_is_rejected(self):
        with pytest.raises(KansujiArgumentError):
            to_large_number(None)


class TestRoundTrip:
    """to_positional と to_large_number の往復"""

    @pytest.mark.parametrize("text", ["十三", "百三", "三百六十五", "一千九百五十七"])
    def test_large_number_round_trip(self, text):
        assert to_large_number(to_positional(text)) == text

    def test_positional_input_becomes_large_number(self):
        assert to_large_number(to_positional("一三")) == "十三"

    def test_multi_level_round_trip(self):
        text = "一京二兆三億四万五千六百七十八"
        assert to_large_number(to_positional(text)) == text


class TestRender:
    """整数からの書式化"""

    def test_render_positional(self):
        assert render_positional(2023) == "二〇二三"
        assert render_positional(0) == "〇"

    @pytest.mark.parametrize("value", [1, 10, 13, 103, 1957, 35000, 10_0020_0030_0045_678])
    def test_render_large_number_parses_back(self, value):
        assert parse_run(render_large_number(value)) == value

    def test_render_large_number_zero(self):
        assert render_large_number(0) == "〇"

    @pytest.mark.parametrize("value", [-1, 10 ** 20, "12", None, True])
    def test_invalid_values_rejected(self, value):
        with pytest.raises(KansujiArgumentError):
            render_large_number(value)
