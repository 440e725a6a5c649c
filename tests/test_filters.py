from datetime import datetime, timezone

import pytest

from string_analyzer.exceptions import FilterValidationError
from string_analyzer.schemas.string import FilterCriteria, StringRecord
from string_analyzer.services.analyzer import analyze
from string_analyzer.services.filters import filter_all, matches, parse_filter_params


def make_record(value):
    properties = analyze(value)
    return StringRecord(
        id=properties.sha256_hash,
        value=value,
        properties=properties,
        created_at=datetime.now(timezone.utc),
    )


class TestMatches:
    def test_empty_criteria_matches_everything(self):
        assert matches(make_record("anything"), FilterCriteria())

    def test_all_fields_must_hold(self):
        criteria = FilterCriteria(min_length=5, is_palindrome=True)
        assert not matches(make_record("hello world"), criteria)
        assert matches(make_record("racecar"), criteria)

    def test_length_bounds_are_inclusive(self):
        record = make_record("abcde")
        assert matches(record, FilterCriteria(min_length=5, max_length=5))
        assert not matches(record, FilterCriteria(min_length=6))
        assert not matches(record, FilterCriteria(max_length=4))

    def test_word_count_is_exact(self):
        record = make_record("two words")
        assert matches(record, FilterCriteria(word_count=2))
        assert not matches(record, FilterCriteria(word_count=1))

    def test_is_palindrome_false(self):
        assert matches(make_record("hello"), FilterCriteria(is_palindrome=False))
        assert not matches(make_record("level"), FilterCriteria(is_palindrome=False))

    def test_contains_character_is_case_insensitive(self):
        record = make_record("Banana")
        assert matches(record, FilterCriteria(contains_character="B"))
        assert matches(record, FilterCriteria(contains_character="n"))
        assert not matches(record, FilterCriteria(contains_character="z"))

    def test_filter_all_keeps_order(self):
        records = [make_record(v) for v in ["level", "hello", "noon", "world", "kayak"]]
        result = filter_all(records, FilterCriteria(is_palindrome=True))
        assert [r.value for r in result] == ["level", "noon", "kayak"]


class TestParseFilterParams:
    def test_no_params(self):
        assert parse_filter_params().is_empty()

    def test_valid_params(self):
        criteria = parse_filter_params(
            is_palindrome="false",
            min_length="2",
            max_length="10",
            word_count="1",
            contains_character="a",
        )
        assert criteria.applied() == {
            "is_palindrome": False,
            "min_length": 2,
            "max_length": 10,
            "word_count": 1,
            "contains_character": "a",
        }

    def test_negative_numbers_parse(self):
        assert parse_filter_params(max_length="-1").max_length == -1

    @pytest.mark.parametrize("value", ["True", "1", "yes", ""])
    def test_is_palindrome_must_be_boolean_literal(self, value):
        with pytest.raises(FilterValidationError):
            parse_filter_params(is_palindrome=value)

    @pytest.mark.parametrize("name", ["min_length", "max_length", "word_count"])
    def test_numeric_params_must_be_integers(self, name):
        with pytest.raises(FilterValidationError) as exc_info:
            parse_filter_params(**{name: "abc"})
        assert name in exc_info.value.message

    @pytest.mark.parametrize("value", ["", "ab"])
    def test_contains_character_must_be_single_character(self, value):
        with pytest.raises(FilterValidationError):
            parse_filter_params(contains_character=value)
