import re
from typing import Iterable, List, Optional

from string_analyzer.exceptions import FilterValidationError
from string_analyzer.schemas.string import FilterCriteria, StringRecord

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def matches(record: StringRecord, criteria: FilterCriteria) -> bool:
    """Check a record against every populated field of the criteria"""
    props = record.properties

    if criteria.is_palindrome is not None:
        if props.is_palindrome != criteria.is_palindrome:
            return False

    if criteria.min_length is not None:
        if props.length < criteria.min_length:
            return False

    if criteria.max_length is not None:
        if props.length > criteria.max_length:
            return False

    if criteria.word_count is not None:
        if props.word_count != criteria.word_count:
            return False

    if criteria.contains_character is not None:
        char = criteria.contains_character.lower()
        if props.character_frequency_map.get(char, 0) <= 0:
            return False

    return True


def filter_all(records: Iterable[StringRecord], criteria: FilterCriteria) -> List[StringRecord]:
    """Keep matching records in their original order"""
    return [record for record in records if matches(record, criteria)]


def _parse_int(name: str, raw: str) -> int:
    if not _INTEGER_RE.fullmatch(raw.strip()):
        raise FilterValidationError(f"Invalid {name} value. Must be a number")
    return int(raw)


def parse_filter_params(
    is_palindrome: Optional[str] = None,
    min_length: Optional[str] = None,
    max_length: Optional[str] = None,
    word_count: Optional[str] = None,
    contains_character: Optional[str] = None,
) -> FilterCriteria:
    """
    Validate raw query parameter strings and build filter criteria.
    Raises FilterValidationError on the first malformed parameter.
    """
    filters = {}

    if is_palindrome is not None:
        if is_palindrome not in ("true", "false"):
            raise FilterValidationError("Invalid is_palindrome value. Must be true or false")
        filters["is_palindrome"] = is_palindrome == "true"

    if min_length is not None:
        filters["min_length"] = _parse_int("min_length", min_length)

    if max_length is not None:
        filters["max_length"] = _parse_int("max_length", max_length)

    if word_count is not None:
        filters["word_count"] = _parse_int("word_count", word_count)

    if contains_character is not None:
        if len(contains_character) != 1:
            raise FilterValidationError(
                "Invalid contains_character value. Must be a single character"
            )
        filters["contains_character"] = contains_character

    return FilterCriteria(**filters)
