from datetime import datetime, timezone
from typing import List, Optional, Tuple

from fastapi import status

from string_analyzer.crud.string import StringStore
from string_analyzer.exceptions import AlreadyExists, InvalidInput, NotFound, Unparseable
from string_analyzer.schemas.string import FilterCriteria, StringRecord
from string_analyzer.services.analyzer import analyze, trim
from string_analyzer.services.filters import filter_all
from string_analyzer.services.query_parser import translate

NOT_FOUND_MESSAGE = "String does not exist in the system"


def create_string(store: StringStore, value) -> StringRecord:
    """
    Analyze and store a string.
    Raises InvalidInput for non-strings or blank strings and AlreadyExists
    if the trimmed value is already stored.
    """
    if not isinstance(value, str):
        raise InvalidInput(
            "Invalid data type: value must be a string",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    trimmed = trim(value)
    if not trimmed:
        raise InvalidInput("String cannot be empty or only whitespace")

    if store.get(trimmed) is not None:
        raise AlreadyExists("String already exists in the system")

    properties = analyze(trimmed)
    record = StringRecord(
        id=properties.sha256_hash,
        value=trimmed,
        properties=properties,
        created_at=datetime.now(timezone.utc),
    )
    # add() re-checks atomically in case of a concurrent create
    return store.add(record)


def get_string(store: StringStore, value: str) -> StringRecord:
    record = store.get(value)
    if record is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return record


def list_strings(
    store: StringStore, criteria: Optional[FilterCriteria] = None
) -> Tuple[List[StringRecord], int]:
    """List stored strings, optionally filtered. Returns (records, count)."""
    records = store.list()
    if criteria is not None and not criteria.is_empty():
        records = filter_all(records, criteria)
    return records, len(records)


def delete_string(store: StringStore, value: str) -> None:
    if not store.delete(value):
        raise NotFound(NOT_FOUND_MESSAGE)


def translate_query(text: str) -> FilterCriteria:
    """Translate a natural language query, raising Unparseable if nothing matched"""
    criteria = translate(text)
    if criteria.is_empty():
        raise Unparseable("Unable to parse natural language query")
    return criteria


def filter_by_natural_language(
    store: StringStore, text: str
) -> Tuple[List[StringRecord], int, FilterCriteria]:
    criteria = translate_query(text)
    records, count = list_strings(store, criteria)
    return records, count, criteria
