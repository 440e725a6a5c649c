from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from datetime import datetime, timezone
from typing import Optional
import logging

from string_analyzer.crud.string import StringStore, get_store
from string_analyzer.schemas.string import (
    HealthResponse,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringRecord,
)
from string_analyzer.services import string_service
from string_analyzer.services.filters import parse_filter_params

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, store: StringStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if the trimmed string already exists.
    """
    record = string_service.create_string(store, string_data.value)
    logger.info(f"Stored string analysis {record.id}")
    return record


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="Filter by palindrome (true/false)"),
    min_length: Optional[str] = Query(None, description="Minimum string length"),
    max_length: Optional[str] = Query(None, description="Maximum string length"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Single character the string must contain"),
    store: StringStore = Depends(get_store),
):
    """
    Get all strings with optional filtering.
    """
    criteria = parse_filter_params(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    records, count = string_service.list_strings(store, criteria)
    return StringListResponse(data=records, count=count, filters_applied=criteria.applied())


# Must be registered before /strings/{string_value}
@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query, e.g. 'all single word palindromic strings'"),
    store: StringStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required query parameter: query",
        )

    records, count, criteria = string_service.filter_by_natural_language(store, query)
    logger.info(f"Interpreted query '{query}' as {criteria.applied()}")

    return NaturalLanguageResponse(
        data=records,
        count=count,
        interpreted_query=InterpretedQuery(original=query, parsed_filters=criteria.applied()),
    )


@router.get("/strings/{string_value:path}", response_model=StringRecord)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return string_service.get_string(store, string_value)


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    string_service.delete_string(store, string_value)
    logger.info(f"Deleted string '{string_value}'")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/health", response_model=HealthResponse)
def health_check(store: StringStore = Depends(get_store)):
    """Health check endpoint"""
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        total_strings=store.count(),
    )
