from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional, List
from datetime import datetime


class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")


class StringProperties(BaseModel):
    """Properties derived from a trimmed string value."""

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)


class FilterCriteria(BaseModel):
    """Optional, AND-combined constraints. ``None`` means unconstrained."""

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = Field(None, min_length=1, max_length=1)

    def is_empty(self) -> bool:
        return not self.applied()

    def applied(self) -> Dict:
        """Populated fields only, in declaration order."""
        return self.model_dump(exclude_none=True)


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict = Field(default_factory=dict)


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    total_strings: int
