"""
Translate free-text queries into :class:`FilterCriteria`.

The translator is a fixed, ordered table of pattern rules. Each rule belongs
to a dimension. In the ``word_count`` and ``length`` dimensions only the
first matching rule fires. Every other dimension lets all matching rules
fire in table order, so a later rule overwrites an earlier one's fields
(``vowel`` overwrites an explicit ``contains the letter x``).

Examples:
- "all single word palindromic strings" -> {is_palindrome: true, word_count: 1}
- "strings longer than 10 characters"    -> {min_length: 11}
- "strings containing the letter z"      -> {contains_character: "z"}
"""
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from string_analyzer.schemas.string import FilterCriteria

EXCLUSIVE_DIMENSIONS = frozenset({"word_count", "length"})


@dataclass(frozen=True)
class QueryRule:
    name: str
    dimension: str
    pattern: re.Pattern
    effect: Callable[[re.Match], Dict[str, Any]]


def _number(match: re.Match) -> int:
    return int(match.group(1))


RULES: Tuple[QueryRule, ...] = (
    QueryRule(
        "palindrome",
        "palindrome",
        re.compile(r"palindrom"),
        lambda m: {"is_palindrome": True},
    ),
    QueryRule(
        "single_word",
        "word_count",
        re.compile(r"single\s+word|one\s+word|word_count.*1"),
        lambda m: {"word_count": 1},
    ),
    QueryRule(
        "n_words",
        "word_count",
        re.compile(r"(\d+)\s+words?", re.ASCII),
        lambda m: {"word_count": _number(m)},
    ),
    QueryRule(
        "longer_than",
        "length",
        re.compile(r"longer than\s*(\d+)", re.ASCII),
        lambda m: {"min_length": _number(m) + 1},
    ),
    QueryRule(
        "shorter_than",
        "length",
        re.compile(r"shorter than\s*(\d+)", re.ASCII),
        lambda m: {"max_length": _number(m) - 1},
    ),
    QueryRule(
        "exact_length",
        "length",
        re.compile(r"(\d+)\s*characters?", re.ASCII),
        lambda m: {"min_length": _number(m), "max_length": _number(m)},
    ),
    QueryRule(
        "contains_letter",
        "character",
        re.compile(r"contain(s|ing)?\s+(?:the\s+)?(?:letter\s+)?([a-z])"),
        lambda m: {"contains_character": m.group(2)},
    ),
    # Only checks for 'a'. Runs after contains_letter and overwrites it.
    QueryRule(
        "vowel",
        "character",
        re.compile(r"vowel"),
        lambda m: {"contains_character": "a"},
    ),
)


def translate(query: str) -> FilterCriteria:
    """Parse a natural language query into filter criteria.

    Returns an empty :class:`FilterCriteria` when no rule matches; callers
    treat that as "not understood", never as "match everything".
    """
    text = query.lower()
    filters: Dict[str, Any] = {}
    fired = set()

    for rule in RULES:
        if rule.dimension in EXCLUSIVE_DIMENSIONS and rule.dimension in fired:
            continue
        match = rule.pattern.search(text)
        if match:
            filters.update(rule.effect(match))
            fired.add(rule.dimension)

    return FilterCriteria(**filters)
