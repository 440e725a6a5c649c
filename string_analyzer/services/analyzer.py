import hashlib
import re
from collections import Counter
from typing import Dict

from string_analyzer.exceptions import InvalidInput
from string_analyzer.schemas.string import StringProperties

# ECMAScript WhiteSpace and LineTerminator code points
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")
_WHITESPACE_RE = re.compile("[" + re.escape(WHITESPACE) + "]+")


def trim(text: str) -> str:
    """Strip leading and trailing whitespace"""
    return text.strip(WHITESPACE)


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string, lone surrogates hashed as U+FFFD"""
    data = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """
    Check if string is a palindrome, ignoring case and anything that is not
    an ASCII letter or digit. Strings with nothing left after cleaning are
    never palindromes.
    """
    cleaned = _NON_ALNUM_RE.sub("", text.lower())
    if not cleaned:
        return False
    return cleaned == cleaned[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters, case-insensitive"""
    return len(set(text.lower()))


def count_words(text: str) -> int:
    """Count words separated by runs of whitespace"""
    return len([token for token in _WHITESPACE_RE.split(text) if token])


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each lowercased character"""
    return dict(Counter(text.lower()))


def analyze(raw: str) -> StringProperties:
    """Analyze a string and return all computed properties of its trimmed value"""
    if not isinstance(raw, str):
        raise InvalidInput("Input must be a string", status_code=422)

    value = trim(raw)

    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=get_character_frequency(value),
    )
